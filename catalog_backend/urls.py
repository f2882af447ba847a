from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("django-admin/", admin.site.urls),
    # JSON API, session endpoints and health checks
    path("", include("catalog.urls")),
    # allauth: /auth/google/login/, /auth/facebook/login/ and their callbacks
    path("auth/", include("allauth.urls")),
]

handler404 = "catalog.views.error_404"
handler500 = "catalog.views.error_500"
