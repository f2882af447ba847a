from django.urls import path
from . import views
from .views.health import health_check, liveness_check, readiness_check, metrics

app_name = "catalog"

urlpatterns = [
    # Health checks (for load balancers and monitoring)
    path("", liveness_check, name="root"),
    path("health/", health_check, name="health"),
    path("health/liveness/", liveness_check, name="liveness"),
    path("health/readiness/", readiness_check, name="readiness"),
    path("health/metrics/", metrics, name="metrics"),

    # Session (OAuth redirects themselves are served by allauth under /auth/)
    path("auth/me", views.me, name="me"),
    path("auth/logout", views.logout, name="logout"),
    path("auth/csrf", views.csrf, name="csrf"),

    # Admin moderation
    path("api/admin/users", views.user_list, name="admin_users"),
    path("api/admin/users/update", views.update_users, name="admin_users_update"),

    # Current user's inventories
    path("api/user/owned", views.owned_inventories, name="owned_inventories"),
    path("api/user/accessible", views.accessible_inventories, name="accessible_inventories"),

    # Inventories
    path("api/inventories/latest", views.latest, name="inventories_latest"),
    path("api/inventories/popular", views.popular, name="inventories_popular"),
    path("api/inventories/tags", views.tag_cloud, name="inventories_tags"),
    path("api/inventories", views.inventory_collection, name="inventories"),
    path("api/inventories/<int:pk>", views.inventory_detail, name="inventory_detail"),
    path("api/inventories/<int:pk>/items", views.inventory_items, name="inventory_items"),
    path("api/inventories/items/<int:item_id>", views.inventory_item_delete, name="inventory_item_delete"),
    path("api/inventories/<int:pk>/access", views.inventory_access, name="inventory_access"),
    path(
        "api/inventories/<int:pk>/access/<int:user_id>",
        views.inventory_access_revoke,
        name="inventory_access_revoke",
    ),

    # Items
    path("api/items", views.item_collection, name="items"),
    path("api/items/<int:pk>", views.item_detail, name="item_detail"),

    # Lookups
    path("api/tags", views.tag_list, name="tags"),
    path("api/categories", views.category_list, name="categories"),
]
