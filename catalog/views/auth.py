"""
Session endpoints around the allauth OAuth flow.
The provider redirects themselves live under /auth/<provider>/login/ (allauth).
"""

import logging

from django.contrib.auth import logout as auth_logout
from django.http import HttpRequest, JsonResponse
from django.middleware.csrf import get_token
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET, require_POST

from ..serializers import user_to_dict
from .helpers import json_err, json_ok

logger = logging.getLogger(__name__)


@require_GET
def me(request: HttpRequest) -> JsonResponse:
    """Return the logged-in user, or 401 when there is no session."""
    if not request.user.is_authenticated:
        return json_err("Not authenticated", 401)
    return json_ok(user=user_to_dict(request.user))


@require_POST
def logout(request: HttpRequest) -> JsonResponse:
    """End the session and drop the session cookie."""
    user_id = request.user.pk
    auth_logout(request)
    if user_id:
        logger.info(f"User {user_id} logged out")
    return json_ok(message="Logged out successfully")


@require_GET
@ensure_csrf_cookie
def csrf(request: HttpRequest) -> JsonResponse:
    """Hand the SPA a CSRF token for its unsafe requests."""
    return json_ok(csrfToken=get_token(request))
