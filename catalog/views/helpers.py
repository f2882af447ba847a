"""
Shared helper functions for the JSON views: response envelopes, auth gates
and small lookup shortcuts.
"""

import logging
from functools import wraps
from typing import Any, Callable

from django.db.models import Model
from django.http import HttpRequest, JsonResponse

from ..exceptions import NotFound

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------------------------------------
# JSON Response Helpers
# -------------------------------------------------------------------------------------------------

def json_ok(status: int = 200, **payload: Any) -> JsonResponse:
    """Return a successful JSON response with ok=True."""
    data = {"ok": True}
    data.update(payload)
    return JsonResponse(data, status=status)


def json_err(msg: str, status: int = 400) -> JsonResponse:
    """Return an error JSON response with ok=False."""
    return JsonResponse({"ok": False, "error": msg}, status=status)


# -------------------------------------------------------------------------------------------------
# Auth gates
# -------------------------------------------------------------------------------------------------

def api_login_required(view: Callable) -> Callable:
    """
    Session auth for JSON endpoints.

    Anonymous callers get a 401 (not the login redirect of login_required) and
    blocked users a 403.
    """
    @wraps(view)
    def wrapper(request: HttpRequest, *args, **kwargs):
        if not request.user.is_authenticated:
            return json_err("Unauthorized: You must be logged in.", 401)
        if request.user.is_blocked:
            return json_err("Forbidden: Your account has been blocked.", 403)
        return view(request, *args, **kwargs)

    return wrapper


def admin_required(view: Callable) -> Callable:
    """Allow only users with ``is_admin``. Stack below ``api_login_required``."""
    @wraps(view)
    def wrapper(request: HttpRequest, *args, **kwargs):
        if not getattr(request.user, "is_admin", False):
            logger.warning(f"Non-admin user {request.user.pk} hit {request.path}")
            return json_err("Forbidden: Administrator access required.", 403)
        return view(request, *args, **kwargs)

    return wrapper


# -------------------------------------------------------------------------------------------------
# Lookup Helpers
# -------------------------------------------------------------------------------------------------

def get_or_not_found(queryset_or_model, message: str, **lookup) -> Model:
    """Like get_object_or_404, but raises the catalog NotFound error."""
    queryset = getattr(queryset_or_model, "objects", queryset_or_model)
    obj = queryset.filter(**lookup).first()
    if obj is None:
        raise NotFound(message)
    return obj
