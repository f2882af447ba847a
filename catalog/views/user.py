"""
Per-user inventory listings: what the caller created and what they were
granted write access to.
"""

import logging

from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET

from ..models import AccessPermission, Inventory
from ..serializers import inventory_to_dict
from .helpers import api_login_required, json_err, json_ok

logger = logging.getLogger(__name__)


@api_login_required
@require_GET
def owned_inventories(request: HttpRequest) -> JsonResponse:
    """Inventories created by the caller, newest first."""
    try:
        inventories = Inventory.objects.filter(creator=request.user).order_by("-created_at", "-id")
        return json_ok(inventories=[inventory_to_dict(inv) for inv in inventories])

    except Exception:
        logger.exception("Error loading owned inventories")
        return json_err("Failed to load owned inventories", 500)


@api_login_required
@require_GET
def accessible_inventories(request: HttpRequest) -> JsonResponse:
    """Inventories the caller can write to through an AccessPermission."""
    try:
        permissions = (
            AccessPermission.objects
            .filter(user=request.user)
            .select_related("inventory")
            .order_by("-created_at", "-id")
        )
        return json_ok(inventories=[inventory_to_dict(p.inventory) for p in permissions])

    except Exception:
        logger.exception("Error loading accessible inventories")
        return json_err("Failed to load accessible inventories", 500)
