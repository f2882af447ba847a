"""
Administrator endpoints: the user list and bulk moderation.
Every view here requires a logged-in, non-blocked admin.
"""

import logging

from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET, require_POST

from ..exceptions import CatalogError, ValidationFailed
from ..forms import BulkActionForm
from ..models import User
from ..moderation import apply_request
from ..serializers import user_to_dict
from ..utils import first_form_error, read_json_body
from .helpers import admin_required, api_login_required, json_err, json_ok

logger = logging.getLogger(__name__)


@api_login_required
@admin_required
@require_GET
def user_list(request: HttpRequest) -> JsonResponse:
    """List every user for the moderation table."""
    try:
        users = User.objects.order_by("id")
        return json_ok(users=[user_to_dict(u) for u in users])

    except Exception:
        logger.exception("Error listing users")
        return json_err("Failed to fetch users", 500)


@api_login_required
@admin_required
@require_POST
def update_users(request: HttpRequest) -> JsonResponse:
    """
    Apply a bulk moderation action.

    Body: ``{"action": "block" | "unblock" | "delete" | "toggleAdmin", "userIds": [...]}``

    Returns ``{ok, message, action, affected, skipped}``. ``skipped`` lists the
    ids left untouched (self-deletion, last-admin protection, unknown ids).
    """
    try:
        form = BulkActionForm(read_json_body(request))
        if not form.is_valid():
            raise ValidationFailed(first_form_error(form))

        outcome = apply_request(form.to_request(), request.user.pk)
        return json_ok(
            message=outcome.message,
            action=outcome.action.value,
            affected=outcome.affected,
            skipped=outcome.skipped,
        )

    except CatalogError as e:
        return json_err(e.message, e.status)
    except Exception:
        logger.exception("Error applying admin action")
        return json_err("An error occurred.", 500)
