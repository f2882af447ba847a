"""
Bulk user moderation used by the admin endpoint.

Supported actions:
- block / unblock: one bulk UPDATE of ``is_blocked``
- delete: bulk DELETE of the targets, never the acting admin
- toggleAdmin: per-user read-then-write of ``is_admin`` with last-admin protection

The caller is responsible for checking that the acting user is an admin.
Validation happens before any query is issued. Database errors are not caught
here; the view turns them into a 500.
"""

import logging
from dataclasses import dataclass, field

from django.db import models, transaction

from .exceptions import ValidationFailed
from .models import User

logger = logging.getLogger(__name__)


class BulkAction(models.TextChoices):
    BLOCK = "block", "Block"
    UNBLOCK = "unblock", "Unblock"
    DELETE = "delete", "Delete"
    TOGGLE_ADMIN = "toggleAdmin", "Toggle admin"


@dataclass(frozen=True)
class BulkActionRequest:
    action: BulkAction
    user_ids: tuple[int, ...]


@dataclass
class ActionOutcome:
    action: BulkAction
    affected: int = 0
    # Targets left untouched: the acting admin on delete, the last admin on
    # toggleAdmin, or ids that no longer exist on toggleAdmin.
    skipped: list[int] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"Action '{self.action.value}' completed successfully."


def _normalize_ids(target_user_ids) -> tuple[int, ...]:
    if isinstance(target_user_ids, (str, bytes, dict)) or not isinstance(
        target_user_ids, (list, tuple, set, frozenset)
    ):
        raise ValidationFailed("User IDs must be a non-empty array.")
    if not target_user_ids:
        raise ValidationFailed("User IDs must be a non-empty array.")
    # dedupe, keep request order
    return tuple(dict.fromkeys(target_user_ids))


def _set_blocked(user_ids, acting_user_id, blocked: bool, action: BulkAction) -> ActionOutcome:
    affected = User.objects.filter(pk__in=user_ids).update(is_blocked=blocked)
    return ActionOutcome(action=action, affected=affected)


def _block(user_ids, acting_user_id) -> ActionOutcome:
    return _set_blocked(user_ids, acting_user_id, True, BulkAction.BLOCK)


def _unblock(user_ids, acting_user_id) -> ActionOutcome:
    return _set_blocked(user_ids, acting_user_id, False, BulkAction.UNBLOCK)


def _delete(user_ids, acting_user_id) -> ActionOutcome:
    outcome = ActionOutcome(action=BulkAction.DELETE)
    targets = [pk for pk in user_ids if pk != acting_user_id]
    if len(targets) != len(user_ids):
        outcome.skipped.append(acting_user_id)

    if targets:
        # Inventories, items, access permissions and social accounts go with
        # the user through on_delete=CASCADE.
        _, per_model = User.objects.filter(pk__in=targets).delete()
        outcome.affected = per_model.get(User._meta.label, 0)
    return outcome


def _toggle_one(user_id: int, acting_user_id: int, batch_ids) -> bool:
    """
    Flip ``is_admin`` for one user. Returns False when the user was left alone.

    Runs in its own transaction. The acting admin only demotes themselves while
    an admin outside ``batch_ids`` remains; admins inside the batch get demoted
    and promotions inside it do not count. The admin rows are locked before
    counting, so two admins demoting themselves at once cannot both see a
    survivor.
    """
    with transaction.atomic():
        if user_id == acting_user_id:
            admin_ids = list(
                User.objects.select_for_update()
                .filter(is_admin=True)
                .values_list("pk", flat=True)
            )
            if not set(admin_ids) - set(batch_ids):
                logger.info(f"Skipping toggleAdmin for user {user_id}: no admin would remain")
                return False

        user = User.objects.select_for_update().filter(pk=user_id).first()
        if user is None:
            return False

        user.is_admin = not user.is_admin
        user.save(update_fields=["is_admin"])
        return True


def _toggle_admin(user_ids, acting_user_id) -> ActionOutcome:
    outcome = ActionOutcome(action=BulkAction.TOGGLE_ADMIN)

    # Request order; the self check above does not depend on it
    for user_id in user_ids:
        if _toggle_one(user_id, acting_user_id, user_ids):
            outcome.affected += 1
        else:
            outcome.skipped.append(user_id)
    return outcome


_HANDLERS = {
    BulkAction.BLOCK: _block,
    BulkAction.UNBLOCK: _unblock,
    BulkAction.DELETE: _delete,
    BulkAction.TOGGLE_ADMIN: _toggle_admin,
}


def apply_action(action, target_user_ids, acting_user_id: int) -> ActionOutcome:
    """
    Apply a moderation ``action`` to ``target_user_ids`` on behalf of ``acting_user_id``.

    Raises ValidationFailed for an unknown action or an empty/malformed id
    collection; nothing is written in that case.
    """
    try:
        action = BulkAction(action)
    except ValueError:
        raise ValidationFailed("Invalid action.")

    user_ids = _normalize_ids(target_user_ids)
    outcome = _HANDLERS[action](user_ids, acting_user_id)

    logger.info(
        f"Admin {acting_user_id} applied '{action.value}' to {len(user_ids)} user(s): "
        f"{outcome.affected} changed, {len(outcome.skipped)} skipped"
    )
    return outcome


def apply_request(request: BulkActionRequest, acting_user_id: int) -> ActionOutcome:
    return apply_action(request.action, request.user_ids, acting_user_id)
