"""
Write-access resolution for inventories and their items.

A user may change an inventory's items when they created the inventory, or
when an AccessPermission row links them to it. Ownership is checked first and
wins without touching the permission table.

Lookups only read. A missing inventory means "no access"; a failing lookup
(database down, bad connection) raises, so the caller answers with a 500
instead of guessing.
"""

import logging

from .exceptions import Forbidden
from .models import AccessPermission, Inventory

logger = logging.getLogger(__name__)


def _owner_grant(*, user_id: int, creator_id: int, **_) -> bool:
    return creator_id == user_id


def _delegated_grant(*, user_id: int, inventory_id: int, **_) -> bool:
    return AccessPermission.objects.filter(user_id=user_id, inventory_id=inventory_id).exists()


# Evaluated in order; the first grant that matches short-circuits the rest.
WRITE_GRANTS = (_owner_grant, _delegated_grant)


def can_write(user_id: int, inventory_id: int) -> bool:
    """Return True if ``user_id`` may create, edit or delete items in ``inventory_id``."""
    creator_id = (
        Inventory.objects
        .filter(pk=inventory_id)
        .values_list("creator_id", flat=True)
        .first()
    )
    if creator_id is None:
        return False

    return any(
        grant(user_id=user_id, creator_id=creator_id, inventory_id=inventory_id)
        for grant in WRITE_GRANTS
    )


def require_write(user_id: int, inventory_id: int, message: str) -> None:
    """Raise Forbidden with ``message`` unless the user may write to the inventory."""
    if not can_write(user_id, inventory_id):
        logger.warning(f"Write denied: user={user_id} inventory={inventory_id}")
        raise Forbidden(message)


def require_creator(user_id: int, inventory: Inventory, message: str) -> None:
    """Inventory metadata and its access list belong to the creator alone."""
    if inventory.creator_id != user_id:
        logger.warning(f"Creator-only action denied: user={user_id} inventory={inventory.pk}")
        raise Forbidden(message)
