"""
Plain-dict renderings of the catalog models for JSON responses.

Keys are camelCase to match what the frontend already consumes.
"""

from typing import Any

from .constants import CUSTOM_FIELDS
from .models import AccessPermission, Category, Inventory, Item, Tag, User


def _iso(value) -> str | None:
    return value.isoformat() if value else None


def user_to_dict(user: User) -> dict[str, Any]:
    return {
        "id": user.pk,
        "email": user.email,
        "name": user.name,
        "isAdmin": user.is_admin,
        "isBlocked": user.is_blocked,
        "createdAt": _iso(user.created_at),
    }


def category_to_dict(category: Category) -> dict[str, Any]:
    return {"id": category.pk, "name": category.name}


def tag_to_dict(tag: Tag) -> dict[str, Any]:
    return {"id": tag.pk, "name": tag.name}


def item_to_dict(item: Item) -> dict[str, Any]:
    data = {
        "id": item.pk,
        "inventoryId": item.inventory_id,
        "name": item.name,
        "customId": item.custom_id,
        "createdAt": _iso(item.created_at),
        "updatedAt": _iso(item.updated_at),
    }
    for name in CUSTOM_FIELDS:
        data[name] = getattr(item, name)
    return data


def inventory_to_dict(
    inventory: Inventory,
    *,
    with_creator: bool = False,
    with_tags: bool = False,
    with_items: bool = False,
) -> dict[str, Any]:
    """
    Render an inventory. Related collections are opt-in so list endpoints
    only pay for what they prefetch.
    """
    data = {
        "id": inventory.pk,
        "title": inventory.title,
        "description": inventory.description,
        "categoryId": inventory.category_id,
        "creatorId": inventory.creator_id,
        "createdAt": _iso(inventory.created_at),
        "updatedAt": _iso(inventory.updated_at),
    }
    if with_creator:
        data["creator"] = user_to_dict(inventory.creator)
    if with_tags:
        data["tags"] = [tag_to_dict(tag) for tag in inventory.tags.all()]
    if with_items:
        data["items"] = [item_to_dict(item) for item in inventory.items.all()]
    if hasattr(inventory, "item_count"):
        data["itemCount"] = inventory.item_count
    return data


def permission_to_dict(permission: AccessPermission) -> dict[str, Any]:
    return {
        "id": permission.pk,
        "userId": permission.user_id,
        "inventoryId": permission.inventory_id,
        "user": user_to_dict(permission.user),
        "createdAt": _iso(permission.created_at),
    }
