"""
Inventory endpoints.

Handles the public listings (latest, popular, tag cloud, detail), inventory
create/update, the nested item routes and the creator-managed access list.
"""

import logging

from django.db import IntegrityError, transaction
from django.db.models import Count
from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET, require_http_methods

from ..constants import LATEST_INVENTORIES_LIMIT, POPULAR_INVENTORIES_LIMIT
from ..exceptions import CatalogError, Conflict, NotFound, ValidationFailed
from ..forms import AccessGrantForm, InventoryForm, ItemForm
from ..models import AccessPermission, Category, Inventory, Item, Tag, User
from ..permissions import require_creator
from ..serializers import inventory_to_dict, item_to_dict, permission_to_dict
from ..utils import first_form_error, read_json_body
from .helpers import api_login_required, get_or_not_found, json_err, json_ok
from .items import create_item, delete_item

logger = logging.getLogger(__name__)


def _with_relations(queryset):
    return queryset.select_related("creator").prefetch_related("tags")


def _resolve_tags(tag_ids: list[int]) -> list[Tag]:
    tags = list(Tag.objects.filter(pk__in=tag_ids))
    if len(tags) != len(set(tag_ids)):
        raise NotFound("Tag not found.")
    return tags


# -------------------------------------------------------------------------------------------------
# Listings
# -------------------------------------------------------------------------------------------------

@require_GET
def latest(request: HttpRequest) -> JsonResponse:
    """The most recently created inventories."""
    try:
        inventories = _with_relations(Inventory.objects.order_by("-created_at", "-id"))[:LATEST_INVENTORIES_LIMIT]
        return json_ok(inventories=[
            inventory_to_dict(inv, with_creator=True, with_tags=True) for inv in inventories
        ])

    except Exception:
        logger.exception("Error fetching latest inventories")
        return json_err("Failed to fetch latest inventories", 500)


@require_GET
def popular(request: HttpRequest) -> JsonResponse:
    """Inventories with the most items."""
    try:
        inventories = _with_relations(
            Inventory.objects
            .annotate(item_count=Count("items"))
            .order_by("-item_count", "-created_at", "-id")
        )[:POPULAR_INVENTORIES_LIMIT]
        return json_ok(inventories=[
            inventory_to_dict(inv, with_creator=True, with_tags=True) for inv in inventories
        ])

    except Exception:
        logger.exception("Error fetching popular inventories")
        return json_err("Failed to fetch popular inventories", 500)


@require_GET
def tag_cloud(request: HttpRequest) -> JsonResponse:
    """Unique tag names for the tag cloud."""
    try:
        names = list(Tag.objects.order_by("name").values_list("name", flat=True))
        return json_ok(tags=names)

    except Exception:
        logger.exception("Error fetching tag cloud")
        return json_err("Failed to fetch tags", 500)


# -------------------------------------------------------------------------------------------------
# Collection / detail
# -------------------------------------------------------------------------------------------------

@require_http_methods(["GET", "POST"])
def inventory_collection(request: HttpRequest) -> JsonResponse:
    if request.method == "POST":
        return _create(request)

    try:
        inventories = _with_relations(Inventory.objects.all())
        return json_ok(inventories=[
            inventory_to_dict(inv, with_creator=True, with_tags=True) for inv in inventories
        ])

    except Exception:
        logger.exception("Error fetching inventories")
        return json_err("Failed to fetch inventories", 500)


@api_login_required
def _create(request: HttpRequest) -> JsonResponse:
    try:
        form = InventoryForm(read_json_body(request))
        if not form.is_valid():
            raise ValidationFailed(first_form_error(form))
        data = form.cleaned_data

        category = get_or_not_found(Category, "Category not found.", pk=data["category_id"])
        tags = _resolve_tags(data["tags"]) if data.get("tags") else []

        with transaction.atomic():
            inventory = Inventory.objects.create(
                title=data["title"],
                description=data["description"],
                category=category,
                creator=request.user,
            )
            if tags:
                inventory.tags.set(tags)

        logger.info(f"User {request.user.pk} created inventory {inventory.pk}")
        return json_ok(status=201, inventory=inventory_to_dict(inventory, with_tags=True))

    except CatalogError as e:
        return json_err(e.message, e.status)
    except Exception:
        logger.exception("Failed to create inventory")
        return json_err("Failed to create inventory", 500)


@require_http_methods(["GET", "PUT"])
def inventory_detail(request: HttpRequest, pk: int) -> JsonResponse:
    if request.method == "PUT":
        return _update(request, pk)

    try:
        inventory = get_or_not_found(
            _with_relations(Inventory.objects).prefetch_related("items"), "Not found", pk=pk
        )
        return json_ok(inventory=inventory_to_dict(
            inventory, with_creator=True, with_tags=True, with_items=True
        ))

    except CatalogError as e:
        return json_err(e.message, e.status)
    except Exception:
        logger.exception("Error fetching inventory")
        return json_err("Failed to fetch inventory", 500)


@api_login_required
def _update(request: HttpRequest, pk: int) -> JsonResponse:
    """Update title/description/category and replace tags when given. Creator only."""
    try:
        inventory = get_or_not_found(Inventory, "Not found", pk=pk)
        require_creator(
            request.user.pk, inventory,
            "Forbidden: Only the creator can edit this inventory.",
        )

        form = InventoryForm(read_json_body(request), partial=True)
        if not form.is_valid():
            raise ValidationFailed(first_form_error(form))
        data = form.supplied_data()

        tags = None
        if data.get("tags") is not None:
            tags = _resolve_tags(data["tags"])
        if data.get("category_id") is not None:
            inventory.category = get_or_not_found(Category, "Category not found.", pk=data["category_id"])

        for field in ("title", "description"):
            if field in data:
                setattr(inventory, field, data[field])

        with transaction.atomic():
            inventory.save()
            if tags is not None:
                inventory.tags.set(tags)

        return json_ok(inventory=inventory_to_dict(inventory, with_tags=True))

    except CatalogError as e:
        return json_err(e.message, e.status)
    except Exception:
        logger.exception("Error updating inventory")
        return json_err("Failed to update inventory", 500)


# -------------------------------------------------------------------------------------------------
# Nested items
# -------------------------------------------------------------------------------------------------

@require_http_methods(["GET", "POST"])
def inventory_items(request: HttpRequest, pk: int) -> JsonResponse:
    if request.method == "POST":
        return _add_item(request, pk)

    try:
        items = Item.objects.filter(inventory_id=pk)
        return json_ok(items=[item_to_dict(item) for item in items])

    except Exception:
        logger.exception("Error fetching inventory items")
        return json_err("Failed to fetch items", 500)


@api_login_required
def _add_item(request: HttpRequest, pk: int) -> JsonResponse:
    try:
        form = ItemForm(read_json_body(request))
        form.is_valid()
        item = create_item(request.user.pk, pk, form)
        return json_ok(status=201, item=item_to_dict(item))

    except CatalogError as e:
        return json_err(e.message, e.status)
    except Exception:
        logger.exception("Error adding item to inventory")
        return json_err("Failed to add item", 500)


@api_login_required
@require_http_methods(["DELETE"])
def inventory_item_delete(request: HttpRequest, item_id: int) -> JsonResponse:
    try:
        delete_item(request.user.pk, item_id)
        return json_ok(message="Item deleted")

    except CatalogError as e:
        return json_err(e.message, e.status)
    except Exception:
        logger.exception("Error deleting inventory item")
        return json_err("Failed to delete item", 500)


# -------------------------------------------------------------------------------------------------
# Access permissions (creator only)
# -------------------------------------------------------------------------------------------------

@api_login_required
@require_http_methods(["GET", "POST"])
def inventory_access(request: HttpRequest, pk: int) -> JsonResponse:
    """List (GET) or grant (POST ``{"userId": N}``) write access to an inventory."""
    try:
        inventory = get_or_not_found(Inventory, "Not found", pk=pk)
        require_creator(
            request.user.pk, inventory,
            "Forbidden: Only the creator can manage access to this inventory.",
        )

        if request.method == "GET":
            permissions = inventory.access_permissions.select_related("user")
            return json_ok(permissions=[permission_to_dict(p) for p in permissions])

        form = AccessGrantForm(read_json_body(request))
        if not form.is_valid():
            raise ValidationFailed(first_form_error(form))

        user = get_or_not_found(User, "User not found.", pk=form.cleaned_data["user_id"])
        if user.pk == inventory.creator_id:
            raise ValidationFailed("The creator already has write access.")

        try:
            with transaction.atomic():
                permission = AccessPermission.objects.create(user=user, inventory=inventory)
        except IntegrityError:
            raise Conflict("Conflict: This user already has access to this inventory.")

        logger.info(f"User {request.user.pk} granted user {user.pk} access to inventory {inventory.pk}")
        return json_ok(status=201, permission=permission_to_dict(permission))

    except CatalogError as e:
        return json_err(e.message, e.status)
    except Exception:
        logger.exception("Error managing inventory access")
        return json_err("Failed to manage access", 500)


@api_login_required
@require_http_methods(["DELETE"])
def inventory_access_revoke(request: HttpRequest, pk: int, user_id: int) -> JsonResponse:
    try:
        inventory = get_or_not_found(Inventory, "Not found", pk=pk)
        require_creator(
            request.user.pk, inventory,
            "Forbidden: Only the creator can manage access to this inventory.",
        )

        deleted, _ = AccessPermission.objects.filter(inventory=inventory, user_id=user_id).delete()
        if not deleted:
            raise NotFound("Access permission not found.")

        logger.info(f"User {request.user.pk} revoked user {user_id}'s access to inventory {inventory.pk}")
        return json_ok(message="Access revoked")

    except CatalogError as e:
        return json_err(e.message, e.status)
    except Exception:
        logger.exception("Error revoking inventory access")
        return json_err("Failed to revoke access", 500)
