"""
Item CRUD.

Reads are public. Every write asks the permission resolver first: creates
against the requested inventory, updates and deletes against the inventory
the item already lives in.
"""

import logging

from django.db import IntegrityError, transaction
from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_http_methods

from ..exceptions import CatalogError, Conflict, ValidationFailed
from ..forms import ItemForm
from ..models import Item
from ..permissions import require_write
from ..serializers import item_to_dict
from ..utils import first_form_error, read_json_body
from .helpers import api_login_required, get_or_not_found, json_err, json_ok

logger = logging.getLogger(__name__)

CUSTOM_ID_CONFLICT = "Conflict: An item with this Custom ID already exists in this inventory."


def save_item(item: Item) -> Item:
    """Save, turning a duplicate custom id into a Conflict."""
    try:
        with transaction.atomic():
            item.save()
    except IntegrityError:
        raise Conflict(CUSTOM_ID_CONFLICT)
    return item


def create_item(user_id: int, inventory_id: int, form: ItemForm) -> Item:
    """
    Create an item in ``inventory_id`` on behalf of ``user_id``.

    ``form`` must already have been through ``is_valid()``; the permission
    check runs before its field errors are reported.
    """
    require_write(
        user_id, inventory_id,
        "Forbidden: You do not have permission to add items to this inventory.",
    )
    if form.errors:
        raise ValidationFailed(first_form_error(form))

    item = Item(inventory_id=inventory_id, **form.item_fields())
    save_item(item)
    logger.info(f"User {user_id} created item {item.pk} in inventory {inventory_id}")
    return item


@require_http_methods(["GET", "POST"])
def item_collection(request: HttpRequest) -> JsonResponse:
    if request.method == "POST":
        return _create(request)
    return _list(request)


def _list(request: HttpRequest) -> JsonResponse:
    try:
        return json_ok(items=[item_to_dict(item) for item in Item.objects.all()])

    except Exception:
        logger.exception("Error fetching items")
        return json_err("Failed to fetch items", 500)


@api_login_required
def _create(request: HttpRequest) -> JsonResponse:
    try:
        form = ItemForm(read_json_body(request))
        form.is_valid()

        inventory_id = form.cleaned_data.get("inventory_id")
        if inventory_id is None:
            raise ValidationFailed("inventoryId is required.")

        item = create_item(request.user.pk, inventory_id, form)
        return json_ok(status=201, item=item_to_dict(item))

    except CatalogError as e:
        return json_err(e.message, e.status)
    except Exception:
        logger.exception("Error creating item")
        return json_err("Failed to create item", 500)


@require_http_methods(["GET", "PUT", "DELETE"])
def item_detail(request: HttpRequest, pk: int) -> JsonResponse:
    if request.method == "PUT":
        return _update(request, pk)
    if request.method == "DELETE":
        return _delete(request, pk)
    return _retrieve(request, pk)


def _retrieve(request: HttpRequest, pk: int) -> JsonResponse:
    try:
        item = get_or_not_found(Item, "Not found", pk=pk)
        return json_ok(item=item_to_dict(item))

    except CatalogError as e:
        return json_err(e.message, e.status)
    except Exception:
        logger.exception("Error fetching item")
        return json_err("Failed to fetch item", 500)


@api_login_required
def _update(request: HttpRequest, pk: int) -> JsonResponse:
    try:
        item = get_or_not_found(Item, "Item not found.", pk=pk)
        require_write(
            request.user.pk, item.inventory_id,
            "Forbidden: You do not have permission to edit this item.",
        )

        form = ItemForm(read_json_body(request), partial=True)
        if not form.is_valid():
            raise ValidationFailed(first_form_error(form))

        for field, value in form.item_fields().items():
            setattr(item, field, value)
        save_item(item)
        return json_ok(item=item_to_dict(item))

    except CatalogError as e:
        return json_err(e.message, e.status)
    except Exception:
        logger.exception("Error updating item")
        return json_err("Failed to update item", 500)


def delete_item(user_id: int, item_id: int) -> None:
    item = get_or_not_found(Item, "Item not found.", pk=item_id)
    require_write(
        user_id, item.inventory_id,
        "Forbidden: You do not have permission to delete this item.",
    )
    item.delete()
    logger.info(f"User {user_id} deleted item {item_id}")


@api_login_required
def _delete(request: HttpRequest, pk: int) -> JsonResponse:
    try:
        delete_item(request.user.pk, pk)
        return json_ok(message="Item deleted")

    except CatalogError as e:
        return json_err(e.message, e.status)
    except Exception:
        logger.exception("Error deleting item")
        return json_err("Failed to delete item", 500)
