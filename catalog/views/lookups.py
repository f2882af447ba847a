"""Read-only lookup lists used by the inventory editor."""

import logging

from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET

from ..models import Category, Tag
from ..serializers import category_to_dict, tag_to_dict
from .helpers import json_err, json_ok

logger = logging.getLogger(__name__)


@require_GET
def tag_list(request: HttpRequest) -> JsonResponse:
    try:
        return json_ok(tags=[tag_to_dict(t) for t in Tag.objects.order_by("name")])

    except Exception:
        logger.exception("Error fetching tags")
        return json_err("Failed to fetch tags", 500)


@require_GET
def category_list(request: HttpRequest) -> JsonResponse:
    try:
        return json_ok(categories=[category_to_dict(c) for c in Category.objects.order_by("name")])

    except Exception:
        logger.exception("Error fetching categories")
        return json_err("Failed to fetch categories", 500)
