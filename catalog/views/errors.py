"""
Error handling views.
Custom 404 and 500 error handlers returning the JSON envelope.
"""

import logging

from django.http import HttpRequest, JsonResponse

from .helpers import json_err

logger = logging.getLogger(__name__)


def error_404(request: HttpRequest, exception: Exception) -> JsonResponse:
    """Custom 404 error handler."""
    logger.warning(f"404 error for path: {request.path}", extra={"request": request})
    return json_err("Not found", 404)


def error_500(request: HttpRequest) -> JsonResponse:
    """Custom 500 error handler."""
    logger.error(f"500 error for path: {request.path}", extra={"request": request})
    return json_err("Internal server error", 500)
