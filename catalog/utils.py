import json
import re
from typing import Any
from urllib.parse import urlparse

import bleach
from django.http import HttpRequest

from .constants import MAX_TEXT_LENGTH, MAX_URL_LENGTH, WIRE_ALIASES
from .exceptions import ValidationFailed


def sanitize_text(text: str | None, allow_basic_formatting: bool = False) -> str:
    """
    Sanitize text input to prevent XSS attacks.

    Args:
        text: The text to sanitize
        allow_basic_formatting: If True, allows basic HTML tags like <b>, <i>, <br>

    Returns:
        Sanitized text string
    """
    if not text:
        return ""

    if allow_basic_formatting:
        allowed_tags = ['b', 'i', 'u', 'br', 'p', 'strong', 'em']
    else:
        allowed_tags = []

    cleaned = bleach.clean(text, tags=allowed_tags, attributes={}, strip=True)

    if len(cleaned) > MAX_TEXT_LENGTH:
        cleaned = cleaned[:MAX_TEXT_LENGTH]

    return cleaned.strip()


def sanitize_url(url: str | None) -> str:
    """
    Sanitize and validate URLs for document fields.

    Returns the URL unchanged if it is a plain http(s) link, otherwise "".
    """
    if not url:
        return ""

    url = url.strip()

    if not re.match(r'^https?://', url, re.IGNORECASE):
        return ""

    if re.search(r'(javascript|data|vbscript):', url, re.IGNORECASE):
        return ""

    if not urlparse(url).netloc:
        return ""

    if len(url) > MAX_URL_LENGTH:
        return ""

    return url


def read_json_body(request: HttpRequest) -> dict[str, Any]:
    """
    Decode a JSON object request body and translate camelCase wire keys.

    Raises ValidationFailed for malformed JSON or a non-object payload.
    """
    if not request.body:
        return {}
    try:
        payload = json.loads(request.body)
    except (ValueError, UnicodeDecodeError):
        raise ValidationFailed("Request body must be valid JSON.")

    if not isinstance(payload, dict):
        raise ValidationFailed("Request body must be a JSON object.")

    return {WIRE_ALIASES.get(key, key): value for key, value in payload.items()}


def first_form_error(form) -> str:
    """Flatten a bound form's errors into one human-readable message."""
    for errors in form.errors.values():
        return errors[0]
    return "Invalid request."
