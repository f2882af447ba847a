from django import forms

from .constants import (
    BOOL_FIELDS,
    DOC_FIELDS,
    INT_FIELDS,
    MAX_BULK_USER_IDS,
    MAX_CUSTOM_ID_LENGTH,
    MAX_TITLE_LENGTH,
    MULTILINE_FIELDS,
    STRING_FIELDS,
)
from .moderation import BulkAction, BulkActionRequest
from .utils import sanitize_text, sanitize_url


def _coerce_id_list(value, message: str) -> list[int]:
    """Accept a JSON array of integer ids (numeric strings allowed)."""
    if not isinstance(value, list):
        raise forms.ValidationError(message)
    ids = []
    for raw in value:
        if isinstance(raw, bool):
            raise forms.ValidationError(message)
        if isinstance(raw, int):
            ids.append(raw)
        elif isinstance(raw, str) and raw.strip().isdigit():
            ids.append(int(raw.strip()))
        else:
            raise forms.ValidationError(message)
    return ids


class PayloadForm(forms.Form):
    """
    Base for forms bound to a decoded JSON body.

    With ``partial=True`` every field becomes optional and only the keys the
    client actually sent are reported by ``supplied_data()``, which gives PUT
    requests "leave untouched what you didn't send" semantics.
    """
    text_fields: tuple[str, ...] = ()

    def __init__(self, data=None, *args, partial: bool = False, **kwargs):
        super().__init__(data, *args, **kwargs)
        self.partial = partial
        if partial:
            for field in self.fields.values():
                field.required = False

    def clean(self):
        cleaned = super().clean()
        for name in self.text_fields:
            value = cleaned.get(name)
            if value:
                cleaned[name] = sanitize_text(value)
        return cleaned

    def supplied_data(self) -> dict:
        if not self.partial:
            return dict(self.cleaned_data)
        return {k: v for k, v in self.cleaned_data.items() if k in self.data}


class BulkActionForm(PayloadForm):
    """Body of POST /api/admin/users/update: ``{"action": ..., "userIds": [...]}``."""
    user_ids = forms.JSONField(
        error_messages={
            "required": "User IDs must be a non-empty array.",
            "invalid": "User IDs must be a non-empty array.",
        },
    )
    action = forms.ChoiceField(
        choices=BulkAction.choices,
        error_messages={
            "required": "Invalid action.",
            "invalid_choice": "Invalid action.",
        },
    )

    def clean_user_ids(self):
        ids = _coerce_id_list(self.cleaned_data.get("user_ids"), "User IDs must be a non-empty array.")
        if not ids:
            raise forms.ValidationError("User IDs must be a non-empty array.")
        if len(ids) > MAX_BULK_USER_IDS:
            raise forms.ValidationError(f"At most {MAX_BULK_USER_IDS} user IDs per request.")
        return ids

    def to_request(self) -> BulkActionRequest:
        return BulkActionRequest(
            action=BulkAction(self.cleaned_data["action"]),
            user_ids=tuple(dict.fromkeys(self.cleaned_data["user_ids"])),
        )


class InventoryForm(PayloadForm):
    text_fields = ("title", "description")

    title = forms.CharField(max_length=MAX_TITLE_LENGTH)
    description = forms.CharField()
    category_id = forms.IntegerField()
    tags = forms.JSONField(required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name in ("title", "description", "category_id"):
            self.fields[name].error_messages["required"] = "Missing required fields."

    def clean(self):
        cleaned = super().clean()
        if self.partial:
            for name in ("title", "description"):
                if name in self.data and not cleaned.get(name):
                    self.add_error(name, "Missing required fields.")
        return cleaned

    def clean_tags(self):
        tags = self.cleaned_data.get("tags")
        if tags in (None, ""):
            # an explicit empty array clears the tags on update
            return [] if self.data.get("tags") == [] else None
        return _coerce_id_list(tags, "Tags must be an array of tag IDs.")


class ItemForm(PayloadForm):
    """Item payload shared by create and update; custom slots are all optional."""
    text_fields = ("name", "custom_id") + STRING_FIELDS + MULTILINE_FIELDS

    name = forms.CharField(
        max_length=MAX_TITLE_LENGTH,
        error_messages={"required": "Item name is required."},
    )
    custom_id = forms.CharField(max_length=MAX_CUSTOM_ID_LENGTH, required=False, empty_value=None)
    inventory_id = forms.IntegerField(required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name in STRING_FIELDS:
            self.fields[name] = forms.CharField(max_length=MAX_TITLE_LENGTH, required=False, empty_value=None)
        for name in MULTILINE_FIELDS:
            self.fields[name] = forms.CharField(required=False, empty_value=None, strip=False)
        for name in INT_FIELDS:
            self.fields[name] = forms.IntegerField(required=False)
        for name in BOOL_FIELDS:
            self.fields[name] = forms.NullBooleanField(required=False)
        for name in DOC_FIELDS:
            self.fields[name] = forms.CharField(required=False, empty_value=None)

    def clean(self):
        cleaned = super().clean()
        if self.partial and "name" in self.data and not cleaned.get("name"):
            self.add_error("name", "Item name is required.")
        if cleaned.get("custom_id") == "":
            cleaned["custom_id"] = None
        for name in DOC_FIELDS:
            value = cleaned.get(name)
            if value is None:
                continue
            url = sanitize_url(value)
            if not url:
                self.add_error(name, "Must be an http(s) URL.")
            else:
                cleaned[name] = url
        return cleaned

    def item_fields(self) -> dict:
        """Supplied values that map onto Item columns (inventory_id excluded)."""
        data = self.supplied_data()
        data.pop("inventory_id", None)
        return data


class AccessGrantForm(PayloadForm):
    user_id = forms.IntegerField(error_messages={"required": "userId is required."})
