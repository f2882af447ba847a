"""
Constants for the catalog application.
Centralizes magic numbers and configuration values for better maintainability.
"""

# --------------------------------------------------------------------------------------
# Listing endpoints
# --------------------------------------------------------------------------------------
LATEST_INVENTORIES_LIMIT = 10     # GET /api/inventories/latest
POPULAR_INVENTORIES_LIMIT = 10    # GET /api/inventories/popular

# --------------------------------------------------------------------------------------
# Moderation
# --------------------------------------------------------------------------------------
MAX_BULK_USER_IDS = 500           # Upper bound on ids accepted by one bulk admin action

# --------------------------------------------------------------------------------------
# Text Limits
# --------------------------------------------------------------------------------------
MAX_TEXT_LENGTH = 10_000          # Maximum length for sanitized multiline text
MAX_TITLE_LENGTH = 255
MAX_CUSTOM_ID_LENGTH = 100
MAX_URL_LENGTH = 2048             # Maximum length for document URLs

# --------------------------------------------------------------------------------------
# Custom item fields
# --------------------------------------------------------------------------------------
# Each inventory item carries three optional slots of every kind.
CUSTOM_FIELD_SLOTS = (1, 2, 3)
STRING_FIELDS = tuple(f"string{n}_val" for n in CUSTOM_FIELD_SLOTS)
MULTILINE_FIELDS = tuple(f"multiline{n}_val" for n in CUSTOM_FIELD_SLOTS)
INT_FIELDS = tuple(f"int{n}_val" for n in CUSTOM_FIELD_SLOTS)
BOOL_FIELDS = tuple(f"bool{n}_val" for n in CUSTOM_FIELD_SLOTS)
DOC_FIELDS = tuple(f"doc{n}_val" for n in CUSTOM_FIELD_SLOTS)
CUSTOM_FIELDS = STRING_FIELDS + MULTILINE_FIELDS + INT_FIELDS + BOOL_FIELDS + DOC_FIELDS

# --------------------------------------------------------------------------------------
# Wire format
# --------------------------------------------------------------------------------------
# camelCase request keys accepted from the frontend -> form field names
WIRE_ALIASES = {
    "customId": "custom_id",
    "inventoryId": "inventory_id",
    "categoryId": "category_id",
    "userIds": "user_ids",
    "userId": "user_id",
}
