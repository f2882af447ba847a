"""
Views package for the catalog application.

This package is organized into logical modules:
- auth: session status, logout and CSRF token for the SPA
- admin: user list and bulk moderation (admins only)
- user: the caller's owned and accessible inventories
- inventories: inventory listings, create/update, nested items, access grants
- items: item CRUD guarded by the write-access resolver
- lookups: tags and categories
- health: liveness/readiness/metrics
- helpers: JSON envelopes and auth gates
"""

from .auth import (
    me,
    logout,
    csrf,
)

from .admin import (
    user_list,
    update_users,
)

from .user import (
    owned_inventories,
    accessible_inventories,
)

from .inventories import (
    latest,
    popular,
    tag_cloud,
    inventory_collection,
    inventory_detail,
    inventory_items,
    inventory_item_delete,
    inventory_access,
    inventory_access_revoke,
)

from .items import (
    item_collection,
    item_detail,
)

from .lookups import (
    tag_list,
    category_list,
)

from .errors import (
    error_404,
    error_500,
)

__all__ = [
    # Auth
    'me',
    'logout',
    'csrf',
    # Admin
    'user_list',
    'update_users',
    # User
    'owned_inventories',
    'accessible_inventories',
    # Inventories
    'latest',
    'popular',
    'tag_cloud',
    'inventory_collection',
    'inventory_detail',
    'inventory_items',
    'inventory_item_delete',
    'inventory_access',
    'inventory_access_revoke',
    # Items
    'item_collection',
    'item_detail',
    # Lookups
    'tag_list',
    'category_list',
    # Errors
    'error_404',
    'error_500',
]
