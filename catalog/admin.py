from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin
from auditlog.registry import auditlog
from .models import AccessPermission, Category, Inventory, Item, Tag, User

# Register models with auditlog for security audit trail
# This tracks all create, update, and delete operations on these models
auditlog.register(User, exclude_fields=['password', 'last_login'])
auditlog.register(Inventory, exclude_fields=['created_at', 'updated_at'])
auditlog.register(Item, exclude_fields=['created_at', 'updated_at'])
auditlog.register(AccessPermission, exclude_fields=['created_at'])


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = ("username", "email", "name", "is_admin", "is_blocked", "created_at")
    list_filter = ("is_admin", "is_blocked", "is_staff")
    search_fields = ("username", "email", "name")
    fieldsets = DjangoUserAdmin.fieldsets + (
        ("Catalog", {"fields": ("name", "is_admin", "is_blocked")}),
    )

@admin.register(Inventory)
class InventoryAdmin(admin.ModelAdmin):
    list_display = ("title", "creator", "category", "created_at")
    list_filter = ("category", "created_at")
    list_select_related = ("creator", "category")
    search_fields = ("title", "description", "creator__email")
    filter_horizontal = ("tags",)

@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ("name", "custom_id", "inventory", "created_at")
    list_select_related = ("inventory",)
    search_fields = ("name", "custom_id", "inventory__title")
    readonly_fields = ("created_at", "updated_at")

@admin.register(AccessPermission)
class AccessPermissionAdmin(admin.ModelAdmin):
    list_display = ("user", "inventory", "created_at")
    list_select_related = ("user", "inventory")
    search_fields = ("user__email", "inventory__title")

@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    search_fields = ("name",)

@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    search_fields = ("name",)
