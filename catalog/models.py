from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Application user.

    Accounts are created on the first successful OAuth login (the provider link
    itself lives in allauth's SocialAccount table). ``is_admin`` grants access to
    the moderation endpoints; ``is_blocked`` locks the user out of the API.
    """
    name = models.CharField(max_length=255, blank=True)
    is_admin = models.BooleanField(default=False)
    is_blocked = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["is_admin"], name="user_is_admin_idx"),
        ]

    def __str__(self):
        return self.name or self.email or self.username


class Category(models.Model):
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name


class Tag(models.Model):
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class Inventory(models.Model):
    """A user-owned collection of items. The creator never changes."""
    title = models.CharField(max_length=255)
    description = models.TextField()
    category = models.ForeignKey(Category, on_delete=models.PROTECT, related_name="inventories")
    creator = models.ForeignKey(User, on_delete=models.CASCADE, related_name="inventories")
    tags = models.ManyToManyField(Tag, blank=True, related_name="inventories")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        verbose_name_plural = "inventories"
        indexes = [
            models.Index(fields=["creator", "-created_at"], name="inventory_creator_created_idx"),
            models.Index(fields=["created_at"], name="inventory_created_at_idx"),
        ]

    def __str__(self):
        return self.title


class Item(models.Model):
    """
    A record inside one inventory.

    Besides ``name`` and the inventory-scoped ``custom_id`` every item has three
    optional slots of each custom field kind: single-line string, multiline
    text, integer, boolean and document (URL).
    """
    inventory = models.ForeignKey(Inventory, on_delete=models.CASCADE, related_name="items")
    name = models.CharField(max_length=255)
    custom_id = models.CharField(max_length=100, null=True, blank=True)

    string1_val = models.CharField(max_length=255, null=True, blank=True)
    string2_val = models.CharField(max_length=255, null=True, blank=True)
    string3_val = models.CharField(max_length=255, null=True, blank=True)

    multiline1_val = models.TextField(null=True, blank=True)
    multiline2_val = models.TextField(null=True, blank=True)
    multiline3_val = models.TextField(null=True, blank=True)

    int1_val = models.IntegerField(null=True, blank=True)
    int2_val = models.IntegerField(null=True, blank=True)
    int3_val = models.IntegerField(null=True, blank=True)

    bool1_val = models.BooleanField(null=True, blank=True)
    bool2_val = models.BooleanField(null=True, blank=True)
    bool3_val = models.BooleanField(null=True, blank=True)

    doc1_val = models.URLField(max_length=2048, null=True, blank=True)
    doc2_val = models.URLField(max_length=2048, null=True, blank=True)
    doc3_val = models.URLField(max_length=2048, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["inventory", "name"], name="item_inventory_name_idx"),
        ]
        constraints = [
            # NULL custom ids never collide
            models.UniqueConstraint(
                fields=["inventory", "custom_id"],
                name="unique_item_custom_id_per_inventory",
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.custom_id})" if self.custom_id else self.name


class AccessPermission(models.Model):
    """Delegated write access to an inventory for a user who did not create it."""
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="access_permissions")
    inventory = models.ForeignKey(Inventory, on_delete=models.CASCADE, related_name="access_permissions")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "inventory"],
                name="unique_access_permission",
            ),
        ]

    def __str__(self):
        return f"{self.user} -> {self.inventory}"

