"""
Tests for data integrity constraints.
"""
import pytest
from django.db import IntegrityError, transaction
from django.db.models import ProtectedError

from catalog.models import AccessPermission, Category, Inventory, Item, Tag

pytestmark = pytest.mark.integrity


class TestItemConstraints:

    def test_custom_id_unique_per_inventory(self, inventory, item):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Item.objects.create(inventory=inventory, name='Copy', custom_id='BK-001')

    def test_same_custom_id_in_other_inventory(self, item, category, other_user):
        elsewhere = Inventory.objects.create(
            title='Other', description='d', category=category, creator=other_user
        )
        Item.objects.create(inventory=elsewhere, name='Copy', custom_id='BK-001')
        assert Item.objects.filter(custom_id='BK-001').count() == 2

    def test_null_custom_ids_never_collide(self, inventory):
        Item.objects.create(inventory=inventory, name='a')
        Item.objects.create(inventory=inventory, name='b')
        assert Item.objects.filter(inventory=inventory, custom_id__isnull=True).count() == 2


class TestAccessPermissionConstraints:

    def test_one_row_per_user_and_inventory(self, other_user, inventory, grant):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                AccessPermission.objects.create(user=other_user, inventory=inventory)


class TestLookupConstraints:

    def test_category_name_unique(self, category):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Category.objects.create(name=category.name)

    def test_tag_name_unique(self, tags):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Tag.objects.create(name='fantasy')

    def test_category_in_use_cannot_be_deleted(self, inventory, category):
        with pytest.raises(ProtectedError):
            category.delete()


class TestCascades:

    def test_deleting_inventory_removes_items_and_grants(self, inventory, item, grant):
        inventory.delete()
        assert not Item.objects.exists()
        assert not AccessPermission.objects.exists()
