"""
Pytest configuration and fixtures for the catalog tests.
"""
import json

import pytest
from django.contrib.auth import get_user_model
from django.test import Client

from catalog.models import AccessPermission, Category, Inventory, Item, Tag

User = get_user_model()


def make_user(username, **extra):
    return User.objects.create_user(
        username=username,
        email=f'{username}@example.com',
        password='testpass123',
        name=username.title(),
        **extra
    )


@pytest.fixture
def user(db):
    """Create a test user."""
    return make_user('testuser')


@pytest.fixture
def other_user(db):
    """Create another test user for permission tests."""
    return make_user('otheruser')


@pytest.fixture
def admin_user(db):
    """Create a catalog administrator (is_admin, not a Django superuser)."""
    return make_user('admin', is_admin=True)


@pytest.fixture
def category(db):
    return Category.objects.create(name='Books')


@pytest.fixture
def tags(db):
    return [Tag.objects.create(name=name) for name in ('fantasy', 'signed', 'vintage')]


@pytest.fixture
def inventory(user, category):
    """An inventory created by ``user``."""
    return Inventory.objects.create(
        title='Bookshelf',
        description='Books in the living room',
        category=category,
        creator=user,
    )


@pytest.fixture
def item(inventory):
    return Item.objects.create(
        inventory=inventory,
        name='The Hobbit',
        custom_id='BK-001',
        int1_val=1937,
    )


@pytest.fixture
def grant(other_user, inventory):
    """Give ``other_user`` write access to ``user``'s inventory."""
    return AccessPermission.objects.create(user=other_user, inventory=inventory)


@pytest.fixture
def authenticated_client(client, user):
    """Return a Django test client with authenticated user."""
    client.force_login(user)
    return client


@pytest.fixture
def other_client(db, other_user):
    """A separate client logged in as ``other_user``."""
    client = Client()
    client.force_login(other_user)
    return client


@pytest.fixture
def admin_client(db, admin_user):
    """Return a Django test client with authenticated admin."""
    client = Client()
    client.force_login(admin_user)
    return client


def send_json(client, method, url, payload=None):
    """Issue a JSON request the way the SPA does."""
    body = json.dumps(payload) if payload is not None else ''
    return getattr(client, method)(url, data=body, content_type='application/json')


@pytest.fixture
def api():
    """``api(client, 'post', url, {...})`` sends a JSON body."""
    return send_json


@pytest.fixture
def user_factory(db):
    """Create extra users by username."""
    return make_user
