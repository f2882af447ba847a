"""
Tests for inventory listings, create/update and access management.
"""
import pytest
from django.urls import reverse

from catalog.models import AccessPermission, Inventory, Item

pytestmark = pytest.mark.inventories


class TestListings:

    def test_latest_newest_first(self, client, user, category):
        for n in range(12):
            Inventory.objects.create(title=f'inv{n}', description='d', category=category, creator=user)

        response = client.get(reverse('catalog:inventories_latest'))

        assert response.status_code == 200
        titles = [inv['title'] for inv in response.json()['inventories']]
        assert len(titles) == 10
        assert titles[0] == 'inv11'
        assert response.json()['inventories'][0]['creator']['id'] == user.pk

    def test_popular_by_item_count(self, client, user, category):
        small = Inventory.objects.create(title='small', description='d', category=category, creator=user)
        big = Inventory.objects.create(title='big', description='d', category=category, creator=user)
        Item.objects.create(inventory=small, name='a')
        for n in range(3):
            Item.objects.create(inventory=big, name=f'b{n}')

        response = client.get(reverse('catalog:inventories_popular'))

        inventories = response.json()['inventories']
        assert [inv['title'] for inv in inventories] == ['big', 'small']
        assert inventories[0]['itemCount'] == 3

    def test_tag_cloud(self, client, tags):
        response = client.get(reverse('catalog:inventories_tags'))
        assert response.json()['tags'] == ['fantasy', 'signed', 'vintage']

    def test_list_all(self, client, inventory):
        response = client.get(reverse('catalog:inventories'))
        assert [inv['id'] for inv in response.json()['inventories']] == [inventory.pk]

    def test_detail_includes_items(self, client, inventory, item):
        response = client.get(reverse('catalog:inventory_detail', args=[inventory.pk]))

        assert response.status_code == 200
        data = response.json()['inventory']
        assert data['title'] == 'Bookshelf'
        assert [i['customId'] for i in data['items']] == ['BK-001']

    def test_detail_missing_is_404(self, client, db):
        response = client.get(reverse('catalog:inventory_detail', args=[31337]))
        assert response.status_code == 404


class TestCreateUpdate:

    def test_create(self, authenticated_client, api, user, category, tags):
        response = api(authenticated_client, 'post', reverse('catalog:inventories'), {
            'title': 'Records',
            'description': 'Vinyl',
            'categoryId': category.pk,
            'tags': [tags[0].pk, tags[2].pk],
        })

        assert response.status_code == 201
        inventory = Inventory.objects.get(title='Records')
        assert inventory.creator == user
        assert set(inventory.tags.values_list('name', flat=True)) == {'fantasy', 'vintage'}

    def test_create_strips_markup(self, authenticated_client, api, category):
        api(authenticated_client, 'post', reverse('catalog:inventories'), {
            'title': '<script>x</script>Records',
            'description': '<b>Vinyl</b>',
            'categoryId': category.pk,
        })

        inventory = Inventory.objects.get()
        assert '<' not in inventory.title
        assert inventory.description == 'Vinyl'

    def test_create_missing_fields(self, authenticated_client, api, category):
        response = api(authenticated_client, 'post', reverse('catalog:inventories'), {
            'title': 'Records',
        })

        assert response.status_code == 400
        assert response.json()['error'] == 'Missing required fields.'

    def test_create_unknown_category(self, authenticated_client, api, db):
        response = api(authenticated_client, 'post', reverse('catalog:inventories'), {
            'title': 'Records',
            'description': 'Vinyl',
            'categoryId': 999,
        })
        assert response.status_code == 404
        assert not Inventory.objects.exists()

    def test_create_unknown_tag(self, authenticated_client, api, category):
        response = api(authenticated_client, 'post', reverse('catalog:inventories'), {
            'title': 'Records',
            'description': 'Vinyl',
            'categoryId': category.pk,
            'tags': [999],
        })
        assert response.status_code == 404
        assert not Inventory.objects.exists()

    def test_create_requires_login(self, client, api, category):
        response = api(client, 'post', reverse('catalog:inventories'), {
            'title': 'Records',
            'description': 'Vinyl',
            'categoryId': category.pk,
        })
        assert response.status_code == 401

    def test_invalid_json_is_400(self, authenticated_client):
        response = authenticated_client.post(
            reverse('catalog:inventories'), data='{nope', content_type='application/json'
        )
        assert response.status_code == 400
        assert response.json()['error'] == 'Request body must be valid JSON.'

    def test_update_partial(self, authenticated_client, api, inventory):
        response = api(authenticated_client, 'put', reverse('catalog:inventory_detail', args=[inventory.pk]), {
            'title': 'Shelf',
        })

        assert response.status_code == 200
        inventory.refresh_from_db()
        assert inventory.title == 'Shelf'
        assert inventory.description == 'Books in the living room'

    def test_update_replaces_and_clears_tags(self, authenticated_client, api, inventory, tags):
        inventory.tags.set(tags[:2])
        url = reverse('catalog:inventory_detail', args=[inventory.pk])

        api(authenticated_client, 'put', url, {'tags': [tags[2].pk]})
        assert list(inventory.tags.values_list('name', flat=True)) == ['vintage']

        api(authenticated_client, 'put', url, {'tags': []})
        assert not inventory.tags.exists()

    def test_update_rejects_blank_title(self, authenticated_client, api, inventory):
        response = api(authenticated_client, 'put', reverse('catalog:inventory_detail', args=[inventory.pk]), {
            'title': '',
        })
        assert response.status_code == 400

    def test_update_by_grantee_forbidden(self, other_client, api, inventory, grant):
        response = api(other_client, 'put', reverse('catalog:inventory_detail', args=[inventory.pk]), {
            'title': 'Mine now',
        })

        assert response.status_code == 403
        inventory.refresh_from_db()
        assert inventory.title == 'Bookshelf'


class TestNestedItems:

    def test_list_items(self, client, inventory, item):
        response = client.get(reverse('catalog:inventory_items', args=[inventory.pk]))
        assert [i['id'] for i in response.json()['items']] == [item.pk]

    def test_add_item_uses_path_inventory(self, other_client, api, inventory, grant):
        response = api(other_client, 'post', reverse('catalog:inventory_items', args=[inventory.pk]), {
            'name': 'Emma',
            'customId': 'BK-002',
        })

        assert response.status_code == 201
        assert response.json()['item']['inventoryId'] == inventory.pk

    def test_add_item_without_access(self, other_client, api, inventory):
        response = api(other_client, 'post', reverse('catalog:inventory_items', args=[inventory.pk]), {
            'name': 'Emma',
        })
        assert response.status_code == 403

    def test_add_item_to_missing_inventory(self, authenticated_client, api, db):
        response = api(authenticated_client, 'post', reverse('catalog:inventory_items', args=[4040]), {
            'name': 'Emma',
        })
        assert response.status_code == 403

    def test_delete_nested_item(self, authenticated_client, item):
        response = authenticated_client.delete(reverse('catalog:inventory_item_delete', args=[item.pk]))

        assert response.status_code == 200
        assert not Item.objects.filter(pk=item.pk).exists()


class TestAccessManagement:

    def test_grant_and_list(self, authenticated_client, api, inventory, other_user):
        url = reverse('catalog:inventory_access', args=[inventory.pk])

        response = api(authenticated_client, 'post', url, {'userId': other_user.pk})
        assert response.status_code == 201
        assert response.json()['permission']['userId'] == other_user.pk

        response = authenticated_client.get(url)
        assert [p['userId'] for p in response.json()['permissions']] == [other_user.pk]

    def test_duplicate_grant_is_conflict(self, authenticated_client, api, inventory, other_user, grant):
        response = api(authenticated_client, 'post', reverse('catalog:inventory_access', args=[inventory.pk]), {
            'userId': other_user.pk,
        })

        assert response.status_code == 409
        assert AccessPermission.objects.count() == 1

    def test_grant_to_creator_rejected(self, authenticated_client, api, inventory, user):
        response = api(authenticated_client, 'post', reverse('catalog:inventory_access', args=[inventory.pk]), {
            'userId': user.pk,
        })
        assert response.status_code == 400

    def test_grant_to_unknown_user(self, authenticated_client, api, inventory):
        response = api(authenticated_client, 'post', reverse('catalog:inventory_access', args=[inventory.pk]), {
            'userId': 5555,
        })
        assert response.status_code == 404

    def test_grantee_cannot_manage_access(self, other_client, api, inventory, grant, user_factory):
        third = user_factory('third')
        response = api(other_client, 'post', reverse('catalog:inventory_access', args=[inventory.pk]), {
            'userId': third.pk,
        })

        assert response.status_code == 403
        assert not AccessPermission.objects.filter(user=third).exists()

    def test_revoke(self, authenticated_client, inventory, other_user, grant):
        url = reverse('catalog:inventory_access_revoke', args=[inventory.pk, other_user.pk])

        response = authenticated_client.delete(url)
        assert response.status_code == 200
        assert not AccessPermission.objects.exists()

        response = authenticated_client.delete(url)
        assert response.status_code == 404


class TestUserListings:

    def test_owned(self, authenticated_client, inventory):
        response = authenticated_client.get(reverse('catalog:owned_inventories'))
        assert [inv['id'] for inv in response.json()['inventories']] == [inventory.pk]

    def test_accessible(self, other_client, inventory, grant):
        response = other_client.get(reverse('catalog:accessible_inventories'))
        assert [inv['id'] for inv in response.json()['inventories']] == [inventory.pk]

    def test_owned_requires_login(self, client, db):
        response = client.get(reverse('catalog:owned_inventories'))
        assert response.status_code == 401
