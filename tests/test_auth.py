"""
Tests for session endpoints and the OAuth adapters.
"""
from types import SimpleNamespace

import pytest
from allauth.core.exceptions import ImmediateHttpResponse
from django.contrib.auth import get_user_model
from django.test import RequestFactory
from django.urls import reverse

from catalog.adapters import AccountAdapter, SocialAccountAdapter, display_name_from_profile

User = get_user_model()

pytestmark = pytest.mark.auth


class TestSessionEndpoints:
    """Test /auth/me, /auth/logout and /auth/csrf."""

    def test_me_requires_login(self, client, db):
        response = client.get(reverse('catalog:me'))
        assert response.status_code == 401
        assert response.json() == {'ok': False, 'error': 'Not authenticated'}

    def test_me_returns_user(self, authenticated_client, user):
        response = authenticated_client.get(reverse('catalog:me'))

        assert response.status_code == 200
        data = response.json()['user']
        assert data['id'] == user.pk
        assert data['email'] == 'testuser@example.com'
        assert data['isAdmin'] is False
        assert data['isBlocked'] is False

    def test_logout_ends_session(self, authenticated_client):
        response = authenticated_client.post(reverse('catalog:logout'))
        assert response.status_code == 200
        assert response.json()['ok'] is True

        response = authenticated_client.get(reverse('catalog:me'))
        assert response.status_code == 401

    def test_logout_requires_post(self, authenticated_client):
        response = authenticated_client.get(reverse('catalog:logout'))
        assert response.status_code == 405

    def test_csrf_sets_cookie(self, client, db):
        response = client.get(reverse('catalog:csrf'))

        assert response.status_code == 200
        assert response.json()['csrfToken']
        assert 'csrftoken' in response.cookies


class TestDisplayName:
    """Display names built from provider profiles."""

    def test_google_uses_name(self):
        assert display_name_from_profile('google', {'name': 'Ada Lovelace'}) == 'Ada Lovelace'

    def test_facebook_joins_first_and_last(self):
        extra = {'first_name': 'Ada', 'last_name': 'Lovelace', 'name': 'ignored'}
        assert display_name_from_profile('facebook', extra) == 'Ada Lovelace'

    def test_facebook_falls_back_to_name(self):
        assert display_name_from_profile('facebook', {'name': 'Ada'}) == 'Ada'

    def test_missing_fields_give_empty_name(self):
        assert display_name_from_profile('google', {}) == ''


class TestAdapters:
    """Signup is OAuth-only and blocked users are turned away."""

    def _sociallogin(self, user, existing):
        return SimpleNamespace(
            user=user,
            is_existing=existing,
            account=SimpleNamespace(provider='google', extra_data={'name': 'Ada'}),
        )

    def test_local_signup_closed(self):
        request = RequestFactory().get('/')
        assert AccountAdapter(request).is_open_for_signup(request) is False

    def test_social_signup_open(self):
        request = RequestFactory().get('/')
        assert SocialAccountAdapter(request).is_open_for_signup(request, None) is True

    def test_blocked_user_rejected(self, user):
        user.is_blocked = True
        user.save()
        request = RequestFactory().get('/')

        with pytest.raises(ImmediateHttpResponse) as exc_info:
            SocialAccountAdapter(request).pre_social_login(request, self._sociallogin(user, True))

        assert exc_info.value.response.status_code == 403

    def test_active_user_passes(self, user):
        request = RequestFactory().get('/')
        assert SocialAccountAdapter(request).pre_social_login(
            request, self._sociallogin(user, True)
        ) is None

    def test_new_login_passes(self, db):
        request = RequestFactory().get('/')
        assert SocialAccountAdapter(request).pre_social_login(
            request, self._sociallogin(User(is_blocked=False), False)
        ) is None
