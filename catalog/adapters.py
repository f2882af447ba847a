import logging

from allauth.account.adapter import DefaultAccountAdapter
from allauth.core.exceptions import ImmediateHttpResponse
from allauth.socialaccount.adapter import DefaultSocialAccountAdapter
from django.http import JsonResponse

logger = logging.getLogger(__name__)


class AccountAdapter(DefaultAccountAdapter):
    # Accounts only come from OAuth providers
    def is_open_for_signup(self, request):
        return False


def display_name_from_profile(provider: str, extra_data: dict) -> str:
    """
    Build a display name from a provider profile.

    Google hands out a ready ``name``; Facebook is asked for first/last name
    separately, so those are joined.
    """
    if provider == "facebook":
        first = extra_data.get("first_name") or ""
        last = extra_data.get("last_name") or ""
        name = f"{first} {last}".strip()
        if name:
            return name
    return (extra_data.get("name") or "").strip()


class SocialAccountAdapter(DefaultSocialAccountAdapter):
    """
    Links an OAuth identity to a User.

    A returning (provider, uid) pair logs in the linked user; an unknown pair
    creates a new user plus the SocialAccount row. Blocked users are turned
    away before a session is established.
    """

    def is_open_for_signup(self, request, sociallogin):
        return True

    def pre_social_login(self, request, sociallogin):
        user = sociallogin.user
        if sociallogin.is_existing and user.is_blocked:
            logger.warning(f"Blocked user {user.pk} attempted to log in via {sociallogin.account.provider}")
            raise ImmediateHttpResponse(
                JsonResponse({"ok": False, "error": "Your account has been blocked."}, status=403)
            )

    def populate_user(self, request, sociallogin, data):
        user = super().populate_user(request, sociallogin, data)
        user.name = display_name_from_profile(
            sociallogin.account.provider, sociallogin.account.extra_data or {}
        )
        return user

    def save_user(self, request, sociallogin, form=None):
        user = super().save_user(request, sociallogin, form)
        logger.info(f"New user {user.pk} signed up via {sociallogin.account.provider}")
        return user
