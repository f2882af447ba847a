"""
Management command to promote (or demote) a catalog administrator.

Admins can only be created by other admins through the API, so the first one
has to be made from the shell.

Usage:
    python manage.py grant_admin alice@example.com
    python manage.py grant_admin alice --revoke
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.db.models import Q

from catalog.models import User


class Command(BaseCommand):
    help = 'Grant or revoke catalog administrator rights for a user (by email or username)'

    def add_arguments(self, parser):
        parser.add_argument(
            'identifier',
            help='Email address or username of the user',
        )
        parser.add_argument(
            '--revoke',
            action='store_true',
            help='Remove administrator rights instead of granting them',
        )

    def handle(self, *args, **options):
        identifier = options['identifier'].strip()
        revoke = options['revoke']

        matches = list(User.objects.filter(Q(email__iexact=identifier) | Q(username=identifier))[:2])
        if not matches:
            raise CommandError(f"No user found for '{identifier}'")
        if len(matches) > 1:
            raise CommandError(f"'{identifier}' matches more than one user; use the username")
        user = matches[0]

        if revoke:
            self._revoke(user)
        else:
            self._grant(user)

    def _grant(self, user):
        if user.is_admin:
            self.stdout.write(self.style.NOTICE(f"{user} is already an administrator"))
            return
        user.is_admin = True
        user.save(update_fields=['is_admin'])
        self.stdout.write(self.style.SUCCESS(f"{user} is now an administrator"))

    def _revoke(self, user):
        if not user.is_admin:
            self.stdout.write(self.style.NOTICE(f"{user} is not an administrator"))
            return

        with transaction.atomic():
            admin_ids = list(
                User.objects.select_for_update().filter(is_admin=True).values_list('pk', flat=True)
            )
            if len(admin_ids) <= 1:
                raise CommandError(f"{user} is the last administrator; promote someone else first")
            user.is_admin = False
            user.save(update_fields=['is_admin'])

        self.stdout.write(self.style.SUCCESS(f"{user} is no longer an administrator"))
