"""
WSGI config for the catalog backend.

Exposes the WSGI callable as a module-level variable named ``application``;
gunicorn.conf.py points workers at it.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "catalog_backend.settings")

application = get_wsgi_application()
