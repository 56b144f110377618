"""WSGI config for the mentions service."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "mentions_service.settings")

application = get_wsgi_application()
