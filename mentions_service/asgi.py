"""ASGI config for the mentions service."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "mentions_service.settings")

application = get_asgi_application()
