"""Django settings for the mentions service.

Values are read from the environment so the same module serves local
development, containers and CI. The ``MENTIONS`` bag mirrors the forum's
administrator settings for the mentions feature and is loaded once into an
immutable snapshot by ``core.config.mentions_settings``.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-mentions-service-dev")

DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "django_rq",
    "core",
]

MIDDLEWARE = [
    "core.middleware.RequestIDMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "mentions_service.urls"

WSGI_APPLICATION = "mentions_service.wsgi.application"
ASGI_APPLICATION = "mentions_service.asgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.getenv("POSTGRES_DB", "mentions"),
        "USER": os.getenv("POSTGRES_USER", "mentions"),
        "PASSWORD": os.getenv("POSTGRES_PASSWORD", ""),
        "HOST": os.getenv("POSTGRES_HOST", "localhost"),
        "PORT": os.getenv("POSTGRES_PORT", "5432"),
        "CONN_MAX_AGE": 60,
    }
}

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": REDIS_URL,
    }
}

RQ_QUEUES = {
    "default": {
        "URL": REDIS_URL,
        "DEFAULT_TIMEOUT": 600,
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True
TIME_ZONE = "UTC"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "EXCEPTION_HANDLER": "core.exceptions.custom_exception_handler",
    "UNAUTHENTICATED_USER": None,
}

# Administrator settings for the mentions feature. Switches accept the
# "on"/"off" strings persisted by the forum admin page or plain booleans.
MENTIONS = {
    "disableFollowedTopics": os.getenv("MENTIONS_DISABLE_FOLLOWED_TOPICS", "off"),
    "autofillGroups": os.getenv("MENTIONS_AUTOFILL_GROUPS", "off"),
    "disableGroupMentions": os.getenv("MENTIONS_DISABLE_GROUP_MENTIONS", "[]"),
    "overrideIgnores": os.getenv("MENTIONS_OVERRIDE_IGNORES", "off"),
    "display": os.getenv("MENTIONS_DISPLAY", ""),
    "privilegedDirectReplies": os.getenv("MENTIONS_PRIVILEGED_DIRECT_REPLIES", "off"),
    "hideFullname": os.getenv("FORUM_HIDE_FULLNAME", "off"),
}
