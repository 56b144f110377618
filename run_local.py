#!/usr/bin/env python
"""Script to run the Django development server."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Apply migrations, then run the Django development server.

    The sent-mentions table is owned by this service, so a local database
    is brought up to date before serving.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "mentions_service.settings")
    execute_from_command_line([sys.argv[0], "migrate", "--noinput"])
    execute_from_command_line([sys.argv[0], "runserver", *sys.argv[1:]])


if __name__ == "__main__":
    main()
