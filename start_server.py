"""Production server startup script for the mentions service.

This module provides the entry point for starting the Django application
with Gunicorn in production environments (Docker containers, Kubernetes).
Dispatch jobs run in separate ``manage.py rqworker default`` processes.
"""

import sys

from gunicorn.app.wsgiapp import run


def main():
    """Start the mentions service using Gunicorn.

    Binds to 0.0.0.0:8000 with 4 workers of 2 threads each, a 60-second
    timeout, and access/error logs on stdout/stderr.
    """
    sys.argv = [
        "gunicorn",
        "mentions_service.wsgi:application",
        "--bind",
        "0.0.0.0:8000",
        "--workers",
        "4",
        "--threads",
        "2",
        "--timeout",
        "60",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()
