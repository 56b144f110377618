"""DRF exception handler for the mentions API.

Every error body has the shape ``{status, message, request_id, timestamp}``
except for DRF's own exceptions (validation, 404, 403), which keep DRF's
rendering. Forum failures are reported as gateway errors: the forum being
down or slow is a 503, the forum refusing a request is a 502.
"""

import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from django.conf import settings

import requests
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.constants import REQUEST_ID_HEADER
from core.exceptions.downstream_exceptions import (
    DownstreamServiceError,
    DownstreamServiceUnavailableError,
)
from core.logging.context import get_request_id

logger = logging.getLogger(__name__)

# Checked in order; the first matching row wins
_ERROR_STATUS: tuple[tuple[tuple[type[Exception], ...], int, str], ...] = (
    (
        (
            DownstreamServiceUnavailableError,
            requests.Timeout,
            requests.ConnectionError,
        ),
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "The forum is currently unavailable.",
    ),
    (
        (DownstreamServiceError,),
        status.HTTP_502_BAD_GATEWAY,
        "The forum rejected the request.",
    ),
)


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Render an exception raised by a mentions view.

    Args:
        exc: The exception that was raised.
        context: DRF context holding the view and request.

    Returns:
        The error response.
    """
    view = context.get("view")
    request = getattr(view, "request", None)
    request_id = get_request_id()

    response = exception_handler(exc, context)
    if response is None:
        status_code, message = _status_for(exc)
        response = Response(
            {
                "status": status_code,
                "message": message,
                "request_id": request_id,
                "timestamp": datetime.now(UTC).isoformat(),
            },
            status=status_code,
        )

    if request_id:
        response[REQUEST_ID_HEADER] = request_id

    _log_exception(exc, request, response.status_code)
    return response


def _status_for(exc: Exception) -> tuple[int, str]:
    for types, status_code, message in _ERROR_STATUS:
        if isinstance(exc, types):
            return status_code, message
    return (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal server error occurred.",
    )


def _log_exception(exc: Exception, request: Any, status_code: int) -> None:
    """Log one line per failed request, with the stack trace in DEBUG."""
    parts = [
        f"{type(exc).__name__}: {exc}",
        f"{getattr(request, 'method', '-')} {getattr(request, 'path', '-')}",
        f"status={status_code}",
    ]
    service_name = getattr(exc, "service_name", None)
    if service_name:
        parts.append(f"forum_service={service_name}")

    message = " | ".join(parts)
    if settings.DEBUG:
        message += "\n" + "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )

    logger.log(logging.WARNING if status_code < 500 else logging.ERROR, message)
