"""Custom structlog processors for request context and service metadata."""

import asyncio
import os
import threading

from colorama import Fore, Style, init
from structlog.typing import EventDict, WrappedLogger

from core.logging.context import get_request_id

_LEVEL_COLORS = {
    "DEBUG": Fore.CYAN,
    "INFO": Fore.GREEN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.RED + Style.BRIGHT,
}

_CONSOLE_HIDDEN_FIELDS = {
    "level",
    "timestamp",
    "request_id",
    "logger",
    "event",
    "process_id",
    "thread_id",
    "task",
    "service_name",
    "environment",
}


def add_request_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add the current request ID to log events.

    Args:
        _logger: The wrapped logger instance (unused).
        _method_name: The name of the method called on the logger (unused).
        event_dict: The event dictionary to be logged.

    Returns:
        The event dictionary with request_id added if available.
    """
    request_id = get_request_id()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def add_service_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service_name and environment to log events."""
    event_dict["service_name"] = os.getenv("SERVICE_NAME", "mentions-service")
    event_dict["environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def add_process_info(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add process, thread and (inside an event loop) asyncio task names.

    Dispatch runs many coroutines on one thread, so the task name is what
    tells interleaved fan-out logs apart.
    """
    event_dict["process_id"] = os.getpid()
    event_dict["thread_id"] = threading.get_ident()
    try:
        task = asyncio.current_task()
    except RuntimeError:
        task = None
    if task is not None:
        event_dict["task"] = task.get_name()
    return event_dict


def console_renderer(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> str:
    """Render log events as colored strings for console output.

    Format: [LEVEL] timestamp | request_id | logger_name | message key=value...
    """
    init(autoreset=True)

    level = event_dict.get("level", "INFO").upper()
    level_color = _LEVEL_COLORS.get(level, Fore.WHITE)

    formatted = (
        f"{level_color}[{level:<8}]{Style.RESET_ALL} "
        f"{Fore.WHITE}{event_dict.get('timestamp', '')}{Style.RESET_ALL} | "
        f"{Fore.MAGENTA}{event_dict.get('request_id', 'no-request-id')}"
        f"{Style.RESET_ALL} | "
        f"{Fore.BLUE}{event_dict.get('logger', 'root')}{Style.RESET_ALL} | "
        f"{event_dict.get('event', '')}"
    )

    extra = " ".join(
        f"{key}={value}"
        for key, value in event_dict.items()
        if key not in _CONSOLE_HIDDEN_FIELDS
    )
    if extra:
        formatted += f" {Fore.YELLOW}{extra}{Style.RESET_ALL}"
    return formatted
