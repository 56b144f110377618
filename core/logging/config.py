"""Structlog configuration: JSON file logs plus a colored console."""

import logging
import logging.handlers
import os
from pathlib import Path

import structlog

from core.logging.processors import (
    add_process_info,
    add_request_context,
    add_service_context,
    console_renderer,
)

_MAX_LOG_BYTES = 50 * 1024 * 1024
_LOG_BACKUPS = 20


def setup_logging() -> None:
    """Configure structlog and the stdlib root logger.

    The file handler writes one JSON object per line with request, service
    and process metadata; the console handler pretty-prints the same events.
    Records emitted by libraries through stdlib logging get the same
    enrichment via ``foreign_pre_chain``.

    Environment Variables:
    - LOG_FILE_PATH: Path to log file (default: ./logs/mentions-service.log)
    - LOG_LEVEL: Logging level (default: INFO)
    - SERVICE_NAME: Service name for metadata (default: mentions-service)
    - ENVIRONMENT: Deployment environment (default: development)
    """
    log_file_path = os.getenv("LOG_FILE_PATH", "./logs/mentions-service.log")
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)

    shared_processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_request_context,
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_service_context,
            add_process_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file_path,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=[
                *shared_processors,
                add_service_context,
                add_process_info,
            ],
        )
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    for handler in (file_handler, console_handler):
        handler.setLevel(log_level)
        root_logger.addHandler(handler)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_file=log_file_path,
        log_level=log_level_name,
    )
