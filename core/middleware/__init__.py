"""Middleware components for the mentions service."""

from core.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
