"""Observability helpers: structured logging with per-request context."""

from .logging import bind_request_context, clear_request_context, get_request_logger, setup_structured_logging

__all__ = [
    "bind_request_context",
    "clear_request_context",
    "get_request_logger",
    "setup_structured_logging",
]
