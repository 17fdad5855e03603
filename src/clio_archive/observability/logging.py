"""Structured logging with per-request context using structlog and contextvars."""

import logging
import sys

import structlog

_configured = False


def setup_structured_logging(level: str = "INFO") -> None:
    """Configure structlog with JSON output and per-request context.

    Logs go to stderr so stdout stays free for the MCP stdio transport
    and for CLI output.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    global _configured
    if _configured:
        return

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        stream=sys.stderr,
    )

    _configured = True


def bind_request_context(request_id: str, task: str) -> None:
    """Bind request context for all subsequent logs in this async context.

    Args:
        request_id: Unique request identifier
        task: Name of the generation task being executed
    """
    structlog.contextvars.bind_contextvars(request_id=request_id, task=task)


def clear_request_context() -> None:
    """Clear request context after the request completes."""
    structlog.contextvars.clear_contextvars()


def get_request_logger(name: str = "clio_archive") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger carrying the request context."""
    return structlog.get_logger(name)
