"""Logging configuration for setminify."""

import logging
import sys

import structlog

from .config import Settings, get_settings


def setup_logging(settings: Settings | None = None) -> None:
    """Set up structured logging: console output in development, JSON otherwise."""
    settings = settings or get_settings()
    level = getattr(logging, settings.app.log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer()
            if settings.app.development
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # Logs go to stderr, looked up per logger so redirected streams are
        # honored; stdout carries command output.
        logger_factory=lambda *args: structlog.WriteLogger(sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a configured logger."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
