"""Logging helpers for in-app analytics.

Purpose:
    Provide a single helper for attaching a handler to the analytics report
    channel (or any other logger) with a consistent formatter and level.
External Dependencies:
    Uses the Python standard library ``logging`` module; ``rich`` supplies the
    optional console handler.
Fallback Semantics:
    Loggers that already carry handlers are returned untouched.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logger(name: str, level: int | None = None, rich: bool = False) -> logging.Logger:
    """Summary: Return a logger configured with a standard handler.
    Parameters:
        name: Name of the logger to retrieve; usually ``AnalyticsConfig.name``.
        level: Optional logging level override. Defaults to ``logging.INFO``
            when no handlers are configured on the logger.
        rich: Attach a ``rich`` console handler instead of a plain stream
            handler.
    Returns:
        logging.Logger: Configured logger instance.
    Side Effects:
        Adds a handler when the logger does not already have one attached.
    """

    logger = logging.getLogger(name)
    effective_level = level if level is not None else logging.INFO

    if not logger.handlers:
        if rich:
            handler: logging.Handler = RichHandler(rich_tracebacks=True, show_path=False)
            handler.setFormatter(logging.Formatter("%(message)s"))
        else:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(effective_level)

    return logger


__all__ = ["DEFAULT_FORMAT", "configure_logger"]
