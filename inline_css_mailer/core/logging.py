"""Logging setup for applications embedding the hook."""

from __future__ import annotations

import logging

from inline_css_mailer.core.config import settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    The package never configures handlers on import; call this from the
    application entry point when no other logging setup exists.
    """

    logger = logging.getLogger("inline_css_mailer")
    logger.setLevel(level or settings.INLINE_CSS_LOG_LEVEL.upper())

    if not any(getattr(handler, "_inline_css", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._inline_css = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger


__all__ = ["configure_logging"]
