"""Core utilities for the CSS inlining hook."""

from inline_css_mailer.core.config import settings
from inline_css_mailer.core.exceptions import (
    DeliveryError,
    EngineFailure,
    InlineCssError,
    MalformedExistingStructure,
)
from inline_css_mailer.core.logging import configure_logging

__all__ = [
    "settings",
    "configure_logging",
    "InlineCssError",
    "EngineFailure",
    "MalformedExistingStructure",
    "DeliveryError",
]
