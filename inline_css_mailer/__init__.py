"""Inline CSS into outgoing HTML emails and nest their MIME parts."""

from inline_css_mailer.core.exceptions import (
    EngineFailure,
    InlineCssError,
    MalformedExistingStructure,
)
from inline_css_mailer.services import InlineCssHook, delivering_email

__version__ = "0.1.0"

__all__ = [
    "InlineCssHook",
    "delivering_email",
    "InlineCssError",
    "EngineFailure",
    "MalformedExistingStructure",
]
