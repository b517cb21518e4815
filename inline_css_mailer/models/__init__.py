"""Domain models for the CSS inlining hook."""

from inline_css_mailer.models.email import (
    EmailAttachment,
    EmailContent,
    InlinedStyles,
    PartLayout,
)

__all__ = ["EmailContent", "EmailAttachment", "InlinedStyles", "PartLayout"]
