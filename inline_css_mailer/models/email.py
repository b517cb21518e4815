"""Email related domain models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence


@dataclass(frozen=True)
class EmailAttachment:
    """Binary attachment to be delivered with an email.

    Attachments with ``inline=True`` are referenced from the HTML body through
    ``cid:<content_id>`` and end up under ``multipart/related``.
    """

    filename: str
    content_type: str
    data: bytes
    inline: bool = False
    content_id: Optional[str] = None


@dataclass(frozen=True)
class EmailContent:
    """Represents an email ready to be delivered."""

    subject: str
    sender: str
    recipients: Sequence[str]
    html_body: Optional[str] = None
    text_body: Optional[str] = None
    reply_to: Optional[str] = None
    charset: Optional[str] = None
    host: Optional[str] = None
    attachments: Sequence[EmailAttachment] = field(default_factory=tuple)

    def primary_recipient(self) -> str:
        """Return the first recipient address or an empty string."""
        return self.recipients[0] if self.recipients else ""


@dataclass(frozen=True)
class InlinedStyles:
    """Output of the styling engine for a single message."""

    inlined_html: str
    plain_text: Optional[str] = None


class PartLayout(str, Enum):
    """Shape of the container that holds the text and HTML leaves."""

    ALTERNATIVE = "multipart/alternative"
    RELATED = "multipart/related"


__all__ = ["EmailContent", "EmailAttachment", "InlinedStyles", "PartLayout"]
