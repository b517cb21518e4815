"""Top level content type of a restructured message."""

from __future__ import annotations

from email.message import Message
from typing import Sequence

from inline_css_mailer.services.message_parts import is_inline

MIXED = "multipart/mixed"
RELATED = "multipart/related"


def top_level_media_type(attachments: Sequence[Message]) -> str:
    """``multipart/mixed`` as soon as one attachment is not referenced inline."""

    if any(not is_inline(attachment) for attachment in attachments):
        return MIXED
    return RELATED


def finalize_content_type(content_type: str, attachments: Sequence[Message]) -> str:
    """Swap the media type of ``content_type`` and keep its parameters verbatim."""

    segments = content_type.split(";")
    segments[0] = top_level_media_type(attachments)
    return ";".join(segments)


class ContentTypeFinalizer:
    def finalize(self, message: Message, attachments: Sequence[Message]) -> None:
        current = message.get("Content-Type", "text/plain")
        value = finalize_content_type(str(current), attachments)
        if "Content-Type" in message:
            message.replace_header("Content-Type", value)
        else:
            message["Content-Type"] = value


__all__ = [
    "ContentTypeFinalizer",
    "finalize_content_type",
    "top_level_media_type",
    "MIXED",
    "RELATED",
]
