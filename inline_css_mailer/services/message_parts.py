"""Helpers to locate bodies and attachments inside an outbound message."""

from __future__ import annotations

from email.message import Message
from typing import Iterator, List, Optional

from inline_css_mailer.core.exceptions import MalformedExistingStructure

_BODY_TYPES = ("text/plain", "text/html")


def is_attachment(part: Message) -> bool:
    """Return ``True`` for parts that are attachments rather than bodies.

    Attached messages (``message/*``) count as attachments even though the
    email package reports them as multipart.
    """

    if part.get_content_disposition() == "attachment" or part.get_filename():
        return True
    if part.get_content_maintype() == "message":
        return True
    if part.is_multipart():
        return False
    return bool(part.get("Content-ID")) and part.get_content_type() not in _BODY_TYPES


def is_inline(part: Message) -> bool:
    return part.get_content_disposition() == "inline"


def _iter_parts(container: Message) -> Iterator[Message]:
    """Yield the parts below ``container`` without entering attachments."""

    for part in container.get_payload():
        yield part
        if part.is_multipart() and not is_attachment(part):
            yield from _iter_parts(part)


def collect_attachments(message: Message) -> List[Message]:
    """Return every attachment of ``message`` in document order."""

    if not message.is_multipart():
        return []
    return [part for part in _iter_parts(message) if is_attachment(part)]


def _find_body(message: Message, content_type: str) -> Optional[Message]:
    if not message.is_multipart():
        return None
    for part in _iter_parts(message):
        if part.is_multipart() or is_attachment(part):
            continue
        if part.get_content_type() == content_type:
            return part
    return None


def find_html_part(message: Message) -> Optional[Message]:
    """Return the HTML body of ``message``.

    A single part ``text/html`` message is its own HTML part.
    """

    if not message.is_multipart():
        return message if message.get_content_type() == "text/html" else None
    return _find_body(message, "text/html")


def find_text_part(message: Message) -> Optional[Message]:
    return _find_body(message, "text/plain")


def message_charset(message: Message, html_part: Message, default: str) -> str:
    return message.get_content_charset() or html_part.get_content_charset() or default


def read_body(part: Message) -> str:
    """Return the decoded text body of a leaf part."""

    content_type = part.get_content_type()
    try:
        content = part.get_content()  # type: ignore[attr-defined]
    except AttributeError as exc:
        raise MalformedExistingStructure(
            f"{content_type} part has no content accessor; "
            "build or parse messages with email.policy.default"
        ) from exc
    except LookupError as exc:
        raise MalformedExistingStructure(f"Cannot decode {content_type} part") from exc

    if not isinstance(content, str):
        raise MalformedExistingStructure(f"{content_type} part does not carry text")
    return content


__all__ = [
    "collect_attachments",
    "find_html_part",
    "find_text_part",
    "is_attachment",
    "is_inline",
    "message_charset",
    "read_body",
]
