"""Build the text/HTML leaves and nest them into their multipart containers.

Reference hierarchy of a fully featured message::

    multipart/mixed
      multipart/related
        multipart/alternative
          text/plain
          text/html
        image/png      (inline attachments)
      application/pdf  (regular attachments)

The assembler returns the ``multipart/related`` or ``multipart/alternative``
container; the top level is decided by the content type finalizer.
"""

from __future__ import annotations

import unicodedata
from email.message import Message, MIMEPart
from email.policy import Policy, default
from typing import Optional, Sequence

from inline_css_mailer.core.exceptions import MalformedExistingStructure
from inline_css_mailer.models import PartLayout
from inline_css_mailer.services.message_parts import is_inline


def choose_layout(attachments: Sequence[Message]) -> PartLayout:
    """``multipart/related`` is only needed when something is referenced inline."""

    if any(is_inline(attachment) for attachment in attachments):
        return PartLayout.RELATED
    return PartLayout.ALTERNATIVE


def _fit_text(body: str, charset: str) -> str:
    """Replace characters ``charset`` cannot carry in a plain text body.

    Each one becomes its compatibility form, its base letter without accents,
    or ``?`` as a last resort.
    """

    fitted = []
    for char in body:
        for candidate in (
            char,
            unicodedata.normalize("NFKC", char),
            "".join(c for c in unicodedata.normalize("NFKD", char) if not unicodedata.combining(c)),
        ):
            try:
                candidate.encode(charset)
            except UnicodeEncodeError:
                continue
            fitted.append(candidate)
            break
        else:
            fitted.append("?")
    return "".join(fitted)


def _build_leaf(body: str, subtype: str, charset: str, policy: Policy) -> MIMEPart:
    try:
        body.encode(charset)
    except LookupError as exc:
        raise MalformedExistingStructure(f"Unknown charset {charset!r}") from exc
    except UnicodeEncodeError:
        if subtype == "html":
            body = body.encode(charset, "xmlcharrefreplace").decode(charset)
        else:
            body = _fit_text(body, charset)

    part = MIMEPart(policy=policy)
    part.set_content(body, subtype=subtype, charset=charset)
    return part


def build_text_part(body: str, charset: str, *, policy: Policy = default) -> MIMEPart:
    return _build_leaf(body, "plain", charset, policy)


def build_html_part(body: str, charset: str, *, policy: Policy = default) -> MIMEPart:
    return _build_leaf(body, "html", charset, policy)


class PartAssembler:
    """Nest the body leaves according to the attachments of the message."""

    def __init__(self, *, policy: Policy = default):
        self._policy = policy

    def assemble(
        self,
        *,
        inlined_html: str,
        plain_text: Optional[str],
        charset: str,
        attachments: Sequence[Message],
        existing_text: Optional[Message] = None,
    ) -> MIMEPart:
        # An existing text part wins even when its body is blank.
        if existing_text is not None:
            text_part = existing_text
        else:
            text_part = build_text_part(plain_text or "", charset, policy=self._policy)
        html_part = build_html_part(inlined_html, charset, policy=self._policy)

        alternative = MIMEPart(policy=self._policy)
        alternative.make_alternative()
        alternative.attach(text_part)
        alternative.attach(html_part)

        if choose_layout(attachments) is PartLayout.ALTERNATIVE:
            return alternative

        related = MIMEPart(policy=self._policy)
        related.make_related()
        related.attach(alternative)
        return related


__all__ = ["PartAssembler", "build_html_part", "build_text_part", "choose_layout"]
