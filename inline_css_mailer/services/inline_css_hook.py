"""Inline CSS into HTML emails right before they are delivered."""

from __future__ import annotations

import copy
import logging
from email.message import EmailMessage

from inline_css_mailer.core.config import Settings, settings
from inline_css_mailer.services.content_type import ContentTypeFinalizer
from inline_css_mailer.services.message_parts import (
    collect_attachments,
    find_html_part,
    find_text_part,
    message_charset,
    read_body,
)
from inline_css_mailer.services.part_assembler import PartAssembler
from inline_css_mailer.services.style_inliner import PremailerEngine, StyleInliner

logger = logging.getLogger(__name__)


class InlineCssHook:
    """Interceptor that rewrites HTML messages with inlined styles.

    ``process`` never touches its argument: it returns either the original
    message, when there is no HTML to style, or a restructured copy.
    ``delivering_email`` commits that result into the caller's message, which
    is what a delivery pipeline expects from an interceptor.
    """

    def __init__(
        self,
        *,
        inliner: StyleInliner | None = None,
        assembler: PartAssembler | None = None,
        finalizer: ContentTypeFinalizer | None = None,
        config: Settings | None = None,
    ):
        self._settings = config or settings
        self._inliner = inliner or StyleInliner(PremailerEngine(self._settings))
        self._assembler = assembler or PartAssembler()
        self._finalizer = finalizer or ContentTypeFinalizer()

    def _base_url(self, message: EmailMessage) -> str:
        return self._settings.INLINE_CSS_BASE_URL or str(message.get("Host", ""))

    def process(self, message: EmailMessage) -> EmailMessage:
        if find_html_part(message) is None:
            logger.debug(
                "Message %s has no HTML body; skipping CSS inlining",
                message.get("Message-ID", "<unknown>"),
            )
            return message

        draft = copy.deepcopy(message)
        html_part = find_html_part(draft)
        existing_text = find_text_part(draft)
        attachments = collect_attachments(draft)
        charset = message_charset(draft, html_part, self._settings.INLINE_CSS_DEFAULT_CHARSET)
        base_url = self._base_url(draft)

        styles = self._inliner.inline_styles(
            read_body(html_part),
            base_url,
            needs_plain_text=existing_text is None,
        )
        root = self._assembler.assemble(
            inlined_html=styles.inlined_html,
            plain_text=styles.plain_text,
            charset=charset,
            attachments=attachments,
            existing_text=existing_text,
        )

        # The body is rebuilt from scratch; attachments come back at the end.
        del draft["Content-Transfer-Encoding"]
        draft.set_payload([root])
        self._finalizer.finalize(draft, attachments)
        for attachment in attachments:
            draft.attach(attachment)

        logger.info(
            "Inlined CSS for message %s (%s, %d attachment(s), text part %s)",
            draft.get("Message-ID", "<unknown>"),
            draft.get_content_type(),
            len(attachments),
            "reused" if existing_text is not None else "generated",
        )
        return draft

    def delivering_email(self, message: EmailMessage) -> EmailMessage:
        return commit(message, self.process(message))


def commit(target: EmailMessage, state: EmailMessage) -> EmailMessage:
    """Copy headers and body of ``state`` into ``target`` and return ``target``."""

    if state is target:
        return target

    for name in set(target.keys()):
        del target[name]
    for name, value in state.items():
        target[name] = value

    target.set_payload(state.get_payload())
    target.preamble = state.preamble
    target.epilogue = state.epilogue
    return target


def delivering_email(message: EmailMessage) -> EmailMessage:
    """Interceptor entry point using a hook built from the global settings."""

    return InlineCssHook().delivering_email(message)


__all__ = ["InlineCssHook", "commit", "delivering_email"]
