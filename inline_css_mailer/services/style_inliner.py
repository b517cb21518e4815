"""Adapter around the CSS inlining and HTML to text engine."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import html2text
from premailer import Premailer

from inline_css_mailer.core.config import Settings, settings
from inline_css_mailer.core.exceptions import EngineFailure
from inline_css_mailer.models import InlinedStyles

logger = logging.getLogger(__name__)


class StylingEngine(Protocol):
    """Anything able to inline CSS and render HTML as plain text."""

    def inline(self, html: str, base_url: str) -> str:
        ...

    def to_plain_text(self, html: str) -> str:
        ...


def _absolute_base_url(base_url: str) -> Optional[str]:
    """premailer only accepts base URLs with a scheme; a bare host gets http."""
    if not base_url:
        return None
    if "://" not in base_url:
        return f"http://{base_url}"
    return base_url


class PremailerEngine:
    """Inline CSS with premailer and derive plain text with html2text."""

    def __init__(self, config: Settings | None = None):
        self._settings = config or settings

    def inline(self, html: str, base_url: str) -> str:
        premailer = Premailer(
            html,
            base_url=_absolute_base_url(base_url),
            keep_style_tags=self._settings.INLINE_CSS_KEEP_STYLE_TAGS,
            strip_important=self._settings.INLINE_CSS_STRIP_IMPORTANT,
            allow_network=self._settings.INLINE_CSS_ALLOW_NETWORK,
            cssutils_logging_level=logging.CRITICAL,
        )
        return premailer.transform()

    def to_plain_text(self, html: str) -> str:
        converter = html2text.HTML2Text()
        converter.body_width = self._settings.INLINE_CSS_TEXT_BODY_WIDTH
        return converter.handle(html)


class StyleInliner:
    """Run one message body through the styling engine."""

    def __init__(self, engine: StylingEngine | None = None):
        self._engine = engine or PremailerEngine()

    def inline_styles(
        self, html: str, base_url: str, *, needs_plain_text: bool
    ) -> InlinedStyles:
        # The text fallback must be derived from the original markup. Once the
        # CSS is inlined its declarations would leak into the plain text.
        plain_text: Optional[str] = None
        if needs_plain_text:
            try:
                plain_text = self._engine.to_plain_text(html)
            except Exception as exc:
                raise EngineFailure("Failed to convert HTML body to plain text") from exc

        try:
            inlined_html = self._engine.inline(html, base_url)
        except Exception as exc:
            raise EngineFailure("Failed to inline CSS into HTML body") from exc

        logger.debug(
            "Inlined %d bytes of HTML (base_url=%r, plain_text=%s)",
            len(html),
            base_url,
            plain_text is not None,
        )
        return InlinedStyles(inlined_html=inlined_html, plain_text=plain_text)


__all__ = ["StylingEngine", "PremailerEngine", "StyleInliner"]
