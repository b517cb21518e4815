from __future__ import annotations

import re
from email.message import EmailMessage
from typing import Callable

import pytest

from inline_css_mailer.core.config import Settings
from inline_css_mailer.services import InlineCssHook, StyleInliner

_ENV_KEYS = (
    "INLINE_CSS_BASE_URL",
    "INLINE_CSS_DEFAULT_CHARSET",
    "INLINE_CSS_KEEP_STYLE_TAGS",
    "INLINE_CSS_STRIP_IMPORTANT",
    "INLINE_CSS_ALLOW_NETWORK",
    "INLINE_CSS_TEXT_BODY_WIDTH",
    "INLINE_CSS_LOG_LEVEL",
)


class FakeEngine:
    """Engine double that records calls and marks its output."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def inline(self, html: str, base_url: str) -> str:
        self.calls.append(("inline", html, base_url))
        return html.replace("<p>", '<p style="color:red">')

    def to_plain_text(self, html: str) -> str:
        self.calls.append(("to_plain_text", html))
        without_style = re.sub(r"<style>.*?</style>", "", html, flags=re.S)
        return re.sub(r"<[^>]+>", "", without_style)


class BrokenEngine:
    def inline(self, html: str, base_url: str) -> str:
        raise ValueError("unbalanced markup")

    def to_plain_text(self, html: str) -> str:
        raise ValueError("unbalanced markup")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_settings(monkeypatch) -> Callable[..., Settings]:
    def _make(**env: str) -> Settings:
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return Settings()

    return _make


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def broken_engine() -> BrokenEngine:
    return BrokenEngine()


@pytest.fixture
def hook(fake_engine, make_settings) -> InlineCssHook:
    return InlineCssHook(inliner=StyleInliner(fake_engine), config=make_settings())


@pytest.fixture
def build_message() -> Callable[..., EmailMessage]:
    def _build(
        *,
        html: str | None = "<p>Hi</p>",
        text: str | None = None,
        charset: str = "utf-8",
        attachments: tuple[tuple[str, bool], ...] = (),
        host: str | None = None,
    ) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = "Greetings"
        message["From"] = "team@example.com"
        message["To"] = "you@example.com"
        message["Message-ID"] = "<greetings@example.com>"
        if host:
            message["Host"] = host

        if html is None:
            message.set_content(text or "", charset=charset)
        elif text is None:
            message.set_content(html, subtype="html", charset=charset)
        else:
            message.set_content(text, charset=charset)
            message.add_alternative(html, subtype="html", charset=charset)

        for filename, inline in attachments:
            message.add_attachment(
                f"payload of {filename}".encode(),
                maintype="application" if not inline else "image",
                subtype="pdf" if not inline else "png",
                filename=filename,
                disposition="inline" if inline else "attachment",
                cid=f"<{filename}>" if inline else None,
            )
        return message

    return _build

