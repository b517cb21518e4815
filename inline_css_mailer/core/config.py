"""Configuration for the CSS inlining hook."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _to_bool(value: str, *, default: bool = False) -> bool:
    lowered = value.strip().lower()
    if not lowered:
        return default
    return lowered in {"true", "1", "yes", "y", "on"}


class Settings:
    """Environment driven settings, read once per process."""

    def __init__(self) -> None:
        # Base URL used to resolve relative stylesheet and image references.
        # When empty, the message's ``Host`` header is used instead.
        self.INLINE_CSS_BASE_URL: str = os.getenv("INLINE_CSS_BASE_URL", "")
        self.INLINE_CSS_DEFAULT_CHARSET: str = os.getenv("INLINE_CSS_DEFAULT_CHARSET", "utf-8")

        self.INLINE_CSS_KEEP_STYLE_TAGS: bool = _to_bool(
            os.getenv("INLINE_CSS_KEEP_STYLE_TAGS", "false"), default=False
        )
        self.INLINE_CSS_STRIP_IMPORTANT: bool = _to_bool(
            os.getenv("INLINE_CSS_STRIP_IMPORTANT", "false"), default=False
        )
        self.INLINE_CSS_ALLOW_NETWORK: bool = _to_bool(
            os.getenv("INLINE_CSS_ALLOW_NETWORK", "true"), default=True
        )
        self.INLINE_CSS_TEXT_BODY_WIDTH: int = int(os.getenv("INLINE_CSS_TEXT_BODY_WIDTH", "0"))

        self.INLINE_CSS_LOG_LEVEL: str = os.getenv("INLINE_CSS_LOG_LEVEL", "INFO")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

__all__ = ["settings", "get_settings", "Settings"]
