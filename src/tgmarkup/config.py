"""Renderer settings.

The library itself only uses explicit settings objects; the environment is read
by `load_settings()`, which the CLI calls after loading `.env`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class MarkupSettings:
    user_link_prefix: str = "app://user?id="
    spoiler_class: str = "spoiler"
    deep_link_base: str = "https://t.me"


DEFAULT_SETTINGS = MarkupSettings()

# Matches the markup Telegram itself accepts.
TELEGRAM_SETTINGS = MarkupSettings(user_link_prefix="tg://user?id=", spoiler_class="tg-spoiler")


def load_settings() -> MarkupSettings:
    """Build settings from MARKUP_* environment variables, falling back to defaults."""
    return MarkupSettings(
        user_link_prefix=os.getenv("MARKUP_USER_LINK_PREFIX") or DEFAULT_SETTINGS.user_link_prefix,
        spoiler_class=os.getenv("MARKUP_SPOILER_CLASS") or DEFAULT_SETTINGS.spoiler_class,
        deep_link_base=(os.getenv("MARKUP_DEEP_LINK_BASE") or DEFAULT_SETTINGS.deep_link_base).rstrip("/"),
    )
