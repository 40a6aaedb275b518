"""Render Telegram-style text entities as HTML, Markdown or MarkdownV2."""

from __future__ import annotations

from .config import DEFAULT_SETTINGS, TELEGRAM_SETTINGS, MarkupSettings, load_settings
from .entities import Dialect, Entity, EntityKind
from .errors import CrossingEntities, InvalidArgument, InvalidDialect, MarkupError, UnsupportedDialectFeature
from .escaping import escape, escape_html, escape_markdown
from .message import (
    MessagePayload,
    caption_html,
    caption_html_urled,
    caption_markdown,
    caption_markdown_urled,
    caption_markdown_v2,
    caption_markdown_v2_urled,
    message_caption_entities,
    message_entities,
    parse_entities,
    parse_entity,
    render_message,
    text_html,
    text_html_urled,
    text_markdown,
    text_markdown_urled,
    text_markdown_v2,
    text_markdown_v2_urled,
)
from .nesting import is_nested, nested_entities, sort_entities, top_level_entities
from .render import render
from .tools import create_deep_linked_url, mention_html, mention_markdown

__all__ = [
    "DEFAULT_SETTINGS",
    "TELEGRAM_SETTINGS",
    "CrossingEntities",
    "Dialect",
    "Entity",
    "EntityKind",
    "InvalidArgument",
    "InvalidDialect",
    "MarkupError",
    "MarkupSettings",
    "MessagePayload",
    "UnsupportedDialectFeature",
    "caption_html",
    "caption_html_urled",
    "caption_markdown",
    "caption_markdown_urled",
    "caption_markdown_v2",
    "caption_markdown_v2_urled",
    "create_deep_linked_url",
    "escape",
    "escape_html",
    "escape_markdown",
    "is_nested",
    "load_settings",
    "mention_html",
    "mention_markdown",
    "message_caption_entities",
    "message_entities",
    "nested_entities",
    "parse_entities",
    "parse_entity",
    "render",
    "render_message",
    "sort_entities",
    "text_html",
    "text_html_urled",
    "text_markdown",
    "text_markdown_urled",
    "text_markdown_v2",
    "text_markdown_v2_urled",
    "top_level_entities",
]
