"""Message-level entry points.

Accept any object exposing `text`, `entities`, `caption` and
`caption_entities` (a `telegram.Message` qualifies) and render either its text
or its caption.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from telegram import MessageEntity

from .config import MarkupSettings
from .entities import Dialect, Entity, EntityKind, as_entity
from .nesting import sort_entities
from .render import render
from .tg_text import utf16_slice


@dataclass(frozen=True)
class MessagePayload:
    """The text-bearing part of a Bot API message."""

    text: str | None = None
    entities: tuple[Entity, ...] = field(default_factory=tuple)
    caption: str | None = None
    caption_entities: tuple[Entity, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessagePayload:
        """Build a payload from a Bot API message JSON object."""
        return cls(
            text=data.get("text"),
            entities=_decode_entities(data.get("entities")),
            caption=data.get("caption"),
            caption_entities=_decode_entities(data.get("caption_entities")),
        )


def _decode_entities(value: Any) -> tuple[Entity, ...]:
    """Decode Bot API entity dicts via python-telegram-bot's MessageEntity."""
    if not value:
        return ()
    if not isinstance(value, list):
        raise ValueError(f"Entities must be a list, got {type(value).__name__}")

    entities: list[Entity] = []
    for raw in value:
        if not isinstance(raw, dict):
            raise ValueError(f"Entity must be an object, got {raw!r}")
        try:
            tg_entity = MessageEntity.de_json(raw, bot=None)
        except (KeyError, TypeError) as e:
            raise ValueError(f"Could not decode entity {raw!r}: {e}") from e
        if tg_entity is None:
            raise ValueError(f"Could not decode entity {raw!r}")
        entities.append(Entity.from_telegram(tg_entity))
    return tuple(entities)


def parse_entity(text: str | None, entity: Any) -> str:
    """Return the part of `text` covered by `entity`."""
    if text is None:
        raise ValueError("Cannot extract entity text from a message without text")
    entity = as_entity(entity)
    return utf16_slice(text, entity.offset, entity.end)


def parse_entities(
    text: str | None,
    entities: Iterable[Any] | None,
    kinds: Iterable[Any] | None = None,
) -> dict[Entity, str]:
    """Map each entity (sorted, optionally filtered by kind) to the text it covers."""
    selected = [as_entity(e) for e in entities or ()]
    if kinds is not None:
        allowed = {EntityKind.coerce(k) for k in kinds}
        selected = [e for e in selected if e.kind in allowed]
    return {entity: parse_entity(text, entity) for entity in sort_entities(selected)}


def message_entities(message: Any, kinds: Iterable[Any] | None = None) -> dict[Entity, str]:
    return parse_entities(message.text, message.entities, kinds)


def message_caption_entities(message: Any, kinds: Iterable[Any] | None = None) -> dict[Entity, str]:
    return parse_entities(message.caption, message.caption_entities, kinds)


def render_message(
    message: Any,
    dialect: Any,
    *,
    caption: bool = False,
    auto_link_urls: bool = False,
    kinds: Iterable[Any] | None = None,
    settings: MarkupSettings | None = None,
) -> str | None:
    """Render the text (or caption) of `message`; `None` when it has none."""
    if caption:
        text, entities = message.caption, message.caption_entities
    else:
        text, entities = message.text, message.entities
    return render(text, entities, dialect, auto_link_urls, kinds=kinds, settings=settings)


def text_html(message: Any, settings: MarkupSettings | None = None) -> str | None:
    return render_message(message, Dialect.HTML, settings=settings)


def text_html_urled(message: Any, settings: MarkupSettings | None = None) -> str | None:
    return render_message(message, Dialect.HTML, auto_link_urls=True, settings=settings)


def caption_html(message: Any, settings: MarkupSettings | None = None) -> str | None:
    return render_message(message, Dialect.HTML, caption=True, settings=settings)


def caption_html_urled(message: Any, settings: MarkupSettings | None = None) -> str | None:
    return render_message(message, Dialect.HTML, caption=True, auto_link_urls=True, settings=settings)


def text_markdown(message: Any, settings: MarkupSettings | None = None) -> str | None:
    return render_message(message, Dialect.MARKDOWN, settings=settings)


def text_markdown_urled(message: Any, settings: MarkupSettings | None = None) -> str | None:
    return render_message(message, Dialect.MARKDOWN, auto_link_urls=True, settings=settings)


def text_markdown_v2(message: Any, settings: MarkupSettings | None = None) -> str | None:
    return render_message(message, Dialect.MARKDOWN_V2, settings=settings)


def text_markdown_v2_urled(message: Any, settings: MarkupSettings | None = None) -> str | None:
    return render_message(message, Dialect.MARKDOWN_V2, auto_link_urls=True, settings=settings)


def caption_markdown(message: Any, settings: MarkupSettings | None = None) -> str | None:
    return render_message(message, Dialect.MARKDOWN, caption=True, settings=settings)


def caption_markdown_urled(message: Any, settings: MarkupSettings | None = None) -> str | None:
    return render_message(message, Dialect.MARKDOWN, caption=True, auto_link_urls=True, settings=settings)


def caption_markdown_v2(message: Any, settings: MarkupSettings | None = None) -> str | None:
    return render_message(message, Dialect.MARKDOWN_V2, caption=True, settings=settings)


def caption_markdown_v2_urled(message: Any, settings: MarkupSettings | None = None) -> str | None:
    return render_message(
        message,
        Dialect.MARKDOWN_V2,
        caption=True,
        auto_link_urls=True,
        settings=settings,
    )
