"""Immutable data model: entity kinds, entities and output dialects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import InvalidDialect


class EntityKind(str, Enum):
    """Formatting kinds, in the fixed order used as the third sort key."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    SPOILER = "spoiler"
    CODE = "code"
    PRE = "pre"
    URL = "url"
    TEXT_LINK = "text_link"
    TEXT_MENTION = "text_mention"
    # Kinds rendered as plain escaped text.
    MENTION = "mention"
    HASHTAG = "hashtag"
    CASHTAG = "cashtag"
    BOT_COMMAND = "bot_command"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    CUSTOM_EMOJI = "custom_emoji"
    BLOCKQUOTE = "blockquote"
    EXPANDABLE_BLOCKQUOTE = "expandable_blockquote"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value

    @property
    def order(self) -> int:
        return _KIND_ORDER[self]

    @classmethod
    def coerce(cls, value: Any) -> EntityKind:
        """Map a kind, a Bot API type string or a `MessageEntityType` to a kind.

        Unknown type strings fall into `OTHER`.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            return cls.OTHER


_KIND_ORDER: dict[EntityKind, int] = {kind: index for index, kind in enumerate(EntityKind)}


class Dialect(str, Enum):
    """Output dialects. Values match `telegram.constants.ParseMode`."""

    HTML = "HTML"
    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: Any) -> Dialect:
        """Accept a dialect, a `ParseMode` or its string (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if value is not None:
            wanted = str(value).lower()
            for dialect in cls:
                if dialect.value.lower() == wanted:
                    return dialect
        raise InvalidDialect(f"Unsupported dialect {value!r}; expected one of HTML, Markdown, MarkdownV2.")


@dataclass(frozen=True)
class Entity:
    """An annotation over the half-open span [offset, offset + length) of a text.

    Offsets and lengths are UTF-16 code units.
    """

    offset: int
    length: int
    kind: EntityKind
    url: str | None = None
    mentioned_user_id: int | None = None
    language: str | None = None

    def __post_init__(self) -> None:
        for name in ("offset", "length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"Entity {name} must be a non-negative integer, got {value!r}")
        object.__setattr__(self, "kind", EntityKind.coerce(self.kind))

    @property
    def end(self) -> int:
        return self.offset + self.length

    @classmethod
    def from_telegram(cls, entity: Any) -> Entity:
        """Adapt a `telegram.MessageEntity` (or anything shaped like one)."""
        user = getattr(entity, "user", None)
        return cls(
            offset=entity.offset,
            length=entity.length,
            kind=EntityKind.coerce(entity.type),
            url=getattr(entity, "url", None),
            mentioned_user_id=user.id if user is not None else None,
            language=getattr(entity, "language", None),
        )


def as_entity(value: Any) -> Entity:
    if isinstance(value, Entity):
        return value
    return Entity.from_telegram(value)
