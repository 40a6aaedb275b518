"""Recursive entity-to-markup renderer.

The renderer walks the top-level entities of a text in order, emitting the
literal runs between them and a wrapped rendition of each entity. An entity
that contains other entities is rendered by recursing over its own substring,
with offsets rebased to the entity's start.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from .config import DEFAULT_SETTINGS, MarkupSettings
from .entities import Dialect, Entity, EntityKind, as_entity
from .errors import UnsupportedDialectFeature
from .escaping import escape_html, escape_markdown
from .nesting import is_duplicate, nested_entities, top_level_entities
from .tg_text import encode_utf16, slice_utf16

logger = logging.getLogger(__name__)

# Rendered as their (escaped) text in every dialect.
_PLAIN_KINDS = frozenset(
    {
        EntityKind.MENTION,
        EntityKind.HASHTAG,
        EntityKind.CASHTAG,
        EntityKind.BOT_COMMAND,
        EntityKind.EMAIL,
        EntityKind.PHONE_NUMBER,
        EntityKind.CUSTOM_EMOJI,
        EntityKind.BLOCKQUOTE,
        EntityKind.EXPANDABLE_BLOCKQUOTE,
        EntityKind.OTHER,
    }
)

_LEGACY_UNSUPPORTED = frozenset({EntityKind.UNDERLINE, EntityKind.STRIKETHROUGH, EntityKind.SPOILER})


@dataclass(frozen=True)
class _RenderContext:
    dialect: Dialect
    auto_link_urls: bool
    settings: MarkupSettings


def render(
    text: str | None,
    entities: Iterable[Any] | None,
    dialect: Any,
    auto_link_urls: bool = False,
    *,
    kinds: Iterable[Any] | None = None,
    settings: MarkupSettings | None = None,
) -> str | None:
    """Render `text` annotated with `entities` as markup in `dialect`.

    Args:
        text: Base text the entity offsets refer to. `None` renders to `None`.
        entities: `Entity` objects or python-telegram-bot `MessageEntity` objects.
        dialect: A `Dialect`, a `telegram.constants.ParseMode` or its string.
        auto_link_urls: Turn bare `url` entities into links.
        kinds: Only render entities of these kinds; the rest stay plain text.
        settings: Mention link prefix and spoiler class. Defaults to `DEFAULT_SETTINGS`.

    Raises:
        InvalidDialect: If `dialect` is not one of the supported dialects.
        UnsupportedDialectFeature: If legacy Markdown meets nesting or an
            underline/strikethrough/spoiler entity.
        CrossingEntities: If two entities overlap without nesting.
    """
    context = _RenderContext(
        dialect=Dialect.coerce(dialect),
        auto_link_urls=bool(auto_link_urls),
        settings=settings or DEFAULT_SETTINGS,
    )
    if text is None:
        return None

    selected = [as_entity(e) for e in entities or ()]
    if kinds is not None:
        allowed = {EntityKind.coerce(k) for k in kinds}
        selected = [e for e in selected if e.kind in allowed]

    logger.debug(
        "Rendering %d entities as %s (auto_link_urls=%s)",
        len(selected),
        context.dialect,
        context.auto_link_urls,
    )
    return _render(text, selected, 0, context)


def _render(text: str, entities: list[Entity], base_offset: int, context: _RenderContext) -> str:
    encoded = encode_utf16(text)
    parts: list[str] = []
    cursor = 0
    visited: set[Entity] = set()

    ordered = top_level_entities(entities)
    for entity in ordered:
        if entity in visited:
            continue

        nested = nested_entities(entity, entities)
        visited.update(nested)
        visited.update(other for other in ordered if other is not entity and is_duplicate(other, entity))

        start = entity.offset - base_offset
        end = start + entity.length
        raw = slice_utf16(encoded, start, end)

        if nested:
            if context.dialect is Dialect.MARKDOWN:
                raise UnsupportedDialectFeature("Nested entities are not supported by legacy Markdown.")
            inner = _render(raw, nested, entity.offset, context)
        else:
            inner = _escape_plain(raw, context.dialect)

        insert = _wrap(entity, inner, raw, context)

        parts.append(_literal(slice_utf16(encoded, cursor, start), base_offset, context))
        parts.append(insert)
        cursor = end

    parts.append(_literal(slice_utf16(encoded, cursor), base_offset, context))
    return "".join(parts)


def _literal(run: str, base_offset: int, context: _RenderContext) -> str:
    # Only runs of the outermost text are escaped; nested runs are emitted as-is.
    if base_offset == 0:
        return _escape_plain(run, context.dialect)
    return run


def _escape_plain(text: str, dialect: Dialect) -> str:
    if dialect is Dialect.HTML:
        return escape_html(text)
    return escape_markdown(text, dialect)


def _wrap(entity: Entity, inner: str, raw: str, context: _RenderContext) -> str:
    match context.dialect:
        case Dialect.HTML:
            return _wrap_html(entity, inner, context)
        case Dialect.MARKDOWN | Dialect.MARKDOWN_V2:
            return _wrap_markdown(entity, inner, raw, context)
    raise AssertionError(f"Unhandled dialect {context.dialect!r}")


def _wrap_html(entity: Entity, inner: str, context: _RenderContext) -> str:
    kind = entity.kind
    match kind:
        case EntityKind.TEXT_LINK:
            return f'<a href="{entity.url or ""}">{inner}</a>'
        case EntityKind.TEXT_MENTION:
            if entity.mentioned_user_id is None:
                logger.warning("Text mention at offset %d has no user; rendering it as text", entity.offset)
                return inner
            return f'<a href="{context.settings.user_link_prefix}{entity.mentioned_user_id}">{inner}</a>'
        case EntityKind.URL:
            return f'<a href="{inner}">{inner}</a>' if context.auto_link_urls else inner
        case EntityKind.BOLD:
            return f"<b>{inner}</b>"
        case EntityKind.ITALIC:
            return f"<i>{inner}</i>"
        case EntityKind.UNDERLINE:
            return f"<u>{inner}</u>"
        case EntityKind.STRIKETHROUGH:
            return f"<s>{inner}</s>"
        case EntityKind.SPOILER:
            return f'<span class="{context.settings.spoiler_class}">{inner}</span>'
        case EntityKind.CODE:
            return f"<code>{inner}</code>"
        case EntityKind.PRE:
            if entity.language:
                return f'<pre><code class="{entity.language}">{inner}</code></pre>'
            return f"<pre>{inner}</pre>"
        case _ if kind in _PLAIN_KINDS:
            return inner
    raise AssertionError(f"Unhandled entity kind {kind!r} for HTML")


def _wrap_markdown(entity: Entity, inner: str, raw: str, context: _RenderContext) -> str:
    kind = entity.kind
    dialect = context.dialect
    legacy = dialect is Dialect.MARKDOWN

    if legacy and kind in _LEGACY_UNSUPPORTED:
        raise UnsupportedDialectFeature(f"{kind.value} entities are not supported by legacy Markdown.")

    match kind:
        case EntityKind.TEXT_LINK:
            url = entity.url or ""
            if legacy:
                return f"[{inner}]({url})"
            return f"[{inner}]({escape_markdown(url, dialect, EntityKind.TEXT_LINK)})"
        case EntityKind.TEXT_MENTION:
            if entity.mentioned_user_id is None:
                logger.warning("Text mention at offset %d has no user; rendering it as text", entity.offset)
                return inner
            return f"[{inner}]({context.settings.user_link_prefix}{entity.mentioned_user_id})"
        case EntityKind.URL:
            if not context.auto_link_urls:
                return inner
            if legacy:
                return f"[{raw}]({raw})"
            return f"[{inner}]({raw})"
        case EntityKind.BOLD:
            return f"*{inner}*"
        case EntityKind.ITALIC:
            return f"_{inner}_"
        case EntityKind.UNDERLINE:
            return f"__{inner}__"
        case EntityKind.STRIKETHROUGH:
            return f"~{inner}~"
        case EntityKind.SPOILER:
            return f"||{inner}||"
        case EntityKind.CODE:
            return f"`{escape_markdown(raw, dialect, EntityKind.CODE)}`"
        case EntityKind.PRE:
            return _pre_markdown(entity, raw, dialect)
        case _ if kind in _PLAIN_KINDS:
            return inner
    raise AssertionError(f"Unhandled entity kind {kind!r} for {dialect}")


def _pre_markdown(entity: Entity, raw: str, dialect: Dialect) -> str:
    code = escape_markdown(raw, dialect, EntityKind.PRE)
    if entity.language:
        prefix = f"```{entity.language}\n"
    elif code.startswith("\\"):
        prefix = "```"
    else:
        prefix = "```\n"
    return f"{prefix}{code}```"
