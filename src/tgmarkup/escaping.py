"""Plain-text escaping per dialect and context.

Each table is a single character class, so substitution is linear in the
input length.
"""

from __future__ import annotations

import re
from html import escape as _html_escape
from typing import Any

from .entities import Dialect, EntityKind
from .errors import InvalidDialect

_MARKDOWN_ESCAPED = re.compile(r"([_*`\[])")
_MARKDOWN_V2_ESCAPED = re.compile(r"([\\_*()~`>#+\-=|{}.!\[\]])")
_MARKDOWN_V2_MONOSPACE_ESCAPED = re.compile(r"([\\`])")
_MARKDOWN_V2_LINK_TARGET_ESCAPED = re.compile(r"([\\)])")

_BACKSLASH = r"\\\1"


def escape_html(text: str) -> str:
    """Escape `&`, `<` and `>`."""
    return _html_escape(text, quote=False)


def escape_markdown(text: str, dialect: Any = Dialect.MARKDOWN, kind: Any = None) -> str:
    """Backslash-escape the characters `dialect` treats as markup.

    For MarkdownV2 the `kind` selects the context: `code`/`pre` content only
    escapes backslash and backtick, a `text_link` target only backslash and
    close-parenthesis. Legacy Markdown ignores `kind`.

    Raises:
        InvalidDialect: If `dialect` is not a Markdown dialect.
    """
    dialect = Dialect.coerce(dialect)
    kind = EntityKind.coerce(kind) if kind is not None else None

    match dialect, kind:
        case Dialect.MARKDOWN, _:
            pattern = _MARKDOWN_ESCAPED
        case Dialect.MARKDOWN_V2, EntityKind.CODE | EntityKind.PRE:
            pattern = _MARKDOWN_V2_MONOSPACE_ESCAPED
        case Dialect.MARKDOWN_V2, EntityKind.TEXT_LINK:
            pattern = _MARKDOWN_V2_LINK_TARGET_ESCAPED
        case Dialect.MARKDOWN_V2, _:
            pattern = _MARKDOWN_V2_ESCAPED
        case _:
            raise InvalidDialect("Only Markdown and MarkdownV2 can be markdown-escaped.")

    return pattern.sub(_BACKSLASH, text)


def escape(text: str, dialect: Any, kind: Any = None) -> str:
    """Escape `text` for any dialect."""
    if Dialect.coerce(dialect) is Dialect.HTML:
        return escape_html(text)
    return escape_markdown(text, dialect, kind)
