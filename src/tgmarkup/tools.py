"""Small formatting helpers: user mentions and deep links."""

from __future__ import annotations

import re
from typing import Any

from .config import DEFAULT_SETTINGS, MarkupSettings
from .entities import Dialect
from .errors import InvalidArgument, InvalidDialect
from .escaping import escape_html, escape_markdown

_DEEP_LINK_PAYLOAD_RE = re.compile(r"[A-Za-z0-9_-]+")
MAX_DEEP_LINK_PAYLOAD = 64


def mention_html(user_id: int | str, name: str, settings: MarkupSettings | None = None) -> str:
    """HTML link mentioning a user by id."""
    prefix = (settings or DEFAULT_SETTINGS).user_link_prefix
    return f'<a href="{prefix}{user_id}">{escape_html(name)}</a>'


def mention_markdown(
    user_id: int | str,
    name: str,
    dialect: Any = Dialect.MARKDOWN,
    settings: MarkupSettings | None = None,
) -> str:
    """Markdown link mentioning a user by id.

    Legacy Markdown keeps `name` as-is; MarkdownV2 escapes it.
    """
    dialect = Dialect.coerce(dialect)
    link = f"{(settings or DEFAULT_SETTINGS).user_link_prefix}{user_id}"
    match dialect:
        case Dialect.MARKDOWN:
            return f"[{name}]({link})"
        case Dialect.MARKDOWN_V2:
            return f"[{escape_markdown(name, dialect)}]({link})"
        case _:
            raise InvalidDialect("Only Markdown and MarkdownV2 mentions are supported.")


def create_deep_linked_url(
    bot_username: str | None,
    payload: str | None = None,
    group: bool = False,
    settings: MarkupSettings | None = None,
) -> str:
    """Build a deep link that starts a bot (or adds it to a group) with `payload`.

    Raises:
        InvalidArgument: If the username is missing or too short, or the payload
            is too long or contains characters other than A-Z, a-z, 0-9, _ and -.
    """
    if not bot_username or len(bot_username) <= 3:
        raise InvalidArgument("You must provide a valid bot_username.")

    base_url = f"{(settings or DEFAULT_SETTINGS).deep_link_base}/{bot_username}"
    if not payload:
        return base_url

    if len(payload) > MAX_DEEP_LINK_PAYLOAD:
        raise InvalidArgument(f"The deep-linking payload must not exceed {MAX_DEEP_LINK_PAYLOAD} characters.")

    if not _DEEP_LINK_PAYLOAD_RE.fullmatch(payload):
        raise InvalidArgument("Only the following characters are allowed for deep-linked URLs: A-Z, a-z, 0-9, _ and -")

    key = "startgroup" if group else "start"
    return f"{base_url}?{key}={payload}"
