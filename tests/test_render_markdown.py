from __future__ import annotations

import pytest
from telegram.constants import ParseMode

from tgmarkup import (
    TELEGRAM_SETTINGS,
    Dialect,
    Entity,
    EntityKind,
    UnsupportedDialectFeature,
    caption_markdown_v2_urled,
    render,
    text_markdown,
    text_markdown_urled,
    text_markdown_v2,
    text_markdown_v2_urled,
)

EXPECTED_MARKDOWN = (
    r"Test for <*bold*, _ita_\__lic_, `code`,"
    r" [links](http://github.com/ab_),"
    r" [text-mention](tg://user?id=123456789) and ```python" "\n" r"pre```."
    r" http://google.com/ab\_"
)

EXPECTED_MARKDOWN_V2 = (
    r"__Test__ for <*bold*, _ita\_lic_, `\\\`code`,"
    r" [links](http://github.com/abc\\\)def),"
    r" [text\-mention](tg://user?id=123456789) and ```\`\\pre```\."
    r" http://google\.com and _bold *nested in ~strk\>trgh~ nested in* italic_\."
    r" ```python" "\n" r"Python pre```\. ||Spoiled||\."
)


def test_text_markdown_simple(message) -> None:  # type: ignore[no-untyped-def]
    assert text_markdown(message, TELEGRAM_SETTINGS) == EXPECTED_MARKDOWN


def test_text_markdown_urled(message) -> None:  # type: ignore[no-untyped-def]
    expected = EXPECTED_MARKDOWN.replace(
        r"http://google.com/ab\_",
        "[http://google.com/ab_](http://google.com/ab_)",
    )
    assert text_markdown_urled(message, TELEGRAM_SETTINGS) == expected


def test_text_markdown_v2_simple(message_v2) -> None:  # type: ignore[no-untyped-def]
    assert text_markdown_v2(message_v2, TELEGRAM_SETTINGS) == EXPECTED_MARKDOWN_V2


def test_text_markdown_v2_urled(message_v2) -> None:  # type: ignore[no-untyped-def]
    expected = EXPECTED_MARKDOWN_V2.replace(
        r" http://google\.com and",
        r" [http://google\.com](http://google.com) and",
    )
    assert text_markdown_v2_urled(message_v2, TELEGRAM_SETTINGS) == expected
    assert caption_markdown_v2_urled(message_v2, TELEGRAM_SETTINGS) == expected


def test_text_markdown_empty(empty_message) -> None:  # type: ignore[no-untyped-def]
    assert text_markdown(empty_message) is None
    assert text_markdown_v2(empty_message) is None


@pytest.mark.parametrize(
    "entities",
    [
        [Entity(0, 4, EntityKind.BOLD), Entity(0, 4, EntityKind.ITALIC)],
        [Entity(0, 4, EntityKind.UNDERLINE)],
        [Entity(0, 4, EntityKind.STRIKETHROUGH)],
        [Entity(0, 4, EntityKind.SPOILER)],
    ],
)
def test_legacy_markdown_rejects_v2_features(entities: list[Entity]) -> None:
    with pytest.raises(UnsupportedDialectFeature):
        render("test", entities, Dialect.MARKDOWN)


def test_legacy_rejection_is_all_or_nothing() -> None:
    entities = [Entity(0, 1, EntityKind.BOLD), Entity(2, 4, EntityKind.UNDERLINE)]
    with pytest.raises(UnsupportedDialectFeature):
        render("a test", entities, ParseMode.MARKDOWN)


def test_text_link_target_escaping_per_dialect() -> None:
    entities = [Entity(0, 4, EntityKind.TEXT_LINK, url="http://x/a)b")]
    assert render("link", entities, Dialect.MARKDOWN_V2) == r"[link](http://x/a\)b)"
    assert render("link", entities, Dialect.MARKDOWN) == "[link](http://x/a)b)"


def test_pre_fence_prefix() -> None:
    assert render("abc", [Entity(0, 3, EntityKind.PRE)], Dialect.MARKDOWN_V2) == "```\nabc```"
    assert render(r"\n", [Entity(0, 2, EntityKind.PRE)], Dialect.MARKDOWN_V2) == r"```\\n```"
    assert render("x", [Entity(0, 1, EntityKind.PRE, language="go")], Dialect.MARKDOWN_V2) == "```go\nx```"


def test_code_uses_monospace_escaping() -> None:
    entities = [Entity(2, 7, EntityKind.CODE)]
    assert render("a `b.c\\_d", entities, Dialect.MARKDOWN_V2) == r"a `\`b.c\\_d`"


def test_legacy_code_uses_legacy_escaping() -> None:
    entities = [Entity(0, 5, EntityKind.CODE)]
    assert render("a_b*c", entities, Dialect.MARKDOWN) == r"`a\_b\*c`"


def test_v2_formatting_wraps() -> None:
    text = "u s p"
    entities = [
        Entity(0, 1, EntityKind.UNDERLINE),
        Entity(2, 1, EntityKind.STRIKETHROUGH),
        Entity(4, 1, EntityKind.SPOILER),
    ]
    assert render(text, entities, Dialect.MARKDOWN_V2) == "__u__ ~s~ ||p||"


def test_no_entities_escapes_whole_text() -> None:
    assert render("*bold*", [], Dialect.MARKDOWN) == r"\*bold\*"
    assert render("_italic_", [], Dialect.MARKDOWN) == r"\_italic\_"
    assert render("1+1=2.", [], Dialect.MARKDOWN_V2) == r"1\+1\=2\."
