from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
from telegram import Chat, Message, MessageEntity, User
from telegram.constants import MessageEntityType


def pytest_configure() -> None:
    """Ensure src/ is importable in tests."""
    repo_root = Path(__file__).resolve().parent.parent
    src = repo_root / "src"
    sys.path.insert(0, str(src))


MENTIONED_USER = User(id=123456789, first_name="mentioned user", is_bot=False)

TEXT = "Test for <bold, ita_lic, code, links, text-mention and pre. http://google.com/ab_"

ENTITIES = [
    MessageEntity(type=MessageEntityType.BOLD, offset=10, length=4),
    MessageEntity(type=MessageEntityType.ITALIC, offset=16, length=3),
    MessageEntity(type=MessageEntityType.ITALIC, offset=20, length=3),
    MessageEntity(type=MessageEntityType.CODE, offset=25, length=4),
    MessageEntity(type=MessageEntityType.TEXT_LINK, offset=31, length=5, url="http://github.com/ab_"),
    MessageEntity(type=MessageEntityType.TEXT_MENTION, offset=38, length=12, user=MENTIONED_USER),
    MessageEntity(type=MessageEntityType.PRE, offset=55, length=3, language="python"),
    MessageEntity(type=MessageEntityType.URL, offset=60, length=21),
]

TEXT_V2 = (
    r"Test for <bold, ita_lic, \`code, links, text-mention and `\pre."
    r" http://google.com and bold nested in strk>trgh nested in italic. Python pre. Spoiled."
)

ENTITIES_V2 = [
    MessageEntity(type=MessageEntityType.UNDERLINE, offset=0, length=4),
    MessageEntity(type=MessageEntityType.BOLD, offset=10, length=4),
    MessageEntity(type=MessageEntityType.ITALIC, offset=16, length=7),
    MessageEntity(type=MessageEntityType.CODE, offset=25, length=6),
    MessageEntity(type=MessageEntityType.TEXT_LINK, offset=33, length=5, url=r"http://github.com/abc\)def"),
    MessageEntity(type=MessageEntityType.TEXT_MENTION, offset=40, length=12, user=MENTIONED_USER),
    MessageEntity(type=MessageEntityType.PRE, offset=57, length=5),
    MessageEntity(type=MessageEntityType.URL, offset=64, length=17),
    MessageEntity(type=MessageEntityType.ITALIC, offset=86, length=41),
    MessageEntity(type=MessageEntityType.BOLD, offset=91, length=29),
    MessageEntity(type=MessageEntityType.STRIKETHROUGH, offset=101, length=9),
    MessageEntity(type=MessageEntityType.PRE, offset=129, length=10, language="python"),
    MessageEntity(type=MessageEntityType.SPOILER, offset=141, length=7),
]


def _message(text: str | None, entities: list[MessageEntity]) -> Message:
    return Message(
        message_id=1,
        date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        chat=Chat(id=1, type=Chat.PRIVATE),
        text=text,
        entities=entities,
        caption=text,
        caption_entities=entities,
    )


@pytest.fixture
def message() -> Message:
    """Message without nesting or v2-only kinds (renders in every dialect)."""
    return _message(TEXT, ENTITIES)


@pytest.fixture
def message_v2() -> Message:
    """Message with nesting and underline/strikethrough/spoiler."""
    return _message(TEXT_V2, ENTITIES_V2)


@pytest.fixture
def empty_message() -> Message:
    return Message(
        message_id=2,
        date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        chat=Chat(id=1, type=Chat.PRIVATE),
        text=None,
        caption="test",
    )
