"""UTF-16 text helpers.

Telegram measures entity offsets and lengths in UTF-16 code units, so every
slice taken by the renderer goes through these helpers rather than plain
`str` indexing.
"""

from __future__ import annotations

from dataclasses import dataclass

from .entities import Entity, EntityKind

_CODEC = "utf-16-le"


def utf16_len(text: str) -> int:
    """Length in UTF-16 code units (Telegram entity offsets use this)."""
    return len(text.encode(_CODEC, "surrogatepass")) // 2


def encode_utf16(text: str) -> bytes:
    return text.encode(_CODEC, "surrogatepass")


def slice_utf16(encoded: bytes, start: int, end: int | None = None) -> str:
    """Decode the code units [start, end) of an already encoded text."""
    stop = None if end is None else max(end, 0) * 2
    return encoded[max(start, 0) * 2 : stop].decode(_CODEC, "surrogatepass")


def utf16_slice(text: str, start: int, end: int | None = None) -> str:
    """Slice `text` by UTF-16 code units instead of code points."""
    return slice_utf16(encode_utf16(text), start, end)


@dataclass(frozen=True)
class Segment:
    text: str
    kind: EntityKind | str | None = None
    url: str | None = None
    mentioned_user_id: int | None = None
    language: str | None = None


def build(segments: list[Segment]) -> tuple[str, list[Entity]]:
    """Concatenate segments into text + entities with UTF-16 offsets."""
    parts: list[str] = []
    entities: list[Entity] = []
    offset = 0

    for seg in segments:
        parts.append(seg.text)
        seg_len = utf16_len(seg.text)
        if seg.kind is not None and seg_len:
            entities.append(
                Entity(
                    offset=offset,
                    length=seg_len,
                    kind=seg.kind,
                    url=seg.url,
                    mentioned_user_id=seg.mentioned_user_id,
                    language=seg.language,
                )
            )
        offset += seg_len

    return "".join(parts), entities
