"""Exceptions raised while rendering entities to markup."""

from __future__ import annotations


class MarkupError(Exception):
    """Base class for all markup rendering errors."""


class UnsupportedDialectFeature(MarkupError, ValueError):
    """The target dialect cannot express an entity kind or nesting configuration."""


class InvalidDialect(MarkupError, ValueError):
    """A dialect value outside HTML / Markdown / MarkdownV2 was supplied."""


class InvalidArgument(MarkupError, ValueError):
    """An auxiliary helper received an invalid argument."""


class CrossingEntities(MarkupError, ValueError):
    """Two entities overlap without one containing the other."""

    def __init__(self, first: object, second: object) -> None:
        self.first = first
        self.second = second
        super().__init__(f"Entities overlap without nesting: {first!r} and {second!r}")
