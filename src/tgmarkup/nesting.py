"""Entity ordering and nesting resolution.

Entities are ordered by offset, then length, then kind. Entity B is nested in A
when B's span lies inside A's span and B does not compare equal to A under that
order. Entity counts are message-sized, so containment is found by scanning.
"""

from __future__ import annotations

from typing import Iterable

from .entities import Entity
from .errors import CrossingEntities


def sort_key(entity: Entity) -> tuple[int, int, int]:
    return entity.offset, entity.length, entity.kind.order


def sort_entities(entities: Iterable[Entity]) -> list[Entity]:
    return sorted(entities, key=sort_key)


def is_duplicate(first: Entity, second: Entity) -> bool:
    """Whether two entities compare equal under the total order."""
    return sort_key(first) == sort_key(second)


def is_nested(inner: Entity, outer: Entity) -> bool:
    """Whether `inner` is nested in `outer`.

    A zero-length entity contains nothing, and is not contained by a
    positive-length entity starting at the same offset.
    """
    if is_duplicate(inner, outer):
        return False
    if outer.length == 0:
        return False
    if inner.length == 0 and inner.offset == outer.offset:
        return False
    return inner.offset >= outer.offset and inner.end <= outer.end


def encloses(outer: Entity, inner: Entity) -> bool:
    """Like `is_nested`, but decides which of two equal spans is the outer one.

    Equal spans of different kinds are nested in each other under the plain
    predicate; the entity earlier in the total order encloses the other.
    """
    if not is_nested(inner, outer):
        return False
    if inner.offset == outer.offset and inner.length == outer.length:
        return sort_key(outer) < sort_key(inner)
    return True


def nested_entities(outer: Entity, entities: Iterable[Entity]) -> list[Entity]:
    """All entities nested in `outer` (at any depth), sorted."""
    return [e for e in sort_entities(entities) if is_nested(e, outer)]


def top_level_entities(entities: Iterable[Entity]) -> list[Entity]:
    """Entities not enclosed by any other entity of the set, sorted.

    Raises:
        CrossingEntities: If two top-level entities overlap without nesting.
    """
    ordered = sort_entities(entities)
    top = [e for e in ordered if not any(encloses(other, e) for other in ordered if other is not e)]

    previous: Entity | None = None
    for entity in top:
        if previous is not None and not is_duplicate(previous, entity) and entity.offset < previous.end:
            raise CrossingEntities(previous, entity)
        if previous is None or entity.end >= previous.end:
            previous = entity
    return top
