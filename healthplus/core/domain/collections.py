"""
Indexed Collection Helpers

Every entity list in the snapshot is a tuple of frozen dataclasses keyed by
``id``. These helpers are the single place where lookup-by-id and
merge-by-id live, including the policy that an unknown id is a no-op.

When nothing changes the helpers hand back the *same* tuple object, so callers
can detect a no-op with an identity check.
"""

import dataclasses
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Protocol, TypeVar

logger = logging.getLogger(__name__)


class Identified(Protocol):
    """Anything stored in an indexed collection."""

    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=Identified)


def find_by_id(items: Iterable[T], entity_id: str) -> T | None:
    """Return the first item with the given id, or None."""
    for item in items:
        if item.id == entity_id:
            return item
    return None


def append(items: tuple[T, ...], item: T) -> tuple[T, ...]:
    """Return a new tuple with ``item`` at the end."""
    return (*items, item)


def prepend(items: tuple[T, ...], item: T) -> tuple[T, ...]:
    """Return a new tuple with ``item`` at the front."""
    return (item, *items)


def update_by_id(items: tuple[T, ...], entity_id: str, transform: Callable[[T], T]) -> tuple[T, ...]:
    """
    Replace the item with ``entity_id`` by ``transform(item)``.

    Args:
        items: Current collection
        entity_id: Id of the item to update
        transform: Pure function producing the replacement item

    Returns:
        A new tuple, or ``items`` itself when the id is unknown or the
        transform returned the item unchanged.
    """
    for index, item in enumerate(items):
        if item.id != entity_id:
            continue
        updated = transform(item)
        if updated is item:
            return items
        return (*items[:index], updated, *items[index + 1 :])

    logger.debug(f"No entity with id {entity_id!r}, update ignored")
    return items


def merge_fields(entity: T, updates: Mapping[str, Any], protected: Iterable[str] = ("id",)) -> T:
    """
    Shallow-merge ``updates`` into a frozen dataclass.

    Keys that are not fields of the dataclass, or that are protected, are
    dropped. Returns ``entity`` itself when nothing is left to apply.
    """
    blocked = set(protected)
    known = {f.name for f in dataclasses.fields(entity)}  # type: ignore[arg-type]
    applicable = {key: value for key, value in updates.items() if key in known and key not in blocked}
    if not applicable:
        return entity
    return dataclasses.replace(entity, **applicable)  # type: ignore[type-var]
