# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    field_validator,
)

from ._concepts import Ordering
from ._errors import OutOfBoundsError
from .config import settings
from .utils import to_list_type

T = TypeVar("T")

logger = logging.getLogger(__name__)


__all__ = (
    "OrderedCollection",
    "Collection",
)


def _is_index(index: Any) -> bool:
    return isinstance(index, int) and not isinstance(index, bool)


class OrderedCollection(BaseModel, Ordering[T], Generic[T]):
    """Abstract ordered collection with sequential integer positions.

    Items are stored under contiguous indices `0..count-1` no matter how
    the collection was built or mutated: input keys are discarded on
    construction and removal shifts every later item down by one.

    Iteration follows a single shared cursor (`rewind`, `valid`,
    `current`, `advance`, `key`). Only one cursor traversal may run per
    instance at a time; use `traverse()` for an independent pass.
    Subclasses must implement `current()`, which defines what the cursor
    yields.

    Attributes:
        items (list[Any]):
            The stored items, in order. `None` is a real item.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
    )

    items: list[Any] = Field(
        default_factory=list,
        title="Items",
        description="Stored items under sequential integer positions.",
    )
    _cursor: int = PrivateAttr(default=0)

    def __init__(self, items: Any = None, /, **data: Any) -> None:
        if items is not None:
            if "items" in data:
                raise TypeError(
                    f"{type(self).__name__}() got multiple values for 'items'"
                )
            data["items"] = items
        super().__init__(**data)
        logger.debug(
            "%s created with %d items", type(self).__name__, len(self.items)
        )

    @field_validator("items", mode="before")
    def _validate_items(cls, value: Any) -> list[Any]:
        return to_list_type(value)

    # cursor protocol

    @property
    def position(self) -> int:
        """The current cursor position (may equal `count()`)."""
        return self._cursor

    def rewind(self) -> None:
        """Reset the cursor to the first slot."""
        self._cursor = 0

    @abstractmethod
    def current(self) -> T:
        """Return the item at the cursor.

        Implementations should raise `OutOfBoundsError` when `valid()` is
        False, as `Collection.current` does.
        """

    def key(self) -> int:
        """Return the cursor position, which doubles as the item key."""
        return self._cursor

    def advance(self) -> None:
        """Move the cursor forward by one; moving past the end is allowed."""
        self._cursor += 1

    def valid(self) -> bool:
        """Check that a slot is present at the cursor.

        This is a presence check, so a stored `None` is still valid.
        """
        return self.has(self._cursor)

    # storage

    def count(self) -> int:
        """Return the number of stored items."""
        return len(self.items)

    def add(self, item: T) -> None:
        """Append an item at index `count()`."""
        self.items.append(item)

    def remove(self, index: int) -> None:
        """Remove the item at `index` and shift later items down by one.

        The cursor is left where it is.

        Raises:
            OutOfBoundsError: If no slot is present at `index`.
        """
        self._check_index(index)
        del self.items[index]
        logger.debug(
            "Removed index %d from %s, %d items left",
            index,
            type(self).__name__,
            len(self.items),
        )

    def has(self, index: int) -> bool:
        """Check whether a slot is present at `index`."""
        return _is_index(index) and 0 <= index < len(self.items)

    def get(self, index: int) -> T:
        """Return the item at `index` unchanged.

        Raises:
            OutOfBoundsError: If no slot is present at `index`.
        """
        self._check_index(index)
        return self.items[index]

    def clear(self) -> None:
        """Remove all items and reset the cursor."""
        self.items.clear()
        self._cursor = 0
        logger.debug("Cleared %s", type(self).__name__)

    def to_array(self) -> list[T]:
        """Return a snapshot list of the items.

        Mutating the returned list does not affect the collection.
        """
        return self.items[:]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()

    def traverse(self) -> Iterator[T]:
        """Yield a snapshot of the items without touching the cursor.

        Each call gets its own position, so traversals may be nested.
        """
        yield from self.items[:]

    def _check_index(self, index: Any) -> None:
        if not self.has(index):
            logger.debug(
                "Index %r out of bounds for %s of %d items",
                index,
                type(self).__name__,
                len(self.items),
            )
            raise OutOfBoundsError.from_index(index, len(self.items))

    # python protocols

    def __list__(self) -> list[T]:
        return self.to_array()

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)

    def __iter__(self) -> Iterator[T]:
        """Iterate through the shared cursor, yielding `current()`.

        Not re-entrant: a nested loop over the same instance rewinds the
        cursor under the outer loop.
        """
        self.rewind()
        while self.valid():
            yield self.current()
            self.advance()

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __contains__(self, item: Any) -> bool:
        return item in self.items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedCollection):
            return NotImplemented
        return type(self) is type(other) and self.items == other.items

    def __repr__(self) -> str:
        limit = settings.REPR_MAX_ITEMS
        shown = ", ".join(repr(i) for i in self.items[:limit])
        if len(self.items) > limit:
            shown = f"{shown}, ..." if shown else "..."
        name = type(self).__name__
        return f"{name}(items=[{shown}], count={len(self.items)})"


class Collection(OrderedCollection[T], Generic[T]):
    """Concrete collection whose cursor yields the stored item as is."""

    def current(self) -> T:
        if not self.valid():
            raise OutOfBoundsError.from_index(
                self._cursor,
                len(self.items),
                message="Iterator position is invalid",
            )
        return self.items[self._cursor]
