"""Insertion-ordered set used for checker registration lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class OrderedSet(Generic[T]):
    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: dict[T, None] = dict.fromkeys(items)

    def add(self, item: T) -> bool:
        """Append `item` unless present; report whether it was added."""
        if item in self._items:
            return False
        self._items[item] = None
        return True

    def add_first(self, item: T) -> bool:
        if item in self._items:
            return False
        self._items = {item: None, **self._items}
        return True

    def discard(self, item: T) -> bool:
        if item not in self._items:
            return False
        del self._items[item]
        return True

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._items)!r})"
