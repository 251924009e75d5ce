"""An ordered association list with value semantics.

The map is a sequence of ``(key, value)`` items kept in insertion order.
Appending never checks for an existing key, so a map may hold several items
with the same key; lookups then see the first of them.  Every operation
returns a new map and leaves the original untouched.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Iterator, Sequence


class AssocMap:
    """An immutable, ordered sequence of key/value items."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[tuple[Hashable, Any]] = ()) -> None:
        self._items: tuple[tuple[Hashable, Any], ...] = tuple(
            (key, value) for key, value in items
        )

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value of the first item with ``key``, else ``default``."""
        return next((v for k, v in self._items if k == key), default)

    def __getitem__(self, key: Hashable) -> Any:
        for k, v in self._items:
            if k == key:
                return v
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._items)

    def append(self, key: Hashable, value: Any) -> AssocMap:
        """Return a map with the item added at the end, even if ``key`` exists."""
        return AssocMap(self._items + ((key, value),))

    def insert(self, key: Hashable, value: Any) -> AssocMap:
        """Return a map where ``key`` is bound to ``value``.

        Every existing item with ``key`` gets the new value in place;
        otherwise the item is appended.
        """
        if key in self:
            return self.map_item(key, lambda new, _old: new, value)
        return self.append(key, value)

    def map_item(
        self, key: Hashable, mapping: Callable[[Any, Any], Any], aux: Any = None
    ) -> AssocMap:
        """Return a map where each value under ``key`` becomes ``mapping(aux, value)``."""
        return AssocMap(
            (k, mapping(aux, v) if k == key else v) for k, v in self._items
        )

    def keys(self) -> tuple[Hashable, ...]:
        """Return the keys of all items, in order, duplicates included."""
        return tuple(k for k, _ in self._items)

    def values(self) -> tuple[Any, ...]:
        """Return the values of all items, in order."""
        return tuple(v for _, v in self._items)

    def items(self) -> tuple[tuple[Hashable, Any], ...]:
        """Return all items, in order."""
        return self._items

    def __iter__(self) -> Iterator[tuple[Hashable, Any]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AssocMap):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"AssocMap({list(self._items)!r})"


def call_with_seq(func: Callable[..., Any], args: Sequence[Any]) -> Any:
    """Call ``func`` with the elements of ``args`` as positional arguments."""
    return func(*args)