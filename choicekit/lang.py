"""Small language helpers: the unit value and addressable copies."""

from __future__ import annotations

import copy
from typing import Any, TypeVar

T = TypeVar("T")


class Unit:
    """The type with exactly one value, carrying no information."""

    __slots__ = ()
    _instance: Unit | None = None

    def __new__(cls) -> Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Unit)

    def __hash__(self) -> int:
        return hash(Unit)

    def __repr__(self) -> str:
        return "unit"

    def __reduce__(self) -> Any:
        return (Unit, ())


unit = Unit()


def obj(value: T) -> T:
    """Return a fresh object holding a copy of ``value``.

    The copy can be kept and changed without affecting ``value``.
    """
    return copy.copy(value)