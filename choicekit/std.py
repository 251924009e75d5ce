"""Standard generic types built from choices and records.

``def_maybe``, ``def_either``, ``def_res`` and ``def_pair`` instantiate
the generic types for concrete type names. The same arguments always give
back the same type. ``try_ok`` and ``propagating`` pass an error up to the
caller: ``try_ok`` unwraps an ``Ok`` or raises ``Propagate``, and a function
decorated with ``propagating`` turns that into an ``Err`` of its own result
type.
"""

from __future__ import annotations

import functools
import re
from typing import Any, Callable, TypeVar

from .choice import ChoiceValue, choice, matches
from .record import record
from .variant import field, variant

F = TypeVar("F", bound=Callable[..., Any])


class Propagate(Exception):
    """Carries the error of an ``Err`` result up to a ``propagating`` function."""

    def __init__(self, error: Any) -> None:
        super().__init__(error)
        self.error = error


def _type_part(type_name: str) -> str:
    if not isinstance(type_name, str) or not type_name.strip():
        raise ValueError(f"invalid type name: {type_name!r}")
    part = re.sub(r"\W+", "_", type_name.replace("*", " ptr ")).strip("_")
    if not part:
        raise ValueError(f"invalid type name: {type_name!r}")
    return part


def _generic_name(base: str, *type_names: str) -> str:
    return "_".join([base, *(_type_part(t) for t in type_names)])


@functools.cache
def def_maybe(type_name: str) -> type:
    """Return the Maybe type for ``type_name``: ``Just(value)`` or ``Nothing()``."""
    return choice(
        _generic_name("Maybe", type_name),
        variant("Just", type_name),
        variant("Nothing"),
    )


@functools.cache
def def_either(left_type: str, right_type: str) -> type:
    """Return the Either type: ``Left(value)`` or ``Right(value)``."""
    return choice(
        _generic_name("Either", left_type, right_type),
        variant("Left", left_type),
        variant("Right", right_type),
    )


@functools.cache
def def_res(ok_type: str, err_type: str) -> type:
    """Return the result type: ``Ok(value)`` or ``Err(error)``."""
    return choice(
        _generic_name("Res", ok_type, err_type),
        variant("Ok", ok_type),
        variant("Err", err_type),
    )


@functools.cache
def def_pair(fst_type: str, snd_type: str) -> type:
    """Return the Pair record type with fields ``fst`` and ``snd``."""
    return record(
        _generic_name("Pair", fst_type, snd_type),
        field("fst", fst_type),
        field("snd", snd_type),
    )


def is_just(maybe: ChoiceValue) -> bool:
    """Tell whether a Maybe holds a value."""
    return matches(maybe, "Just")


def is_nothing(maybe: ChoiceValue) -> bool:
    """Tell whether a Maybe holds nothing."""
    return matches(maybe, "Nothing")


def is_left(either: ChoiceValue) -> bool:
    """Tell whether an Either holds its left alternative."""
    return matches(either, "Left")


def is_right(either: ChoiceValue) -> bool:
    """Tell whether an Either holds its right alternative."""
    return matches(either, "Right")


def is_ok(res: ChoiceValue) -> bool:
    """Tell whether a result is a success."""
    return matches(res, "Ok")


def is_err(res: ChoiceValue) -> bool:
    """Tell whether a result is a failure."""
    return matches(res, "Err")


def try_ok(res: ChoiceValue) -> Any:
    """Return the value of an ``Ok``; raise ``Propagate`` with the error of an ``Err``."""
    if is_err(res):
        raise Propagate(res.value)
    if not is_ok(res):
        raise ValueError(f"not a result value: {res!r}")
    return res.value


def _check_res_type(res_type: type) -> None:
    if (
        not isinstance(res_type, type)
        or not issubclass(res_type, ChoiceValue)
        or not res_type.variants
    ):
        raise TypeError(f"not a choice type: {res_type!r}")
    res_type.variant("Ok")
    res_type.variant("Err")


def propagating(res_type: type) -> Callable[[F], F]:
    """Decorate a function so that ``Propagate`` becomes ``res_type.Err(error)``."""
    _check_res_type(res_type)

    def decorate(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Propagate as exc:
                return res_type.Err(exc.error)

        return wrapper  # type: ignore[return-value]

    return decorate