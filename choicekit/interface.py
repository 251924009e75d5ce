"""Interfaces: named sets of methods, implemented per type through vtables.

An ``Interface`` declares method names.  ``impl`` binds an implementer type
to one function per method, producing a vtable.  ``new_object`` pairs a value
with the vtable of its type, giving an ``InterfaceObject`` whose methods are
called with the value as their first argument.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping


class InterfaceError(Exception):
    """Raised when an interface is declared, implemented or used wrongly."""


def _implementer_label(implementer: type | str) -> str:
    if isinstance(implementer, type):
        return implementer.__name__
    if isinstance(implementer, str) and implementer:
        return implementer
    raise InterfaceError(f"invalid implementer: {implementer!r}")


def vtable_name(interface_name: str, implementer_name: str | None = None) -> str:
    """Return the vtable name of an interface, or of one implementation of it."""
    if not isinstance(interface_name, str) or not interface_name.isidentifier():
        raise InterfaceError(f"invalid interface name: {interface_name!r}")
    base = f"{interface_name}_VTable"
    if implementer_name is None:
        return base
    return f"{base}_{implementer_name}"


@dataclass(frozen=True)
class _VTable:
    """The methods of one interface as implemented by one type."""

    name: str
    interface: str
    implementer: type | str
    methods: Mapping[str, Callable[..., Any]]

    def __getattr__(self, method_name: str) -> Callable[..., Any]:
        if method_name.startswith("__"):
            raise AttributeError(method_name)
        try:
            return self.methods[method_name]
        except KeyError:
            raise AttributeError(
                f"{self.interface} has no method {method_name!r}"
            ) from None

    def __getitem__(self, method_name: str) -> Callable[..., Any]:
        return self.methods[method_name]

    def __contains__(self, method_name: object) -> bool:
        return method_name in self.methods


class Interface:
    """A named set of methods that types may implement."""

    def __init__(self, name: str, methods: Iterable[str]) -> None:
        if not isinstance(name, str) or not name.isidentifier():
            raise InterfaceError(f"invalid interface name: {name!r}")
        names = tuple(methods)
        for method_name in names:
            if not isinstance(method_name, str) or not method_name.isidentifier():
                raise InterfaceError(f"invalid method name: {method_name!r}")
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise InterfaceError(
                f"duplicate methods in {name!r}: {', '.join(duplicates)}"
            )
        self.name = name
        self.method_names = names
        self._vtables: dict[type | str, _VTable] = {}

    @property
    def mut_name(self) -> str:
        """The name of the interface's mutable object type."""
        return f"{self.name}Mut"

    @property
    def vtable_type_name(self) -> str:
        """The name of the interface's vtable type."""
        return vtable_name(self.name)

    def impl(
        self, implementer: type | str, methods: Mapping[str, Callable[..., Any]]
    ) -> _VTable:
        """Implement the interface for ``implementer`` and return its vtable."""
        label = _implementer_label(implementer)
        if implementer in self._vtables:
            raise InterfaceError(f"{self.name} is already implemented for {label}")
        given = set(methods)
        missing = [n for n in self.method_names if n not in given]
        extra = sorted(given - set(self.method_names))
        if missing:
            raise InterfaceError(
                f"{label} does not implement {self.name} method(s): {', '.join(missing)}"
            )
        if extra:
            raise InterfaceError(
                f"{self.name} has no method(s): {', '.join(extra)}"
            )
        for method_name, func in methods.items():
            if not callable(func):
                raise InterfaceError(f"method {method_name!r} of {label} is not callable")
        table = _VTable(
            name=vtable_name(self.name, label),
            interface=self.name,
            implementer=implementer,
            methods=MappingProxyType({n: methods[n] for n in self.method_names}),
        )
        self._vtables[implementer] = table
        return table

    def methods_for(self, implementer: type | str) -> _VTable:
        """Return the vtable of ``implementer``."""
        try:
            return self._vtables[implementer]
        except KeyError:
            raise InterfaceError(
                f"{self.name} is not implemented for {_implementer_label(implementer)}"
            ) from None
        except TypeError:
            raise InterfaceError(f"invalid implementer: {implementer!r}") from None

    def _vtable_of(self, target: Any) -> _VTable:
        for cls in type(target).__mro__:
            if cls in self._vtables:
                return self._vtables[cls]
        raise InterfaceError(
            f"{self.name} is not implemented for {type(target).__name__}"
        )

    def new_object(self, target: Any, mutable: bool = False) -> InterfaceObject:
        """Pair ``target`` with the vtable of its type."""
        return InterfaceObject(self, target, self._vtable_of(target), mutable)

    def __repr__(self) -> str:
        return f"Interface({self.name!r}, {list(self.method_names)!r})"


@dataclass(frozen=True)
class InterfaceObject:
    """A value seen through an interface: the value and its vtable."""

    interface: Interface
    target: Any
    vtable: _VTable = field(repr=False)
    mutable: bool = False

    @property
    def type_name(self) -> str:
        """The name of the object type: the interface, or its mutable form."""
        return self.interface.mut_name if self.mutable else self.interface.name

    def method(self, method_name: str) -> Callable[..., Any]:
        """Return the function implementing ``method_name``."""
        try:
            return self.vtable[method_name]
        except KeyError:
            raise InterfaceError(
                f"{self.interface.name} has no method {method_name!r}"
            ) from None

    def call(self, method_name: str, *args: Any) -> Any:
        """Call ``method_name`` with the target and ``args``."""
        return self.method(method_name)(self.target, *args)