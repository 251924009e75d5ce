"""Variant descriptions for tagged-union (choice) types.

A variant is one of three kinds: it carries nothing, a single value of one
type, or several named fields.  Variants know how to describe themselves in
a compact introspection notation, e.g. ``((VARIANT_KIND_SINGLE)(B)(int))``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class VariantKind(Enum):
    """How much data a variant carries."""

    EMPTY = "VARIANT_KIND_EMPTY"
    SINGLE = "VARIANT_KIND_SINGLE"
    MANY = "VARIANT_KIND_MANY"


def _check_identifier(name: str, what: str) -> None:
    if not isinstance(name, str) or not name.isidentifier():
        raise ValueError(f"invalid {what} name: {name!r}")


def _check_type_name(type_name: str) -> None:
    if not isinstance(type_name, str) or not type_name.strip():
        raise ValueError(f"invalid type name: {type_name!r}")


@dataclass(frozen=True)
class Field:
    """A named, typed field of a record or of a many-field variant."""

    name: str
    type_name: str

    def __post_init__(self) -> None:
        _check_identifier(self.name, "field")
        _check_type_name(self.type_name)

    def introspect(self) -> str:
        """Return the field as ``((name)(type))``."""
        return f"(({self.name})({self.type_name}))"


@dataclass(frozen=True)
class Variant:
    """One alternative of a choice type."""

    kind: VariantKind
    name: str
    type_name: str | None = None
    fields: tuple[Field, ...] = ()

    def __post_init__(self) -> None:
        _check_identifier(self.name, "variant")
        if self.kind is VariantKind.EMPTY:
            if self.type_name is not None or self.fields:
                raise ValueError(f"empty variant {self.name!r} cannot carry data")
        elif self.kind is VariantKind.SINGLE:
            _check_type_name(self.type_name)
            if self.fields:
                raise ValueError(f"single variant {self.name!r} cannot have fields")
        else:
            if self.type_name is not None:
                raise ValueError(f"many-field variant {self.name!r} has no single type")
            if not self.fields:
                raise ValueError(f"many-field variant {self.name!r} needs at least one field")
            names = [f.name for f in self.fields]
            duplicates = sorted({n for n in names if names.count(n) > 1})
            if duplicates:
                raise ValueError(
                    f"duplicate fields in variant {self.name!r}: {', '.join(duplicates)}"
                )

    @property
    def field_names(self) -> tuple[str, ...]:
        """Names of the fields of a many-field variant, in declaration order."""
        return tuple(f.name for f in self.fields)

    def introspect(self) -> str:
        """Return the variant in introspection notation."""
        head = f"(({self.kind.value})({self.name})"
        if self.kind is VariantKind.EMPTY:
            return head + ")"
        if self.kind is VariantKind.SINGLE:
            return head + f"({self.type_name}))"
        inner = " ".join(f.introspect() for f in self.fields)
        return head + f"( {inner} ))"

    def field_type(self, field_name: str) -> str:
        """Return the type of the named field of a many-field variant."""
        if self.kind is not VariantKind.MANY:
            raise TypeError(f"variant {self.name!r} has no named fields")
        for f in self.fields:
            if f.name == field_name:
                return f.type_name
        raise KeyError(field_name)


def field(name: str, type_name: str) -> Field:
    """Declare a named field."""
    return Field(name, type_name)


def variant(name: str, *args: str) -> Variant:
    """Declare a variant carrying nothing or a single value of one type."""
    if not args:
        return Variant(VariantKind.EMPTY, name)
    if len(args) == 1:
        return Variant(VariantKind.SINGLE, name, type_name=args[0])
    raise TypeError(f"variant() takes a name and at most one type, got {len(args) + 1} arguments")


def variant_many(name: str, *args: Field | tuple[str, str]) -> Variant:
    """Declare a variant carrying several named fields."""
    fields = tuple(a if isinstance(a, Field) else Field(*a) for a in args)
    return Variant(VariantKind.MANY, name, fields=fields)


def introspect_variants(variants: Iterable[Variant]) -> str:
    """Describe a sequence of variants, separated by spaces."""
    return " ".join(v.introspect() for v in variants)


def has_payload(variants: Iterable[Variant]) -> bool:
    """Tell whether any variant carries data."""
    return any(v.kind is not VariantKind.EMPTY for v in variants)