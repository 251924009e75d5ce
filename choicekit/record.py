"""Record (product) types with named, typed fields."""

from __future__ import annotations

import keyword
from dataclasses import make_dataclass
from typing import Any

from .variant import Field


def record(name: str, *args: Field | tuple[str, str]) -> type:
    """Create an immutable record type called ``name`` with the given fields."""
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        raise ValueError(f"invalid record name: {name!r}")
    fields = tuple(a if isinstance(a, Field) else Field(*a) for a in args)
    if not fields:
        raise ValueError(f"record {name!r} needs at least one field")
    names = [f.name for f in fields]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise ValueError(f"duplicate fields in record {name!r}: {', '.join(duplicates)}")
    for n in names:
        if keyword.iskeyword(n) or n.startswith("__"):
            raise ValueError(f"field name {n!r} is reserved")
    return make_dataclass(
        name,
        [(f.name, Any) for f in fields],
        frozen=True,
        namespace={"__record_fields__": fields},
    )


def introspect_record(record_type: type) -> str:
    """Describe the fields of a record type, e.g. ``((a)(int)) ((b)(double))``."""
    fields = getattr(record_type, "__record_fields__", None)
    if not isinstance(record_type, type) or fields is None:
        raise TypeError(f"not a record type: {record_type!r}")
    return " ".join(f.introspect() for f in fields)