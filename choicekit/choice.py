"""Tagged-union (choice) types with constructors and pattern matching.

``choice(name, *variants)`` builds a new type.  Every variant becomes a
constructor on that type, values know which variant they hold, and
``match`` dispatches on that variant.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Mapping

from .record import record
from .variant import Variant, VariantKind, has_payload, introspect_variants

_MISSING: Any = object()


class MatchError(Exception):
    """Raised when no arm of a match handles the value."""


class ChoiceValue:
    """A value of a choice type: the tag of one variant and its payload."""

    __slots__ = ("_tag", "_value")

    variants: ClassVar[tuple[Variant, ...]] = ()
    has_data: ClassVar[bool] = False
    _by_name: ClassVar[dict[str, Variant]] = {}
    _payload_records: ClassVar[dict[str, type]] = {}

    __match_args__ = ("tag", "value")

    def __init__(self, tag: str, *args: Any, **kwargs: Any) -> None:
        variant = type(self).variant(tag)
        if variant.kind is VariantKind.EMPTY:
            if args or kwargs:
                raise TypeError(f"{tag}() takes no arguments")
            value = None
        elif variant.kind is VariantKind.SINGLE:
            if kwargs or len(args) != 1:
                raise TypeError(f"{tag}() takes exactly one positional argument")
            value = args[0]
        else:
            value = type(self)._payload_records[tag](*args, **kwargs)
        object.__setattr__(self, "_tag", tag)
        object.__setattr__(self, "_value", value)

    @classmethod
    def variant(cls, name: str) -> Variant:
        """Return the description of the variant called ``name``."""
        if not cls.variants:
            raise TypeError("ChoiceValue has no variants; build a type with choice()")
        try:
            return cls._by_name[name]
        except KeyError:
            raise ValueError(f"{cls.__name__} has no variant {name!r}") from None

    @property
    def tag(self) -> str:
        """The name of the variant this value holds."""
        return self._tag

    @property
    def value(self) -> Any:
        """The payload: None, the single value, or a record of the fields."""
        return self._value

    def _unpack(self) -> tuple[Any, ...]:
        variant = type(self)._by_name[self._tag]
        if variant.kind is VariantKind.EMPTY:
            return ()
        if variant.kind is VariantKind.SINGLE:
            return (self._value,)
        return tuple(getattr(self._value, name) for name in variant.field_names)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} values are immutable")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._tag == other._tag and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._tag, self._value))

    def __repr__(self) -> str:
        variant = type(self)._by_name[self._tag]
        if variant.kind is VariantKind.EMPTY:
            return f"{self._tag}()"
        if variant.kind is VariantKind.SINGLE:
            return f"{self._tag}({self._value!r})"
        inner = ", ".join(
            f"{name}={getattr(self._value, name)!r}" for name in variant.field_names
        )
        return f"{self._tag}({inner})"


def _constructor(cls: type, name: str) -> staticmethod:
    def construct(*args: Any, **kwargs: Any) -> ChoiceValue:
        return cls(name, *args, **kwargs)

    construct.__name__ = name
    construct.__qualname__ = f"{cls.__name__}.{name}"
    construct.__doc__ = f"Build a {cls.__name__} holding the {name} variant."
    return staticmethod(construct)


def choice(name: str, *args: Variant) -> type:
    """Create a choice type called ``name`` with the given variants."""
    if not isinstance(name, str) or not name.isidentifier():
        raise ValueError(f"invalid choice name: {name!r}")
    if not args:
        raise ValueError(f"choice {name!r} needs at least one variant")
    for v in args:
        if not isinstance(v, Variant):
            raise TypeError(f"expected a Variant, got {v!r}")
    variants = tuple(args)
    names = [v.name for v in variants]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise ValueError(f"duplicate variants in {name!r}: {', '.join(duplicates)}")
    for n in names:
        if n.startswith("__") or hasattr(ChoiceValue, n):
            raise ValueError(f"variant name {n!r} is reserved")

    namespace = {
        "__slots__": (),
        "variants": variants,
        "has_data": has_payload(variants),
        "_by_name": {v.name: v for v in variants},
        "_payload_records": {
            v.name: record(v.name, *v.fields)
            for v in variants
            if v.kind is VariantKind.MANY
        },
    }
    cls = type(name, (ChoiceValue,), namespace)
    for n in names:
        setattr(cls, n, _constructor(cls, n))
    return cls


def matches(value: ChoiceValue, variant_name: str) -> bool:
    """Tell whether ``value`` holds the variant called ``variant_name``."""
    if not isinstance(value, ChoiceValue):
        raise TypeError(f"expected a choice value, got {value!r}")
    type(value).variant(variant_name)
    return value.tag == variant_name


def variant_tag(value: ChoiceValue) -> str:
    """Return the tag (variant name) of a choice value."""
    if not isinstance(value, ChoiceValue):
        raise TypeError(f"expected a choice value, got {value!r}")
    return value.tag


def match(
    value: ChoiceValue,
    arms: Mapping[str, Callable[..., Any]],
    otherwise: Callable[[], Any] = _MISSING,
) -> Any:
    """Dispatch on the variant of ``value`` and return what the arm returns.

    An arm for an empty variant is called with no arguments, for a single
    variant with the payload, and for a many-field variant with the fields
    in declaration order.  Without a matching arm, ``otherwise()`` is called;
    if it is not given, ``MatchError`` is raised.
    """
    if not isinstance(value, ChoiceValue):
        raise TypeError(f"expected a choice value, got {value!r}")
    cls = type(value)
    for arm_name in arms:
        cls.variant(arm_name)
    if value.tag in arms:
        return arms[value.tag](*value._unpack())
    if otherwise is _MISSING:
        raise MatchError(f"no arm handles {cls.__name__}.{value.tag}")
    return otherwise()


def introspect(choice_type: type) -> str:
    """Describe the variants of a choice type in introspection notation."""
    if (
        not isinstance(choice_type, type)
        or not issubclass(choice_type, ChoiceValue)
        or not choice_type.variants
    ):
        raise TypeError(f"not a choice type: {choice_type!r}")
    return introspect_variants(choice_type.variants)