# choicekit

Tagged unions ("choices"), records, interfaces with explicit method tables,
and a small set of standard `Maybe`, `Either`, `Res` and `Pair` types, all
built from ordinary Python values. The package has no dependencies outside
the standard library.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Variants (`choicekit.variant`)

A variant is one alternative of a choice. It has a `VariantKind`:

- `EMPTY`: it carries nothing, made with `variant(name)`;
- `SINGLE`: it carries one value, made with `variant(name, type_name)`;
- `MANY`: it carries several named fields, made with
  `variant_many(name, field(name, type_name), ...)`. Plain `(name, type_name)`
  tuples are accepted in place of `field(...)`.

Names must be identifiers. Type names are descriptive strings and are not
checked against the values stored. `Variant.field_type(name)` returns the
type of a field of a many-field variant. `Variant.introspect()` describes a
variant in a compact notation, `introspect_variants(variants)` describes a
sequence of them, and `has_payload(variants)` tells whether any of them
carries data.

## Choices (`choicekit.choice`)

```python
from choicekit.variant import variant, variant_many, field
from choicekit.choice import choice, match, matches, variant_tag, introspect

Token = choice(
    "Token",
    variant("Ident", "str"),
    variant("Integer", "int"),
    variant("Plus"),
    variant("OpenParen"),
    variant("CloseParen"),
)

tok = Token.Integer(123)
variant_tag(tok)          # "Integer"
matches(tok, "Plus")      # False

match(tok, {
    "Ident": lambda name: name,
    "Integer": lambda n: str(n),
    "Plus": lambda: " + ",
}, otherwise=lambda: "?")
```

`choice(name, *variants)` returns a new subclass of `ChoiceValue` with one
constructor per variant. Values are immutable and compare by type, tag and
payload. `value.tag` is the variant name and `value.value` is the payload:
`None`, the single value, or a record of the fields.

`match` calls the arm for the value's variant: with no arguments for an
empty variant, with the payload for a single variant, and with the fields in
declaration order for a many-field variant. If no arm fits, `otherwise()` is
called; without it `MatchError` is raised. Arm names and names given to
`matches` must be variants of the value's type, otherwise `ValueError` is
raised.

`introspect(choice_type)` describes all variants:

```python
Something = choice(
    "Something",
    variant("A"),
    variant("B", "int"),
    variant_many("C", field("c1", "double"), field("c2", "char")),
)
introspect(Something)
# ((VARIANT_KIND_EMPTY)(A)) ((VARIANT_KIND_SINGLE)(B)(int)) ((VARIANT_KIND_MANY)(C)( ((c1)(double)) ((c2)(char)) ))
```

## Records (`choicekit.record`)

`record(name, field(...), ...)` builds a frozen dataclass with the given
fields. `introspect_record(record_type)` describes its fields in
declaration order, for example `((a)(int)) ((b)(const char *)) ((c)(double))`.

## Interfaces (`choicekit.interface`)

```python
from choicekit.interface import Interface

Shape = Interface("Shape", ["area"])
Shape.impl(Square, {"area": lambda s: s.width * s.height})

Shape.methods_for(Square).area(Square(6, 3.4))     # 20.4
shape = Shape.new_object(Square(2, 3))
shape.call("area")                                   # 6
```

`Interface.impl` registers one implementation per implementer (a type or a
name) and returns its method table; every declared method must be given and
no others. `Interface.methods_for` returns that table. `Interface.new_object`
pairs a value with the table of its type (looked up along the type's bases);
`InterfaceObject.method` returns one function and `InterfaceObject.call`
calls it with the value as first argument. With `mutable=True` the object's
`type_name` is the interface name followed by `Mut`. `vtable_name` gives the
name of a method table, e.g. `vtable_name("Shape", "Square")` is
`"Shape_VTable_Square"`. Misuse raises `InterfaceError`.

## Standard types (`choicekit.std`)

- `def_maybe(t)`, `def_either(l, r)`, `def_res(ok, err)` and
  `def_pair(fst, snd)` return the types `Maybe_<t>` (`Just`/`Nothing`),
  `Either_<l>_<r>` (`Left`/`Right`), `Res_<ok>_<err>` (`Ok`/`Err`) and the
  record `Pair_<fst>_<snd>` (fields `fst`, `snd`). The same arguments always
  give back the same type.
- `is_just`, `is_nothing`, `is_left`, `is_right`, `is_ok` and `is_err` test
  which variant a value holds.
- `try_ok(res)` returns the value of an `Ok` and raises `Propagate` carrying
  the error of an `Err`. A function decorated with `@propagating(res_type)`
  turns such a `Propagate` into `res_type.Err(error)`.

## Small helpers

`choicekit.lang` provides `Unit`, a type with a single value (also available
as `unit`), and `obj(value)`, which returns a shallow copy of `value`.

`choicekit.assoc.AssocMap` is an immutable ordered list of key/value items.
`append` adds an item even if the key exists; `insert` replaces the values of
existing items with the key or appends; `map_item(key, mapping, aux)`
replaces each value under `key` with `mapping(aux, value)`; `get(key,
default)` sees the first item with the key; `keys`, `values` and `items`
return tuples. Every operation returns a new map. `call_with_seq(func, args)`
calls `func(*args)`.

## Demo

    choicekit-demo [SECTION ...]

This prints the examples: `tokens`, `maybe`, `pair`, `tree` (a binary tree
in pre-order), `shapes` (areas through the `Shape` interface), `obj` and
`introspect`. With no sections it prints all of them.

## What it does not do

Type names on fields and variants are labels for introspection only;
payloads are not checked against them, and nothing generates code or types
beyond the Python classes described above.