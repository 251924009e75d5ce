"""Worked examples: tokens, Maybe, Pair, a binary tree, shapes and introspection."""

from __future__ import annotations

import argparse
import math
from typing import Any, Iterable, Sequence

from .choice import ChoiceValue, choice, introspect, match
from .interface import Interface
from .lang import obj
from .record import record
from .std import def_maybe, def_pair
from .variant import field, variant, variant_many

Token = choice(
    "Token",
    variant("Ident", "const char *"),
    variant("Integer", "int"),
    variant("Plus"),
    variant("OpenParen"),
    variant("CloseParen"),
)

BinaryTreeBranches = record(
    "BinaryTree_Tree_BinaryTree_int",
    field("left", "struct Tree_BinaryTree_int *"),
    field("right", "struct Tree_BinaryTree_int *"),
)

BinaryTree = choice(
    "Tree_BinaryTree_int",
    variant_many(
        "Branch",
        field("data", "int"),
        field("branches", "BinaryTree_Tree_BinaryTree_int"),
    ),
    variant("Leaf", "int"),
)

Something = choice(
    "Something",
    variant("A"),
    variant("B", "int"),
    variant_many("C", field("c1", "double"), field("c2", "char")),
)

Square = record("Square", field("width", "double"), field("height", "double"))
Triangle = record(
    "Triangle", field("a", "double"), field("b", "double"), field("c", "double")
)
Point = record("Point", field("x", "int"), field("y", "int"))

Shape = Interface("Shape", ["area"])


def _square_area(square: Any) -> float:
    return square.width * square.height


def _triangle_area(triangle: Any) -> float:
    a, b, c = triangle.a, triangle.b, triangle.c
    p = (a + b + c) / 2
    return math.sqrt(p * (p - a) * (p - b) * (p - c))


Shape.impl(Square, {"area": _square_area})
Shape.impl(Triangle, {"area": _triangle_area})


def format_token(token: ChoiceValue) -> str:
    """Render one token as it appears in source text."""
    return match(
        token,
        {
            "Ident": lambda ident: str(ident),
            "Integer": lambda integer: str(integer),
            "Plus": lambda: " + ",
            "OpenParen": lambda: "(",
            "CloseParen": lambda: ")",
        },
    )


def render_tokens(tokens: Iterable[ChoiceValue]) -> str:
    """Render a sequence of tokens as one string."""
    return "".join(format_token(token) for token in tokens)


def format_maybe(maybe: ChoiceValue) -> str:
    """Render a Maybe as ``Just(value)`` or ``Nothing``."""
    return match(
        maybe,
        {
            "Just": lambda val: f"Just({val})",
            "Nothing": lambda: "Nothing",
        },
    )


def format_pair(pair: Any) -> str:
    """Render a pair of a message and a number on two lines."""
    return f"fst = {pair.fst}\nsnd = {pair.snd:f}"


def build_binary_tree() -> ChoiceValue:
    """Build a branch holding 123 with leaves 456 and 759."""
    left = BinaryTree.Leaf(456)
    right = BinaryTree.Leaf(759)
    return BinaryTree.Branch(data=123, branches=BinaryTreeBranches(left, right))


def tree_values(tree: ChoiceValue) -> list[int]:
    """Return the values of a binary tree in pre-order."""
    return match(
        tree,
        {
            "Branch": lambda data, branches: [
                data,
                *tree_values(branches.left),
                *tree_values(branches.right),
            ],
            "Leaf": lambda value: [value],
        },
    )


def shape_areas() -> list[float]:
    """Return the areas of the example square and triangle."""
    square = Square(width=6, height=3.4)
    triangle = Triangle(a=4, b=13, c=15)
    return [
        Shape.methods_for(Square).area(square),
        Shape.methods_for(Triangle).area(triangle),
    ]


def _create_point() -> Any:
    return Point(54, 367)


def _section_lines(section: str) -> list[str]:
    if section == "tokens":
        tokens = [
            Token.OpenParen(),
            Token.Ident("x"),
            Token.Plus(),
            Token.Integer(123),
            Token.CloseParen(),
        ]
        return [render_tokens(tokens)]
    if section == "maybe":
        maybe_int = def_maybe("int")
        maybe_msg = def_maybe("Msg")
        return [format_maybe(maybe_int.Just(123)), format_maybe(maybe_msg.Nothing())]
    if section == "pair":
        pair = def_pair("Msg", "double")("Hello", 89267.2529909)
        return format_pair(pair).splitlines()
    if section == "tree":
        return [" ".join(str(v) for v in tree_values(build_binary_tree()))]
    if section == "shapes":
        return [f"{area:f}" for area in shape_areas()]
    if section == "obj":
        point = obj(_create_point())
        return [f"({point.x}, {point.y})"]
    return [introspect(Something)]


_SECTIONS = ("tokens", "maybe", "pair", "tree", "shapes", "obj", "introspect")


def main(argv: Sequence[str] | None = None) -> int:
    """Print the output of the chosen examples, or of all of them."""
    parser = argparse.ArgumentParser(prog="choicekit-demo", description=__doc__)
    parser.add_argument("sections", nargs="*", choices=_SECTIONS, metavar="SECTION")
    args = parser.parse_args(argv)
    for section in args.sections or _SECTIONS:
        for line in _section_lines(section):
            print(line)
    return 0