import pytest

from choicekit.choice import (
    ChoiceValue,
    MatchError,
    choice,
    introspect,
    match,
    matches,
    variant_tag,
)
from choicekit.variant import field, introspect_variants, variant, variant_many


@pytest.fixture
def Token():
    return choice(
        "Token",
        variant("Ident", "const char *"),
        variant("Integer", "int"),
        variant("Plus"),
        variant("OpenParen"),
        variant("CloseParen"),
    )


@pytest.fixture
def Something():
    return choice(
        "Something",
        variant("A"),
        variant("B", "int"),
        variant_many("C", field("c1", "double"), field("c2", "char")),
    )


def _render(token):
    return match(
        token,
        {
            "Ident": lambda ident: ident,
            "Integer": lambda integer: str(integer),
            "Plus": lambda: " + ",
            "OpenParen": lambda: "(",
            "CloseParen": lambda: ")",
        },
    )


def test_tokens_render_as_in_example(Token):
    tokens = [Token.OpenParen(), Token.Ident("x"), Token.Plus(), Token.Integer(123), Token.CloseParen()]
    assert "".join(_render(t) for t in tokens) == "(x + 123)"


def test_matches_and_tag(Token):
    tok = Token.Integer(7)
    assert matches(tok, "Integer")
    assert not matches(tok, "Plus")
    assert variant_tag(tok) == "Integer"
    assert tok.value == 7


def test_matches_unknown_variant_raises(Token):
    with pytest.raises(ValueError):
        matches(Token.Plus(), "Minus")


def test_constructor_arity_checked(Token):
    with pytest.raises(TypeError):
        Token.Plus(1)
    with pytest.raises(TypeError):
        Token.Integer()
    with pytest.raises(TypeError):
        Token.Integer(1, 2)


def test_many_variant_fields(Something):
    c = Something.C(c1=1.5, c2="z")
    assert c.value.c1 == 1.5
    assert c.value.c2 == "z"
    assert match(c, {"C": lambda c1, c2: (c1, c2)}) == (1.5, "z")
    assert Something.C(1.5, "z") == c


def test_single_variant_arm_gets_payload(Something):
    assert match(Something.B(42), {"B": lambda b: b}) == 42


def test_missing_arm_raises(Token):
    with pytest.raises(MatchError):
        match(Token.Plus(), {"Ident": lambda i: i})


def test_otherwise_used_when_no_arm(Token):
    result = match(Token.Plus(), {"Ident": lambda i: i}, otherwise=lambda: "other")
    assert result == "other"
    assert match(Token.Ident("y"), {"Ident": lambda i: i}, otherwise=lambda: "other") == "y"


def test_unknown_arm_raises(Token):
    with pytest.raises(ValueError):
        match(Token.Plus(), {"Nope": lambda: 1})


def test_introspect_matches_example(Something):
    expected = (
        "((VARIANT_KIND_EMPTY)(A)) ((VARIANT_KIND_SINGLE)(B)(int)) "
        "((VARIANT_KIND_MANY)(C)( ((c1)(double)) ((c2)(char)) ))"
    )
    assert introspect(Something) == expected
    assert introspect(Something) == introspect_variants(Something.variants)


def test_introspect_rejects_non_choice():
    with pytest.raises(TypeError):
        introspect(int)
    with pytest.raises(TypeError):
        introspect(ChoiceValue)


def test_has_data():
    Empty = choice("Empty", variant("X"), variant("Y"))
    Full = choice("Full", variant("X"), variant("Y", "int"))
    assert Empty.has_data is False
    assert Full.has_data is True


def test_duplicate_variants_rejected():
    with pytest.raises(ValueError):
        choice("Dup", variant("A"), variant("A", "int"))


def test_no_variants_rejected():
    with pytest.raises(ValueError):
        choice("Nothing")


def test_reserved_variant_name_rejected():
    with pytest.raises(ValueError):
        choice("Bad", variant("tag"))


def test_non_variant_argument_rejected():
    with pytest.raises(TypeError):
        choice("Bad", "A")


def test_values_are_immutable_and_comparable(Token):
    a = Token.Integer(3)
    with pytest.raises(AttributeError):
        a.tag = "Plus"
    assert a == Token.Integer(3)
    assert a != Token.Integer(4)
    assert hash(a) == hash(Token.Integer(3))


def test_different_choice_types_not_equal():
    A = choice("A", variant("X"))
    B = choice("B", variant("X"))
    assert (A.X() == B.X()) is False


def test_repr(Token, Something):
    assert repr(Token.Integer(5)) == "Integer(5)"
    assert repr(Token.Plus()) == "Plus()"
    assert repr(Something.C(1.0, "q")) == "C(c1=1.0, c2='q')"


def test_direct_construction_by_tag(Token):
    assert Token("Integer", 9) == Token.Integer(9)
    with pytest.raises(ValueError):
        Token("Missing")
    with pytest.raises(TypeError):
        ChoiceValue("A")


def _ident_name(token_type, tok):
    match tok:
        case token_type(tag="Ident", value=name):
            return name
        case _:
            return None


def test_structural_pattern_matching(Token):
    tok = Token.Ident("z")
    assert tok.tag == "Ident"
    assert tok.value == "z"
    assert _ident_name(Token, tok) == "z"
    assert _ident_name(Token, Token.Plus()) is None