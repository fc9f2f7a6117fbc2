import pytest

from polycalc.polynomial import ParseError, Polynomial
from polycalc.term import Term, TermError
from polycalc.variable import Variable


def test_like_terms_combine():
    assert Polynomial.parse("x + x;") == Polynomial.parse("2x;")


def test_order_does_not_matter_after_simplify():
    assert Polynomial.parse("y + x + 3;") == Polynomial.parse("3 + x + y;")


def test_term_count():
    assert len(Polynomial.parse("x + y + z;")) == 3


def test_semicolon_ends_input():
    assert Polynomial.parse("x; y") == Polynomial.parse("x")


def test_group_derivative():
    assert Polynomial.parse("(x2)';") == Polynomial.parse("2x;")


def test_term_derivative():
    assert Polynomial.parse("x3';") == Polynomial.parse("3x2;")


def test_derivative_operator_after_space():
    assert Polynomial.parse("x2 ';") == Polynomial.parse("2x;")


def test_multiplication():
    assert Polynomial.parse("x * y;") == Polynomial.parse("xy;")


def test_chained_multiplication():
    assert Polynomial.parse("x * y * z;") == Polynomial.parse("xyz;")


def test_group_product_expands():
    assert Polynomial.parse("(x + 1) * (x + 1);") == Polynomial.parse("x2 + 2x + 1;")


def test_multiplication_is_commutative():
    a = Polynomial.parse("x + 2y;")
    b = Polynomial.parse("3x - y;")
    ab = a.multiply(b)
    ba = b.multiply(a)
    ab.simplify()
    ba.simplify()
    assert ab == ba


def test_subtraction_cancels():
    poly = Polynomial.parse("x - x;")
    assert all(term.coefficient == 0 for term in poly)
    assert str(poly) == ""


def test_negated_group_cancels():
    poly = Polynomial.parse("x - (x);")
    assert all(term.coefficient == 0 for term in poly)


def test_string_round_trip():
    poly = Polynomial.parse("2x2 - 3xy + 7;")
    assert Polynomial.parse(str(poly)) == poly


def test_constant_derivative_is_zero():
    derivative = Polynomial.constant(5).differentiate()
    assert [term.coefficient for term in derivative] == [0]


def test_differentiate_is_linear():
    a = Polynomial.parse("x3 + y;")
    b = Polynomial.parse("4x;")
    total = Polynomial(a)
    total.extend(b)
    left = total.differentiate()
    right = a.differentiate()
    right.extend(b.differentiate())
    left.simplify()
    right.simplify()
    assert left == right


def test_split_from_keeps_all_terms():
    terms = [Term(1, [Variable("y")]), Term(2, [Variable("x")]), Term(3)]
    poly = Polynomial(terms)
    tail = poly.split_from(1)
    assert poly.terms == terms[:1]
    assert sorted(map(repr, tail)) == sorted(map(repr, terms[1:]))


def test_sort_is_idempotent():
    poly = Polynomial.parse("z + y2 + x + 4;")
    again = Polynomial(poly)
    again.sort()
    assert again == poly


def test_terms_text_one_line_per_term():
    poly = Polynomial.parse("x + y + 1;")
    assert poly.terms_text().split("\n") == [str(term) for term in poly]


def test_multiply_term_on_empty_raises():
    with pytest.raises(ValueError):
        Polynomial().multiply_term(Term(2))


def test_unclosed_parenthesis_raises():
    with pytest.raises(ParseError):
        Polynomial.parse("(x + 1")


def test_semicolon_inside_parenthesis_raises():
    with pytest.raises(ParseError):
        Polynomial.parse("(x + 1;)")


def test_operator_without_left_operand_raises():
    with pytest.raises(ParseError):
        Polynomial.parse("* x;")


def test_parse_group_unclosed_raises():
    with pytest.raises(ParseError):
        Polynomial.parse_group("(x")


def test_bad_variable_raises():
    with pytest.raises(TermError):
        Polynomial.parse("3);")


def test_parse_group_strips_parentheses():
    assert Polynomial.parse_group("(x + y)") == Polynomial.parse_group("x + y")