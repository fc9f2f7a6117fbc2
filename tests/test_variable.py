import pytest

from polycalc.variable import Variable


def test_str_hides_unit_exponent():
    assert str(Variable("x", 1)) == "x"


def test_str_shows_other_exponents():
    assert str(Variable("x", 3)) == "x3"
    assert str(Variable("y", -2)) == "y-2"


def test_default_exponent_is_one():
    assert Variable("z") == Variable("z", 1)


def test_differentiate_returns_old_exponent_and_lowered_variable():
    factor, lowered = Variable("x", 3).differentiate()
    assert factor == 3
    assert lowered == Variable("x", 2)


def test_differentiate_does_not_modify_original():
    v = Variable("x", 5)
    v.differentiate()
    assert v.exponent == 5


def test_inverted_twice_is_identity():
    v = Variable("q", 4)
    assert v.inverted().inverted() == v
    assert v.inverted().exponent == -v.exponent


def test_names_order_alphabetically():
    assert Variable("a", 1) < Variable("b", 1)
    assert Variable("b", 1) > Variable("a", 1)
    assert Variable("a", 1) < Variable("b", 9)


def test_same_name_orders_higher_exponent_first():
    assert Variable("x", 3) < Variable("x", 2)
    assert Variable("x", 2) > Variable("x", 3)


def test_equal_variables_are_not_strictly_ordered():
    v = Variable("x", 2)
    w = Variable("x", 2)
    assert not v < w
    assert not v > w
    assert v <= w
    assert v >= w


@pytest.mark.parametrize(
    "a,b",
    [
        (Variable("a", 1), Variable("b", 1)),
        (Variable("x", 4), Variable("x", 1)),
        (Variable("c", -1), Variable("d", 7)),
    ],
)
def test_le_and_ge_agree_with_strict_order(a, b):
    assert a <= b
    assert b >= a
    assert not a >= b
    assert not b <= a


def test_sorting_groups_names_and_orders_exponents():
    items = [Variable("y", 1), Variable("x", 1), Variable("x", 3), Variable("a", 2)]
    result = sorted(items)
    assert [v.name for v in result] == ["a", "x", "x", "y"]
    assert result[1].exponent >= result[2].exponent


def test_comparison_with_other_type_is_rejected():
    with pytest.raises(TypeError):
        Variable("x") < 3