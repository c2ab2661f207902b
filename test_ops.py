"""
Operator forward values and local derivative rules.
"""

import numpy as np
import pytest

from scalar_aad.aad import Value, use_tape, tanh, exp, subtract_from
from scalar_aad.aad.ops import add, sub, mul, div, neg, pow


@pytest.mark.parametrize("x, y", [(2.0, -3.0), (0.0, 5.5), (-1.25, -4.0), (1e10, 1e-10)])
def test_add_and_mul_values(x, y):
    assert add(Value(x), Value(y)).val == x + y
    assert mul(Value(x), Value(y)).val == x * y


def test_add_rule():
    a, b = Value(1.0), Value(2.0)
    r = a + b
    r.backward()
    assert (a.grad, b.grad) == (1.0, 1.0)


def test_mul_rule():
    a, b = Value(4.0), Value(-0.5)
    r = a * b
    r.backward()
    assert a.grad == -0.5
    assert b.grad == 4.0


def test_sub_is_minuend_minus_subtrahend_with_correct_signs():
    a, b = Value(5.0), Value(2.0)
    r = a - b
    assert r.val == 3.0
    r.backward()
    assert a.grad == 1.0
    assert b.grad == -1.0


def test_subtract_from_keeps_reference_same_sign_rule():
    # subtract_from(a, b) is b - a. Its rule credits +g to BOTH operands,
    # which is right for b and wrong for a; kept on purpose for
    # compatibility, `-` / sub() use the correct rule.
    a, b = Value(5.0), Value(2.0)
    r = subtract_from(a, b)
    assert r.val == -3.0
    r.backward()
    assert a.grad == 1.0
    assert b.grad == 1.0


def test_pow_rule():
    a = Value(3.0)
    r = a ** 2
    assert r.val == 9.0
    r.backward()
    assert a.grad == 6.0

    b = Value(4.0)
    s = pow(b, 0.5)
    assert s.val == 2.0
    s.backward()
    assert b.grad == pytest.approx(0.25)


def test_pow_value_exponent_is_not_tracked():
    a = Value(2.0)
    p = Value(3.0)
    r = a ** p
    assert r.val == 8.0
    r.backward()
    assert a.grad == 12.0
    assert p.grad == 0.0
    assert r.op.children == (a,)
    assert r.op.exponent == 3.0


def test_constant_base_power_is_constant():
    x = Value(3.0)
    r = 2 ** x
    assert r.val == 8.0
    r.backward()
    assert x.grad == 0.0


def test_div_reuses_mul_and_pow():
    a, b = Value(3.0), Value(4.0)
    with use_tape() as t:
        r = a / b
        assert [n.op_tag for n in t.nodes] == ["pow", "mul"]
    assert r.val == 0.75
    r.backward()
    assert a.grad == pytest.approx(0.25)
    assert b.grad == pytest.approx(-3.0 / 16.0)


def test_neg():
    a = Value(2.5)
    r = -a
    assert r.val == -2.5
    r.backward()
    assert a.grad == -1.0
    assert neg(3.0).val == -3.0


def test_tanh_rule():
    x = Value(0.7)
    r = x.tanh()
    assert r.val == pytest.approx(np.tanh(0.7))
    r.backward()
    assert x.grad == pytest.approx(1.0 - np.tanh(0.7) ** 2)


def test_exp_rule():
    x = Value(1.3)
    r = exp(x)
    assert r.val == pytest.approx(np.exp(1.3))
    r.backward()
    assert x.grad == pytest.approx(np.exp(1.3))
    assert x.exp().val == r.val


def test_numbers_on_either_side_become_constant_leaves():
    x = Value(2.0)
    for r, expected in [
        (x + 1, 3.0), (1 + x, 3.0),
        (x - 1, 1.0), (1 - x, -1.0),
        (x * 3, 6.0), (3 * x, 6.0),
        (x / 4, 0.5), (4 / x, 2.0),
    ]:
        assert r.val == expected
        for child in r.children:
            if child is not x and child.op is None:
                assert child.grad == 0.0

    r = 1 - x
    r.backward()
    assert x.grad == -1.0


def test_ieee_specials_propagate_without_raising():
    with use_tape():
        assert div(Value(1.0), Value(0.0)).val == np.inf
        assert np.isinf((Value(0.0) ** -1).val)
        assert np.isnan((Value(-1.0) ** 0.5).val)
        assert exp(Value(1000.0)).val == np.inf
        assert tanh(Value(np.inf)).val == 1.0

        y = Value(0.0) ** -1
        y.backward()
        assert np.isinf(y.children[0].grad)

        z = Value(np.nan) * 2.0
        z.backward()
        assert np.isnan(z.val)


def test_value_type_checks():
    with pytest.raises(TypeError):
        Value("1.0")
    with pytest.raises(TypeError):
        Value(True)
    with pytest.raises(TypeError):
        Value([1.0, 2.0])
    assert Value(np.float32(1.5)).val == 1.5
    assert isinstance(Value(3).val, np.float64)


def test_equal_values_are_distinct_nodes():
    a, b = Value(1.0), Value(1.0)
    assert a is not b
    assert a != b
    assert a.uid != b.uid
    assert len({a, b}) == 2


def test_leaf_properties_and_repr():
    a = Value(2.0, name="a")
    assert a.is_leaf
    assert a.children == ()
    r = a * 2
    assert not r.is_leaf
    assert r.children[0] is a
    assert repr(a) == "Value(2.0, grad=0.0, name='a')"
    assert float(r) == 4.0


def test_numpy_scalar_on_the_left_defers_to_value():
    x = Value(2.0)
    r = np.float64(1.0) - x
    assert isinstance(r, Value)
    assert r.val == -1.0
    r.backward()
    assert x.grad == -1.0

    s = np.float64(3.0) * x
    assert isinstance(s, Value)
    assert s.val == 6.0


def test_named_ops():
    a, b = Value(6.0), Value(3.0)
    assert add(a, b, name="s").name == "s"
    assert sub(a, b, name="d").name == "d"
    assert div(a, b, name="q").name == "q"
    assert pow(a, 2, name="p").name == "p"
    assert neg(a, name="n").name == "n"
    assert subtract_from(a, b, name="r").name == "r"
    assert exp(a, name="e").name == "e"
    assert (a * b).name is None
