from math import exp

from num_dual import Dual64

from epcsaft.parameters.impl import dual


def test_library_dual_satisfies_capabilities():
    x = Dual64(2.0, 1.0)
    assert isinstance(x, dual.DualNum)
    assert not isinstance(2.0, dual.DualNum)


def test_helpers_on_floats():
    assert dual.re(3.0) == 3.0
    assert dual.exp(0.0) == 1.0
    assert dual.recip(4.0) == 0.25
    assert dual.promote(1.0, 2.5) == 2.5


def test_helpers_on_duals():
    x = Dual64(0.5, 1.0)
    assert dual.re(x) == 0.5

    e = dual.exp(x)
    assert abs(e.value - exp(0.5)) < 1e-15
    assert abs(e.first_derivative - exp(0.5)) < 1e-15

    r = dual.recip(x)
    assert r.value == 2.0
    assert r.first_derivative == -4.0


def test_promote_has_zero_derivative():
    p = dual.promote(Dual64(1.0, 1.0), 2.5)
    assert isinstance(p, Dual64)
    assert p.value == 2.5
    assert p.first_derivative == 0.0
