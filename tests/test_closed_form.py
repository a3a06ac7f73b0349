# tests/test_closed_form.py
import pytest
import numpy as np

from pyautomatica import poly, real_quadratic_roots, complex_quadratic_roots
from pyautomatica.closed_form import (
    real_linear_root,
    complex_linear_root,
    real_deg2_roots,
    complex_deg2_roots,
)


def test_real_quadratic_roots():
    assert real_quadratic_roots(3., 2.) == (-1., -2.)
    assert real_quadratic_roots(-2., 1.) == (1., 1.)
    assert real_quadratic_roots(-6., 9.) == (3., 3.)


def test_real_quadratic_roots_negative_discriminant():
    """Complex roots are reported as absent, not as an error."""
    assert real_quadratic_roots(-6., 10.) is None
    assert real_quadratic_roots(0., 1.) is None


def test_complex_quadratic_roots():
    assert complex_quadratic_roots(3., 2.) == (-1 + 0j, -2 + 0j)
    assert complex_quadratic_roots(0., 1.) == (0 - 1j, 0 + 1j)
    assert complex_quadratic_roots(-6., 10.) == (3 - 1j, 3 + 1j)
    assert complex_quadratic_roots(-6., 9.) == (3 + 0j, 3 + 0j)


def test_quadratic_formula_is_stable():
    """Both roots keep full relative accuracy when b^2 >> c."""
    b, c = -1e8, 1.
    r1, r2 = real_quadratic_roots(b, c)
    assert r1 == pytest.approx(1e-8, rel=1e-12)
    assert r2 == pytest.approx(1e8, rel=1e-12)

    z1, z2 = complex_quadratic_roots(b, c)
    assert z1.real == pytest.approx(1e-8, rel=1e-12)
    assert z2.real == pytest.approx(1e8, rel=1e-12)


def test_linear_root():
    p = poly(10., -2.)
    assert real_linear_root(p) == [5.]
    assert complex_linear_root(p) == [5 + 0j]


def test_linear_root_integer_coefficients():
    assert real_linear_root(poly(3, 2)) == [-1.5]


def test_deg2_roots_are_normalized():
    # 2x^2 + 10x + 12 = 2(x + 2)(x + 3)
    p = poly(12., 10., 2.)
    assert real_deg2_roots(p) == [-2., -3.]
    assert complex_deg2_roots(p) == [-2 + 0j, -3 + 0j]

    # x^2 + 1
    assert real_deg2_roots(poly(1., 0., 1.)) is None
    roots = complex_deg2_roots(poly(2., 0., 2.))
    assert np.allclose(roots, [-1j, 1j])
