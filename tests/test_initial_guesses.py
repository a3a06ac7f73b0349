"""
Tests for the initial approximations of the iterative root finder.
"""

import pytest
import numpy as np

from pyautomatica import Polynomial, poly
from pyautomatica.initial_guesses import cross_product, convex_hull_top, initial_guesses

INF = float('inf')


def test_cross_product_orientation():
    # Left turn
    assert cross_product((0., 0.), (1., 0.), (0., 1.)) == 1.
    # Right turn
    assert cross_product((0., 0.), (1., 1.), (2., 0.)) == -2.
    # Collinear
    assert cross_product((0., 0.), (1., 1.), (2., 2.)) == 0.


def test_convex_hull_keeps_right_turns():
    points = [(0, 0., 0.), (1, 1., 2.), (2, 2., 0.)]
    assert convex_hull_top(points) == [(0, 0.), (1, 1.), (2, 2.)]


def test_convex_hull_drops_points_below():
    points = [(0, 0., 0.), (1, 1., -5.), (2, 2., 0.)]
    assert convex_hull_top(points) == [(0, 0.), (2, 2.)]


def test_convex_hull_drops_collinear_points():
    points = [(0, 0., 0.), (1, 1., 1.), (2, 2., 2.), (3, 3., 3.)]
    assert convex_hull_top(points) == [(0, 0.), (3, 3.)]


def test_convex_hull_skips_zero_coefficients():
    """ln 0 = -inf never belongs to the upper hull."""
    points = [(0, 0., 0.), (1, 1., -INF), (2, 2., -INF), (3, 3., 0.)]
    assert convex_hull_top(points) == [(0, 0.), (3, 3.)]


def test_convex_hull_two_points():
    points = [(0, 0., 1.), (1, 1., 3.)]
    assert convex_hull_top(points) == [(0, 0.), (1, 1.)]


def test_initial_guesses_on_unit_circle():
    # x^3 + 1
    guesses = initial_guesses(poly(1., 0., 0., 1.))
    assert len(guesses) == 3
    assert np.allclose(np.abs(guesses), 1.)
    expected = [np.exp(2j * np.pi * m / 3) for m in range(3)]
    assert np.allclose(guesses, expected)


def test_initial_guesses_follow_root_magnitudes():
    # (x - 1)(x - 10)(x - 100): every coefficient is a vertex of the hull
    p = Polynomial.from_roots([1., 10., 100.])
    guesses = initial_guesses(p)
    assert len(guesses) == 3
    assert np.allclose(np.abs(guesses), [1000. / 1110., 10., 111.])


def test_initial_guesses_count_equals_degree():
    for coeffs in ([1., 0., 0., 0., 0., 1.],
                   [3., -2., 0.5, 7., 1e-3, 2.],
                   [1e-6, 1., 1e6, 1., 1e-6]):
        p = Polynomial(coeffs)
        assert len(initial_guesses(p)) == p.degree()
