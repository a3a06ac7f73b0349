"""
Tests for the Aberth-Ehrlich root finder of PyAutomatica.
"""

import pytest
import numpy as np

from pyautomatica import Polynomial, poly
from pyautomatica.aberth import (
    DEFAULT_MAX_ITERATIONS,
    RootStatus,
    RootsFinder,
    RootsFinderOptions,
)
from pyautomatica.initial_guesses import initial_guesses


def _sorted(roots):
    return sorted(roots, key=lambda z: (round(z.real, 6), round(z.imag, 6)))


def test_default_options():
    options = RootsFinderOptions()
    assert options.max_iterations == DEFAULT_MAX_ITERATIONS == 30
    assert options.verbose is False
    assert options.store_history is False


def test_negative_budget_rejected():
    with pytest.raises(ValueError):
        RootsFinderOptions(max_iterations=-1)

    finder = RootsFinder(poly(1., 2., 3., 4.))
    with pytest.raises(ValueError):
        finder.with_max_iterations(-5)


def test_finder_setup():
    p = Polynomial.from_roots([-1., -2., -3.])
    finder = RootsFinder(p)
    assert finder.der == p.derive()
    assert len(finder.solution) == 3
    assert np.allclose(finder.solution, initial_guesses(p))
    assert finder.status == [RootStatus.PENDING] * 3


def test_real_roots_found():
    # (x + 1)(x + 2)(x + 3)
    p = Polynomial.from_roots([-1., -2., -3.])
    finder = RootsFinder(p).with_max_iterations(100)
    roots = finder.roots_finder()

    assert len(roots) == 3
    assert all(isinstance(r, complex) for r in roots)
    assert np.allclose(_sorted(roots), [-3., -2., -1.], atol=1e-10)
    assert 0 < finder.info['iterations'] <= 100
    assert finder.info['success'] == (finder.info['converged'] == 3)


def test_complex_roots_found():
    # x^3 + 0.5x - 2: one real root and a complex conjugate pair
    p = poly(-2., 0.5, 0., 1.)
    roots = RootsFinder(p).with_max_iterations(100).roots_finder()

    expected = np.roots([1., 0., 0.5, -2.])
    assert np.allclose(_sorted(roots), _sorted(expected), atol=1e-8)
    for r in roots:
        assert abs(p.eval(r)) < 1e-9


def test_zero_budget_returns_initial_guesses():
    p = poly(1., 0., 0., 1.)
    finder = RootsFinder(p).with_max_iterations(0)
    roots = finder.roots_finder()

    assert np.allclose(roots, initial_guesses(p))
    assert finder.info['iterations'] == 0
    assert finder.info['converged'] == 0
    assert finder.info['success'] is False


def test_single_sweep_uses_updated_values():
    """Within a sweep every root sees the values already updated before it."""
    p = poly(-6., 1., 4., 1.)
    der = p.derive()

    finder = RootsFinder(p, RootsFinderOptions(max_iterations=1))
    x = list(finder.solution.copy())
    for i in range(len(x)):
        n_i = p.eval(x[i]) / der.eval(x[i])
        a_i = sum(1 / (x[i] - x[j]) for j in range(len(x)) if j != i)
        x[i] = x[i] - n_i / (1 - n_i * a_i)

    roots = finder.roots_finder()
    assert finder.info['iterations'] == 1
    assert np.allclose(roots, x, rtol=1e-9)


def test_history_stored():
    p = Polynomial.from_roots([1., 2., 3., 4.])
    finder = RootsFinder(p, RootsFinderOptions(max_iterations=50, store_history=True))
    roots = finder.roots_finder()

    assert len(finder.history) == finder.info['iterations'] + 1
    assert np.allclose(finder.history[0], initial_guesses(p))
    assert np.allclose(finder.history[-1], roots)


def test_history_not_stored_by_default():
    finder = RootsFinder(Polynomial.from_roots([1., 2., 3.]))
    finder.roots_finder()
    assert finder.history == []


def test_repeated_runs_are_identical():
    p = Polynomial.from_roots([0.5, -1.5, 2.5, 4.])
    first = RootsFinder(p).roots_finder()
    second = RootsFinder(p).roots_finder()
    assert first == second


def test_verbose_output(capsys):
    p = Polynomial.from_roots([1., 2., 3.])
    finder = RootsFinder(p, RootsFinderOptions(max_iterations=40, verbose=True))
    finder.roots_finder()

    captured = capsys.readouterr()
    assert "Aberth-Ehrlich iteration on 3 roots" in captured.out
    assert "roots converged" in captured.out


def test_shared_options_are_not_modified():
    options = RootsFinderOptions(max_iterations=25)
    p = Polynomial.from_roots([1., 2., 3.])

    finder = RootsFinder(p, options).with_max_iterations(3)
    assert finder.options.max_iterations == 3
    assert options.max_iterations == 25

    other = RootsFinder(p, options)
    assert other.options.max_iterations == 25
