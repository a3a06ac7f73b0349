"""
Main root finding module for PyAutomatica.

This module routes a polynomial to the right root finding strategy
according to its degree:

    degree None or 0  -> no roots
    degree 1 or 2     -> closed formulas
    degree >= 3       -> companion matrix eigenvalues, or the Aberth-Ehrlich
                         iteration for the iterative functions

Roots at the origin are removed before the strategy runs and appended after
the computed roots.
"""

from enum import Enum
from typing import List, Optional, Tuple

from pyautomatica.polynomial import Polynomial
from pyautomatica.closed_form import (
    complex_deg2_roots,
    complex_linear_root,
    real_deg2_roots,
    real_linear_root,
)
from pyautomatica.companion import complex_eigen_roots, real_eigen_roots
from pyautomatica.aberth import DEFAULT_MAX_ITERATIONS, RootsFinder, RootsFinderOptions
from pyautomatica.utils import extend_roots


class RootStrategy(Enum):
    """Root finding strategy selected from the polynomial degree."""
    CLOSED_FORM = 1
    EIGEN = 2
    ITERATIVE = 3


def select_strategy(degree: Optional[int], iterative: bool = False) -> Optional[RootStrategy]:
    """Select the root finding strategy for a polynomial degree.

    Args:
        degree: Degree of the polynomial, None for the zero polynomial
        iterative: Whether degrees above two use the iterative method

    Returns:
        The strategy, or None when there are no roots to compute
    """
    if degree is None or degree == 0:
        return None
    if degree <= 2:
        return RootStrategy.CLOSED_FORM
    return RootStrategy.ITERATIVE if iterative else RootStrategy.EIGEN


def find_zero_roots(p: Polynomial) -> Tuple[int, Polynomial]:
    """Count the roots at the origin and remove them from the polynomial.

    Args:
        p: Polynomial

    Returns:
        Tuple of (number of roots at 0, reduced polynomial)
    """
    return p.find_zero_roots()


def real_roots(p: Polynomial, verbose: bool = False) -> Optional[List[float]]:
    """Calculate the real roots of a polynomial.

    Args:
        p: Polynomial
        verbose: Whether to print the selected strategy

    Returns:
        The real roots, or None when the polynomial is constant or some
        roots are not real
    """
    zeros, cropped = find_zero_roots(p)
    strategy = select_strategy(cropped.degree())
    if verbose:
        print(f"Real roots of degree {p.degree()} polynomial: {zeros} at the origin, "
              f"strategy {strategy.name if strategy else None}")

    if strategy is None:
        roots = None
    elif strategy is RootStrategy.CLOSED_FORM:
        roots = real_linear_root(cropped) if cropped.degree() == 1 else real_deg2_roots(cropped)
    else:
        roots = real_eigen_roots(cropped)

    if roots is None:
        return None
    return extend_roots(roots, zeros, 0.0)


def complex_roots(p: Polynomial, verbose: bool = False) -> List[complex]:
    """Calculate the complex roots of a polynomial.

    Args:
        p: Polynomial
        verbose: Whether to print the selected strategy

    Returns:
        The roots, empty for constant polynomials
    """
    zeros, cropped = find_zero_roots(p)
    strategy = select_strategy(cropped.degree())
    if verbose:
        print(f"Complex roots of degree {p.degree()} polynomial: {zeros} at the origin, "
              f"strategy {strategy.name if strategy else None}")

    if strategy is None:
        roots: List[complex] = []
    elif strategy is RootStrategy.CLOSED_FORM:
        roots = complex_linear_root(cropped) if cropped.degree() == 1 else complex_deg2_roots(cropped)
    else:
        roots = complex_eigen_roots(cropped)

    return extend_roots(roots, zeros, 0j)


def iterative_roots_with_max(p: Polynomial,
                             max_iterations: int,
                             verbose: bool = False) -> List[complex]:
    """Calculate the complex roots of a polynomial with the Aberth-Ehrlich method.

    Polynomials of degree one and two use the closed formulas.

    Args:
        p: Polynomial
        max_iterations: Maximum number of iterations
        verbose: Whether to print progress information

    Returns:
        The roots, empty for constant polynomials
    """
    zeros, cropped = find_zero_roots(p)
    strategy = select_strategy(cropped.degree(), iterative=True)
    if verbose:
        print(f"Iterative roots of degree {p.degree()} polynomial: {zeros} at the origin, "
              f"strategy {strategy.name if strategy else None}")

    if strategy is None:
        roots: List[complex] = []
    elif strategy is RootStrategy.CLOSED_FORM:
        roots = complex_linear_root(cropped) if cropped.degree() == 1 else complex_deg2_roots(cropped)
    else:
        options = RootsFinderOptions(max_iterations=max_iterations, verbose=verbose)
        finder = RootsFinder(cropped, options)
        roots = finder.roots_finder()

    return extend_roots(roots, zeros, 0j)


def iterative_roots(p: Polynomial, verbose: bool = False) -> List[complex]:
    """Calculate the complex roots of a polynomial with the Aberth-Ehrlich method.

    The iteration is limited to DEFAULT_MAX_ITERATIONS (30) sweeps.
    """
    return iterative_roots_with_max(p, DEFAULT_MAX_ITERATIONS, verbose=verbose)
