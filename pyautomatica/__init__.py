"""
PyAutomatica: polynomial algebra and root finding for control systems.

This library provides the polynomial type used to describe transfer
functions and characteristic equations, together with three ways of
computing its roots: closed formulas, eigenvalues of the companion matrix
and the Aberth-Ehrlich iteration.
"""

__version__ = "0.1.0"

# Import from polynomial module
from pyautomatica.polynomial import (
    Polynomial,
    poly
)

# Import from solver module
from pyautomatica.solver import (
    RootStrategy,
    select_strategy,
    find_zero_roots,
    real_roots,
    complex_roots,
    iterative_roots,
    iterative_roots_with_max
)

# Import from other modules as needed
from pyautomatica.closed_form import real_quadratic_roots, complex_quadratic_roots
from pyautomatica.aberth import RootsFinder, RootsFinderOptions, RootStatus, DEFAULT_MAX_ITERATIONS

# Note: plotting depends on matplotlib and is not imported at package import
# time. Users can import from pyautomatica.visualization directly.

__all__ = [
    "Polynomial",
    "poly",
    "RootStrategy",
    "select_strategy",
    "find_zero_roots",
    "real_roots",
    "complex_roots",
    "iterative_roots",
    "iterative_roots_with_max",
    "real_quadratic_roots",
    "complex_quadratic_roots",
    "RootsFinder",
    "RootsFinderOptions",
    "RootStatus",
    "DEFAULT_MAX_ITERATIONS",
]
