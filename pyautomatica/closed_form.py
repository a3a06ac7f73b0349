"""
Closed form roots for PyAutomatica.

Exact formulas for polynomials of degree one and two. The quadratic formula
is written in the form that avoids the cancellation between -b/2 and the
square root of the discriminant.
"""

import math
from typing import List, Optional, Tuple

from pyautomatica.polynomial import Polynomial
from pyautomatica.utils import to_float_list


def real_quadratic_roots(b: float, c: float) -> Optional[Tuple[float, float]]:
    """Calculate the real roots of x^2 + b*x + c = 0.

    Args:
        b: First degree coefficient
        c: Zero degree coefficient

    Returns:
        The two roots, or None if the discriminant is negative
    """
    b_half = b / 2
    d = b_half * b_half - c  # Discriminant
    if d == 0:
        return -b_half, -b_half
    elif d < 0:
        return None

    s = math.sqrt(d)
    g = 1.0 if b > 0 else -1.0
    h = -(b_half + g * s)
    return c / h, h


def complex_quadratic_roots(b: float, c: float) -> Tuple[complex, complex]:
    """Calculate the complex roots of x^2 + b*x + c = 0.

    Args:
        b: First degree coefficient
        c: Zero degree coefficient

    Returns:
        The two roots; a negative discriminant gives the conjugate pair
        with the negative imaginary part first
    """
    b_half = b / 2
    d = b_half * b_half - c  # Discriminant
    if d == 0:
        return complex(-b_half, 0.0), complex(-b_half, 0.0)
    elif d < 0:
        s = math.sqrt(-d)
        return complex(-b_half, -s), complex(-b_half, s)

    s = math.sqrt(d)
    g = 1.0 if b > 0 else -1.0
    h = -(b_half + g * s)
    return complex(c / h, 0.0), complex(h, 0.0)


def _normalized_quadratic(p: Polynomial) -> Tuple[float, float]:
    c0, c1, c2 = to_float_list(p.coeffs())
    return c1 / c2, c0 / c2


def real_linear_root(p: Polynomial) -> List[float]:
    """Root of a first degree polynomial."""
    c0, c1 = to_float_list(p.coeffs())
    return [-c0 / c1]


def complex_linear_root(p: Polynomial) -> List[complex]:
    """Root of a first degree polynomial as a complex number."""
    return [complex(r) for r in real_linear_root(p)]


def real_deg2_roots(p: Polynomial) -> Optional[List[float]]:
    """Real roots of a second degree polynomial, None if they are complex."""
    roots = real_quadratic_roots(*_normalized_quadratic(p))
    if roots is None:
        return None
    return list(roots)


def complex_deg2_roots(p: Polynomial) -> List[complex]:
    """Complex roots of a second degree polynomial."""
    return list(complex_quadratic_roots(*_normalized_quadratic(p)))
