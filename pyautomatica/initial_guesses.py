"""
Initial approximations for the iterative root finder.

The starting points are placed on circles whose radii come from the upper
convex hull of the points (k, ln|c_k|), the Newton polygon of the
coefficients. Each edge of the hull between indices k_i and k_(i+1) gives
k_(i+1) - k_i points evenly spaced on a circle of radius

    r = |c_(k_i) / c_(k_(i+1))| ^ (1 / (k_(i+1) - k_i))

References:
    D. A. Bini, Numerical computation of polynomial zeros by means of
    Aberth's method, Numerical Algorithms 13 (1996) 179-200.

    A. M. Andrew, Another efficient algorithm for convex hulls in two
    dimensions, Information Processing Letters 9 (1979) 216-219.
"""

import cmath
import numpy as np
from typing import List, Sequence, Tuple

from pyautomatica.polynomial import Polynomial
from pyautomatica.utils import to_float_list

TAU = 2 * np.pi

# (index k, k as float, ln|c_k|)
HullPoint = Tuple[int, float, float]


def cross_product(p0: Tuple[float, float],
                  p1: Tuple[float, float],
                  p2: Tuple[float, float]) -> float:
    """Compute the cross product of (p1 - p0) and (p2 - p0).

    (p1.x - p0.x) * (p2.y - p0.y) - (p2.x - p0.x) * (p1.y - p0.y)

    A negative value means that p0, p1, p2 make a right turn.
    """
    first = (p1[0] - p0[0], p1[1] - p0[1])
    second = (p2[0] - p0[0], p2[1] - p0[1])
    return first[0] * second[1] - second[0] * first[1]


def convex_hull_top(points: Sequence[HullPoint]) -> List[Tuple[int, float]]:
    """Calculate the upper convex hull of points sorted by abscissa.

    Monotone chain (Andrew's algorithm): the top of the stack is removed
    while it does not make a strict right turn with the new point.

    Args:
        points: Points (k, x, y) sorted by increasing x, at least two

    Returns:
        The (k, x) pairs of the hull vertices, sorted by k
    """
    assert len(points) >= 2, "the hull needs at least two points"
    stack: List[HullPoint] = [points[0], points[1]]

    for p in points[2:]:
        while len(stack) >= 2:
            next_to_top, top = stack[-2], stack[-1]
            cp = cross_product((next_to_top[1], next_to_top[2]),
                               (top[1], top[2]),
                               (p[1], p[2]))
            if cp < 0:
                break
            # Not a strict right turn (or undefined because of ln 0)
            stack.pop()
        stack.append(p)

    return [(k, x) for k, x, _ in stack]


def initial_guesses(p: Polynomial) -> List[complex]:
    """Generate the initial approximations of the roots of a polynomial.

    The polynomial must not have roots at the origin, i.e. its constant
    term is nonzero.

    Args:
        p: Polynomial whose roots have to be found

    Returns:
        List of degree(p) complex starting points
    """
    coeffs = to_float_list(p.coeffs())
    with np.errstate(divide="ignore"):
        log_magnitudes = np.log(np.abs(coeffs))
    points = [(k, float(k), float(y)) for k, y in enumerate(log_magnitudes)]

    hull = convex_hull_top(points)

    guesses: List[complex] = []
    for (k_i, x_i), (k_j, x_j) in zip(hull, hull[1:]):
        n_k = k_j - k_i
        r = abs(coeffs[k_i] / coeffs[k_j]) ** (1.0 / (x_j - x_i))
        for m in range(n_k):
            # r * e^(2*pi*i*m/n_k)
            guesses.append(r * cmath.exp(1j * TAU * m / n_k))

    return guesses
