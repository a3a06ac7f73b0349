"""
Utility functions for PyAutomatica.

This module collects the scalar capabilities the polynomial code relies on
(zero and one of a coefficient type, zero test, division) together with a few
helpers shared by the root-finding modules.
"""

import numbers
import numpy as np
from typing import Any, List, Sequence, TypeVar, Union

# Real scalar types accepted as polynomial coefficients.
Scalar = Union[int, float, numbers.Real, np.number]

R = TypeVar("R")


def check_scalar(value: Any) -> Any:
    """Return the value if it is a usable coefficient, raise TypeError otherwise."""
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        raise TypeError(f"Unsupported coefficient type: {type(value)}")
    return value


def zero_like(value: Any) -> Any:
    """Zero of the same numeric type as value."""
    try:
        return type(value)(0)
    except (TypeError, ValueError):
        return 0


def one_like(value: Any) -> Any:
    """One of the same numeric type as value."""
    try:
        return type(value)(1)
    except (TypeError, ValueError):
        return 1


def is_zero(value: Any) -> bool:
    """Check whether a scalar equals zero."""
    return value == 0


def divide(numerator: Any, denominator: Any) -> Any:
    """Divide two scalars following the semantics of their type.

    Integers divided by integers truncate toward zero, every other
    combination uses true division.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        The quotient

    Raises:
        ZeroDivisionError: If the divisor is a Python zero
    """
    if isinstance(numerator, numbers.Integral) and isinstance(denominator, numbers.Integral):
        quotient = abs(int(numerator)) // abs(int(denominator))
        if (numerator < 0) != (denominator < 0):
            quotient = -quotient
        return quotient
    return numerator / denominator


def to_float_list(coeffs: Sequence[Any]) -> List[float]:
    """Convert coefficients to Python floats for the numerical solvers."""
    return [float(c) for c in coeffs]


def extend_roots(roots: List[R], zeros: int, zero: Any = 0.0) -> List[R]:
    """Append `zeros` copies of the root at the origin after the computed roots.

    Args:
        roots: Roots found by one of the strategies
        zeros: Multiplicity of the root at the origin
        zero: Value used for the origin (0.0 or 0j)

    Returns:
        The same list, extended in place
    """
    roots.extend([zero] * zeros)
    return roots
