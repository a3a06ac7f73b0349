"""
Polynomial representation module for PyAutomatica.

This module provides the univariate polynomial type used by the control
toolkit. Coefficients are stored from the lowest to the highest degree,

    p(x) = c0 + c1*x + c2*x^2 + ...

and the coefficient list is always trimmed: it is never empty and it has no
trailing zeros, except for the zero polynomial which is stored as [0].
"""

import numbers
import numpy as np
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from pyautomatica.utils import Scalar, check_scalar, divide, is_zero, one_like, zero_like


class Polynomial:
    """Representation of a univariate polynomial with real coefficients."""

    def __init__(self, coeffs: Optional[Iterable[Scalar]] = None):
        """Initialize a polynomial from its coefficients.

        Args:
            coeffs: Coefficients from the lowest to the highest degree.
                An empty or missing sequence gives the zero polynomial.

        Raises:
            TypeError: If a coefficient is not a number
        """
        if coeffs is None:
            coeffs = []
        self._coeffs: List[Any] = [check_scalar(c) for c in coeffs]
        self._trim()
        assert self._coeffs, "polynomial coefficients are never empty"

    @classmethod
    def _raw(cls, coeffs: List[Any]) -> "Polynomial":
        """Build a polynomial from an already validated list, without trimming."""
        p = cls.__new__(cls)
        p._coeffs = coeffs
        assert p._coeffs
        return p

    @classmethod
    def from_coefficients(cls, coeffs: Iterable[Scalar]) -> "Polynomial":
        """Create a polynomial from coefficients ordered from low to high degree."""
        return cls(coeffs)

    @classmethod
    def from_roots(cls, roots: Iterable[Scalar]) -> "Polynomial":
        """Create the monic polynomial whose roots are the given values.

        Args:
            roots: Roots, repeated entries give repeated roots

        Returns:
            The product of the factors (x - r)
        """
        result = cls.one()
        for r in roots:
            check_scalar(r)
            result = result * cls._raw([-r, one_like(r)])
        result._trim()
        return result

    @classmethod
    def zero(cls) -> "Polynomial":
        """The zero polynomial."""
        return cls._raw([0])

    @classmethod
    def one(cls) -> "Polynomial":
        """The unit polynomial."""
        return cls._raw([1])

    def _trim(self) -> None:
        """Remove the trailing zero coefficients, keep at least one coefficient."""
        for i in range(len(self._coeffs) - 1, -1, -1):
            if not is_zero(self._coeffs[i]):
                del self._coeffs[i + 1:]
                break
        else:
            self._coeffs = self._coeffs[:1] if self._coeffs else [0]

    def __repr__(self) -> str:
        return f"Polynomial({self._coeffs!r})"

    def __str__(self) -> str:
        if len(self._coeffs) == 1:
            return str(self._coeffs[0])

        terms = []
        for i, c in enumerate(self._coeffs):
            if is_zero(c):
                continue
            if i == 0:
                terms.append(str(c))
                continue
            coef = str(c) if c < 0 else f"+{c}"
            terms.append(f"{coef}s" if i == 1 else f"{coef}s^{i}")
        return " ".join(terms)

    def __len__(self) -> int:
        return len(self._coeffs)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._coeffs)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._trimmed_coeffs() == other._trimmed_coeffs()

    __hash__ = None

    def _trimmed_coeffs(self) -> List[Any]:
        copy = Polynomial._raw(list(self._coeffs))
        copy._trim()
        return copy._coeffs

    def _check_index(self, index: int) -> int:
        if not isinstance(index, numbers.Integral):
            raise TypeError(f"Coefficient index must be an integer, got {type(index)}")
        if index < 0 or index >= len(self._coeffs):
            raise IndexError(f"Coefficient index {index} out of range for degree {self.degree()}")
        return int(index)

    def __getitem__(self, index: int) -> Any:
        return self._coeffs[self._check_index(index)]

    def __setitem__(self, index: int, value: Scalar) -> None:
        self._coeffs[self._check_index(index)] = check_scalar(value)
        self._trim()

    def coeffs(self) -> List[Any]:
        """Get a copy of the coefficients, from the lowest to the highest degree."""
        return list(self._coeffs)

    def to_array(self, dtype: Any = float) -> np.ndarray:
        """Get the coefficients as a numpy array."""
        return np.array(self._coeffs, dtype=dtype)

    def copy(self) -> "Polynomial":
        """Return an independent copy of the polynomial."""
        return Polynomial._raw(list(self._coeffs))

    def is_zero(self) -> bool:
        """Check whether this is the zero polynomial."""
        return len(self._coeffs) == 1 and is_zero(self._coeffs[0])

    def is_one(self) -> bool:
        """Check whether this is the unit polynomial."""
        return len(self._coeffs) == 1 and self._coeffs[0] == 1

    def degree(self) -> Optional[int]:
        """Get the degree of the polynomial, None for the zero polynomial."""
        assert self._coeffs, "degree is not defined on an empty polynomial"
        if self.is_zero():
            return None
        return len(self._coeffs) - 1

    def extend(self, degree: int) -> None:
        """Pad with zero coefficients up to the given degree.

        Nothing happens if the polynomial already has that degree or more.

        Args:
            degree: Degree of the highest (zero) coefficient to add
        """
        current = self.degree()
        if current is None or degree > current:
            padding = zero_like(self._coeffs[-1])
            self._coeffs.extend([padding] * (degree + 1 - len(self._coeffs)))

    def leading_coeff(self) -> Any:
        """Get the coefficient of the highest degree term."""
        return self._coeffs[-1]

    def monic(self) -> Tuple["Polynomial", Any]:
        """Return the monic form of the polynomial and its leading coefficient.

        The polynomial is returned unchanged when the leading coefficient is
        zero.
        """
        result = self.copy()
        lc = result.monic_mut()
        return result, lc

    def monic_mut(self) -> Any:
        """Normalize the polynomial in place so that it is monic.

        Returns:
            The original leading coefficient
        """
        lc = self.leading_coeff()
        if not is_zero(lc):
            self.div_mut(lc)
        return lc

    def roundoff(self, atol: Scalar) -> "Polynomial":
        """Return a copy where coefficients smaller than atol are set to zero."""
        result = self.copy()
        result.roundoff_mut(atol)
        return result

    def roundoff_mut(self, atol: Scalar) -> None:
        """Set to zero, in place, the coefficients smaller than atol."""
        atol = abs(atol)
        self._coeffs = [zero_like(c) if abs(c) < atol else c for c in self._coeffs]
        self._trim()

    def find_zero_roots(self) -> Tuple[int, "Polynomial"]:
        """Remove the roots at the origin.

        Returns:
            Tuple of (multiplicity of the root at 0, polynomial without those roots).
            The zero polynomial gives (0, zero polynomial).
        """
        if self.is_zero():
            return 0, Polynomial.zero()
        zeros = self._zero_roots_count()
        return zeros, Polynomial._raw(self._coeffs[zeros:])

    def find_zero_roots_mut(self) -> int:
        """Remove the roots at the origin in place and return their multiplicity."""
        if self.is_zero():
            return 0
        zeros = self._zero_roots_count()
        del self._coeffs[:zeros]
        return zeros

    def _zero_roots_count(self) -> int:
        count = 0
        for c in self._coeffs:
            if not is_zero(c):
                break
            count += 1
        return count

    def derive(self) -> "Polynomial":
        """Compute the derivative of the polynomial."""
        if len(self._coeffs) == 1:
            return Polynomial._raw([zero_like(self._coeffs[0])])
        return Polynomial(c * i for i, c in enumerate(self._coeffs) if i > 0)

    def integrate(self, constant: Scalar) -> "Polynomial":
        """Compute the integral of the polynomial.

        Integer coefficients are divided with integer division.

        Args:
            constant: Integration constant

        Returns:
            The primitive whose constant term is `constant`
        """
        check_scalar(constant)
        if self.is_zero():
            return Polynomial([constant])
        return Polynomial([constant] + [divide(c, i + 1) for i, c in enumerate(self._coeffs)])

    def eval(self, x: Any) -> Any:
        """Evaluate the polynomial with Horner's method.

        Args:
            x: Real or complex value, or a numpy array of values

        Returns:
            The value of the polynomial at x
        """
        result = 0 * x
        for c in reversed(self._coeffs):
            result = result * x + c
        return result

    def __call__(self, x: Any) -> Any:
        return self.eval(x)

    # Arithmetic

    def add(self, other: "Polynomial") -> "Polynomial":
        """Add two polynomials."""
        longer, shorter = (self, other) if len(self) >= len(other) else (other, self)
        coeffs = list(longer._coeffs)
        for i, c in enumerate(shorter._coeffs):
            coeffs[i] = coeffs[i] + c
        return Polynomial(coeffs)

    def subtract(self, other: "Polynomial") -> "Polynomial":
        """Subtract another polynomial from this one."""
        return self.add(other.negate())

    def negate(self) -> "Polynomial":
        """Negate every coefficient."""
        return Polynomial([-c for c in self._coeffs])

    def multiply(self, other: "Polynomial") -> "Polynomial":
        """Multiply two polynomials by direct convolution of the coefficients."""
        if self.is_zero() or other.is_zero():
            return Polynomial.zero()
        coeffs = [zero_like(self._coeffs[0] * other._coeffs[0])] * (len(self) + len(other) - 1)
        for i, a in enumerate(self._coeffs):
            for j, b in enumerate(other._coeffs):
                coeffs[i + j] = coeffs[i + j] + a * b
        return Polynomial(coeffs)

    def mul_fft(self, other: "Polynomial") -> "Polynomial":
        """Multiply two polynomials with an FFT based convolution.

        The coefficients of the result are floats.
        """
        # Import here to keep scipy out of the basic polynomial import path
        from pyautomatica.convolution import fft_multiply

        if self.is_zero() or other.is_zero():
            return Polynomial([0.0])
        return Polynomial(fft_multiply(self.coeffs(), other.coeffs()))

    def divide_with_remainder(self, other: "Polynomial") -> Tuple["Polynomial", "Polynomial"]:
        """Polynomial long division.

        Args:
            other: Divisor

        Returns:
            Tuple of (quotient, remainder). Dividing by the zero polynomial
            leaves the dividend unchanged in both positions.
        """
        if other.is_zero():
            return self.copy(), self.copy()

        n = other.degree()
        m = self.degree()
        if m is None or m < n:
            return Polynomial.zero(), self.copy()

        remainder = list(self._coeffs)
        lead = other.leading_coeff()
        quotient = [zero_like(lead)] * (m - n + 1)
        for k in range(m - n, -1, -1):
            q = divide(remainder[n + k], lead)
            quotient[k] = q
            for j, d in enumerate(other._coeffs):
                remainder[j + k] = remainder[j + k] - q * d
        return Polynomial(quotient), Polynomial(remainder[:n])

    def divide(self, other: "Polynomial") -> "Polynomial":
        """Quotient of the polynomial long division."""
        return self.divide_with_remainder(other)[0]

    def remainder(self, other: "Polynomial") -> "Polynomial":
        """Remainder of the polynomial long division."""
        return self.divide_with_remainder(other)[1]

    def div_mut(self, other: Union["Polynomial", Scalar]) -> None:
        """Divide in place by a scalar or keep the quotient by a polynomial."""
        if isinstance(other, Polynomial):
            if other.is_zero():
                return
            self._coeffs = self.divide(other)._coeffs
            return
        check_scalar(other)
        self._coeffs = [divide(c, other) for c in self._coeffs]
        self._trim()

    def __neg__(self) -> "Polynomial":
        return self.negate()

    def __add__(self, other: Any) -> "Polynomial":
        """Add a polynomial or a scalar."""
        if isinstance(other, Polynomial):
            return self.add(other)
        elif isinstance(other, numbers.Number):
            coeffs = list(self._coeffs)
            coeffs[0] = coeffs[0] + other
            return Polynomial(coeffs)
        else:
            return NotImplemented

    def __radd__(self, other: Any) -> "Polynomial":
        """Handle addition when the polynomial is on the right."""
        return self + other

    def __sub__(self, other: Any) -> "Polynomial":
        """Subtract a polynomial or a scalar."""
        if isinstance(other, Polynomial):
            return self.subtract(other)
        elif isinstance(other, numbers.Number):
            coeffs = list(self._coeffs)
            coeffs[0] = coeffs[0] - other
            return Polynomial(coeffs)
        else:
            return NotImplemented

    def __rsub__(self, other: Any) -> "Polynomial":
        """Handle subtraction when the polynomial is on the right."""
        if isinstance(other, numbers.Number):
            return self.negate() + other
        return NotImplemented

    def __mul__(self, other: Any) -> "Polynomial":
        """Multiply by a polynomial or a scalar."""
        if isinstance(other, Polynomial):
            return self.multiply(other)
        elif isinstance(other, numbers.Number):
            return Polynomial([c * other for c in self._coeffs])
        else:
            return NotImplemented

    def __rmul__(self, other: Any) -> "Polynomial":
        """Handle multiplication when the polynomial is on the right."""
        if isinstance(other, numbers.Number):
            return Polynomial([other * c for c in self._coeffs])
        return NotImplemented

    def __truediv__(self, other: Any) -> "Polynomial":
        """Divide by a polynomial (quotient) or a scalar."""
        if isinstance(other, Polynomial):
            return self.divide(other)
        elif isinstance(other, numbers.Number):
            return Polynomial([divide(c, other) for c in self._coeffs])
        else:
            return NotImplemented

    def __mod__(self, other: Any) -> "Polynomial":
        """Remainder of the division by a polynomial."""
        if isinstance(other, Polynomial):
            return self.remainder(other)
        return NotImplemented

    def __divmod__(self, other: Any) -> Tuple["Polynomial", "Polynomial"]:
        if isinstance(other, Polynomial):
            return self.divide_with_remainder(other)
        return NotImplemented

    def __pow__(self, exponent: int) -> "Polynomial":
        """Raise the polynomial to a power.

        Args:
            exponent: Non-negative integer exponent

        Returns:
            The polynomial raised to the given power
        """
        if not isinstance(exponent, numbers.Integral) or exponent < 0:
            raise ValueError("Exponent must be a non-negative integer")

        if exponent == 0:
            return Polynomial.one()

        if exponent == 1:
            return self.copy()

        # Use binary exponentiation for efficiency
        result = Polynomial.one()
        base = self.copy()
        while exponent > 0:
            if exponent & 1:  # exponent is odd
                result = result * base
            base = base * base
            exponent >>= 1

        return result

    # Roots

    def real_roots(self) -> Optional[List[float]]:
        """Real roots of the polynomial, None if some roots are not real.

        Degree 1 and 2 use closed formulas, higher degrees the eigenvalues
        of the companion matrix.
        """
        from pyautomatica.solver import real_roots
        return real_roots(self)

    def complex_roots(self) -> List[complex]:
        """Complex roots of the polynomial, empty for constant polynomials."""
        from pyautomatica.solver import complex_roots
        return complex_roots(self)

    def iterative_roots(self, verbose: bool = False) -> List[complex]:
        """Complex roots found with the Aberth-Ehrlich method (30 iterations)."""
        from pyautomatica.solver import iterative_roots
        return iterative_roots(self, verbose=verbose)

    def iterative_roots_with_max(self, max_iterations: int, verbose: bool = False) -> List[complex]:
        """Complex roots found with the Aberth-Ehrlich method.

        Args:
            max_iterations: Maximum number of sweeps of the iterative method
            verbose: Whether to print progress information
        """
        from pyautomatica.solver import iterative_roots_with_max
        return iterative_roots_with_max(self, max_iterations, verbose=verbose)


def poly(*coeffs: Scalar) -> Polynomial:
    """Create a polynomial from its coefficients, lowest degree first.

    Example:
        poly(1., 2., 3.) is 1 + 2x + 3x^2
    """
    return Polynomial(coeffs)
