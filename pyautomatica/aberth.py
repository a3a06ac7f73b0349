"""
Aberth-Ehrlich module for PyAutomatica.

This module implements the iterative method that finds all the roots of a
polynomial simultaneously. Each approximation x_i is corrected with the
Newton term N_i = p(x_i) / p'(x_i) and the Aberth term
A_i = sum_(j != i) 1 / (x_i - x_j):

    x_i <- x_i - N_i / (1 - N_i * A_i)

References:
    O. Aberth, Iteration methods for finding all zeros of a polynomial
    simultaneously, Math. Comp. 27 (1973) 339-344.

    D. A. Bini, L. Robol, Solving secular and polynomial equations: a
    multiprecision algorithm, J. Comput. Appl. Math. 272 (2014) 276-292.
"""

import copy
import numpy as np
from enum import Enum
from typing import Any, Dict, List, Optional
from tqdm.auto import tqdm

from pyautomatica.polynomial import Polynomial
from pyautomatica.initial_guesses import initial_guesses

DEFAULT_MAX_ITERATIONS = 30


class RootStatus(Enum):
    """Status of a single root approximation."""
    PENDING = 0
    CONVERGED = 1


class RootsFinderOptions:
    """Configuration options for the iterative root finder."""

    def __init__(self,
                 max_iterations: int = DEFAULT_MAX_ITERATIONS,
                 verbose: bool = False,
                 store_history: bool = False):
        """Initialize root finder options.

        Args:
            max_iterations: Maximum number of sweeps over the roots
            verbose: Whether to print progress information
            store_history: Whether to keep the approximations after every sweep

        Raises:
            ValueError: If max_iterations is negative
        """
        if max_iterations < 0:
            raise ValueError(f"max_iterations must be non-negative, got {max_iterations}")
        self.max_iterations = int(max_iterations)
        self.verbose = verbose
        self.store_history = store_history


class RootsFinder:
    """
    Working set of the Aberth-Ehrlich iteration for one polynomial.

    The finder owns the polynomial, its derivative, the current
    approximations and the per-root status flags. It is meant to be used
    for a single call of roots_finder().
    """

    def __init__(self, poly: Polynomial, options: Optional[RootsFinderOptions] = None):
        """Initialize a root finder.

        Args:
            poly: Polynomial without roots at the origin, degree at least one
            options: Finder options (default: RootsFinderOptions with default params)
        """
        self.poly = poly
        self.der = poly.derive()
        # Private copy, with_max_iterations must not leak into shared options
        self.options = copy.copy(options) if options is not None else RootsFinderOptions()

        self._coeffs = poly.to_array(dtype=float)
        self._der_coeffs = self.der.to_array(dtype=float)

        # Set the initial root approximation.
        self.solution = np.array(initial_guesses(poly), dtype=complex)
        assert (poly.degree() or 0) == len(self.solution)

        self.status = [RootStatus.PENDING] * len(self.solution)
        self.history: List[np.ndarray] = []
        self.info: Dict[str, Any] = {
            'iterations': 0,
            'converged': 0,
            'success': False,
        }

    def with_max_iterations(self, iterations: int) -> "RootsFinder":
        """Define the maximum number of iterations.

        Args:
            iterations: Maximum number of iterations

        Returns:
            The finder itself
        """
        if iterations < 0:
            raise ValueError(f"max_iterations must be non-negative, got {iterations}")
        self.options.max_iterations = int(iterations)
        return self

    @staticmethod
    def _horner(coeffs: np.ndarray, x: np.complex128) -> np.complex128:
        result = np.complex128(0)
        for c in coeffs[::-1]:
            result = result * x + c
        return result

    def _sweep(self) -> None:
        """Update every pending root once, in index order.

        Each new approximation is stored before the next root is processed,
        so later roots already see the updated values.
        """
        one = np.complex128(1)
        for i in range(len(self.solution)):
            if self.status[i] is RootStatus.CONVERGED:
                continue

            x_i = self.solution[i]
            n_i = self._horner(self._coeffs, x_i) / self._horner(self._der_coeffs, x_i)

            a_i = np.complex128(0)
            for j, x_j in enumerate(self.solution):
                if j != i:
                    a_i += one / (x_i - x_j)

            new = x_i - n_i / (one - n_i * a_i)
            if new == x_i:
                self.status[i] = RootStatus.CONVERGED
            else:
                self.solution[i] = new

    def roots_finder(self) -> List[complex]:
        """Find all the complex roots of the polynomial.

        The iteration stops when every root is converged, i.e. an update
        leaves it exactly unchanged, or when the iteration budget is spent.

        Returns:
            List of the root approximations
        """
        verbose = self.options.verbose
        max_iterations = self.options.max_iterations
        n_roots = len(self.solution)

        if self.options.store_history:
            self.history.append(self.solution.copy())

        if verbose:
            print(f"Aberth-Ehrlich iteration on {n_roots} roots (max {max_iterations} iterations)...")
            pbar = tqdm(total=max_iterations)

        iterations = 0
        # Division by a vanishing derivative or by coincident approximations
        # gives inf/nan values that propagate as in IEEE arithmetic.
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            for _ in range(max_iterations):
                if all(s is RootStatus.CONVERGED for s in self.status):
                    break
                self._sweep()
                iterations += 1

                if self.options.store_history:
                    self.history.append(self.solution.copy())
                if verbose:
                    pbar.update(1)

        converged = sum(1 for s in self.status if s is RootStatus.CONVERGED)
        self.info['iterations'] = iterations
        self.info['converged'] = converged
        self.info['success'] = converged == n_roots

        if verbose:
            pbar.close()
            print(f"Iteration complete: {converged}/{n_roots} roots converged "
                  f"after {iterations} iterations")

        return [complex(x) for x in self.solution]
