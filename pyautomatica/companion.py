"""
Companion matrix root finding for PyAutomatica.

The roots of a polynomial are the eigenvalues of the companion matrix of its
monic form, so a general eigenvalue solver gives all the roots at once.
"""

import numpy as np
from typing import List, Optional

from pyautomatica.polynomial import Polynomial


def companion_matrix(p: Polynomial) -> Optional[np.ndarray]:
    """Build the companion matrix of a polynomial.

    The subdiagonal is filled with ones and the last column holds the
    negated coefficients of the monic polynomial, -c_i / c_n.

    Args:
        p: Polynomial of degree n

    Returns:
        The n x n companion matrix, or None for the zero polynomial and
        for constant polynomials
    """
    degree = p.degree()
    if degree is None or degree == 0:
        return None

    coeffs = p.to_array(dtype=float)
    comp = np.zeros((degree, degree), dtype=float)
    comp[np.arange(1, degree), np.arange(degree - 1)] = 1.0
    comp[:, degree - 1] = -coeffs[:degree] / coeffs[degree]  # monic polynomial
    assert comp.shape[0] == comp.shape[1]
    return comp


def _eigenvalues(p: Polynomial) -> Optional[np.ndarray]:
    comp = companion_matrix(p)
    if comp is None:
        return None
    try:
        # The transpose has the same spectrum
        return np.linalg.eigvals(comp.T)
    except np.linalg.LinAlgError:
        # Non-convergence or non-finite entries
        return None


def real_eigen_roots(p: Polynomial) -> Optional[List[float]]:
    """Real roots from the eigenvalues of the companion matrix.

    Returns:
        The roots, or None if an eigenvalue is not real or the
        decomposition fails
    """
    eigenvalues = _eigenvalues(p)
    if eigenvalues is None:
        return None
    if np.iscomplexobj(eigenvalues):
        if np.any(eigenvalues.imag != 0):
            return None
        eigenvalues = eigenvalues.real
    return [float(e) for e in eigenvalues]


def complex_eigen_roots(p: Polynomial) -> List[complex]:
    """Complex roots from the eigenvalues of the companion matrix.

    Returns:
        All the eigenvalues, empty for constant polynomials or when the
        decomposition fails
    """
    eigenvalues = _eigenvalues(p)
    if eigenvalues is None:
        return []
    return [complex(e) for e in eigenvalues]
