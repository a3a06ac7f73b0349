"""
Fast polynomial multiplication for PyAutomatica.

The product of two polynomials is the convolution of their coefficient
sequences; for long sequences it is cheaper to compute it in the frequency
domain.
"""

import numpy as np
from scipy import signal
from typing import List, Sequence


def fft_multiply(left: Sequence[float], right: Sequence[float]) -> List[float]:
    """Convolve two coefficient sequences using the FFT.

    Args:
        left: Coefficients of the first polynomial, lowest degree first
        right: Coefficients of the second polynomial, lowest degree first

    Returns:
        Coefficients of the product, of length len(left) + len(right) - 1
    """
    a = np.asarray(left, dtype=float)
    b = np.asarray(right, dtype=float)
    product = signal.fftconvolve(a, b, mode="full")
    return [float(c) for c in product]
