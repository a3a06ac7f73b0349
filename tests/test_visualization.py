"""
Tests for the plotting helpers of PyAutomatica.
"""

import pytest
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from pyautomatica import Polynomial
from pyautomatica.aberth import RootsFinder, RootsFinderOptions
from pyautomatica.visualization import plot_roots, plot_convergence


def test_plot_roots():
    p = Polynomial.from_roots([-2., 1., 3.])
    fig = plot_roots({'eigenvalues': p.complex_roots(),
                      'Aberth': p.iterative_roots()},
                     title='Roots')
    ax = fig.axes[0]
    assert ax.get_title() == 'Roots'
    assert len(ax.collections) == 2
    plt.close(fig)


def test_plot_roots_empty():
    fig = plot_roots({})
    assert fig.axes[0].get_title() == 'Polynomial Roots in Complex Plane'
    plt.close(fig)


def test_plot_convergence():
    p = Polynomial.from_roots([1., 2., 3., 4.])
    finder = RootsFinder(p, RootsFinderOptions(store_history=True))
    finder.roots_finder()

    fig = plot_convergence(finder.history)
    ax = fig.axes[0]
    # One line per root plus the two endpoint markers
    assert len(ax.lines) == 4 + 2
    assert ax.get_title() == 'Aberth-Ehrlich Convergence'
    plt.close(fig)


def test_plot_convergence_without_endpoints():
    history = [np.array([1 + 1j, -1 - 1j]), np.array([0.5 + 0.5j, -0.5 - 0.5j])]
    fig = plot_convergence(history, title='Paths', show_endpoints=False)
    assert len(fig.axes[0].lines) == 2
    plt.close(fig)
