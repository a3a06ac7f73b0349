"""
Visualization module for PyAutomatica.

This module provides functions to draw polynomial roots in the complex plane
and the trajectories followed by the Aberth-Ehrlich approximations.
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Dict, List, Optional, Sequence, Tuple


def plot_roots(root_sets: Dict[str, Sequence[complex]],
               title: Optional[str] = None,
               figsize: Tuple[int, int] = (10, 8),
               markers: str = "oxs+^v") -> plt.Figure:
    """Plot one or more sets of roots in the complex plane.

    Args:
        root_sets: Mapping from a label (e.g. 'eigenvalues', 'Aberth') to roots
        title: Plot title (default: auto-generated)
        figsize: Figure size
        markers: Marker symbols used in turn for each set

    Returns:
        The created matplotlib figure
    """
    fig, ax = plt.subplots(figsize=figsize)

    for i, (label, roots) in enumerate(root_sets.items()):
        values = np.asarray(list(roots), dtype=complex)
        ax.scatter(values.real, values.imag, marker=markers[i % len(markers)],
                   s=60, alpha=0.7, label=f'{label} ({len(values)})')

    # Axes of the complex plane
    ax.axhline(0, color='k', linewidth=0.5, alpha=0.5)
    ax.axvline(0, color='k', linewidth=0.5, alpha=0.5)

    ax.set_xlabel('Real Part')
    ax.set_ylabel('Imaginary Part')

    if title is None:
        title = 'Polynomial Roots in Complex Plane'
    ax.set_title(title)

    ax.axis('equal')
    ax.grid(True, alpha=0.3)
    if root_sets:
        ax.legend()

    plt.tight_layout()
    return fig


def plot_convergence(history: List[np.ndarray],
                     title: Optional[str] = None,
                     figsize: Tuple[int, int] = (12, 10),
                     show_endpoints: bool = True,
                     alpha: float = 0.5) -> plt.Figure:
    """Plot the trajectories of the root approximations.

    Args:
        history: Approximation vectors, one per iteration, as stored by a
            RootsFinder created with store_history=True
        title: Plot title (default: auto-generated)
        figsize: Figure size
        show_endpoints: Whether to mark the initial guesses and final values
        alpha: Transparency for the trajectories

    Returns:
        The created matplotlib figure
    """
    fig, ax = plt.subplots(figsize=figsize)

    if history:
        trajectories = np.array(history, dtype=complex)  # (iterations, roots)
        n_roots = trajectories.shape[1]
        cmap = plt.cm.rainbow
        colors = [cmap(i / max(n_roots - 1, 1)) for i in range(n_roots)]

        for i in range(n_roots):
            path = trajectories[:, i]
            ax.plot(path.real, path.imag, '-', color=colors[i], alpha=alpha, linewidth=1.5)

        if show_endpoints:
            start, end = trajectories[0], trajectories[-1]
            ax.plot(start.real, start.imag, 'go', markersize=6, alpha=0.7, label='Initial guesses')
            ax.plot(end.real, end.imag, 'ro', markersize=6, alpha=0.7,
                    label=f'Roots after {len(history) - 1} iterations')
            ax.legend()

    ax.set_xlabel('Real Part')
    ax.set_ylabel('Imaginary Part')

    if title is None:
        title = 'Aberth-Ehrlich Convergence'
    ax.set_title(title)

    ax.axis('equal')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    return fig
