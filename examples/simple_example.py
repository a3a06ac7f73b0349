"""
Simple example demonstrating the basic usage of PyAutomatica.

This example computes the roots of the characteristic polynomial

    s^4 + 6s^3 + 14s^2 + 16s + 8 = (s + 2)^2 (s^2 + 2s + 2)

with the companion matrix eigenvalues and with the Aberth-Ehrlich iteration,
then plots both sets of roots and the path of each approximation.
"""

import sys
import os
import time
import matplotlib.pyplot as plt

# Add the parent directory to the path so we can import pyautomatica
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pyautomatica import poly, RootsFinder, RootsFinderOptions
from pyautomatica.visualization import plot_roots, plot_convergence


def main():
    """Run the simple example."""
    print("PyAutomatica Simple Example")
    print("===========================")

    p = poly(2., 1.) * poly(2., 1.) * poly(2., 2., 1.)
    print(f"Characteristic polynomial: {p}")
    print(f"Degree: {p.degree()}\n")

    start_time = time.time()
    eigen = p.complex_roots()
    print(f"Eigenvalue roots ({time.time() - start_time:.4f} s):")
    for r in eigen:
        print(f"  {r:.6f}")

    print(f"\nReal roots: {p.real_roots()}")

    # Aberth-Ehrlich iteration keeping every sweep for the plot
    finder = RootsFinder(p, RootsFinderOptions(max_iterations=50, verbose=True, store_history=True))
    start_time = time.time()
    iterative = finder.roots_finder()
    print(f"\nIterative roots ({time.time() - start_time:.4f} s):")
    for r in iterative:
        print(f"  {r:.6f}")
    print(f"Info: {finder.info}")

    print("\nCreating visualization...")
    plot_roots({'eigenvalues': eigen, 'Aberth-Ehrlich': iterative})
    plt.savefig('roots.png')
    plot_convergence(finder.history)
    plt.savefig('aberth_convergence.png')
    print("Visualization saved as 'roots.png' and 'aberth_convergence.png'")

    # Show the plot if running interactively
    plt.show()

    return iterative


if __name__ == "__main__":
    main()
