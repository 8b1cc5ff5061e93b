"""Benchmark Gauss-Hermite node and weight computation.

Compares the O(n) dispatcher (Golub-Welsch, recurrence, asymptotic) against
NumPy's companion-matrix hermgauss (O(n^3)) across rule sizes, and reports
the accuracy of the second moment.
"""

import math
import time

import numpy as np
import torch

from torchhermite.quadrature import gauss_hermite


def benchmark_gauss_hermite(n: int, n_iterations: int = 10) -> float:
    """Benchmark gauss_hermite at given order.

    Parameters
    ----------
    n : int
        Number of quadrature points.
    n_iterations : int
        Number of iterations for timing.

    Returns
    -------
    float
        Average time per rule in milliseconds.
    """
    # Warmup
    for _ in range(3):
        _ = gauss_hermite(n)

    # Benchmark
    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = gauss_hermite(n)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def benchmark_hermgauss(n: int, n_iterations: int = 10) -> float:
    """Benchmark numpy.polynomial.hermite.hermgauss at given order."""
    for _ in range(3):
        _ = np.polynomial.hermite.hermgauss(n)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = np.polynomial.hermite.hermgauss(n)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run Gauss-Hermite benchmarks across orders."""
    orders = [10, 20, 50, 100, 200, 500, 1000, 2000, 5000]

    print("Gauss-Hermite Benchmark")
    print("=" * 70)
    print(
        f"{'n':>8} {'torchhermite (ms)':>18} {'hermgauss (ms)':>16} {'|x^2 err|':>14}"
    )
    print("-" * 70)

    for n in orders:
        ms_torchhermite = benchmark_gauss_hermite(n)

        # NumPy only up to moderate sizes: dense eigenvalue problem
        if n <= 1000:
            ms_hermgauss = benchmark_hermgauss(n)
        else:
            ms_hermgauss = float("nan")

        nodes, weights = gauss_hermite(n)
        error = abs(
            torch.sum(weights * nodes**2).item() - math.sqrt(math.pi) / 2
        )

        print(
            f"{n:>8} {ms_torchhermite:>18.4f} {ms_hermgauss:>16.4f} {error:>14.2e}"
        )

    print()
    print("Notes:")
    print("- n <= 20: Golub-Welsch eigendecomposition")
    print("- 21 <= n <= 200: Newton on the three-term recurrence, O(n^2)")
    print("- n > 200: Newton on the Airy asymptotic expansion, O(n)")


if __name__ == "__main__":
    main()
