"""Golub-Welsch eigenvalue method for small Gauss-Hermite rules."""

import math
from typing import Tuple

import torch
from torch import Tensor


def _hermite_golub_welsch(n: int) -> Tuple[Tensor, Tensor]:
    """
    Non-negative Gauss-Hermite nodes and unweighted weights by the
    Golub-Welsch algorithm. Used for n <= 20.

    References
    ----------
    Golub, G. H., & Welsch, J. H. (1969). Calculation of Gauss quadrature rules.
    Mathematics of Computation, 23(106), 221-230.
    """
    # Jacobi matrix for Hermite (physicists'):
    # diagonal = 0, off-diagonal[k] = sqrt(k/2)
    k = torch.arange(1, n, dtype=torch.float64)
    off_diag = torch.sqrt(k / 2)

    T = torch.diag(off_diag, diagonal=1) + torch.diag(off_diag, diagonal=-1)

    eigenvalues, eigenvectors = torch.linalg.eigh(T)

    sorted_idx = torch.argsort(eigenvalues)
    nodes = eigenvalues[sorted_idx]
    weights = math.sqrt(math.pi) * eigenvectors[0, sorted_idx] ** 2

    # Upper half, including the middle node when n is odd.
    nodes = nodes[n // 2 :]
    weights = weights[n // 2 :]

    return nodes, torch.exp(nodes**2) * weights
