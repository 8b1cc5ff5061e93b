"""Gauss-Hermite nodes and weights in O(n) time."""

import logging
import math
import operator
from typing import Optional, Tuple

import torch
from torch import Tensor

from torchhermite.quadrature._exceptions import DomainError
from torchhermite.quadrature._hermite_asymptotic import _hermite_asy
from torchhermite.quadrature._hermite_golub_welsch import (
    _hermite_golub_welsch,
)
from torchhermite.quadrature._hermite_recurrence import _hermite_rec

logger = logging.getLogger(__name__)

# Largest n handled by the Golub-Welsch eigenvalue method.
GOLUB_WELSCH_MAX_N = 20

# Largest n handled by Newton on the three-term recurrence; above it the
# Airy asymptotic expansion is used.
RECURRENCE_MAX_N = 200


def unweighted_gauss_hermite(
    n: int,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    r"""
    Compute Gauss-Hermite nodes and weights without the weight function.

    The returned weights are :math:`w_i e^{x_i^2}`, where :math:`w_i` are
    the weights returned by :func:`gauss_hermite`, so that

    .. math::

        \int_{-\infty}^{\infty} g(x) dx \approx \sum_{i=1}^{n} w_i g(x_i)

    for :math:`g(x) = f(x) e^{-x^2}` supplied by the caller.

    Parameters
    ----------
    n : int
        Number of quadrature points. Must be non-negative.
    dtype : torch.dtype
        Data type for output tensors.
    device : torch.device, optional
        Device for output tensors.

    Returns
    -------
    nodes : Tensor
        Quadrature nodes, shape (n,), sorted ascending.
    weights : Tensor
        Unweighted quadrature weights, shape (n,).

    Raises
    ------
    DomainError
        If n < 0.
    TypeError
        If n is not an integer.

    Notes
    -----
    The algorithm depends on n:

    - n <= 20: Golub-Welsch (eigendecomposition of the Jacobi matrix).
    - 21 <= n <= 200: Newton iteration on a three-term recurrence for the
      scaled Hermite polynomial.
    - n > 200: Newton iteration in theta-space on the uniform Airy-type
      asymptotic expansion, O(n) overall.

    Only the non-negative half is computed; the rule is mirrored about zero
    and the weights are rescaled so that the zeroth moment
    :math:`\sum_i w_i e^{-x_i^2}` equals :math:`\sqrt{\pi}`.

    References
    ----------
    Townsend, A., Trogdon, T., & Olver, S. (2016). Fast computation of Gauss
    quadrature nodes and weights on the whole real line. IMA Journal of
    Numerical Analysis, 36(1), 337-358.
    """
    n = operator.index(n)

    if n < 0:
        raise DomainError(f"n must be non-negative, got {n}")

    if n == 0:
        return (
            torch.empty(0, dtype=dtype, device=device),
            torch.empty(0, dtype=dtype, device=device),
        )

    if n == 1:
        return (
            torch.tensor([0.0], dtype=dtype, device=device),
            torch.tensor([math.sqrt(math.pi)], dtype=dtype, device=device),
        )

    if n <= GOLUB_WELSCH_MAX_N:
        logger.debug("Gauss-Hermite n=%d: Golub-Welsch", n)

        half_nodes, half_weights = _hermite_golub_welsch(n)
    elif n <= RECURRENCE_MAX_N:
        logger.debug("Gauss-Hermite n=%d: recurrence", n)

        half_nodes, half_weights = _hermite_rec(n)
    else:
        logger.debug("Gauss-Hermite n=%d: asymptotic expansion", n)

        half_nodes, half_weights = _hermite_asy(n)

    # Reflect about zero. For odd n the first half-node is the origin, shared
    # by both halves.
    if n % 2 == 1:
        half_nodes[0] = 0.0

        nodes = torch.cat([-half_nodes.flip(0), half_nodes[1:]])
        weights = torch.cat([half_weights.flip(0), half_weights[1:]])
    else:
        nodes = torch.cat([-half_nodes.flip(0), half_nodes])
        weights = torch.cat([half_weights.flip(0), half_weights])

    weights = weights * (
        math.sqrt(math.pi) / torch.sum(torch.exp(-(nodes**2)) * weights)
    )

    return nodes.to(dtype=dtype, device=device), weights.to(
        dtype=dtype, device=device
    )


def gauss_hermite(
    n: int,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    r"""
    Compute Gauss-Hermite nodes and weights for the physicists' convention.

    Integrates functions with weight w(x) = exp(-x^2) on (-infinity, infinity):

    .. math::

        \int_{-\infty}^{\infty} f(x) e^{-x^2} dx \approx \sum_{i=1}^{n} w_i f(x_i)

    Parameters
    ----------
    n : int
        Number of quadrature points. Must be non-negative.
    dtype : torch.dtype
        Data type for output tensors.
    device : torch.device, optional
        Device for output tensors.

    Returns
    -------
    nodes : Tensor
        Quadrature nodes, shape (n,), sorted ascending.
    weights : Tensor
        Quadrature weights, shape (n,), summing to sqrt(pi).

    Raises
    ------
    DomainError
        If n < 0.
    TypeError
        If n is not an integer.

    Notes
    -----
    Exact for polynomials of degree <= 2n-1. See
    :func:`unweighted_gauss_hermite` for the algorithms used.

    For large n the outermost weights fall below the smallest double and
    are returned as zero (for n = 500, exp(-x^2) underflows for the largest
    nodes); the unweighted weights remain representable.

    Examples
    --------
    >>> nodes, weights = gauss_hermite(2)
    >>> nodes
    tensor([-0.7071,  0.7071], dtype=torch.float64)
    >>> weights
    tensor([0.8862, 0.8862], dtype=torch.float64)
    """
    nodes, weights = unweighted_gauss_hermite(n)

    weights = weights * torch.exp(-(nodes**2))

    return nodes.to(dtype=dtype, device=device), weights.to(
        dtype=dtype, device=device
    )
