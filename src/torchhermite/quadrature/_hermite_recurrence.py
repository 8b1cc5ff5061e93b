"""Scaled Hermite polynomials by three-term recurrence, and the Newton
solver for Gauss-Hermite nodes of moderate order built on it."""

import logging
import math
from typing import Tuple, Union

import torch
from torch import Tensor

from torchhermite.quadrature._exceptions import DomainError
from torchhermite.quadrature._hermite_initial_guesses import (
    hermite_initial_guesses,
)

logger = logging.getLogger(__name__)

RECURRENCE_MAX_ITERATIONS = 10

RECURRENCE_TOLERANCE = math.sqrt(torch.finfo(torch.float64).eps)

# Intermediate values at or above this magnitude are damped.
RESCALE_THRESHOLD = 100.0


def hermite_recurrence(n: int, x: Union[float, Tensor]) -> Tuple[Tensor, Tensor]:
    r"""
    Evaluate the scaled Hermite polynomial of degree ``n`` and its
    Newton companion term.

    With the normalized probabilists' polynomials
    :math:`h_k(x) = He_k(x) / \sqrt{k!}`, computed by

    .. math::

        h_{k+1}(x) = \frac{x h_k(x)}{\sqrt{k+1}} - \frac{h_{k-1}(x)}{\sqrt{1 + 1/k}},
        \quad h_0 = 1, \quad h_1 = x,

    this returns

    .. math::

        H = e^{-x^2/4} h_n(x), \qquad
        H' = e^{-x^2/4} \left(-x h_n(x) + \sqrt{n} h_{n-1}(x)\right).

    The factor :math:`e^{-x^2/4}` is applied as ``n`` multiplications by
    :math:`w = e^{-x^2/(4n)}`. While the recurrence runs, any value of
    magnitude >= 100 is damped by ``w`` immediately (at most ``n`` times per
    element); the factors not yet used are applied at the end. This keeps
    every intermediate in range for large ``n``.

    Parameters
    ----------
    n : int
        Degree. Must be at least 1.
    x : float or Tensor
        Evaluation points (probabilists' scale).

    Returns
    -------
    value : Tensor
        H, same shape as x, float64.
    derivative : Tensor
        H', same shape as x, float64.

    Raises
    ------
    ValueError
        If n < 1.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")

    x = torch.as_tensor(x, dtype=torch.float64)

    w = torch.exp(-(x**2) / (4 * n))

    # Number of times w has been applied, per element.
    count = torch.zeros(x.shape, dtype=torch.int64, device=x.device)

    h_old = torch.ones_like(x)
    h = x.clone()

    for k in range(1, n):
        h_old, h = h, x * h / math.sqrt(k + 1) - h_old / math.sqrt(1 + 1 / k)

        while True:
            rescale = (torch.abs(h) >= RESCALE_THRESHOLD) & (count < n)

            if not torch.any(rescale):
                break

            h = torch.where(rescale, h * w, h)
            h_old = torch.where(rescale, h_old * w, h_old)

            count = count + rescale

    remaining = n - count

    for j in range(n):
        pending = remaining > j

        if not torch.any(pending):
            break

        h = torch.where(pending, h * w, h)
        h_old = torch.where(pending, h_old * w, h_old)

    return h, -x * h + math.sqrt(n) * h_old


def hermite_function_all(n: int, x: Union[float, Tensor]) -> Tensor:
    r"""
    Evaluate the normalized Hermite functions of degrees ``0, ..., n`` at a
    single point.

    Returns :math:`e^{-x^2/4} He_k(x) / \sqrt{k!}` for :math:`k = 0..n`,
    the probabilists' Hermite functions normalized by :math:`\sqrt{k!}`.

    The damping :math:`e^{-x^2/4}` is split into :math:`p = \max(1,
    \lfloor x^2/100 \rfloor)` factors that are applied to the whole table
    whenever the recurrence reaches magnitude 100; unused factors are
    applied at the end.

    Parameters
    ----------
    n : int
        Highest degree. Must be non-negative.
    x : float or Tensor
        Evaluation point (a scalar).

    Returns
    -------
    Tensor
        Values, shape (n + 1,), float64.

    Raises
    ------
    DomainError
        If n < 0.

    Examples
    --------
    >>> hermite_function_all(2, 0.0)
    tensor([ 1.0000,  0.0000, -0.7071], dtype=torch.float64)
    """
    if n < 0:
        raise DomainError(f"n must be non-negative, got {n}")

    x = float(x)

    if n == 0:
        return torch.tensor([math.exp(-(x**2) / 4)], dtype=torch.float64)

    p = max(1, math.floor(x**2 / 100))

    w = math.exp(-(x**2) / (4 * p))

    count = 0

    values = torch.empty(n + 1, dtype=torch.float64)

    h_old = 1.0
    h = x

    values[0] = h_old
    values[1] = h

    for k in range(1, n):
        h_old, h = h, x * h / math.sqrt(k + 1) - h_old / math.sqrt(1 + 1 / k)

        while abs(h) >= RESCALE_THRESHOLD and count < p:
            values[: k + 1] *= w

            h *= w
            h_old *= w

            count += 1

        values[k + 1] = h

    values *= w ** (p - count)

    return values


def _hermite_rec(n: int) -> Tuple[Tensor, Tensor]:
    """Non-negative Gauss-Hermite nodes and unweighted weights, 21 <= n <= 200."""
    x = hermite_initial_guesses(n) * math.sqrt(2)

    for iteration in range(1, RECURRENCE_MAX_ITERATIONS + 1):
        value, derivative = hermite_recurrence(n, x)

        dx = value / derivative

        # A vanishing derivative freezes the node for this sweep.
        dx = torch.where(torch.isnan(dx), torch.zeros_like(dx), dx)

        x = x - dx

        step = torch.max(torch.abs(dx)).item()

        if step < RECURRENCE_TOLERANCE:
            break

    logger.debug(
        "Recurrence Newton for n=%d stopped after %d iterations (max |dx| = %.3e)",
        n,
        iteration,
        step,
    )

    return x / math.sqrt(2), 1 / derivative**2
