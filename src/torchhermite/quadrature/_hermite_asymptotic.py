"""Uniform Airy-type asymptotics of Hermite polynomials in theta-space, and
the Newton solver for Gauss-Hermite nodes of large order built on them."""

import logging
import math
from typing import Tuple

import torch
from torch import Tensor

from torchhermite.quadrature._hermite_initial_guesses import (
    hermite_initial_guesses,
)
from torchhermite.special_functions import airy_ai, airy_ai_prime

logger = logging.getLogger(__name__)

ASYMPTOTIC_MAX_ITERATIONS = 20

ASYMPTOTIC_TOLERANCE = math.sqrt(torch.finfo(torch.float64).eps) / 10

# Coefficients a_s, b_s of the expansion (DLMF 12.10.43).
_A0 = 1.0
_B0 = 1.0
_A1 = 15 / 144
_B1 = -7 / 5 * _A1
_A2 = 5 * 7 * 9 * 11 / 2 / 144**2
_B2 = -13 / 11 * _A2
_A3 = 7 * 9 * 11 * 13 * 15 * 17 / 6 / 144**3
_B3 = -19 / 17 * _A3


def hermite_asymptotic(n: int, theta: Tensor) -> Tuple[Tensor, Tensor]:
    r"""
    Evaluate a scaled Hermite polynomial of degree ``n`` and its derivative
    from the uniform Airy-type asymptotic expansion.

    The variable is :math:`x = \sqrt{2n + 1} \cos\theta`. With
    :math:`\mu^2 = 2n + 1`,

    .. math::

        \eta = \frac{\theta}{2} - \frac{\sin 2\theta}{4}, \quad
        \chi = -\left(\frac{3\eta}{2}\right)^{2/3}, \quad
        \phi = \left(\frac{-\chi}{\sin^2\theta}\right)^{1/4},

    and the first four terms of DLMF 12.10.43 (for the value) and its
    derivative counterpart are summed, with :math:`\mathrm{Ai}` and
    :math:`\mathrm{Ai}'` evaluated at :math:`\mu^{4/3}\chi`.

    Parameters
    ----------
    n : int
        Degree.
    theta : Tensor
        Angles in (0, pi/2], float64.

    Returns
    -------
    value : Tensor
        Scaled polynomial value, same shape as theta.
    derivative : Tensor
        Scaled derivative, same shape as theta.
    """
    musq = 2 * n + 1

    cos_t = torch.cos(theta)
    sin_t = torch.sin(theta)
    sin_2t = 2 * cos_t * sin_t

    eta = 0.5 * theta - 0.25 * sin_2t
    chi = -((3 * eta / 2) ** (2 / 3))
    phi = (-chi / sin_t**2) ** (1 / 4)

    airy_argument = musq ** (2 / 3) * chi

    ai = airy_ai(airy_argument)
    ai_prime = airy_ai_prime(airy_argument)

    # u_k polynomials (DLMF 12.10.9)
    u0 = 1.0
    u1 = (cos_t**3 - 6 * cos_t) / 24
    u2 = (-9 * cos_t**4 + 249 * cos_t**2 + 145) / 1152
    u3 = (
        -4042 * cos_t**9
        + 18189 * cos_t**7
        - 28287 * cos_t**5
        - 151995 * cos_t**3
        - 259290 * cos_t
    ) / 414720

    a_0 = 1.0
    b_0 = -(_A0 * phi**6 * u1 + _A1 * u0) / chi**2
    a_1 = (_B0 * phi**12 * u2 + _B1 * phi**6 * u1 + _B2 * u0) / chi**3
    b_1 = -(phi**18 * u3 + _A1 * phi**12 * u2 + _A2 * phi**6 * u1 + _A3 * u0) / chi**5

    value = (
        a_0 * ai
        + b_0 * ai_prime / musq ** (4 / 3)
        + a_1 * ai / musq**2
        + b_1 * ai_prime / musq ** (4 / 3 + 2)
    )

    value = 2 * math.sqrt(math.pi) * musq ** (1 / 6) * phi * value

    # v_k polynomials (DLMF 12.10.10)
    v0 = 1.0
    v1 = (cos_t**3 + 6 * cos_t) / 24
    v2 = (15 * cos_t**4 - 327 * cos_t**2 - 143) / 1152
    v3 = (
        259290 * cos_t
        + 238425 * cos_t**3
        - 36387 * cos_t**5
        + 18189 * cos_t**7
        - 4042 * cos_t**9
    ) / 414720

    c_0 = -(_B0 * phi**6 * v1 + _B1 * v0) / chi
    d_0 = _A0 * v0
    c_1 = -(phi**18 * v3 + _B1 * phi**12 * v2 + _B2 * phi**6 * v1 + _B3 * v0) / chi**4
    d_1 = (_A0 * phi**12 * v2 + _A1 * phi**6 * v1 + _A2 * v0) / chi**3

    derivative = (
        c_0 * ai / musq ** (2 / 3)
        + d_0 * ai_prime
        + c_1 * ai / musq ** (2 / 3 + 2)
        + d_1 * ai_prime / musq**2
    )

    derivative = math.sqrt(2 * math.pi) * musq ** (1 / 3) / phi * derivative

    return value, derivative


def _hermite_asy(n: int) -> Tuple[Tensor, Tensor]:
    """Non-negative Gauss-Hermite nodes and unweighted weights, n > 200."""
    x0 = hermite_initial_guesses(n)

    theta = torch.acos(x0 / math.sqrt(2 * n + 1))

    for iteration in range(1, ASYMPTOTIC_MAX_ITERATIONS + 1):
        value, derivative = hermite_asymptotic(n, theta)

        dt = -value / (
            math.sqrt(2) * math.sqrt(2 * n + 1) * derivative * torch.sin(theta)
        )

        theta -= dt

        step = torch.max(torch.abs(dt)).item()

        if step < ASYMPTOTIC_TOLERANCE:
            break

    logger.debug(
        "Asymptotic Newton for n=%d stopped after %d iterations (max |dtheta| = %.3e)",
        n,
        iteration,
        step,
    )

    x = math.sqrt(2 * n + 1) * torch.cos(theta)

    w = 1 / (x * value + math.sqrt(2) * derivative) ** 2

    return x, w
