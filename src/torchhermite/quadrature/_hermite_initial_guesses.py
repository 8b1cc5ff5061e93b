"""Initial guesses for the non-negative zeros of Hermite polynomials."""

import math

import torch
from torch import Tensor

from torchhermite._constants import AIRY_ROOTS

# Fixed number of Newton steps for Tricomi's equation theta - sin(theta) = c.
TRICOMI_ITERATIONS = 7

# Zeros below this fraction of n come from Tricomi's formula, the rest from
# Gatteschi's. Empirical.
PATCH_FRACTION = 0.4985

_EPS = torch.finfo(torch.float64).eps


def _airy_root_magnitude(t: Tensor) -> Tensor:
    """Asymptotic |a_k| of the k-th Airy zero, with t = 3/8 pi (4k - 1)."""
    return t ** (2 / 3) * (
        1
        + 5 / 48 * t**-2
        - 5 / 36 * t**-4
        + (77125 / 82944) * t**-6
        - 108056875 / 6967296 * t**-8
        + 162375596875 / 334430208 * t**-10
    )


def hermite_initial_guesses(n: int) -> Tensor:
    r"""
    Initial guesses for the non-negative zeros of the physicists' Hermite
    polynomial :math:`H_n`.

    Two asymptotic approximations are patched together: Gatteschi's
    formula in terms of Airy zeros, accurate near the largest zero
    :math:`\sqrt{2n + 1}`, and Tricomi's formula, accurate near zero.

    Parameters
    ----------
    n : int
        Degree of the Hermite polynomial. Must be at least 20.

    Returns
    -------
    Tensor
        Ascending guesses, shape (n // 2,) for even n. For odd n the exact
        zero at the origin is included first, shape (n // 2 + 1,).

    Raises
    ------
    ValueError
        If n < 20. Both approximations are asymptotic in n.

    References
    ----------
    Gatteschi, L. (2002). Asymptotics and bounds for the zeros of Laguerre
    polynomials: a survey. J. Comput. Appl. Math., 144, 7-27.

    Tricomi, F. G. (1947). Sugli zeri delle funzioni di cui si conosce una
    rappresentazione asintotica. Ann. Mat. Pura Appl., 26, 283-300.
    """
    if n < 20:
        raise ValueError(f"n must be at least 20, got {n}")

    if n % 2 == 1:
        m = (n - 1) // 2
        a = 0.5
    else:
        m = n // 2
        a = -0.5

    nu = 4 * m + 2 * a + 2

    k = torch.arange(1, m + 1, dtype=torch.float64)

    # Gatteschi
    airy_roots = -_airy_root_magnitude(3 / 8 * math.pi * (4 * k - 1))
    airy_roots[:10] = torch.tensor(AIRY_ROOTS[:10], dtype=torch.float64)

    x_init_airy = torch.sqrt(
        torch.abs(
            nu
            + 2 ** (2 / 3) * airy_roots * nu ** (1 / 3)
            + (1 / 5 * 2 ** (4 / 3)) * airy_roots**2 * nu ** (-1 / 3)
            + (11 / 35 - a**2 - 12 / 175) * airy_roots**3 / nu
            + ((16 / 1575) * airy_roots + (92 / 7875) * airy_roots**4)
            * 2 ** (2 / 3)
            * nu ** (-5 / 3)
            - ((15152 / 3031875) * airy_roots**5 + (1088 / 121275) * airy_roots**2)
            * 2 ** (1 / 3)
            * nu ** (-7 / 3)
        )
    )

    # Largest zero first; flip to ascending.
    x_init_airy = torch.flip(x_init_airy, dims=[0])

    # Tricomi
    theta = torch.full((m,), math.pi / 2, dtype=torch.float64)

    rhs = ((4 * m + 3) - 4 * k) / nu * math.pi

    for _ in range(TRICOMI_ITERATIONS):
        theta = theta - (theta - torch.sin(theta) - rhs) / (1 - torch.cos(theta))

    t = torch.cos(theta / 2) ** 2

    x_init_sin = torch.sqrt(
        nu * t - (5 / (4 * (1 - t) ** 2) - 1 / (1 - t) - 1 + 3 * a**2) / 3 / nu
    )

    p = PATCH_FRACTION + _EPS

    x_init = torch.cat(
        [
            x_init_sin[: math.floor(p * n)],
            x_init_airy[math.ceil(p * n) - 1 :],
        ]
    )

    if n % 2 == 1:
        x_init = torch.cat([torch.zeros(1, dtype=torch.float64), x_init])

        return x_init[: m + 1]

    return x_init[:m]
