import math
from typing import Optional

import torch
from torch import Tensor

from torchhermite._constants import J0_ROOTS, PIESSENS_C


def _mcmahon(nu: float, k: Tensor) -> Tensor:
    # McMahon's expansion in 1/b, truncated after the b^-7 term.
    mu = 4 * nu**2
    a1 = 1 / 8
    a3 = (7 * mu - 31) / 384
    a5 = 4 * (3779 + mu * (-982 + 83 * mu)) / 61440
    a7 = 6 * (-6277237 + mu * (1585743 + mu * (-153855 + 6949 * mu))) / 20643840

    b = 0.25 * (2 * nu + 4 * k - 1) * math.pi

    return b - (mu - 1) * ((((a7 / b**2 + a5) / b**2 + a3) / b**2 + a1) / b)


def _piessens(nu: float) -> Tensor:
    coefficients = torch.tensor(PIESSENS_C, dtype=torch.float64)

    pt = (nu - 2) / 3
    chebyshev = [1.0, pt]
    for _ in range(2, coefficients.shape[0]):
        chebyshev.append(2 * pt * chebyshev[-1] - chebyshev[-2])

    zeros = coefficients.T @ torch.tensor(chebyshev, dtype=torch.float64)

    # The first zero vanishes like sqrt(nu + 1) as nu -> -1.
    zeros[0] = zeros[0] * math.sqrt(nu + 1)

    return zeros


def bessel_j_zeros(
    nu: float,
    m: int,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""
    Approximate the first ``m`` positive zeros of the Bessel function
    :math:`J_\nu`.

    Parameters
    ----------
    nu : float
        Order of the Bessel function. Must be >= -1.
    m : int
        Number of zeros.
    dtype : torch.dtype
        Data type for the output tensor.
    device : torch.device, optional
        Device for the output tensor.

    Returns
    -------
    Tensor
        Zeros :math:`j_{\nu, 1} < \dots < j_{\nu, m}`, shape (m,).

    Raises
    ------
    ValueError
        If nu < -1 or m < 0.

    Notes
    -----
    - :math:`\nu = 0`: the first twenty zeros are tabulated.
    - :math:`-1 \le \nu \le 5`: the first six zeros come from Piessens'
      Chebyshev series, accurate to about 12 digits.
    - All remaining zeros use McMahon's asymptotic expansion, which is
      very accurate for the seventh zero onwards when :math:`\nu \le 5`
      and only moderately accurate for small indices when :math:`\nu > 5`.

    Examples
    --------
    >>> bessel_j_zeros(0, 3)
    tensor([2.4048, 5.5201, 8.6537], dtype=torch.float64)

    References
    ----------
    Piessens, R. (1984). Chebyshev series approximations for the zeros of
    the Bessel functions. Journal of Computational Physics, 53(1), 188-192.
    """
    if m < 0:
        raise ValueError(f"m must be non-negative, got {m}")
    if nu < -1:
        raise ValueError(f"nu must be >= -1, got {nu}")

    k = torch.arange(1, m + 1, dtype=torch.float64)

    zeros = _mcmahon(nu, k)

    if nu == 0:
        count = min(m, len(J0_ROOTS))

        zeros[:count] = torch.tensor(J0_ROOTS[:count], dtype=torch.float64)
    elif nu <= 5:
        count = min(m, len(PIESSENS_C[0]))

        zeros[:count] = _piessens(nu)[:count]

    return zeros.to(dtype=dtype, device=device)


__all__ = ["bessel_j_zeros"]
