"""Quadrature rule classes."""

import math
import operator
from typing import Callable, Optional, Tuple, Union

import torch
from torch import Tensor

from torchhermite.quadrature._exceptions import DomainError
from torchhermite.quadrature._gauss_hermite import gauss_hermite


class GaussHermite:
    r"""
    Gauss-Hermite quadrature rule.

    Approximates :math:`\int_{-\infty}^{\infty} f(x) e^{-x^2} dx`, exactly
    for polynomials f of degree <= 2n-1.

    Parameters
    ----------
    n : int
        Number of quadrature points.

    Examples
    --------
    >>> rule = GaussHermite(32)
    >>> rule.integrate(lambda x: x**2)  # sqrt(pi) / 2
    >>> rule.expectation(torch.exp, mean=0.0, std=1.0)  # exp(1/2)

    Attributes
    ----------
    n : int
        Number of points.
    """

    def __init__(self, n: int):
        n = operator.index(n)
        if n < 0:
            raise DomainError(f"n must be non-negative, got {n}")
        if n < 1:
            raise ValueError(f"n must be at least 1, got {n}")
        self.n = n
        self._cache: dict = {}

    def _get_nodes_weights(
        self,
        dtype: torch.dtype,
        device: torch.device,
    ) -> Tuple[Tensor, Tensor]:
        """Get cached nodes and weights."""
        key = (str(dtype), str(device))
        if key not in self._cache:
            self._cache[key] = gauss_hermite(
                self.n, dtype=dtype, device=device
            )
        return self._cache[key]

    def nodes_and_weights(
        self,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> Tuple[Tensor, Tensor]:
        """
        Return nodes and weights for the weight function exp(-x^2).

        Parameters
        ----------
        dtype : torch.dtype, optional
            Output dtype. Default is float64.
        device : torch.device, optional
            Output device. Default is CPU.

        Returns
        -------
        nodes : Tensor
            Shape (n,), ascending.
        weights : Tensor
            Shape (n,).
        """
        dtype = dtype or torch.float64
        device = device or torch.device("cpu")

        return self._get_nodes_weights(dtype, device)

    def integrate(
        self,
        f: Callable[[Tensor], Tensor],
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> Tensor:
        """
        Integrate f(x) exp(-x^2) over the real line.

        Parameters
        ----------
        f : callable
            Integrand without the weight. Takes a tensor of shape (n,) and
            returns a tensor of shape (*batch, n).

        Returns
        -------
        Tensor
            Integral value(s), shape (*batch,).
        """
        nodes, weights = self.nodes_and_weights(dtype=dtype, device=device)
        values = f(nodes)
        return (values * weights).sum(dim=-1)

    def expectation(
        self,
        f: Callable[[Tensor], Tensor],
        mean: Union[float, Tensor] = 0.0,
        std: Union[float, Tensor] = 1.0,
    ) -> Tensor:
        r"""
        Expectation of f(X) for a normal random variable X.

        Uses the change of variables :math:`X = \mu + \sqrt{2}\sigma x`:

        .. math::

            E[f(X)] \approx \frac{1}{\sqrt{\pi}} \sum_{i=1}^{n} w_i
            f(\mu + \sqrt{2}\sigma x_i)

        Parameters
        ----------
        f : callable
            Function of X. Takes tensor of shape (*batch, n), returns same.
        mean, std : float or Tensor
            Mean and standard deviation of X. Can be batched.

        Returns
        -------
        Tensor
            Expectation(s). Shape matches broadcast(mean, std) or scalar.
        """
        # Infer dtype and device
        if isinstance(mean, Tensor):
            dtype = mean.dtype
            device = mean.device
        elif isinstance(std, Tensor):
            dtype = std.dtype
            device = std.device
        else:
            dtype = torch.float64
            device = torch.device("cpu")

        if not isinstance(mean, Tensor):
            mean = torch.tensor(mean, dtype=dtype, device=device)
        if not isinstance(std, Tensor):
            std = torch.tensor(std, dtype=dtype, device=device)

        nodes, weights = self.nodes_and_weights(dtype=dtype, device=device)

        # Handle batched parameters
        if mean.dim() > 0 or std.dim() > 0:
            mean = mean.unsqueeze(-1)  # (*batch, 1)
            std = std.unsqueeze(-1)  # (*batch, 1)

        x = mean + math.sqrt(2) * std * nodes

        return (f(x) * weights).sum(dim=-1) / math.sqrt(math.pi)
