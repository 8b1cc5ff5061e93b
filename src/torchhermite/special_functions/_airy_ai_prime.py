from torch import Tensor

from ._airy import _airy


def airy_ai_prime(x: Tensor) -> Tensor:
    r"""
    Derivative Ai'(x) of the Airy function for real arguments.

    Evaluated together with Ai(x) by ``scipy.special.airy`` in double
    precision.

    Parameters
    ----------
    x : Tensor
        Real argument.

    Returns
    -------
    Tensor
        Ai'(x), with the dtype (float64 for integer input) and device of x.
    """
    return _airy(x)[1]


__all__ = ["airy_ai_prime"]
