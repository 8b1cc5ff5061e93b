from torch import Tensor

from ._airy import _airy


def airy_ai(x: Tensor) -> Tensor:
    r"""
    Airy function Ai(x) for real arguments.

    Ai is the solution of :math:`y'' = x y` that decays as
    :math:`x \to +\infty`. For :math:`x < 0` it oscillates, with zeros
    :math:`a_k \sim -(3\pi(4k - 1)/8)^{2/3}`.

    Evaluated in double precision by ``scipy.special.airy``, which switches
    from the power series to the asymptotic expansions for large ``|x|``,
    so the oscillatory region keeps full accuracy.

    Parameters
    ----------
    x : Tensor
        Real argument.

    Returns
    -------
    Tensor
        Ai(x), with the dtype (float64 for integer input) and device of x.

    Raises
    ------
    TypeError
        If x is not a tensor or is complex.

    Examples
    --------
    >>> airy_ai(torch.tensor([0.0], dtype=torch.float64))
    tensor([0.3550], dtype=torch.float64)
    """
    return _airy(x)[0]


__all__ = ["airy_ai"]
