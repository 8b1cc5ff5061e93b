from typing import Tuple

import torch
from scipy import special
from torch import Tensor


def _airy(x: Tensor) -> Tuple[Tensor, Tensor]:
    """Ai(x) and Ai'(x) in float64, cast back to the dtype and device of x."""
    if not isinstance(x, Tensor):
        raise TypeError("x must be a torch.Tensor")
    if x.is_complex():
        raise TypeError(f"x must be real, got dtype {x.dtype}")

    dtype = x.dtype if x.is_floating_point() else torch.float64

    ai, ai_prime, _, _ = special.airy(
        x.detach().to(device="cpu", dtype=torch.float64).numpy()
    )

    return (
        torch.as_tensor(ai, dtype=torch.float64).to(dtype=dtype, device=x.device),
        torch.as_tensor(ai_prime, dtype=torch.float64).to(
            dtype=dtype, device=x.device
        ),
    )
