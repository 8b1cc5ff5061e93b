"""torchhermite: Gauss-Hermite quadrature for PyTorch."""

from . import (
    quadrature,
    special_functions,
)

__all__ = [
    "quadrature",
    "special_functions",
]

__version__ = "0.1.0"
