from ._airy_ai import airy_ai
from ._airy_ai_prime import airy_ai_prime
from ._bessel_j_zeros import bessel_j_zeros

__all__ = [
    "airy_ai",
    "airy_ai_prime",
    "bessel_j_zeros",
]
