"""
Gauss-Hermite quadrature module.

Node/weight computation:
    gauss_hermite, unweighted_gauss_hermite

Quadrature rule classes:
    GaussHermite

Building blocks:
    hermite_initial_guesses, hermite_recurrence, hermite_function_all,
    hermite_asymptotic

Exceptions:
    QuadratureError, DomainError
"""

from torchhermite.quadrature._exceptions import (
    DomainError,
    QuadratureError,
)
from torchhermite.quadrature._gauss_hermite import (
    gauss_hermite,
    unweighted_gauss_hermite,
)
from torchhermite.quadrature._hermite_asymptotic import hermite_asymptotic
from torchhermite.quadrature._hermite_initial_guesses import (
    hermite_initial_guesses,
)
from torchhermite.quadrature._hermite_recurrence import (
    hermite_function_all,
    hermite_recurrence,
)
from torchhermite.quadrature._rules import GaussHermite

__all__ = [
    # Node/weight computation
    "gauss_hermite",
    "unweighted_gauss_hermite",
    # Rule classes
    "GaussHermite",
    # Building blocks
    "hermite_initial_guesses",
    "hermite_recurrence",
    "hermite_function_all",
    "hermite_asymptotic",
    # Exceptions
    "QuadratureError",
    "DomainError",
]
