"""Exceptions for Gauss-Hermite quadrature."""


class QuadratureError(Exception):
    """Base class for quadrature rule errors."""

    pass


class DomainError(QuadratureError, ValueError):
    """Rule order outside its valid domain.

    Raised when a quadrature rule or Hermite evaluation is requested for a
    negative number of points (or a negative degree).
    """

    pass
