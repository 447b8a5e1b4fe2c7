"""
Exception hierarchy for pylikely.

All exceptions inherit from LikelyError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Expected numerical outcomes (a covariance that is not positive
      definite, a non-positive error) are return values, not exceptions
"""


class LikelyError(Exception):
    """Base exception for all pylikely errors."""
    pass


class ValidationError(LikelyError):
    """
    Input validation failed.

    Raised when user-provided inputs break a calling contract: non-numeric
    data, non-finite values, non-monotonic sample points, bad sizes.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a vector or packed matrix does not match the declared
    number of parameters, or when a packed length does not correspond to
    any integer dimension.

    Attributes:
        expected: Expected length or shape, if known
        actual: Actual length or shape, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class BinningError(ValidationError):
    """Invalid binning specification or bin index."""
    pass


class NumericalError(LikelyError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised when an object cannot be constructed because the covariance it
    was given fails the Cholesky test. Updates of an existing object report
    the same condition by returning False instead.

    Attributes:
        matrix_name: Name/description of the problematic matrix
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name


class MissingCovarianceError(LikelyError):
    """
    An operation needs a covariance matrix but none has been established.

    The object is valid, it only lacks optional data. This is not a
    NumericalError: nothing failed numerically.
    """
    pass
