from ._spline_error import SplineError


class InvalidInputError(SplineError, ValueError):
    """Raised for malformed input data (mismatched lengths, wrong rank)."""

    pass
