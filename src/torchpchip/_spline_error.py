class SplineError(Exception):
    """Base exception for all PCHIP spline errors."""

    pass
