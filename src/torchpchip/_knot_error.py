from ._invalid_input_error import InvalidInputError


class KnotError(InvalidInputError):
    """Raised for invalid knots (non-increasing, fewer than two points)."""

    pass
