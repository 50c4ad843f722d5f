class NonFiniteValueWarning(UserWarning):
    """Warning when data values contain NaN or infinity."""

    pass
