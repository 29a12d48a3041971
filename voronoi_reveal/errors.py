"""Precondition errors raised by the rasterizers."""


class EmptySiteSetError(ValueError):
    """Raised when a nearest-site search is asked to run without any site."""

    def __init__(self, message: str = "No sites: a site set must not be empty"):
        super().__init__(message)


class InvalidDimensionsError(ValueError):
    """Raised when a grid width or height is not a positive integer."""

    def __init__(self, width: object, height: object):
        super().__init__(
            f"Grid dimensions must be positive integers, got {width!r} x {height!r}"
        )
        self.width = width
        self.height = height
