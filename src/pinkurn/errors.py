from typing import Optional


class PinkUrnError(Exception):
    """Base class for errors raised by pinkurn."""


class OutOfRangeError(PinkUrnError, ValueError):
    """A parameter fell outside its allowed range."""

    def __init__(self, name: str, value: object, bound: str, message: Optional[str] = None):
        self.name = name
        self.value = value
        self.bound = bound
        super().__init__(message or f"{name} must be {bound}, got {value!r}")


class PrecisionExceededError(PinkUrnError, ValueError):
    """A value needs more decimal digits than a bounded fraction can hold."""

    def __init__(self, value: float, max_digits: int, message: Optional[str] = None):
        self.value = value
        self.max_digits = max_digits
        super().__init__(
            message
            or f"{value!r} does not terminate within {max_digits} decimal digits"
        )


class IndexOutOfBoundsError(PinkUrnError, IndexError):
    """A draw index did not address a ball currently in the urn."""

    def __init__(self, index: int, total: int):
        self.index = index
        self.total = total
        super().__init__(f"index {index} is outside [0, {total})")


class InvariantViolation(PinkUrnError, RuntimeError):
    """An urn was about to be built in a state it must never reach."""
