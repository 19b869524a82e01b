"""
Pink urn: a depleting red/white urn that reproduces an event probability's mean
run length while bounding the longest run of non-events.
"""

from .errors import (
    IndexOutOfBoundsError,
    InvariantViolation,
    OutOfRangeError,
    PinkUrnError,
    PrecisionExceededError,
)
from .rational import Fraction, decimal_positions, to_fraction
from .urn import DEFAULT_SCALAR, MIN_SCALAR, PinkUrn

__all__ = [
    "PinkUrn",
    "DEFAULT_SCALAR",
    "MIN_SCALAR",
    "Fraction",
    "decimal_positions",
    "to_fraction",
    "PinkUrnError",
    "OutOfRangeError",
    "PrecisionExceededError",
    "IndexOutOfBoundsError",
    "InvariantViolation",
]
