import math
from dataclasses import dataclass
from typing import Iterator

from pinkurn.errors import OutOfRangeError, PrecisionExceededError

# Generous cap: a double carries at most ~15-17 significant decimal digits.
MAX_DECIMAL_DIGITS = 15
INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class Fraction:
    numerator: int
    denominator: int

    def __iter__(self) -> Iterator[int]:
        # Allows `numerator, denominator = to_fraction(p)`.
        yield self.numerator
        yield self.denominator

    def __float__(self) -> float:
        return self.numerator / self.denominator


def decimal_positions(value: float, max_digits: int = MAX_DECIMAL_DIGITS) -> int:
    """
    Count the fractional decimal digits of `value` without formatting it as text.

    Returns the smallest d for which round(value * 10**d) / 10**d gives back exactly
    the same double, i.e. the digits a shortest decimal rendering would show:

        0.25 -> 2,  0.1 -> 1,  3.0 -> 0

    Repeatedly shifting the fractional part until it reaches zero does not terminate
    for values like 0.123456; their binary error grows tenfold per shift.

    Raises OutOfRangeError for NaN or infinite input, and PrecisionExceededError if
    no d <= `max_digits` reproduces `value`.
    """
    if not math.isfinite(value):
        raise OutOfRangeError("value", value, "finite")
    for digits in range(max_digits + 1):
        scale = 10**digits
        if round(value * scale) / scale == value:
            return digits
    raise PrecisionExceededError(value, max_digits)


def to_fraction(value: float) -> Fraction:
    """
    Reduced fraction numerator/denominator reproducing the decimal digits of `value`.

    The denominator is 10**d for d = decimal_positions(value), and both terms are
    divided by their greatest common divisor. Both terms must fit a signed 32-bit
    integer.
    """
    if not math.isfinite(value) or value < 0.0:
        raise OutOfRangeError("value", value, "finite and non-negative")

    digits = decimal_positions(value)
    denominator = 10**digits
    numerator = int(round(value * denominator))

    divisor = math.gcd(numerator, denominator)
    numerator //= divisor
    denominator //= divisor

    if numerator > INT32_MAX or denominator > INT32_MAX:
        raise PrecisionExceededError(
            value,
            MAX_DECIMAL_DIGITS,
            message=f"{value!r} reduces to {numerator}/{denominator}, which exceeds the 32-bit range",
        )
    return Fraction(numerator, denominator)
