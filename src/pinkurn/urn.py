import logging
import math
import operator

from pinkurn.errors import IndexOutOfBoundsError, InvariantViolation, OutOfRangeError
from pinkurn.rational import INT32_MAX, to_fraction

LOGGER = logging.getLogger(__name__)

DEFAULT_SCALAR = 3
# With scalar 1 a probability of 1/d gives total == white, i.e. no red ball.
MIN_SCALAR = 2


def _as_int(name: str, value: int) -> int:
    # bool is an int subclass but never a meaningful count or index.
    if isinstance(value, bool):
        raise OutOfRangeError(name, value, "an integer")
    try:
        return operator.index(value)
    except TypeError:
        raise OutOfRangeError(name, value, "an integer") from None


class PinkUrn:
    """
    Urn of red (event) and white (non-event) balls.

    A drawn white ball is removed; a drawn red ball resets the urn to its initial
    contents. Balls are indexed with red first: red occupies [0, red) and white
    occupies [red, total). Once the white balls run out every draw is an event, so
    no run of non-events is longer than `initial_white`.

    The urn never draws on its own. Callers pass an index (or a unit-interval
    position) taken from their own random source.
    """

    def __init__(self, initial_red: int, initial_white: int):
        initial_red = _as_int("initial_red", initial_red)
        initial_white = _as_int("initial_white", initial_white)
        if initial_red < 1:
            raise OutOfRangeError("initial_red", initial_red, ">= 1")
        if initial_white < 0:
            raise OutOfRangeError("initial_white", initial_white, ">= 0")
        self._initial_red = initial_red
        self._initial_white = initial_white
        self._red = initial_red
        self._white = initial_white

    @classmethod
    def from_probability(cls, probability: float, scalar: int = DEFAULT_SCALAR) -> "PinkUrn":
        """
        Size an urn so its mean non-event run matches an i.i.d. event of `probability`.

        With probability = n/d (reduced), the negative-hypergeometric mean
        white / (red + 1) is equated to the negative-binomial mean (1 - p) / p:

            total = scalar * d - 1
            white = scalar * (d - n)
            red   = total - white = scalar * n - 1

        `scalar` multiplies the urn size; larger urns behave closer to i.i.d.
        """
        if not (0.0 <= probability <= 1.0):
            raise OutOfRangeError("probability", probability, "in [0, 1]")
        scalar = _as_int("scalar", scalar)
        if scalar < MIN_SCALAR:
            raise OutOfRangeError("scalar", scalar, f">= {MIN_SCALAR}")

        numerator, denominator = to_fraction(probability)

        if MIN_SCALAR * denominator - 1 > INT32_MAX:
            raise OutOfRangeError(
                "probability",
                probability,
                f"reducible to a denominator <= {(INT32_MAX + 1) // MIN_SCALAR} (reduces to {numerator}/{denominator})",
            )

        total = scalar * denominator - 1
        if total > INT32_MAX:
            raise OutOfRangeError(
                "scalar",
                scalar,
                f"<= {(INT32_MAX + 1) // denominator} for probability {probability!r}",
            )
        white = scalar * (denominator - numerator)
        red = total - white

        if numerator == 0:
            # Zero probability has no finite mean run; keep the single red ball the
            # urn needs and let the white balls bound the dry spell.
            LOGGER.warning(
                "Probability %r has no matching urn; clamping to 1 red and %d white balls.",
                probability,
                white,
            )
            red = 1

        if red < 1:
            raise InvariantViolation(
                f"probability {probability!r} with scalar {scalar} produced {red} red balls"
            )

        LOGGER.debug(
            "Urn for p=%r (%d/%d, scalar=%d): red=%d white=%d",
            probability,
            numerator,
            denominator,
            scalar,
            red,
            white,
        )
        return cls(red, white)

    @property
    def initial_red(self) -> int:
        return self._initial_red

    @property
    def initial_white(self) -> int:
        return self._initial_white

    @property
    def red(self) -> int:
        return self._red

    @property
    def white(self) -> int:
        return self._white

    @property
    def total(self) -> int:
        return self._red + self._white

    @property
    def is_exhausted(self) -> bool:
        return self._white == 0

    @property
    def max_run_length(self) -> int:
        """Longest possible run of consecutive non-events."""
        return self._initial_white

    @property
    def mean_run_length(self) -> float:
        """Expected non-events between events (negative-hypergeometric mean)."""
        return self._initial_white / (self._initial_red + 1)

    def draw(self, index: int) -> bool:
        """
        Observe the ball at `index`. Returns True for a red ball, which resets the urn;
        a white ball is removed and False is returned.
        """
        index = _as_int("index", index)
        if not (0 <= index < self.total):
            raise IndexOutOfBoundsError(index, self.total)

        if index < self._red:
            self.reset()
            return True

        self._white -= 1
        return False

    def draw_at(self, time: float) -> bool:
        """
        Observe the ball at position `time` in [0, 1), scaled linearly over the balls
        currently in the urn. `time` is typically a uniform random draw.
        """
        if not (0.0 <= time < 1.0):
            raise OutOfRangeError("time", time, "in [0, 1)")
        # time * total can round up to total for times just below 1.
        index = min(math.floor(time * self.total), self.total - 1)
        return self.draw(index)

    def reset(self) -> None:
        self._red = self._initial_red
        self._white = self._initial_white

    def __repr__(self) -> str:
        return (
            f"PinkUrn(red={self._red}/{self._initial_red}, "
            f"white={self._white}/{self._initial_white})"
        )
