from typing import List

from pinkurn.urn import DEFAULT_SCALAR, PinkUrn
from pinkurn.utils.rng import seeded_rng

from .protocols import Process, Sample


class UrnProcess(Process):
    """
    Event stream drawn from a PinkUrn sized for probability p_one.

    Each step feeds one uniform draw in [0, 1) to the urn. The latent state is the
    number of white balls left before the step, so a reset shows up as a jump back
    to the initial white count.
    """
    @property
    def name(self) -> str:
        return f"pink_urn_s{self.scalar}"

    def __init__(self, p_one: float = 0.5, scalar: int = DEFAULT_SCALAR):
        if not (0.0 <= p_one <= 1.0):
            raise ValueError("p_one must be between 0 and 1")
        self.p = p_one
        self.scalar = scalar
        # Fail on a bad scalar at construction rather than on first sample.
        self.urn_template = PinkUrn.from_probability(p_one, scalar)

    def sample(self, length: int, seed: int) -> Sample:
        rng = seeded_rng(seed)
        urn = PinkUrn(self.urn_template.initial_red, self.urn_template.initial_white)

        x: List[int] = []
        latent: List[int] = []

        for _ in range(length):
            latent.append(urn.white)
            x.append(1 if urn.draw_at(rng.random()) else 0)

        return Sample(x=x, latent=latent)
