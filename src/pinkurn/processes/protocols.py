from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from pinkurn.types import LatentState, ObsSequence


@dataclass(frozen=True)
class Sample:
    """
    One generated outcome stream.

    x holds 1 for an event and 0 for a non-event. latent, when a process tracks
    hidden state, holds that state before each step (for an urn, the white balls
    left), aligned index-for-index with x.
    """
    x: ObsSequence
    latent: Optional[Sequence[LatentState]] = None

    def __len__(self) -> int:
        return len(self.x)


class Process(Protocol):
    """Seeded generator of binary event streams."""

    @property
    def name(self) -> str:
        ...

    def sample(self, length: int, seed: int) -> Sample:
        """Exactly `length` outcomes; the same seed reproduces the same stream."""
        ...
