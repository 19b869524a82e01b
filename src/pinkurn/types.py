from typing import Sequence

# Binary observations: 1 marks an event (red ball), 0 a non-event (white ball).
Obs = int
LatentState = int
ObsSequence = Sequence[Obs]
