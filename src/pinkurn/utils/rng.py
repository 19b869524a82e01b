import random
from typing import List

def seeded_rng(seed: int) -> random.Random:
    return random.Random(seed)

def unit_draws(length: int, seed: int) -> List[float]:
    """Uniform positions in [0, 1) for PinkUrn.draw_at."""
    rng = seeded_rng(seed)
    return [rng.random() for _ in range(length)]
