from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional


@dataclass
class RNG:
    """
    Deterministic-friendly RNG wrapper around random.Random.

    Allows injecting a fixed seed for reproducible tests and breeding
    outcomes. Exposes the minimal API the ranch needs so nothing depends on
    Python's global RNG.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def random(self) -> float:
        """Return the next random float in the range [0.0, 1.0)."""
        return self._rng.random()

    def coin_flip(self) -> bool:
        """Fair Bernoulli(0.5) draw."""
        return self.random() < 0.5
