"""Food pellets scattered over the unit square."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass
class Food:
    """A pellet of food at a point of the unit square."""

    position: tuple[float, float]

    @classmethod
    def random(cls, rng: random.Random) -> "Food":
        """Place a pellet uniformly at random in the unit square."""
        return cls((rng.random(), rng.random()))