"""The world: a population of animals and the food they hunt."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from evosim.animal import Animal
from evosim.food import Food

ANIMAL_COUNT = 40
FOOD_COUNT = 60


@dataclass
class World:
    """Animals and food pellets sharing the unit square."""

    animals: list[Animal] = field(default_factory=list)
    foods: list[Food] = field(default_factory=list)

    @classmethod
    def random(cls, rng: random.Random) -> "World":
        """A world of randomly built animals and randomly placed food."""
        animals = [Animal.random(rng) for _ in range(ANIMAL_COUNT)]
        foods = [Food.random(rng) for _ in range(FOOD_COUNT)]
        return cls(animals, foods)