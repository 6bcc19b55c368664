"""Plain snapshots of a running simulation, for display front-ends."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from evosim.animal import Animal
from evosim.food import Food
from evosim.simulation import Simulation, Statistics
from evosim.world import World


@dataclass(frozen=True)
class AnimalView:
    """Where an animal is and which way it faces."""

    x: float
    y: float
    rotation: float

    @classmethod
    def from_animal(cls, animal: Animal) -> "AnimalView":
        x, y = animal.position
        rotation = math.atan2(math.sin(animal.rotation), math.cos(animal.rotation))
        return cls(x, y, rotation)


@dataclass(frozen=True)
class FoodView:
    """Where a food pellet is."""

    x: float
    y: float

    @classmethod
    def from_food(cls, food: Food) -> "FoodView":
        x, y = food.position
        return cls(x, y)


@dataclass(frozen=True)
class WorldView:
    """All animals and food of a world."""

    animals: list[AnimalView]
    foods: list[FoodView]

    @classmethod
    def from_world(cls, world: World) -> "WorldView":
        return cls(
            [AnimalView.from_animal(animal) for animal in world.animals],
            [FoodView.from_food(food) for food in world.foods],
        )


@dataclass(frozen=True)
class StatisticsView:
    """Statistics of a finished generation."""

    min: int
    avg: float
    max: int

    @classmethod
    def from_statistics(cls, stats: Statistics) -> "StatisticsView":
        return cls(stats.min, stats.avg, stats.max)


class LiveSimulation:
    """A simulation that owns its random generator."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.simulation = Simulation.random(self.rng)

    def world(self) -> WorldView:
        return WorldView.from_world(self.simulation.world())

    def step(self) -> None:
        self.simulation.step(self.rng)

    def train(self) -> StatisticsView:
        return StatisticsView.from_statistics(self.simulation.train(self.rng))