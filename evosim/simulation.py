"""The simulation loop: eating, thinking, moving and evolving generations."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Sequence

from evosim.animal import Animal, AnimalIndividual
from evosim.eye import wrap
from evosim.genetic import (
    GaussianMutation,
    GeneticAlgorithm,
    RouletteWheelSelection,
    UniformCrossover,
)
from evosim.world import World

SPEED_MIN = 0.001
SPEED_MAX = 0.005
SPEED_ACCEL = 0.2
ROTATION_ACCEL = math.pi / 2
GEN_LEN = 2500
EAT_DISTANCE = 0.007
MUTATION_CHANCE = 0.01
MUTATION_COEFF = 0.03


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _normalise_angle(angle: float) -> float:
    return math.atan2(math.sin(angle), math.cos(angle))


@dataclass(frozen=True)
class Statistics:
    """Food eaten over one generation: fewest, mean and most."""

    min: int
    avg: float
    max: int

    @classmethod
    def find_stats(cls, population: Sequence[Animal]) -> "Statistics":
        """Summarise the satiation of a non-empty population."""
        if not population:
            raise ValueError("Empty population")
        satiations = [animal.satiation for animal in population]
        return cls(
            min=min(satiations),
            avg=sum(satiations) / len(satiations),
            max=max(satiations),
        )


class Simulation:
    """A world whose animals learn to find food over generations."""

    def __init__(self, world: World, ga: GeneticAlgorithm, age: int = 0) -> None:
        self._world = world
        self.ga = ga
        self.age = age

    def __repr__(self) -> str:
        return f"Simulation(age={self.age!r}, world={self._world!r})"

    @classmethod
    def random(cls, rng: random.Random) -> "Simulation":
        """A fresh simulation with a random world."""
        world = World.random(rng)
        ga = GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(MUTATION_CHANCE, MUTATION_COEFF),
        )
        return cls(world, ga)

    def world(self) -> World:
        return self._world

    def step(self, rng: random.Random) -> Statistics | None:
        """Advance one tick; at the end of a generation, evolve and return its statistics."""
        self._process_collisions(rng)
        self._process_brains()
        self._process_movements()

        self.age += 1
        if self.age > GEN_LEN:
            stats = Statistics.find_stats(self._world.animals)
            self._evolve(rng)
            return stats
        return None

    def train(self, rng: random.Random) -> Statistics:
        """Run until the current generation ends and return its statistics."""
        while True:
            stats = self.step(rng)
            if stats is not None:
                return stats

    def _evolve(self, rng: random.Random) -> None:
        self.age = 0
        current = [AnimalIndividual.from_animal(animal) for animal in self._world.animals]
        evolved = self.ga.evolve(rng, current)
        self._world.animals = [individual.into_animal(rng) for individual in evolved]
        for food in self._world.foods:
            food.position = (rng.random(), rng.random())

    def _process_collisions(self, rng: random.Random) -> None:
        for animal in self._world.animals:
            for food in self._world.foods:
                if math.dist(animal.position, food.position) <= EAT_DISTANCE:
                    animal.satiation += 1
                    food.position = (rng.random(), rng.random())

    def _process_brains(self) -> None:
        for animal in self._world.animals:
            vision = animal.eye.process_vision(
                animal.position, animal.rotation, self._world.foods
            )
            response = animal.brain.nn.forward(vision)
            speed = _clamp(response[0], -SPEED_ACCEL, SPEED_ACCEL)
            rotation = _clamp(response[1], -ROTATION_ACCEL, ROTATION_ACCEL)
            animal.speed = _clamp(animal.speed + speed, SPEED_MIN, SPEED_MAX)
            animal.rotation = _normalise_angle(animal.rotation + rotation)

    def _process_movements(self) -> None:
        for animal in self._world.animals:
            x, y = animal.position
            x += -math.sin(animal.rotation) * animal.speed
            y += math.cos(animal.rotation) * animal.speed
            animal.position = (wrap(x, 0.0, 1.0), wrap(y, 0.0, 1.0))