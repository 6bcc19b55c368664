"""Animals roaming the world, and their genetic-algorithm counterpart."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from evosim.brain import MatrixBrain
from evosim.eye import Eye
from evosim.genetic import Chromosome, Individual

INITIAL_SPEED = 0.002


@dataclass
class Animal:
    """A creature with a position, a heading, an eye and a brain."""

    position: tuple[float, float]
    rotation: float
    eye: Eye
    brain: MatrixBrain
    speed: float = INITIAL_SPEED
    satiation: int = 0

    @classmethod
    def _spawn(cls, eye: Eye, brain: MatrixBrain, rng: random.Random) -> "Animal":
        position = (rng.random(), rng.random())
        rotation = rng.uniform(-math.pi, math.pi)
        return cls(position, rotation, eye, brain)

    @classmethod
    def random(cls, rng: random.Random) -> "Animal":
        """An animal with a random brain at a random place and heading."""
        eye = Eye()
        brain = MatrixBrain.random(rng, eye)
        return cls._spawn(eye, brain, rng)

    def as_chromosome(self) -> Chromosome:
        return self.brain.as_chromosome()

    @classmethod
    def from_chromosome(cls, chromosome: Chromosome, rng: random.Random) -> "Animal":
        """An animal whose brain is built from ``chromosome``, placed at random."""
        eye = Eye()
        brain = MatrixBrain.from_chromosome(chromosome, eye)
        return cls._spawn(eye, brain, rng)


class AnimalIndividual(Individual):
    """An animal as seen by the genetic algorithm: fitness is food eaten."""

    def __init__(self, fitness: float, chromosome: Chromosome) -> None:
        self._fitness = fitness
        self._chromosome = chromosome

    def __repr__(self) -> str:
        return f"AnimalIndividual(fitness={self._fitness!r}, chromosome={self._chromosome!r})"

    @property
    def fitness(self) -> float:
        return self._fitness

    @property
    def chromosome(self) -> Chromosome:
        return self._chromosome

    @classmethod
    def create(cls, chromosome: Chromosome) -> "AnimalIndividual":
        return cls(0.0, chromosome)

    @classmethod
    def from_animal(cls, animal: Animal) -> "AnimalIndividual":
        return cls(float(animal.satiation), animal.as_chromosome())

    def into_animal(self, rng: random.Random) -> Animal:
        return Animal.from_chromosome(self._chromosome, rng)