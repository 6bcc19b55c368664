"""Genetic algorithm: selection, crossover and mutation over float chromosomes."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence, TypeVar


@dataclass
class Chromosome:
    """An ordered sequence of float genes."""

    genes: list[float] = field(default_factory=list)

    def __init__(self, genes: Iterable[float]) -> None:
        self.genes = [float(gene) for gene in genes]

    def __len__(self) -> int:
        return len(self.genes)

    def __iter__(self) -> Iterator[float]:
        return iter(self.genes)

    def __getitem__(self, index: int) -> float:
        return self.genes[index]


class Individual(ABC):
    """A member of a population that has a fitness and a chromosome."""

    @property
    @abstractmethod
    def fitness(self) -> float:
        """How well this individual did; used as a selection weight."""

    @property
    @abstractmethod
    def chromosome(self) -> Chromosome:
        """The genes of this individual."""

    @classmethod
    @abstractmethod
    def create(cls, chromosome: Chromosome) -> "Individual":
        """Build a fresh individual from a chromosome."""


IndividualT = TypeVar("IndividualT", bound=Individual)


class RouletteWheelSelection:
    """Pick an individual with probability proportional to its fitness."""

    def select(self, rng: random.Random, population: Sequence[IndividualT]) -> IndividualT:
        if not population:
            raise ValueError("Empty population")
        weights = [individual.fitness for individual in population]
        if any(weight < 0 for weight in weights):
            raise ValueError("Negative fitness in population")
        if sum(weights) <= 0:
            raise ValueError("All fitness values are zero")
        return rng.choices(population, weights=weights, k=1)[0]


class UniformCrossover:
    """Take each gene from either parent with equal probability."""

    def crossover(
        self, rng: random.Random, parent_a: Chromosome, parent_b: Chromosome
    ) -> Chromosome:
        if len(parent_a) != len(parent_b):
            raise ValueError("Parents have chromosomes of different lengths")
        return Chromosome(
            a if rng.random() < 0.5 else b for a, b in zip(parent_a, parent_b)
        )


class GaussianMutation:
    """Nudge each gene, with a given chance, by up to ``coeff`` in either direction."""

    def __init__(self, chance: float, coeff: float) -> None:
        if not 0.0 <= chance <= 1.0:
            raise ValueError("Mutation chance must lie in [0, 1]")
        self.chance = chance
        self.coeff = coeff

    def _mutate_gene(self, rng: random.Random, gene: float) -> float:
        sign = -1.0 if rng.random() < 0.5 else 1.0
        if rng.random() < self.chance:
            gene += sign * self.coeff * rng.random()
        return gene

    def mutate(self, rng: random.Random, child: Chromosome) -> None:
        """Mutate ``child`` in place."""
        child.genes = [self._mutate_gene(rng, gene) for gene in child.genes]


class GeneticAlgorithm:
    """Produces a new generation from an old one."""

    def __init__(self, selection_method, crossover_method, mutation_method) -> None:
        self.selection_method = selection_method
        self.crossover_method = crossover_method
        self.mutation_method = mutation_method

    def _breed(self, rng: random.Random, population: Sequence[IndividualT]) -> IndividualT:
        parent_a = self.selection_method.select(rng, population).chromosome
        parent_b = self.selection_method.select(rng, population).chromosome
        child = self.crossover_method.crossover(rng, parent_a, parent_b)
        self.mutation_method.mutate(rng, child)
        return type(population[0]).create(child)

    def evolve(
        self, rng: random.Random, population: Sequence[IndividualT]
    ) -> list[IndividualT]:
        if not population:
            raise ValueError("Empty population")
        return [self._breed(rng, population) for _ in population]