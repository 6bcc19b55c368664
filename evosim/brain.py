"""Brains: neural networks sized to an eye, convertible to chromosomes."""

from __future__ import annotations

import random
from dataclasses import dataclass

from evosim.eye import Eye
from evosim.genetic import Chromosome
from evosim.matrix_network import MatrixNetwork
from evosim.network import LayerTopology, Network


def topology(eye: Eye) -> list[LayerTopology]:
    """Layers of a brain: eye cells in, a hidden layer twice as wide, speed and turn out."""
    return [
        LayerTopology(eye.cells),
        LayerTopology(2 * eye.cells),
        LayerTopology(2),
    ]


@dataclass
class Brain:
    """A brain backed by a per-neuron network."""

    nn: Network

    @classmethod
    def random(cls, rng: random.Random, eye: Eye) -> "Brain":
        return cls(Network.random(rng, topology(eye)))

    def as_chromosome(self) -> Chromosome:
        return Chromosome(self.nn.weights())

    @classmethod
    def from_chromosome(cls, chromosome: Chromosome, eye: Eye) -> "Brain":
        return cls(Network.from_weights(topology(eye), chromosome))


@dataclass
class MatrixBrain:
    """A brain backed by a matrix network."""

    nn: MatrixNetwork

    @classmethod
    def random(cls, rng: random.Random, eye: Eye) -> "MatrixBrain":
        return cls(MatrixNetwork.random(rng, topology(eye)))

    def as_chromosome(self) -> Chromosome:
        return Chromosome(self.nn.weights())

    @classmethod
    def from_chromosome(cls, chromosome: Chromosome, eye: Eye) -> "MatrixBrain":
        return cls(MatrixNetwork.from_weights(topology(eye), chromosome))