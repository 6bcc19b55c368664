"""Feed-forward neural network stored as flat weight matrices per layer."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from evosim.linalg import matrix_vector_mult, vector_vector_add
from evosim.network import LayerTopology


def _take(weights: Iterator[float], count: int) -> list[float]:
    taken = [w for _, w in zip(range(count), weights)]
    if len(taken) < count:
        raise ValueError("Got not enough weights")
    return taken


@dataclass
class MatrixLayer:
    """One layer: a row-major ``num_outputs`` x ``num_inputs`` matrix and a bias vector."""

    weights: list[float]
    bias: list[float]
    num_inputs: int
    num_outputs: int

    @classmethod
    def random(cls, rng: random.Random, num_inputs: int, num_outputs: int) -> "MatrixLayer":
        weights = [rng.uniform(-1.0, 1.0) for _ in range(num_inputs * num_outputs)]
        bias = [rng.uniform(-1.0, 1.0) for _ in range(num_outputs)]
        return cls(weights, bias, num_inputs, num_outputs)

    def forward(self, inputs: Sequence[float]) -> list[float]:
        if len(inputs) != self.num_inputs:
            raise ValueError("Input size does not match the layer")
        product = matrix_vector_mult(self.weights, inputs, self.num_outputs, self.num_inputs)
        return [max(v, 0.0) for v in vector_vector_add(product, self.bias)]


class MatrixNetwork:
    """Fully connected network with ReLU activations, one matrix per layer."""

    def __init__(self, layers: list[MatrixLayer]) -> None:
        self.layers = layers

    def __repr__(self) -> str:
        return f"MatrixNetwork(layers={self.layers!r})"

    @classmethod
    def random(
        cls, rng: random.Random, layers: Sequence[LayerTopology]
    ) -> "MatrixNetwork":
        if len(layers) <= 1:
            raise ValueError("A network needs at least two layers")
        return cls(
            [MatrixLayer.random(rng, a.neurons, b.neurons) for a, b in zip(layers, layers[1:])]
        )

    def forward(self, inputs: Iterable[float]) -> list[float]:
        values = list(inputs)
        for layer in self.layers:
            values = layer.forward(values)
        return values

    def weights(self) -> Iterator[float]:
        """All parameters, per layer the weight matrix first and then the biases."""
        for layer in self.layers:
            yield from layer.weights
            yield from layer.bias

    @classmethod
    def from_weights(
        cls, layers: Sequence[LayerTopology], weights: Iterable[float]
    ) -> "MatrixNetwork":
        """Rebuild a network; weights beyond what the topology needs are ignored."""
        remaining = iter(weights)
        built = []
        for a, b in zip(layers, layers[1:]):
            matrix = _take(remaining, a.neurons * b.neurons)
            bias = _take(remaining, b.neurons)
            built.append(MatrixLayer(matrix, bias, a.neurons, b.neurons))
        return cls(built)