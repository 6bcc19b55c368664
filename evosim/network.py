"""Feed-forward neural network built from per-neuron weights."""

from __future__ import annotations

import random
from dataclasses import dataclass
from itertools import chain
from typing import Iterable, Iterator, Sequence


@dataclass(frozen=True)
class LayerTopology:
    """Number of neurons in one layer."""

    neurons: int


def _take(weights: Iterator[float], count: int) -> list[float]:
    taken = [w for _, w in zip(range(count), weights)]
    if len(taken) < count:
        raise ValueError("Got not enough weights")
    return taken


@dataclass
class _Neuron:
    bias: float
    weights: list[float]

    @classmethod
    def random(cls, rng: random.Random, input_size: int) -> "_Neuron":
        bias = rng.uniform(-1.0, 1.0)
        weights = [rng.uniform(-1.0, 1.0) for _ in range(input_size)]
        return cls(bias, weights)

    @classmethod
    def from_weights(cls, input_size: int, weights: Iterator[float]) -> "_Neuron":
        bias, *rest = _take(weights, input_size + 1)
        return cls(bias, rest)

    def forward(self, inputs: Sequence[float]) -> float:
        if len(inputs) != len(self.weights):
            raise ValueError("Input size does not match the neuron's weights")
        output = sum(i * w for i, w in zip(inputs, self.weights))
        return max(self.bias + output, 0.0)


@dataclass
class _Layer:
    neurons: list[_Neuron]

    @classmethod
    def random(cls, rng: random.Random, input_size: int, output_size: int) -> "_Layer":
        return cls([_Neuron.random(rng, input_size) for _ in range(output_size)])

    @classmethod
    def from_weights(
        cls, input_size: int, output_size: int, weights: Iterator[float]
    ) -> "_Layer":
        return cls(
            [_Neuron.from_weights(input_size, weights) for _ in range(output_size)]
        )

    def forward(self, inputs: Sequence[float]) -> list[float]:
        return [neuron.forward(inputs) for neuron in self.neurons]


def _pairs(layers: Sequence[LayerTopology]) -> Iterator[tuple[int, int]]:
    if len(layers) <= 1:
        raise ValueError("A network needs at least two layers")
    return ((a.neurons, b.neurons) for a, b in zip(layers, layers[1:]))


class Network:
    """Fully connected network with ReLU activations."""

    def __init__(self, layers: list[_Layer]) -> None:
        self._layers = layers

    def __repr__(self) -> str:
        return f"Network(layers={self._layers!r})"

    @classmethod
    def random(cls, rng: random.Random, layers: Sequence[LayerTopology]) -> "Network":
        return cls([_Layer.random(rng, n_in, n_out) for n_in, n_out in _pairs(layers)])

    def forward(self, inputs: Iterable[float]) -> list[float]:
        values = list(inputs)
        for layer in self._layers:
            values = layer.forward(values)
        return values

    def weights(self) -> Iterator[float]:
        """All parameters, each neuron's bias first and then its weights."""
        return (
            value
            for layer in self._layers
            for neuron in layer.neurons
            for value in chain((neuron.bias,), neuron.weights)
        )

    @classmethod
    def from_weights(
        cls, layers: Sequence[LayerTopology], weights: Iterable[float]
    ) -> "Network":
        pairs = list(_pairs(layers))
        remaining = iter(weights)
        built = [_Layer.from_weights(n_in, n_out, remaining) for n_in, n_out in pairs]
        if next(remaining, None) is not None:
            raise ValueError("Got too many weights")
        return cls(built)