import random

import pytest

from evosim.matrix_network import MatrixLayer, MatrixNetwork
from evosim.network import LayerTopology


def topology(*sizes):
    return [LayerTopology(n) for n in sizes]


def test_testing_weights():
    network = MatrixNetwork.random(random.Random(), topology(5, 10, 2))
    weights = list(network.weights())
    assert len(weights) == 5 * 10 + 10 * 2 + 10 + 2


def test_weights_round_trip():
    layers = topology(3, 4, 2)
    net = MatrixNetwork.random(random.Random(5), layers)
    weights = list(net.weights())
    assert list(MatrixNetwork.from_weights(layers, weights).weights()) == weights


def test_weights_order_matrix_then_bias():
    given = [1.0, 2.0, 0.5]
    net = MatrixNetwork.from_weights(topology(2, 1), given)
    assert net.layers[0].weights == [1.0, 2.0]
    assert net.layers[0].bias == [0.5]
    assert list(net.weights()) == given


def test_forward_known_values():
    net = MatrixNetwork.from_weights(topology(2, 1), [1.0, 2.0, 0.5])
    assert net.forward([1.0, 1.0]) == [pytest.approx(3.5)]


def test_forward_applies_relu():
    net = MatrixNetwork.from_weights(topology(2, 2), [1.0, 0.0, 0.0, 1.0, 0.0, -5.0])
    assert net.forward([2.0, 3.0]) == [2.0, 0.0]


def test_from_weights_ignores_extra_weights():
    net = MatrixNetwork.from_weights(topology(2, 1), [1.0, 2.0, 0.5, 9.0, 9.0])
    assert list(net.weights()) == [1.0, 2.0, 0.5]


def test_from_weights_rejects_too_few():
    with pytest.raises(ValueError):
        MatrixNetwork.from_weights(topology(2, 1), [1.0, 2.0])


def test_random_rejects_single_layer():
    with pytest.raises(ValueError):
        MatrixNetwork.random(random.Random(0), topology(3))


def test_matrix_layer_random_shapes_and_range():
    layer = MatrixLayer.random(random.Random(6), 3, 4)
    assert len(layer.weights) == 12
    assert len(layer.bias) == 4
    assert all(-1.0 <= w <= 1.0 for w in layer.weights + layer.bias)


def test_matrix_layer_forward_rejects_wrong_size():
    layer = MatrixLayer.random(random.Random(6), 3, 4)
    with pytest.raises(ValueError):
        layer.forward([1.0, 2.0])


def test_forward_output_shape_and_non_negative():
    net = MatrixNetwork.random(random.Random(7), topology(4, 8, 2))
    out = net.forward([0.1, 0.5, -0.3, 0.8])
    assert len(out) == 2
    assert all(v >= 0.0 for v in out)