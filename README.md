# evosim

A small artificial-life simulation. Animals move around a unit-square world
and look for food. Each animal sees the world through an eye that splits its
field of view into cells. A neural network turns what it sees into a change
of speed and a turn. An animal that comes within 0.007 of a food pellet eats
it, and the pellet moves to a new random place. After each generation of 2500
ticks, a genetic algorithm breeds a new population. It uses roulette-wheel
selection, uniform crossover and Gaussian mutation, and it takes the number
of meals an animal ate as that animal's fitness.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
import random

from evosim.view import LiveSimulation

sim = LiveSimulation(random.Random(42))

# Advance the world by one tick.
sim.step()

# Look at the world as plain values.
world = sim.world()
for animal in world.animals[:3]:
    print(animal.x, animal.y, animal.rotation)

# Run until the current generation ends, then evolve a new one.
stats = sim.train()
print(stats.min, stats.avg, stats.max)
```

You can also drive the core simulation yourself:

```python
import random

from evosim.simulation import Simulation

rng = random.Random(0)
sim = Simulation.random(rng)
for generation in range(5):
    stats = sim.train(rng)
    print(generation, stats.min, stats.avg, stats.max)
```

`Simulation.step(rng)` returns `None` on an ordinary tick. On the tick that
ends a generation, it returns that generation's `Statistics` and breeds the
next one. `Simulation.train(rng)` steps until that happens.

Every function that needs randomness takes a `random.Random` instance, so a
seeded generator gives runs you can reproduce.

## Building blocks

- `evosim.genetic`: `Chromosome`, the `Individual` base class,
  `RouletteWheelSelection`, `UniformCrossover`, `GaussianMutation(chance, coeff)`
  and `GeneticAlgorithm`. The chance for `GaussianMutation` must lie in [0, 1].
- `evosim.linalg`: `matrix_vector_mult` and `vector_vector_add` over flat,
  row-major lists.
- `evosim.network`: `LayerTopology` and `Network`, a per-neuron feed-forward
  network with ReLU activations. `Network.from_weights` raises `ValueError`
  when it is given too few weights or too many.
- `evosim.matrix_network`: `MatrixLayer` and `MatrixNetwork`, the same kind of
  network stored as one matrix and one bias vector per layer.
  `MatrixNetwork.from_weights` raises on too few weights and ignores any
  extra ones.
- `evosim.eye`: `Eye(fov_range, fov_angle, cells)`. `Eye.process_vision`
  returns one signal per cell, and a closer pellet adds more to its cell.
  The defaults are a range of 0.25, an angle of 5π/4 and 9 cells. The module
  also has `wrap`, which shifts a value into a range.
- `evosim.brain`: `topology(eye)`, `Brain` and `MatrixBrain`. Each of them
  turns into a chromosome and can be rebuilt from one. Animals use
  `MatrixBrain`.
- `evosim.animal`, `evosim.food`, `evosim.world`: `Animal`, `AnimalIndividual`,
  `Food` and `World`. A random world holds 40 animals and 60 pellets.
- `evosim.simulation`: `Simulation` and the per-generation `Statistics`
  (`min`, `avg`, `max` meals).
- `evosim.view`: the snapshot types `AnimalView`, `FoodView`, `WorldView` and
  `StatisticsView`, and `LiveSimulation`, which holds its own random generator.

## Limitations

- The package does not draw anything. `evosim.view` gives plain snapshots of
  positions and headings, and you need your own front-end to render them.
- Roulette-wheel selection needs some positive fitness. If no animal eats
  anything during a generation, breeding the next generation raises
  `ValueError`.