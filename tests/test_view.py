import math
import random

import pytest

from evosim.animal import Animal
from evosim.food import Food
from evosim.simulation import GEN_LEN, Statistics
from evosim.view import (
    AnimalView,
    FoodView,
    LiveSimulation,
    StatisticsView,
    WorldView,
)
from evosim.world import World


def test_animal_view_copies_position_and_normalises_rotation():
    animal = Animal.random(random.Random(1))
    animal.position = (0.25, 0.75)
    animal.rotation = 3 * math.pi / 2
    view = AnimalView.from_animal(animal)
    assert (view.x, view.y) == (0.25, 0.75)
    assert view.rotation == pytest.approx(-math.pi / 2)


def test_food_view_copies_position():
    view = FoodView.from_food(Food((0.1, 0.9)))
    assert (view.x, view.y) == (0.1, 0.9)


def test_world_view_mirrors_world():
    rng = random.Random(2)
    world = World([Animal.random(rng)], [Food((0.2, 0.3)), Food((0.4, 0.5))])
    view = WorldView.from_world(world)
    assert len(view.animals) == 1
    assert [(f.x, f.y) for f in view.foods] == [(0.2, 0.3), (0.4, 0.5)]


def test_statistics_view_copies_fields():
    view = StatisticsView.from_statistics(Statistics(min=1, avg=2.5, max=4))
    assert (view.min, view.avg, view.max) == (1, 2.5, 4)


def test_live_simulation_world_sizes():
    live = LiveSimulation(random.Random(3))
    view = live.world()
    assert len(view.animals) == 40
    assert len(view.foods) == 60


def test_live_simulation_is_reproducible_with_same_seed():
    first = LiveSimulation(random.Random(4)).world()
    second = LiveSimulation(random.Random(4)).world()
    first_animals = [(a.x, a.y, a.rotation) for a in first.animals]
    second_animals = [(a.x, a.y, a.rotation) for a in second.animals]
    first_foods = [(f.x, f.y) for f in first.foods]
    second_foods = [(f.x, f.y) for f in second.foods]
    assert len(first_animals) == 40
    assert len(first_foods) == 60
    assert first_animals == second_animals
    assert first_foods == second_foods


def test_live_simulation_step_advances_age():
    live = LiveSimulation(random.Random(5))
    live.step()
    assert live.simulation.age == 1
    for animal in live.world().animals:
        assert 0.0 <= animal.x <= 1.0
        assert 0.0 <= animal.y <= 1.0


def test_live_simulation_train_returns_statistics():
    live = LiveSimulation(random.Random(6))
    live.simulation.age = GEN_LEN
    live.simulation.world().animals[0].satiation = 3
    stats = live.train()
    assert stats.max >= 3
    assert stats.min <= stats.avg <= stats.max
    assert live.simulation.age == 0