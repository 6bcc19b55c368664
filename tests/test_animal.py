import math
import random

from evosim.animal import Animal, AnimalIndividual
from evosim.eye import CELLS
from evosim.genetic import Chromosome


def test_random_animal_starts_hungry_at_base_speed():
    animal = Animal.random(random.Random(1))
    assert animal.satiation == 0
    assert animal.speed == 0.002
    assert animal.eye.cells == CELLS


def test_random_animal_placement_is_in_bounds():
    rng = random.Random(8)
    for _ in range(20):
        animal = Animal.random(rng)
        x, y = animal.position
        assert 0.0 <= x < 1.0
        assert 0.0 <= y < 1.0
        assert -math.pi <= animal.rotation <= math.pi


def test_random_animal_reproducible_with_seed():
    first = Animal.random(random.Random(21))
    second = Animal.random(random.Random(21))
    assert first.position == second.position
    assert first.rotation == second.rotation
    assert list(first.as_chromosome()) == list(second.as_chromosome())


def test_chromosome_round_trip():
    rng = random.Random(3)
    animal = Animal.random(rng)
    chromosome = animal.as_chromosome()
    rebuilt = Animal.from_chromosome(chromosome, rng)
    assert list(rebuilt.as_chromosome()) == list(chromosome)
    assert rebuilt.satiation == 0


def test_individual_from_animal_uses_satiation_as_fitness():
    animal = Animal.random(random.Random(4))
    animal.satiation = 7
    individual = AnimalIndividual.from_animal(animal)
    assert individual.fitness == 7.0
    assert list(individual.chromosome) == list(animal.as_chromosome())


def test_created_individual_has_zero_fitness():
    chromosome = Chromosome([0.1, 0.2, 0.3])
    individual = AnimalIndividual.create(chromosome)
    assert individual.fitness == 0.0
    assert list(individual.chromosome) == [0.1, 0.2, 0.3]


def test_into_animal_carries_chromosome():
    rng = random.Random(6)
    animal = Animal.random(rng)
    animal.satiation = 3
    restored = AnimalIndividual.from_animal(animal).into_animal(rng)
    assert list(restored.as_chromosome()) == list(animal.as_chromosome())
    assert restored.satiation == 0