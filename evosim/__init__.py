"""Evolving animals with neural-network brains in a simple food-seeking world."""

__version__ = "0.1.0"
__all__ = [
    "animal",
    "brain",
    "eye",
    "food",
    "genetic",
    "linalg",
    "matrix_network",
    "network",
    "simulation",
    "view",
    "world",
]