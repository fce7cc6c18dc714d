"""Ports - interfaces/protocols for external dependencies."""

from .id_generator import IdGenerator
from .seed_source import SeedSource

__all__ = [
    "IdGenerator",
    "SeedSource",
]
