"""Adapters - implementations of ports."""

from .clock_ids import MonotonicIdGenerator
from .json_seed import JsonSeedSource
from .static_seed import DEFAULT_SEED, StaticSeedSource

__all__ = [
    "MonotonicIdGenerator",
    "JsonSeedSource",
    "StaticSeedSource",
    "DEFAULT_SEED",
]
