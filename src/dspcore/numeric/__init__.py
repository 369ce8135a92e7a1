"""Numeric helpers: decibels, clamping and pseudorandom sampling."""

from dspcore.numeric.functions import clamp, db
from dspcore.numeric.rng import (
    RandomSource,
    default_random_source,
    random_double,
    random_int,
    seed,
)

__all__ = [
    "RandomSource",
    "clamp",
    "db",
    "default_random_source",
    "random_double",
    "random_int",
    "seed",
]
