"""Pseudorandom sampling with an explicit, lock-guarded generator."""

from __future__ import annotations

import logging
import threading

import numpy as np
import numpy.typing as npt

from dspcore.config import DspSettings, load_settings


FloatArray = npt.NDArray[np.float64]

logger = logging.getLogger(__name__)


class RandomSource:
    """Thread-safe wrapper around a numpy ``Generator``."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is not None and seed < 0:
            raise ValueError("seed must be >= 0")
        self._lock = threading.Lock()
        self._generator = np.random.default_rng(seed)

    @classmethod
    def from_settings(cls, settings: DspSettings) -> RandomSource:
        """Create a generator seeded from ``settings.random_seed``."""
        return cls(settings.random_seed)

    def reseed(self, seed: int | None) -> None:
        """Replace generator state; ``None`` draws fresh OS entropy."""
        if seed is not None and seed < 0:
            raise ValueError("seed must be >= 0")
        with self._lock:
            self._generator = np.random.default_rng(seed)
        logger.debug("random source reseeded (seed=%s)", seed)

    def integer(self, low: int, high: int) -> int:
        """Draw an integer from ``[low, high)``."""
        if high <= low:
            raise ValueError("high must be > low")
        with self._lock:
            return int(self._generator.integers(low, high))

    def uniform(self) -> float:
        """Draw a float from ``[0, 1)``."""
        with self._lock:
            return float(self._generator.random())

    def uniform_array(self, size: int) -> FloatArray:
        """Draw ``size`` floats from ``[0, 1)`` in one call."""
        if size < 0:
            raise ValueError("size must be >= 0")
        with self._lock:
            return np.asarray(self._generator.random(size), dtype=np.float64)


_default_source: RandomSource | None = None
_default_source_lock = threading.Lock()


def default_random_source() -> RandomSource:
    """Return the process-wide generator, creating it from the environment on first use."""
    global _default_source
    with _default_source_lock:
        if _default_source is None:
            _default_source = RandomSource.from_settings(load_settings())
        return _default_source


def seed(value: int | None) -> None:
    """Reseed the process-wide generator."""
    default_random_source().reseed(value)


def random_int(low: int, high: int, *, rng: RandomSource | None = None) -> int:
    """Pseudorandom integer in ``[low, high)``."""
    source = default_random_source() if rng is None else rng
    return source.integer(low, high)


def random_double(*, rng: RandomSource | None = None) -> float:
    """Pseudorandom float in ``[0, 1]``."""
    source = default_random_source() if rng is None else rng
    return source.uniform()
