"""Fixed-length real-valued sample sequences with an associated sample rate."""

from __future__ import annotations

import math
from typing import Iterator

import numpy as np
import numpy.typing as npt

from dspcore.config import load_settings


FloatArray = npt.NDArray[np.float64]


class SignalSource:
    """Owned, fixed-size buffer of float64 samples.

    The constructor copies ``samples``; later changes to the caller's buffer
    never reach the source. Generic sources allow item assignment, subclasses
    may freeze their buffer via ``_freeze``. Without an explicit
    ``sample_frequency`` the rate comes from ``load_settings()``.
    """

    __array_ufunc__ = None

    def __init__(
        self,
        samples: npt.ArrayLike = (),
        *,
        sample_frequency: float | None = None,
    ) -> None:
        if sample_frequency is None:
            sample_frequency = load_settings().default_sample_frequency_hz
        frequency = float(sample_frequency)
        if not math.isfinite(frequency) or frequency <= 0:
            raise ValueError("sample_frequency must be a finite value > 0")

        data = np.array(samples, dtype=np.float64)
        if data.ndim != 1:
            raise ValueError("samples must be 1D")

        self._samples: FloatArray = data
        self._sample_frequency = frequency

    @property
    def sample_frequency(self) -> float:
        """Samples per second."""
        return self._sample_frequency

    @property
    def length(self) -> int:
        """Number of samples."""
        return int(self._samples.size)

    @property
    def duration(self) -> float:
        """Length of the sequence in seconds."""
        return self.length / self._sample_frequency

    @property
    def read_only(self) -> bool:
        """Whether item assignment is rejected."""
        return not self._samples.flags.writeable

    def sample_at(self, index: int) -> float:
        """Return the sample at ``index``."""
        if index < 0 or index >= self.length:
            raise IndexError(f"sample index {index} out of range for length {self.length}")
        return float(self._samples[index])

    def to_array(self) -> FloatArray:
        """Return a view of all samples in order."""
        return self._samples

    def mean(self) -> float:
        """Arithmetic mean of the samples."""
        self._require_samples("mean")
        return float(np.mean(self._samples))

    def energy(self) -> float:
        """Sum of squared samples."""
        return float(np.sum(np.square(self._samples)))

    def power(self) -> float:
        """Energy per sample."""
        self._require_samples("power")
        return self.energy() / self.length

    def norm(self) -> float:
        """Euclidean norm of the sample vector."""
        return math.sqrt(self.energy())

    def rms(self) -> float:
        """Root mean square of the samples."""
        return math.sqrt(self.power())

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[float]:
        for value in self._samples:
            yield float(value)

    def __getitem__(self, index: int) -> float:
        return self.sample_at(index)

    def __setitem__(self, index: int, value: float) -> None:
        if self.read_only:
            raise TypeError(f"{type(self).__name__} samples are read-only")
        if index < 0 or index >= self.length:
            raise IndexError(f"sample index {index} out of range for length {self.length}")
        self._samples[index] = value

    def __mul__(self, other: SignalSource | float) -> SignalSource:
        return SignalSource(
            self._samples * self._operand(other),
            sample_frequency=self._sample_frequency,
        )

    __rmul__ = __mul__

    def __add__(self, other: SignalSource | float) -> SignalSource:
        return SignalSource(
            self._samples + self._operand(other),
            sample_frequency=self._sample_frequency,
        )

    __radd__ = __add__

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(length={self.length}, "
            f"sample_frequency={self._sample_frequency})"
        )

    def _freeze(self) -> None:
        self._samples.flags.writeable = False

    def _operand(self, other: SignalSource | float) -> FloatArray | float:
        if isinstance(other, SignalSource):
            if other.length != self.length:
                raise ValueError(
                    f"source lengths must match: {self.length} != {other.length}"
                )
            return other.to_array()
        return float(other)

    def _require_samples(self, operation: str) -> None:
        if self.length == 0:
            raise ValueError(f"{operation} requires at least 1 sample")
