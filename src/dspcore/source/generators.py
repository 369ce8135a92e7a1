"""Synthetic signal sources."""

from __future__ import annotations

from dspcore.numeric import RandomSource, default_random_source
from dspcore.source.signal_source import SignalSource


class WhiteNoiseGenerator(SignalSource):
    """Uniform white noise centred on zero, spanning ``[-amplitude/2, amplitude/2)``."""

    def __init__(
        self,
        length: int,
        *,
        amplitude: float = 1.0,
        sample_frequency: float | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        if length < 0:
            raise ValueError("length must be >= 0")
        if not amplitude >= 0:
            raise ValueError("amplitude must be >= 0")

        source = default_random_source() if rng is None else rng
        samples = amplitude * (source.uniform_array(length) - 0.5)

        super().__init__(samples, sample_frequency=sample_frequency)
        self._amplitude = float(amplitude)

    @property
    def amplitude(self) -> float:
        """Peak-to-peak span of the generated noise."""
        return self._amplitude
