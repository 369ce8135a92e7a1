"""Runtime settings shared by signal sources and random generators."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping


DEFAULT_SAMPLE_FREQUENCY_HZ = 44100.0

SAMPLE_FREQUENCY_ENV_VAR = "DSPCORE_DEFAULT_SAMPLE_FREQUENCY_HZ"
RANDOM_SEED_ENV_VAR = "DSPCORE_RANDOM_SEED"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DspSettings:
    """Process-level defaults for sample rate and pseudorandom seeding."""

    default_sample_frequency_hz: float = DEFAULT_SAMPLE_FREQUENCY_HZ
    random_seed: int | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.default_sample_frequency_hz):
            raise ValueError("default_sample_frequency_hz must be finite")
        if self.default_sample_frequency_hz <= 0:
            raise ValueError("default_sample_frequency_hz must be > 0")
        if self.random_seed is not None and self.random_seed < 0:
            raise ValueError("random_seed must be >= 0")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DspSettings:
        """Build settings from ``DSPCORE_*`` environment variables."""
        env = os.environ if environ is None else environ

        raw_frequency = env.get(SAMPLE_FREQUENCY_ENV_VAR, "").strip()
        raw_seed = env.get(RANDOM_SEED_ENV_VAR, "").strip()

        frequency = DEFAULT_SAMPLE_FREQUENCY_HZ
        if raw_frequency:
            try:
                frequency = float(raw_frequency)
            except ValueError as exc:
                raise ValueError(
                    f"{SAMPLE_FREQUENCY_ENV_VAR} must be a number, got {raw_frequency!r}"
                ) from exc

        seed: int | None = None
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError as exc:
                raise ValueError(
                    f"{RANDOM_SEED_ENV_VAR} must be an integer, got {raw_seed!r}"
                ) from exc

        return cls(default_sample_frequency_hz=frequency, random_seed=seed)


def load_settings(environ: Mapping[str, str] | None = None) -> DspSettings:
    """Settings from the environment, falling back to defaults when malformed."""
    try:
        return DspSettings.from_env(environ)
    except ValueError as exc:
        logger.warning("ignoring invalid dspcore environment settings: %s", exc)
        return DspSettings()
