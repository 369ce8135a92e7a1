"""Configuration defaults for dspcore."""

from dspcore.config.settings import (
    DEFAULT_SAMPLE_FREQUENCY_HZ,
    RANDOM_SEED_ENV_VAR,
    SAMPLE_FREQUENCY_ENV_VAR,
    DspSettings,
    load_settings,
)

__all__ = [
    "DEFAULT_SAMPLE_FREQUENCY_HZ",
    "DspSettings",
    "RANDOM_SEED_ENV_VAR",
    "SAMPLE_FREQUENCY_ENV_VAR",
    "load_settings",
]
