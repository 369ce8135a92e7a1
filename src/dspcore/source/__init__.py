"""Signal source data model and synthetic generators."""

from dspcore.source.generators import WhiteNoiseGenerator
from dspcore.source.signal_source import SignalSource

__all__ = [
    "SignalSource",
    "WhiteNoiseGenerator",
]
