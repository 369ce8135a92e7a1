"""Window functions for tapering sample buffers before spectral analysis."""

from dspcore.window.functions import (
    BlackmanWindow,
    FlatTopWindow,
    GaussianWindow,
    HammingWindow,
    HannWindow,
    RectangularWindow,
    TriangularWindow,
    WindowFunction,
    WindowKind,
    create_window,
)

__all__ = [
    "BlackmanWindow",
    "FlatTopWindow",
    "GaussianWindow",
    "HammingWindow",
    "HannWindow",
    "RectangularWindow",
    "TriangularWindow",
    "WindowFunction",
    "WindowKind",
    "create_window",
]
