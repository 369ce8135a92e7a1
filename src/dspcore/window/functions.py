"""Symmetric tapering windows computed eagerly at construction."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any, ClassVar

import numpy as np
import numpy.typing as npt

from dspcore.config import DEFAULT_SAMPLE_FREQUENCY_HZ
from dspcore.source import SignalSource


FloatArray = npt.NDArray[np.float64]

logger = logging.getLogger(__name__)

_TWO_PI = 2.0 * np.pi

_FLATTOP_COEFFICIENTS: tuple[float, ...] = (
    0.21557895,
    0.41663158,
    0.277263158,
    0.083578947,
    0.006947368,
)


class WindowKind(StrEnum):
    """Closed family of supported window shapes."""

    RECTANGULAR = "rectangular"
    TRIANGULAR = "triangular"
    HANN = "hann"
    HAMMING = "hamming"
    BLACKMAN = "blackman"
    GAUSSIAN = "gaussian"
    FLATTOP = "flattop"


class WindowFunction(SignalSource, ABC):
    """Read-only signal source filled from a closed-form window formula.

    Coefficients are evaluated at normalized positions ``x = i / (N - 1)``.
    A single-sample window is ``[1.0]`` and an empty window is valid. The
    sample rate is always ``DEFAULT_SAMPLE_FREQUENCY_HZ``.
    """

    kind: ClassVar[WindowKind]

    def __init__(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise TypeError(f"size must be an integer, got {type(size).__name__}")
        if size < 0:
            raise ValueError("size must be >= 0")

        n = int(size)
        if n == 0:
            samples = np.zeros((0,), dtype=np.float64)
        elif n == 1:
            samples = np.ones((1,), dtype=np.float64)
        else:
            x = np.arange(n, dtype=np.float64) / float(n - 1)
            samples = np.asarray(self._coefficients(x), dtype=np.float64)

        super().__init__(samples, sample_frequency=DEFAULT_SAMPLE_FREQUENCY_HZ)
        self._freeze()
        logger.debug("built %s window (size=%d)", self.kind.value, n)

    @abstractmethod
    def _coefficients(self, x: FloatArray) -> FloatArray:
        """Window values at normalized positions ``x`` in ``[0, 1]``."""


class RectangularWindow(WindowFunction):
    """Rectangular (boxcar) window; no tapering."""

    kind = WindowKind.RECTANGULAR

    def _coefficients(self, x: FloatArray) -> FloatArray:
        return np.ones_like(x)


class TriangularWindow(WindowFunction):
    """Triangular (Bartlett) window with zero endpoints."""

    kind = WindowKind.TRIANGULAR

    def _coefficients(self, x: FloatArray) -> FloatArray:
        return 1.0 - np.abs(2.0 * x - 1.0)


class HannWindow(WindowFunction):
    """Hann window."""

    kind = WindowKind.HANN

    def _coefficients(self, x: FloatArray) -> FloatArray:
        return 0.5 - 0.5 * np.cos(_TWO_PI * x)


class HammingWindow(WindowFunction):
    """Hamming window."""

    kind = WindowKind.HAMMING

    def _coefficients(self, x: FloatArray) -> FloatArray:
        return 0.54 - 0.46 * np.cos(_TWO_PI * x)


class BlackmanWindow(WindowFunction):
    """Blackman window.

    Endpoints evaluate to roughly ``-1.4e-17`` and are left as computed.
    """

    kind = WindowKind.BLACKMAN

    def _coefficients(self, x: FloatArray) -> FloatArray:
        return 0.42 - 0.5 * np.cos(_TWO_PI * x) + 0.08 * np.cos(2.0 * _TWO_PI * x)


class GaussianWindow(WindowFunction):
    """Gaussian window; ``sigma`` is relative to the half-width."""

    kind = WindowKind.GAUSSIAN

    def __init__(self, size: int, sigma: float = 0.5) -> None:
        if not sigma > 0:
            raise ValueError("sigma must be > 0")
        self._sigma = float(sigma)
        super().__init__(size)

    @property
    def sigma(self) -> float:
        """Standard deviation relative to half the window length."""
        return self._sigma

    def _coefficients(self, x: FloatArray) -> FloatArray:
        return np.exp(-0.5 * np.square((2.0 * x - 1.0) / self._sigma))


class FlatTopWindow(WindowFunction):
    """Flat top window normalized to a unit peak; dips slightly below zero."""

    kind = WindowKind.FLATTOP

    def _coefficients(self, x: FloatArray) -> FloatArray:
        out = np.zeros_like(x)
        for k, coefficient in enumerate(_FLATTOP_COEFFICIENTS):
            sign = -1.0 if k % 2 else 1.0
            out += sign * coefficient * np.cos(k * _TWO_PI * x)
        return out


_WINDOW_TYPES: dict[WindowKind, type[WindowFunction]] = {
    cls.kind: cls
    for cls in (
        RectangularWindow,
        TriangularWindow,
        HannWindow,
        HammingWindow,
        BlackmanWindow,
        GaussianWindow,
        FlatTopWindow,
    )
}


def create_window(kind: WindowKind | str, size: int, **params: Any) -> WindowFunction:
    """Build the window named by ``kind``; extra params go to the constructor."""
    try:
        resolved = WindowKind(kind)
    except ValueError as exc:
        raise ValueError(f"Unknown window kind: {kind}") from exc
    return _WINDOW_TYPES[resolved](size, **params)
