"""Scalar helpers for level reporting and range limiting."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt


FloatArray = npt.NDArray[np.float64]


def db(
    value: float | complex | npt.ArrayLike,
    ref_value: float | None = None,
) -> float | FloatArray:
    """Convert a magnitude to decibels, optionally relative to ``ref_value``.

    Complex inputs are reduced to their magnitude first. Scalars return a
    ``float`` and array-likes return a float64 array.

    Non-positive ratios follow logarithm semantics instead of raising: zero maps
    to ``-inf`` and negative values to ``nan``. A zero ``ref_value`` is not
    rejected and yields ``inf`` or ``nan`` accordingly.
    """
    x = np.asarray(value)
    if np.iscomplexobj(x):
        x = np.abs(x)
    ratio = x.astype(np.float64)

    with np.errstate(divide="ignore", invalid="ignore"):
        if ref_value is not None:
            ratio = ratio / np.float64(ref_value)
        result = 20.0 * np.log10(ratio)

    if result.ndim == 0:
        return float(result)
    return np.asarray(result, dtype=np.float64)


def clamp(min_value: float, value: float, max_value: float) -> float:
    """Limit ``value`` to ``[min_value, max_value]``.

    Callers must pass ``min_value <= max_value``; with inverted bounds the
    result is ``min_value``.
    """
    return max(min_value, min(value, max_value))
