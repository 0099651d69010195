"""Number and coordinate formatting helpers. No svg imports."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


def format_number(value: float) -> str:
    """Shortest round-trip decimal text: 10.0 -> "10", 1e-05 -> "0.00001".

    Never switches to scientific notation, unlike Go's ``%g`` (``1e+06``).
    NaN and infinities pass through as "nan", "inf" and "-inf".
    """
    return np.format_float_positional(float(value), unique=True, trim="-")


def coerce_points(points: Any) -> NDArray[np.float64]:
    """Normalize a point sequence (tuples, Points or an Nx2 array) to an Nx2 float array.

    Raises ValueError for anything that is not a list of (x, y) pairs.
    """
    if isinstance(points, np.ndarray):
        arr = points.astype(np.float64)
    else:
        arr = np.array([tuple(p) for p in points], dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected a sequence of (x, y) pairs, got shape {arr.shape}")
    return arr
