from __future__ import annotations
from typing import Optional, Tuple

import numpy as np
from numpy import ndarray as NDArray

from .numbers import BoundedUnit, np_require_unit, np_snap_unit

CmykSelection = Tuple[
    Optional[BoundedUnit],
    Optional[BoundedUnit],
    Optional[BoundedUnit],
    Optional[BoundedUnit],
]


def unit_rgb_to_cmyk(
    red: float,
    green: float,
    blue: float,
    cyan: bool = True,
    magenta: bool = True,
    yellow: bool = True,
    key_black: bool = True,
) -> CmykSelection:
    """
    Convert unit RGB to unit CMYK.

    Pure black has no chroma to distribute, so it maps to (0, 0, 0, 1)
    instead of dividing by zero.

    Args:
        red, green, blue: Unit RGB channels in [0, 1]
        cyan, magenta, yellow, key_black: Which output channels to compute

    Returns:
        (c, m, y, k) BoundedUnits, None for channels not requested
    """
    if not (cyan or magenta or yellow or key_black):
        return None, None, None, None

    r, g, b = float(red), float(green), float(blue)
    k_inv = max(r, g, b)
    k = 1.0 - k_inv

    def component(channel: float) -> BoundedUnit:
        if k_inv == 0.0:
            return BoundedUnit.MIN
        # k_inv - channel never exceeds k_inv, unlike 1 - channel - k
        return BoundedUnit.from_snapped((k_inv - channel) / k_inv)

    return (
        component(r) if cyan else None,
        component(g) if magenta else None,
        component(b) if yellow else None,
        BoundedUnit.from_snapped(k) if key_black else None,
    )


def np_unit_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized ``unit_rgb_to_cmyk``.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        cmyk: array of shape (..., 4)
    """
    r = np_require_unit(r, "red")
    g = np_require_unit(g, "green")
    b = np_require_unit(b, "blue")
    r, g, b = np.broadcast_arrays(r, g, b)

    k_inv = np.maximum.reduce([r, g, b])
    k = 1.0 - k_inv
    black = k_inv == 0
    safe_k_inv = np.where(black, 1.0, k_inv)

    def component(channel: NDArray) -> NDArray:
        return np.where(black, 0.0, (k_inv - channel) / safe_k_inv)

    cmyk = np.stack([component(r), component(g), component(b), k], axis=-1)
    return np_snap_unit(cmyk, "cmyk")
