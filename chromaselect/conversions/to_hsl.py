from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray

from .numbers import BoundedUnit, WrappedAngle, np_require_unit, np_snap_unit
from .to_hsv import HueSelection, unit_rgb_to_hsvl, np_unit_rgb_to_hsvl
from ..types.format_type import HUE_360


def unit_rgb_to_hsl(
    red: float,
    green: float,
    blue: float,
    hue: bool = True,
    saturation: bool = True,
    luminosity: bool = True,
) -> HueSelection:
    """Convert unit RGB to (hue, saturation, luminosity)."""
    return unit_rgb_to_hsvl(red, green, blue, hue, saturation, luminosity, luminosity=True)


def hsv_to_hsl(
    h: WrappedAngle,
    s: float,
    v: float,
    hue: bool = True,
    saturation: bool = True,
    luminosity: bool = True,
) -> HueSelection:
    """
    Convert HSV to HSL without going through RGB.

    Luminosity feeds the saturation formula, so it is computed whenever either
    saturation or luminosity is requested. Saturation is zero at the black and
    white ends of the luminosity axis.
    """
    s_raw, v_raw = float(s), float(v)

    l = None
    if saturation or luminosity:
        l = v_raw * (1 - s_raw / 2)

    s_out = None
    if saturation:
        if l == 0.0 or l == 1.0:
            s_out = 0.0
        elif l <= 0.5:
            # (v - l) / l with v cancelled out, stable near black
            s_out = s_raw / (2 - s_raw)
        else:
            s_out = (v_raw - l) / (1 - l)

    return (
        WrappedAngle(h) if hue else None,
        None if s_out is None else BoundedUnit.from_snapped(s_out),
        BoundedUnit.from_snapped(l) if luminosity else None,
    )


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized ``unit_rgb_to_hsl``; returns (..., 3)."""
    return np_unit_rgb_to_hsvl(r, g, b, luminosity=True)


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized ``hsv_to_hsl``; returns (..., 3)."""
    h = np.mod(np.asarray(h, dtype=float), HUE_360)
    s = np_require_unit(s, "saturation")
    v = np_require_unit(v, "value")
    h, s, v = np.broadcast_arrays(h, s, v)

    l = v * (1 - s / 2)
    edge = (l == 0) | (l == 1)
    dark = l <= 0.5
    s_l = np.where(
        edge,
        0.0,
        np.where(dark, s / (2 - s), (v - l) / np.where(dark | edge, 1.0, 1 - l)),
    )

    return np.stack([h, np_snap_unit(s_l, "saturation"), np_snap_unit(l, "luminosity")], axis=-1)
