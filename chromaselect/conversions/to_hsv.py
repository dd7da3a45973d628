from __future__ import annotations
from typing import Optional, Tuple

import numpy as np
from numpy import ndarray as NDArray

from .numbers import (
    BoundedUnit,
    WrappedAngle,
    np_require_unit,
    np_round_half_up,
    np_snap_unit,
    round_half_up,
)
from ..types.format_type import HUE_360

HueSelection = Tuple[Optional[WrappedAngle], Optional[BoundedUnit], Optional[BoundedUnit]]


def unit_rgb_to_hsvl(
    red: float,
    green: float,
    blue: float,
    hue: bool = True,
    saturation: bool = True,
    third: bool = True,
    *,
    luminosity: bool = False,
) -> HueSelection:
    """
    Shared RGB -> HSV / HSL kernel.

    Hue is common to both models; ``luminosity`` decides whether the third
    channel (and the saturation formula) is HSL luminosity or HSV value.

    Args:
        red, green, blue: Unit RGB channels in [0, 1]
        hue, saturation, third: Which output channels to compute
        luminosity: True for HSL output, False for HSV output

    Returns:
        (hue, saturation, value-or-luminosity), None for channels not requested
    """
    if not (hue or saturation or third):
        return None, None, None

    r, g, b = float(red), float(green), float(blue)
    high = max(r, g, b)
    low = min(r, g, b)
    chroma = high - low

    h = None
    if hue:
        if high == low:
            h = WrappedAngle(0)
        else:
            if high == r:
                sector = ((g - b) / chroma) % 6
            elif high == g:
                sector = (b - r) / chroma + 2
            else:
                sector = (r - g) / chroma + 4
            h = WrappedAngle.wrapped(round_half_up(sector * 60))

    s = None
    if saturation:
        if luminosity:
            # high + low and 2 - high - low never cancel to zero while chroma > 0
            if chroma == 0.0:
                s = 0.0
            elif high + low <= 1.0:
                s = chroma / (high + low)
            else:
                s = chroma / (2 - high - low)
        elif high == 0.0:
            s = 0.0
        else:
            s = chroma / high

    vl = None
    if third:
        vl = (high + low) / 2 if luminosity else high

    return (
        h,
        None if s is None else BoundedUnit.from_snapped(s),
        None if vl is None else BoundedUnit.from_snapped(vl),
    )


def unit_rgb_to_hsv(
    red: float,
    green: float,
    blue: float,
    hue: bool = True,
    saturation: bool = True,
    value: bool = True,
) -> HueSelection:
    """Convert unit RGB to (hue, saturation, value)."""
    return unit_rgb_to_hsvl(red, green, blue, hue, saturation, value, luminosity=False)


def hsl_to_hsv(
    h: WrappedAngle,
    s: float,
    l: float,
    hue: bool = True,
    saturation: bool = True,
    value: bool = True,
) -> HueSelection:
    """
    Convert HSL to HSV without going through RGB.

    Value is shared by both output channels, so it is computed whenever either
    saturation or value is requested.
    """
    s_raw, l_raw = float(s), float(l)

    v = None
    if saturation or value:
        v = l_raw + s_raw * min(l_raw, 1 - l_raw)

    s_out = None
    if saturation:
        s_out = 0.0 if v == 0.0 else 2 * (1 - l_raw / v)

    return (
        WrappedAngle(h) if hue else None,
        None if s_out is None else BoundedUnit.from_snapped(s_out),
        BoundedUnit.from_snapped(v) if value else None,
    )


def np_unit_rgb_to_hsvl(r: NDArray, g: NDArray, b: NDArray, luminosity: bool = False) -> NDArray:
    """
    Vectorized ``unit_rgb_to_hsvl``.

    Args:
        r, g, b: array-like or scalar, [0,1]
        luminosity: True for HSL output, False for HSV output

    Returns:
        array of shape (..., 3): (hue [0,360) in whole degrees, saturation, value-or-luminosity)
    """
    r = np_require_unit(r, "red")
    g = np_require_unit(g, "green")
    b = np_require_unit(b, "blue")
    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    high = np.maximum.reduce([r, g, b])
    low = np.minimum.reduce([r, g, b])
    chroma = high - low
    grey = chroma == 0
    safe_chroma = np.where(grey, 1.0, chroma)

    sector = np.where(
        high == r,
        ((g - b) / safe_chroma) % 6,
        np.where(high == g, (b - r) / safe_chroma + 2, (r - g) / safe_chroma + 4),
    )
    h = np.where(grey, 0.0, np_round_half_up(sector * 60) % HUE_360)

    if luminosity:
        total = high + low
        third = total / 2
        denom = np.where(total <= 1.0, total, 2 - high - low)
        s = np.where(grey, 0.0, chroma / np.where(grey, 1.0, denom))
    else:
        third = high
        black = high == 0
        s = np.where(black, 0.0, chroma / np.where(black, 1.0, high))

    return np.stack([h, np_snap_unit(s, "saturation"), np_snap_unit(third, "value")], axis=-1)


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized ``unit_rgb_to_hsv``; returns (..., 3)."""
    return np_unit_rgb_to_hsvl(r, g, b, luminosity=False)


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized ``hsl_to_hsv``; returns (..., 3)."""
    h = np.mod(np.asarray(h, dtype=float), HUE_360)
    s = np_require_unit(s, "saturation")
    l = np_require_unit(l, "luminosity")
    h, s, l = np.broadcast_arrays(h, s, l)

    v = l + s * np.minimum(l, 1 - l)
    black = v == 0
    s_v = np.where(black, 0.0, 2 * (1 - l / np.where(black, 1.0, v)))

    return np.stack([h, np_snap_unit(s_v, "saturation"), np_snap_unit(v, "value")], axis=-1)
