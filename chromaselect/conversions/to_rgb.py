from __future__ import annotations
from typing import Optional, Tuple

import numpy as np
from numpy import ndarray as NDArray

from .numbers import BoundedUnit, np_require_unit, np_snap_unit
from ..errors import expect
from ..types.format_type import HUE_360

RgbSelection = Tuple[Optional[BoundedUnit], Optional[BoundedUnit], Optional[BoundedUnit]]

# Phase offsets of the red, green and blue channels on each model's hue wheel
HSL_PHASES = (0.0, 8.0, 4.0)
HSV_PHASES = (5.0, 3.0, 1.0)


def hsl_to_unit_rgb(
    h: int,
    s: float,
    l: float,
    red: bool = True,
    green: bool = True,
    blue: bool = True,
) -> RgbSelection:
    """
    Convert HSL to unit RGB.

    Each channel is an independent evaluation of the same wave function at its
    own phase, so unrequested channels cost nothing.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Luminosity in [0, 1]
        red, green, blue: Which output channels to compute

    Returns:
        (r, g, b) BoundedUnits, None for channels not requested
    """
    h_raw, s_raw, l_raw = float(h), float(s), float(l)
    a = s_raw * min(l_raw, 1 - l_raw)

    def channel(n: float) -> BoundedUnit:
        k = (n + h_raw / 30) % 12
        return BoundedUnit.from_snapped(l_raw - a * max(-1.0, min(k - 3, 9 - k, 1.0)))

    wanted = (red, green, blue)
    return tuple(channel(n) if want else None for n, want in zip(HSL_PHASES, wanted))  # type: ignore[return-value]


def hsv_to_unit_rgb(
    h: int,
    s: float,
    v: float,
    red: bool = True,
    green: bool = True,
    blue: bool = True,
) -> RgbSelection:
    """
    Convert HSV to unit RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]
        red, green, blue: Which output channels to compute

    Returns:
        (r, g, b) BoundedUnits, None for channels not requested
    """
    h_raw, s_raw, v_raw = float(h), float(s), float(v)

    def channel(n: float) -> BoundedUnit:
        k = (n + h_raw / 60) % 6
        return BoundedUnit.from_snapped(v_raw - v_raw * s_raw * max(0.0, min(k, 4 - k, 1.0)))

    wanted = (red, green, blue)
    return tuple(channel(n) if want else None for n, want in zip(HSV_PHASES, wanted))  # type: ignore[return-value]


def cmyk_to_unit_rgb(
    c: Optional[float],
    m: Optional[float],
    y: Optional[float],
    k: float,
    red: bool = True,
    green: bool = True,
    blue: bool = True,
) -> RgbSelection:
    """
    Convert unit CMYK to unit RGB.

    A colour component may be None when the matching RGB channel is not
    requested; key is always needed.
    """
    black_coefficient = 1.0 - float(k)

    def channel(component: Optional[float], name: str) -> BoundedUnit:
        value = float(expect(component, f"{name} was not returned"))
        return BoundedUnit.from_snapped((1.0 - value) * black_coefficient)

    return (
        channel(c, "Cyan") if red else None,
        channel(m, "Magenta") if green else None,
        channel(y, "Yellow") if blue else None,
    )


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized ``hsl_to_unit_rgb``.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, [0,1] saturation
        l: array-like or scalar, [0,1] luminosity

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.mod(np.asarray(h, dtype=float), HUE_360)
    s = np_require_unit(s, "saturation")
    l = np_require_unit(l, "luminosity")
    h, s, l = np.broadcast_arrays(h, s, l)

    a = s * np.minimum(l, 1 - l)

    def channel(n: float) -> NDArray:
        k = (n + h / 30) % 12
        return l - a * np.maximum(-1.0, np.minimum(np.minimum(k - 3, 9 - k), 1.0))

    rgb = np.stack([channel(n) for n in HSL_PHASES], axis=-1)
    return np_snap_unit(rgb, "rgb")


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized ``hsv_to_unit_rgb``.

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.mod(np.asarray(h, dtype=float), HUE_360)
    s = np_require_unit(s, "saturation")
    v = np_require_unit(v, "value")
    h, s, v = np.broadcast_arrays(h, s, v)

    def channel(n: float) -> NDArray:
        k = (n + h / 60) % 6
        return v - v * s * np.maximum(0.0, np.minimum(np.minimum(k, 4 - k), 1.0))

    rgb = np.stack([channel(n) for n in HSV_PHASES], axis=-1)
    return np_snap_unit(rgb, "rgb")


def np_cmyk_to_unit_rgb(c: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    """
    Vectorized ``cmyk_to_unit_rgb``.

    Returns:
        rgb: array of shape (..., 3)
    """
    c = np_require_unit(c, "cyan")
    m = np_require_unit(m, "magenta")
    y = np_require_unit(y, "yellow")
    k = np_require_unit(k, "key")
    c, m, y, k = np.broadcast_arrays(c, m, y, k)

    black_coefficient = 1.0 - k
    rgb = np.stack([(1.0 - c) * black_coefficient,
                    (1.0 - m) * black_coefficient,
                    (1.0 - y) * black_coefficient], axis=-1)
    return np_snap_unit(rgb, "rgb")
