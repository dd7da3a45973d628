from __future__ import annotations
from enum import Enum
from typing import Union


class ColorSpace(str, Enum):
    RGB = "rgb"
    CMYK = "cmyk"
    HSV = "hsv"
    HSL = "hsl"


HUE_SPACES = {ColorSpace.HSV, ColorSpace.HSL}


def as_color_space(color_space: Union[ColorSpace, str]) -> ColorSpace:
    """Normalize a ColorSpace or case-insensitive name into a ColorSpace."""
    if isinstance(color_space, ColorSpace):
        return color_space
    try:
        return ColorSpace(color_space.lower())
    except (AttributeError, ValueError):
        raise ValueError(f"Unknown space: {color_space!r}") from None


def is_hue_space(color_space: Union[ColorSpace, str]) -> bool:
    """
    Check if the given color space is a hue-based space (HSV or HSL).

    Args:
        color_space: Color space enum member or its name
    Returns:
        True if hue-based, False otherwise
    """
    return as_color_space(color_space) in HUE_SPACES
