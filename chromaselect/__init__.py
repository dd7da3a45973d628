"""chromaselect: selective color conversion between RGB, CMYK, HSL and HSV."""

from .colors.color_base import ColorModel
from .colors.rgb import Rgb, RgbFloat
from .colors.cmyk import Cmyk, CmykFloat
from .colors.hsl import Hsl
from .colors.hsv import Hsv
from .colors.color import Color, color_convert, get_color_class

from .conversions import (
    BoundedUnit,
    WrappedAngle,
    unit_rgb_to_hsv,
    unit_rgb_to_hsl,
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    hsl_to_hsv,
    hsv_to_hsl,
    unit_rgb_to_cmyk,
    cmyk_to_unit_rgb,
    np_unit_rgb_to_hsv,
    np_unit_rgb_to_hsl,
    np_hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
    np_hsl_to_hsv,
    np_hsv_to_hsl,
    np_unit_rgb_to_cmyk,
    np_cmyk_to_unit_rgb,
    np_convert,
)
from .errors import OutOfRangeError, MissingSelectionError
from .types import ColorSpace, FormatType

__version__ = "0.1.0"

__all__ = [
    # representations
    "ColorModel",
    "Rgb",
    "RgbFloat",
    "Cmyk",
    "CmykFloat",
    "Hsl",
    "Hsv",
    # facade
    "Color",
    "color_convert",
    "get_color_class",
    # scalars
    "BoundedUnit",
    "WrappedAngle",
    # conversions
    "unit_rgb_to_hsv",
    "unit_rgb_to_hsl",
    "hsv_to_unit_rgb",
    "hsl_to_unit_rgb",
    "hsl_to_hsv",
    "hsv_to_hsl",
    "unit_rgb_to_cmyk",
    "cmyk_to_unit_rgb",
    "np_unit_rgb_to_hsv",
    "np_unit_rgb_to_hsl",
    "np_hsv_to_unit_rgb",
    "np_hsl_to_unit_rgb",
    "np_hsl_to_hsv",
    "np_hsv_to_hsl",
    "np_unit_rgb_to_cmyk",
    "np_cmyk_to_unit_rgb",
    "np_convert",
    # errors
    "OutOfRangeError",
    "MissingSelectionError",
    # enums
    "ColorSpace",
    "FormatType",
    "__version__",
]
