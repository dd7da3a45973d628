"""
chromaselect color conversion kernels
=====================================

Closed-form conversions between unit RGB, HSV, HSL and unit CMYK.

Scalar kernels take one color and a flag per output channel; channels whose
flag is False come back as None and are not computed:

>>> from chromaselect.conversions import unit_rgb_to_hsv
>>> unit_rgb_to_hsv(0.0, 1.0, 0.0, hue=True, saturation=False, value=False)
(WrappedAngle(120), None, None)

Vectorized ``np_`` kernels apply the same formulas to numpy arrays and always
compute every channel. ``np_convert`` routes arrays between any two spaces
and formats.

Conversion Functions
--------------------
RGB → HSV / HSL:
    unit_rgb_to_hsv, unit_rgb_to_hsl, unit_rgb_to_hsvl
HSV / HSL / CMYK → RGB:
    hsv_to_unit_rgb, hsl_to_unit_rgb, cmyk_to_unit_rgb
HSV ↔ HSL:
    hsv_to_hsl, hsl_to_hsv
RGB → CMYK:
    unit_rgb_to_cmyk
"""

from .numbers import BoundedUnit, WrappedAngle, round_half_up

# RGB → HSV conversions
from .to_hsv import (
    unit_rgb_to_hsvl,
    unit_rgb_to_hsv,
    np_unit_rgb_to_hsvl,
    np_unit_rgb_to_hsv,
)

# RGB → HSL conversions
from .to_hsl import (
    unit_rgb_to_hsl,
    np_unit_rgb_to_hsl,
)

# HSV / HSL / CMYK → RGB conversions
from .to_rgb import (
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    cmyk_to_unit_rgb,
    np_hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
    np_cmyk_to_unit_rgb,
)

# RGB → CMYK conversions
from .to_cmyk import unit_rgb_to_cmyk, np_unit_rgb_to_cmyk

# HSV ↔ HSL conversions
from .to_hsv import hsl_to_hsv, np_hsl_to_hsv
from .to_hsl import hsv_to_hsl, np_hsv_to_hsl

# High-level API
from .wrapper import np_convert

from ..types.format_type import FormatType
from ..types.color_types import ColorSpace

__all__ = [
    'BoundedUnit',
    'WrappedAngle',
    'round_half_up',

    # RGB → HSV / HSL
    'unit_rgb_to_hsvl',
    'unit_rgb_to_hsv',
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsvl',
    'np_unit_rgb_to_hsv',
    'np_unit_rgb_to_hsl',

    # → RGB
    'hsv_to_unit_rgb',
    'hsl_to_unit_rgb',
    'cmyk_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'np_cmyk_to_unit_rgb',

    # RGB → CMYK
    'unit_rgb_to_cmyk',
    'np_unit_rgb_to_cmyk',

    # HSV ↔ HSL
    'hsv_to_hsl',
    'hsl_to_hsv',
    'np_hsv_to_hsl',
    'np_hsl_to_hsv',

    # High-level API
    'np_convert',

    # Types
    'FormatType',
    'ColorSpace',
]
