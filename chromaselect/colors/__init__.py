"""
chromaselect Color Classes
==========================

Six immutable representation records, each implementing the channel
selector contract of ``ColorModel``, plus the ``Color`` facade over them.

Representations
---------------
- Rgb: integer RGB (0-255)
- RgbFloat: normalized RGB (0.0-1.0)
- Cmyk: integer CMYK (0-255)
- CmykFloat: normalized CMYK (0.0-1.0)
- Hsl: hue in degrees, saturation and luminosity (0.0-1.0)
- Hsv: hue in degrees, saturation and value (0.0-1.0)

Usage
-----
>>> from chromaselect.colors import Color
>>> green = Color.new_rgb(0, 255, 0)
>>> green.hue()
WrappedAngle(120)
>>> green.to_hsv().model
Hsv(hue=WrappedAngle(120), saturation=BoundedUnit(1.0), value=BoundedUnit(1.0))

Asking a representation directly for a subset of channels:

>>> green.model.select_hsl(hue=False, saturation=True, luminosity=False)
(None, BoundedUnit(1.0), None)
"""

from .color_base import ColorModel
from .rgb import Rgb, RgbFloat
from .cmyk import Cmyk, CmykFloat
from .hsl import Hsl
from .hsv import Hsv
from .color import Color, color_convert, get_color_class, unified_tuple_to_class

__all__ = [
    'ColorModel',
    'Rgb',
    'RgbFloat',
    'Cmyk',
    'CmykFloat',
    'Hsl',
    'Hsv',
    'Color',
    'color_convert',
    'get_color_class',
    'unified_tuple_to_class',
]
