from typing import ClassVar, Tuple

from ..conversions.to_hsv import HueSelection, hsl_to_hsv
from ..conversions.to_rgb import RgbSelection, hsl_to_unit_rgb
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorModel, build_registry, channel_property, coerce_hue, coerce_unit


class Hsl(ColorModel):
    """Hue in whole degrees, saturation and luminosity in [0, 1]."""

    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.HSL
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "luminosity")
    coercers = (coerce_hue, coerce_unit, coerce_unit)

    hue = channel_property(0, "Hue, WrappedAngle in [0, 360)")
    saturation = channel_property(1, "HSL saturation in [0, 1]")
    luminosity = channel_property(2, "Luminosity in [0, 1]")

    def __init__(self, hue: int, saturation: float, luminosity: float) -> None:
        super().__init__(hue, saturation, luminosity)

    def select_hsl(self, hue: bool = True, saturation: bool = True, luminosity: bool = True) -> HueSelection:
        h, s, l = self._value
        return (h if hue else None, s if saturation else None, l if luminosity else None)

    def select_hsv(self, hue: bool = True, saturation: bool = True, value: bool = True) -> HueSelection:
        h, s, l = self._value
        return hsl_to_hsv(h, s, l, hue, saturation, value)

    def select_rgb_float(self, red: bool = True, green: bool = True, blue: bool = True) -> RgbSelection:
        h, s, l = self._value
        return hsl_to_unit_rgb(h, s, l, red, green, blue)


hsl_tuple_to_class = build_registry(Hsl)
