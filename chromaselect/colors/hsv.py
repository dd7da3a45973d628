from typing import ClassVar, Tuple

from ..conversions.to_hsv import HueSelection
from ..conversions.to_hsl import hsv_to_hsl
from ..conversions.to_rgb import RgbSelection, hsv_to_unit_rgb
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorModel, build_registry, channel_property, coerce_hue, coerce_unit


class Hsv(ColorModel):
    """Hue in whole degrees, saturation and value in [0, 1]."""

    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.HSV
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "value")
    coercers = (coerce_hue, coerce_unit, coerce_unit)

    hue = channel_property(0, "Hue, WrappedAngle in [0, 360)")
    saturation = channel_property(1, "HSV saturation in [0, 1]")

    def __init__(self, hue: int, saturation: float, value: float) -> None:
        super().__init__(hue, saturation, value)

    @property
    def brightness(self):
        """HSV value in [0, 1] (``value`` is the whole channel tuple)."""
        return self._value[2]

    def select_hsv(self, hue: bool = True, saturation: bool = True, value: bool = True) -> HueSelection:
        h, s, v = self._value
        return (h if hue else None, s if saturation else None, v if value else None)

    def select_hsl(self, hue: bool = True, saturation: bool = True, luminosity: bool = True) -> HueSelection:
        h, s, v = self._value
        return hsv_to_hsl(h, s, v, hue, saturation, luminosity)

    def select_rgb_float(self, red: bool = True, green: bool = True, blue: bool = True) -> RgbSelection:
        h, s, v = self._value
        return hsv_to_unit_rgb(h, s, v, red, green, blue)


hsv_tuple_to_class = build_registry(Hsv)
