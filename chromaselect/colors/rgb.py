from typing import ClassVar, Tuple

from ..conversions.numbers import BoundedUnit, to_byte_index
from ..conversions.to_rgb import RgbSelection
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import (
    ByteSelection3,
    ColorModel,
    build_registry,
    channel_property,
    coerce_unit,
)


class Rgb(ColorModel):
    """Integer RGB, each channel 0..255."""

    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.RGB
    format_type: ClassVar[FormatType] = FormatType.INT
    channels: ClassVar[Tuple[str, ...]] = ("red", "green", "blue")
    coercers = (to_byte_index, to_byte_index, to_byte_index)

    red = channel_property(0, "Red channel, 0..255")
    green = channel_property(1, "Green channel, 0..255")
    blue = channel_property(2, "Blue channel, 0..255")

    def __init__(self, red: int, green: int, blue: int) -> None:
        super().__init__(red, green, blue)

    def select_rgb(self, red: bool = True, green: bool = True, blue: bool = True) -> ByteSelection3:
        r, g, b = self._value
        return (r if red else None, g if green else None, b if blue else None)

    def select_rgb_float(self, red: bool = True, green: bool = True, blue: bool = True) -> RgbSelection:
        r, g, b = self._value
        return (
            BoundedUnit.from_byte(r) if red else None,
            BoundedUnit.from_byte(g) if green else None,
            BoundedUnit.from_byte(b) if blue else None,
        )


class RgbFloat(ColorModel):
    """Normalized RGB, each channel a BoundedUnit."""

    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.RGB
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("red", "green", "blue")
    coercers = (coerce_unit, coerce_unit, coerce_unit)

    red = channel_property(0, "Red channel in [0, 1]")
    green = channel_property(1, "Green channel in [0, 1]")
    blue = channel_property(2, "Blue channel in [0, 1]")

    def __init__(self, red: float, green: float, blue: float) -> None:
        super().__init__(red, green, blue)

    def select_rgb_float(self, red: bool = True, green: bool = True, blue: bool = True) -> RgbSelection:
        r, g, b = self._value
        return (r if red else None, g if green else None, b if blue else None)


rgb_tuple_to_class = build_registry(Rgb, RgbFloat)
