from typing import ClassVar, Tuple

from ..conversions.numbers import BoundedUnit, to_byte_index
from ..conversions.to_cmyk import CmykSelection
from ..conversions.to_rgb import RgbSelection, cmyk_to_unit_rgb
from ..errors import expect
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import (
    ByteSelection4,
    ColorModel,
    build_registry,
    channel_property,
    coerce_unit,
)


class Cmyk(ColorModel):
    """Integer CMYK, each channel 0..255."""

    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.CMYK
    format_type: ClassVar[FormatType] = FormatType.INT
    channels: ClassVar[Tuple[str, ...]] = ("cyan", "magenta", "yellow", "key_black")
    coercers = (to_byte_index, to_byte_index, to_byte_index, to_byte_index)

    cyan = channel_property(0, "Cyan channel, 0..255")
    magenta = channel_property(1, "Magenta channel, 0..255")
    yellow = channel_property(2, "Yellow channel, 0..255")
    key_black = channel_property(3, "Key (black) channel, 0..255")

    def __init__(self, cyan: int, magenta: int, yellow: int, key_black: int) -> None:
        super().__init__(cyan, magenta, yellow, key_black)

    def select_cmyk(
        self,
        cyan: bool = True,
        magenta: bool = True,
        yellow: bool = True,
        key_black: bool = True,
    ) -> ByteSelection4:
        c, m, y, k = self._value
        return (
            c if cyan else None,
            m if magenta else None,
            y if yellow else None,
            k if key_black else None,
        )

    def select_cmyk_float(
        self,
        cyan: bool = True,
        magenta: bool = True,
        yellow: bool = True,
        key_black: bool = True,
    ) -> CmykSelection:
        c, m, y, k = self._value
        return (
            BoundedUnit.from_byte(c) if cyan else None,
            BoundedUnit.from_byte(m) if magenta else None,
            BoundedUnit.from_byte(y) if yellow else None,
            BoundedUnit.from_byte(k) if key_black else None,
        )

    def select_rgb_float(self, red: bool = True, green: bool = True, blue: bool = True) -> RgbSelection:
        if not (red or green or blue):
            return None, None, None
        # Only the source components feeding a requested channel are converted
        c, m, y, k = self.select_cmyk_float(red, green, blue, True)
        return cmyk_to_unit_rgb(c, m, y, expect(k, "Key/black was not returned"), red, green, blue)


class CmykFloat(ColorModel):
    """Normalized CMYK, each channel a BoundedUnit."""

    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.CMYK
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("cyan", "magenta", "yellow", "key_black")
    coercers = (coerce_unit, coerce_unit, coerce_unit, coerce_unit)

    cyan = channel_property(0, "Cyan channel in [0, 1]")
    magenta = channel_property(1, "Magenta channel in [0, 1]")
    yellow = channel_property(2, "Yellow channel in [0, 1]")
    key_black = channel_property(3, "Key (black) channel in [0, 1]")

    def __init__(self, cyan: float, magenta: float, yellow: float, key_black: float) -> None:
        super().__init__(cyan, magenta, yellow, key_black)

    def select_cmyk_float(
        self,
        cyan: bool = True,
        magenta: bool = True,
        yellow: bool = True,
        key_black: bool = True,
    ) -> CmykSelection:
        c, m, y, k = self._value
        return (
            c if cyan else None,
            m if magenta else None,
            y if yellow else None,
            k if key_black else None,
        )

    def select_rgb_float(self, red: bool = True, green: bool = True, blue: bool = True) -> RgbSelection:
        c, m, y, k = self._value
        return cmyk_to_unit_rgb(c, m, y, k, red, green, blue)


cmyk_tuple_to_class = build_registry(Cmyk, CmykFloat)
