from __future__ import annotations
import warnings
from typing import Dict, Generic, Optional, Tuple, TypeVar, Union

from .color_base import ColorModel
from .rgb import Rgb, RgbFloat, rgb_tuple_to_class
from .cmyk import Cmyk, CmykFloat, cmyk_tuple_to_class
from .hsl import Hsl, hsl_tuple_to_class
from .hsv import Hsv, hsv_tuple_to_class
from ..conversions.numbers import BoundedUnit, WrappedAngle
from ..errors import OutOfRangeError, expect
from ..types.color_types import ColorSpace, as_color_space, is_hue_space
from ..types.format_type import FormatType

M = TypeVar('M', bound=ColorModel)

unified_tuple_to_class: Dict[Tuple[ColorSpace, FormatType], type[ColorModel]] = {
    **rgb_tuple_to_class,
    **cmyk_tuple_to_class,
    **hsl_tuple_to_class,
    **hsv_tuple_to_class,
}

HEX_MAX = 0xFFFFFF


class Color(Generic[M]):
    """
    Accessor and conversion facade over a single color representation.

    Every getter asks the wrapped representation for exactly one channel, and
    every ``to_*`` conversion asks for all channels of the target. Nothing else
    is stored, so a Color is as cheap as its representation record.

    >>> red = Color.new_rgb(255, 0, 0)
    >>> red.hue(), red.luminosity()
    (WrappedAngle(0), BoundedUnit(0.5))
    >>> red.to_cmyk().model
    Cmyk(cyan=0, magenta=255, yellow=255, key_black=0)

    ``into_*`` methods exist for symmetry with ``to_*``; representations are
    immutable so both return a fresh Color and leave the receiver untouched.
    """

    __slots__ = ('_model', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, model: M) -> None:
        if not isinstance(model, ColorModel):
            raise TypeError(f"Color wraps a ColorModel, got {type(model).__name__}")
        self._model = model
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def new_rgb(cls, red: int, green: int, blue: int) -> Color[Rgb]:
        return cls(Rgb(red, green, blue))

    @classmethod
    def from_hex(cls, value: int) -> Color[Rgb]:
        """
        Decode a 0xRRGGBB integer.

        Bits above the low 24 are ignored with a warning.

        Raises:
            OutOfRangeError: for negative input
        """
        if value < 0:
            raise OutOfRangeError(value, f"0x000000..{HEX_MAX:#08x}")
        if value > HEX_MAX:
            warnings.warn(
                f"Hex color {value:#x} is wider than 24 bits; only the low 24 bits are used",
                UserWarning,
                stacklevel=2,
            )
        return cls(Rgb((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))

    @classmethod
    def new_rgb_float(cls, red: float, green: float, blue: float) -> Color[RgbFloat]:
        return cls(RgbFloat(red, green, blue))

    @classmethod
    def new_cmyk(cls, cyan: int, magenta: int, yellow: int, key_black: int) -> Color[Cmyk]:
        return cls(Cmyk(cyan, magenta, yellow, key_black))

    @classmethod
    def new_cmyk_float(cls, cyan: float, magenta: float, yellow: float, key_black: float) -> Color[CmykFloat]:
        return cls(CmykFloat(cyan, magenta, yellow, key_black))

    @classmethod
    def new_hsl(cls, hue: Union[int, WrappedAngle], saturation: float, luminosity: float) -> Color[Hsl]:
        return cls(Hsl(hue, saturation, luminosity))

    @classmethod
    def new_hsv(cls, hue: Union[int, WrappedAngle], saturation: float, value: float) -> Color[Hsv]:
        return cls(Hsv(hue, saturation, value))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def model(self) -> M:
        return self._model

    @property
    def value(self) -> tuple:
        return self._model.value

    @property
    def mode(self) -> ColorSpace:
        return self._model.mode

    @property
    def format_type(self) -> FormatType:
        return self._model.format_type

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._model == other._model

    def __hash__(self) -> int:
        return hash(self._model)

    def __repr__(self) -> str:
        return f"Color({self._model!r})"

    # ------------------ RGB ------------------
    def red(self) -> int:
        r, _, _ = self._model.select_rgb(True, False, False)
        return expect(r, "Red value was not returned")

    def green(self) -> int:
        _, g, _ = self._model.select_rgb(False, True, False)
        return expect(g, "Green value was not returned")

    def blue(self) -> int:
        _, _, b = self._model.select_rgb(False, False, True)
        return expect(b, "Blue value was not returned")

    def red_float(self) -> BoundedUnit:
        r, _, _ = self._model.select_rgb_float(True, False, False)
        return expect(r, "Red value was not returned")

    def green_float(self) -> BoundedUnit:
        _, g, _ = self._model.select_rgb_float(False, True, False)
        return expect(g, "Green value was not returned")

    def blue_float(self) -> BoundedUnit:
        _, _, b = self._model.select_rgb_float(False, False, True)
        return expect(b, "Blue value was not returned")

    # ------------------ HSV / HSL ------------------
    def hue(self) -> WrappedAngle:
        h, _, _ = self._model.select_hsv(True, False, False)
        return expect(h, "Hue value was not returned")

    def saturation_hsv(self) -> BoundedUnit:
        _, s, _ = self._model.select_hsv(False, True, False)
        return expect(s, "Saturation value was not returned")

    def saturation_hsl(self) -> BoundedUnit:
        _, s, _ = self._model.select_hsl(False, True, False)
        return expect(s, "Saturation value was not returned")

    def hsv_value(self) -> BoundedUnit:
        _, _, v = self._model.select_hsv(False, False, True)
        return expect(v, "Value value was not returned")

    def luminosity(self) -> BoundedUnit:
        _, _, l = self._model.select_hsl(False, False, True)
        return expect(l, "Luminosity was not returned")

    # ------------------ CMYK ------------------
    def cyan(self) -> int:
        c, _, _, _ = self._model.select_cmyk(True, False, False, False)
        return expect(c, "Cyan value was not returned")

    def magenta(self) -> int:
        _, m, _, _ = self._model.select_cmyk(False, True, False, False)
        return expect(m, "Magenta value was not returned")

    def yellow(self) -> int:
        _, _, y, _ = self._model.select_cmyk(False, False, True, False)
        return expect(y, "Yellow value was not returned")

    def key_black(self) -> int:
        _, _, _, k = self._model.select_cmyk(False, False, False, True)
        return expect(k, "Key value was not returned")

    def cyan_float(self) -> BoundedUnit:
        c, _, _, _ = self._model.select_cmyk_float(True, False, False, False)
        return expect(c, "Cyan value was not returned")

    def magenta_float(self) -> BoundedUnit:
        _, m, _, _ = self._model.select_cmyk_float(False, True, False, False)
        return expect(m, "Magenta value was not returned")

    def yellow_float(self) -> BoundedUnit:
        _, _, y, _ = self._model.select_cmyk_float(False, False, True, False)
        return expect(y, "Yellow value was not returned")

    def key_black_float(self) -> BoundedUnit:
        _, _, _, k = self._model.select_cmyk_float(False, False, False, True)
        return expect(k, "Key value was not returned")

    # ------------------ CONVERSIONS ------------------
    def to_rgb(self) -> Color[Rgb]:
        r, g, b = self._model.select_rgb(True, True, True)
        return Color(Rgb(
            expect(r, "Red value was not returned"),
            expect(g, "Green value was not returned"),
            expect(b, "Blue value was not returned"),
        ))

    def into_rgb(self) -> Color[Rgb]:
        return self.to_rgb()

    def to_rgb_float(self) -> Color[RgbFloat]:
        r, g, b = self._model.select_rgb_float(True, True, True)
        return Color(RgbFloat(
            expect(r, "Red value not returned"),
            expect(g, "Green value not returned"),
            expect(b, "Blue value not returned"),
        ))

    def into_rgb_float(self) -> Color[RgbFloat]:
        return self.to_rgb_float()

    def to_cmyk(self) -> Color[Cmyk]:
        c, m, y, k = self._model.select_cmyk(True, True, True, True)
        return Color(Cmyk(
            expect(c, "Cyan not returned"),
            expect(m, "Magenta not returned"),
            expect(y, "Yellow not returned"),
            expect(k, "Key/black not returned"),
        ))

    def into_cmyk(self) -> Color[Cmyk]:
        return self.to_cmyk()

    def to_cmyk_float(self) -> Color[CmykFloat]:
        c, m, y, k = self._model.select_cmyk_float(True, True, True, True)
        return Color(CmykFloat(
            expect(c, "Cyan not returned"),
            expect(m, "Magenta not returned"),
            expect(y, "Yellow not returned"),
            expect(k, "Key/black not returned"),
        ))

    def into_cmyk_float(self) -> Color[CmykFloat]:
        return self.to_cmyk_float()

    def to_hsl(self) -> Color[Hsl]:
        h, s, l = self._model.select_hsl(True, True, True)
        return Color(Hsl(
            expect(h, "Hue was not returned"),
            expect(s, "Saturation was not returned"),
            expect(l, "Luminosity was not returned"),
        ))

    def into_hsl(self) -> Color[Hsl]:
        return self.to_hsl()

    def to_hsv(self) -> Color[Hsv]:
        h, s, v = self._model.select_hsv(True, True, True)
        return Color(Hsv(
            expect(h, "Hue was not returned"),
            expect(s, "Saturation was not returned"),
            expect(v, "Value was not returned"),
        ))

    def into_hsv(self) -> Color[Hsv]:
        return self.to_hsv()

    def convert(
        self,
        to_space: Optional[Union[ColorSpace, str]] = None,
        to_format: Optional[Union[FormatType, str]] = None,
    ) -> Color:
        """
        Convert this color to a different color space and/or format.

        Args:
            to_space: Target color space ("rgb", "cmyk", "hsv", "hsl"). Defaults to current space.
            to_format: Target format (INT or FLOAT). Defaults to the current
                format, or FLOAT for hue spaces, which only exist as floats.

        Returns:
            New Color in the target space/format

        Raises:
            ValueError: for unknown or unsupported space/format combinations
        """
        space = as_color_space(to_space) if to_space is not None else self.mode
        if to_format is not None:
            fmt = FormatType(to_format)
        elif is_hue_space(space):
            fmt = FormatType.FLOAT
        else:
            fmt = self.format_type
        target = get_color_class(space, fmt)
        return getattr(self, CONVERTERS[target])()


CONVERTERS: Dict[type[ColorModel], str] = {
    Rgb: "to_rgb",
    RgbFloat: "to_rgb_float",
    Cmyk: "to_cmyk",
    CmykFloat: "to_cmyk_float",
    Hsl: "to_hsl",
    Hsv: "to_hsv",
}


def get_color_class(color_space: Union[ColorSpace, str], format_type: Union[FormatType, str]) -> type[ColorModel]:
    color_class = unified_tuple_to_class.get((as_color_space(color_space), FormatType(format_type)))
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class


def color_convert(color: Union[Color, ColorModel], color_space: Union[ColorSpace, str],
                  format_type: Optional[Union[FormatType, str]] = None) -> Color:
    """Convert a Color or bare representation record to the given space/format."""
    if isinstance(color, ColorModel):
        color = Color(color)
    return color.convert(color_space, format_type)
