from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional, Tuple

from ..conversions.numbers import BoundedUnit, WrappedAngle
from ..conversions.to_hsv import HueSelection, unit_rgb_to_hsv
from ..conversions.to_hsl import unit_rgb_to_hsl
from ..conversions.to_cmyk import CmykSelection, unit_rgb_to_cmyk
from ..conversions.to_rgb import RgbSelection
from ..errors import expect
from ..types.color_types import ColorSpace
from ..types.format_type import FormatType

ByteSelection3 = Tuple[Optional[int], Optional[int], Optional[int]]
ByteSelection4 = Tuple[Optional[int], Optional[int], Optional[int], Optional[int]]


def coerce_unit(value: Any) -> BoundedUnit:
    if isinstance(value, BoundedUnit):
        return value
    return BoundedUnit(value)


def coerce_hue(value: Any) -> WrappedAngle:
    """Accept a WrappedAngle as is; plain integers must already be in 0..359."""
    if isinstance(value, WrappedAngle):
        return value
    return WrappedAngle.exact(value)


def _byte_slot(slot: Optional[BoundedUnit], wanted: bool, name: str) -> Optional[int]:
    if not wanted:
        return None
    return expect(slot, f"{name} value was not calculated").to_byte()


class ColorModel(ABC):
    """
    One color representation plus the channel selector contract.

    Every ``select_*`` method takes one flag per channel of its *output*
    representation and returns one slot per channel: ``None`` where the flag
    is False, the computed value where it is True. Work that only serves an
    unrequested channel is skipped.

    Subclasses must provide ``select_rgb_float``; the remaining selectors
    default to projecting through unit RGB, and the integer selectors round
    the float selectors so each conversion has a single source of truth.
    Instances are immutable.
    """

    __slots__ = ('_value', '_is_frozen')

    mode: ClassVar[ColorSpace]
    format_type: ClassVar[FormatType]
    channels: ClassVar[Tuple[str, ...]]
    coercers: ClassVar[Tuple[Any, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *values: Any) -> None:
        if len(values) != len(self.channels):
            raise ValueError(f"{self.__class__.__name__} expects {len(self.channels)} channels, got {len(values)}")
        self._value = tuple(coerce(v) for coerce, v in zip(self.coercers, values))
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Any, ...]:
        return self._value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={v!r}" for name, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"

    # ------------------ CHANNEL SELECTORS ------------------
    @abstractmethod
    def select_rgb_float(self, red: bool = True, green: bool = True, blue: bool = True) -> RgbSelection:
        ...

    def _full_rgb_float(self) -> Tuple[BoundedUnit, BoundedUnit, BoundedUnit]:
        r, g, b = self.select_rgb_float(True, True, True)
        return (
            expect(r, "Red was not returned"),
            expect(g, "Green was not returned"),
            expect(b, "Blue was not returned"),
        )

    def select_rgb(self, red: bool = True, green: bool = True, blue: bool = True) -> ByteSelection3:
        r, g, b = self.select_rgb_float(red, green, blue)
        return (
            _byte_slot(r, red, "Red"),
            _byte_slot(g, green, "Green"),
            _byte_slot(b, blue, "Blue"),
        )

    def select_hsv(self, hue: bool = True, saturation: bool = True, value: bool = True) -> HueSelection:
        if not (hue or saturation or value):
            return None, None, None
        return unit_rgb_to_hsv(*self._full_rgb_float(), hue, saturation, value)

    def select_hsl(self, hue: bool = True, saturation: bool = True, luminosity: bool = True) -> HueSelection:
        if not (hue or saturation or luminosity):
            return None, None, None
        return unit_rgb_to_hsl(*self._full_rgb_float(), hue, saturation, luminosity)

    def select_cmyk_float(
        self,
        cyan: bool = True,
        magenta: bool = True,
        yellow: bool = True,
        key_black: bool = True,
    ) -> CmykSelection:
        if not (cyan or magenta or yellow or key_black):
            return None, None, None, None
        return unit_rgb_to_cmyk(*self._full_rgb_float(), cyan, magenta, yellow, key_black)

    def select_cmyk(
        self,
        cyan: bool = True,
        magenta: bool = True,
        yellow: bool = True,
        key_black: bool = True,
    ) -> ByteSelection4:
        c, m, y, k = self.select_cmyk_float(cyan, magenta, yellow, key_black)
        return (
            _byte_slot(c, cyan, "Cyan"),
            _byte_slot(m, magenta, "Magenta"),
            _byte_slot(y, yellow, "Yellow"),
            _byte_slot(k, key_black, "Key/black"),
        )


def channel_property(index: int, doc: str) -> property:
    return property(lambda self: self._value[index], doc=doc)


def build_registry(*classes: type[ColorModel]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
