"""
Scalar types every conversion formula operates on.

``BoundedUnit`` is a float that is guaranteed to live in ``[0, 1]``. It is used
for every normalized channel (RGB float, CMYK float, saturation, value,
luminosity). It never clamps: constructing or computing a value outside the
unit interval raises ``OutOfRangeError``.

``WrappedAngle`` is an integer number of degrees in ``[0, 360)`` used for hue.
Its arithmetic wraps around the circle and never fails.

>>> BoundedUnit(0.25) + BoundedUnit(0.5)
BoundedUnit(0.75)
>>> WrappedAngle(350) + 20
WrappedAngle(10)
"""
from __future__ import annotations
import math
import operator
from typing import Callable, ClassVar, Optional, SupportsFloat, SupportsIndex

import numpy as np

from ..errors import OutOfRangeError
from ..types.format_type import BYTE_MAX, HUE_360

UNIT_DOMAIN = "[0.0, 1.0]"
BYTE_DOMAIN = f"0..{BYTE_MAX}"
EXACT_DEGREES_DOMAIN = f"0..{HUE_360 - 1}"

# Formulas may overshoot the unit interval by float rounding only.
UNIT_EPSILON = 1e-9


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negative input."""
    return int(math.floor(value + 0.5))


def snap_unit(value: float) -> float:
    """Pull a value lying within ``UNIT_EPSILON`` outside [0, 1] back onto the bound."""
    if -UNIT_EPSILON <= value < 0.0:
        return 0.0
    if 1.0 < value <= 1.0 + UNIT_EPSILON:
        return 1.0
    return value


def to_byte_index(value: SupportsIndex) -> int:
    """Validate an integer channel in 0..255."""
    if isinstance(value, bool):
        raise TypeError("Byte channel must be an integer, not bool")
    byte = operator.index(value)
    if not 0 <= byte <= BYTE_MAX:
        raise OutOfRangeError(byte, BYTE_DOMAIN)
    return byte


class BoundedUnit(float):
    """A floating-point number restricted to the inclusive range ``[0, 1]``."""

    __slots__ = ()

    MIN: ClassVar[BoundedUnit]
    MAX: ClassVar[BoundedUnit]

    def __new__(cls, value: SupportsFloat = 0.0):
        number = float(value)
        # NaN fails both comparisons
        if not 0.0 <= number <= 1.0:
            raise OutOfRangeError(value, UNIT_DOMAIN)
        return super().__new__(cls, number)

    @classmethod
    def try_new(cls, value: SupportsFloat) -> Optional[BoundedUnit]:
        """Return a BoundedUnit, or None if ``value`` is outside [0, 1]."""
        try:
            return cls(value)
        except OutOfRangeError:
            return None

    @classmethod
    def new_or_fail(cls, value: SupportsFloat) -> BoundedUnit:
        """Build a BoundedUnit from a value the caller already knows is in range."""
        return cls(value)

    @classmethod
    def from_snapped(cls, value: float) -> BoundedUnit:
        """Build from a formula result, tolerating float rounding at the bounds."""
        return cls(snap_unit(value))

    @classmethod
    def from_byte(cls, byte: SupportsIndex) -> BoundedUnit:
        return cls(to_byte_index(byte) / BYTE_MAX)

    def to_byte(self) -> int:
        return round_half_up(float(self) * BYTE_MAX)

    def value(self) -> float:
        return float(self)

    def min(self, other: BoundedUnit) -> BoundedUnit:
        return self if float(self) <= float(other) else BoundedUnit(other)

    def max(self, other: BoundedUnit) -> BoundedUnit:
        return self if float(self) >= float(other) else BoundedUnit(other)

    def _operate(self, other: object, op: Callable[[float, float], float], name: str):
        if not isinstance(other, BoundedUnit):
            # Mixed arithmetic leaves the unit domain
            return op(float(self), other)  # type: ignore[arg-type]
        try:
            result = op(float(self), float(other))
        except ZeroDivisionError:
            raise OutOfRangeError(math.inf, UNIT_DOMAIN, f"{name} operation") from None
        if not 0.0 <= result <= 1.0:
            raise OutOfRangeError(result, UNIT_DOMAIN, f"{name} operation")
        return BoundedUnit(result)

    def __add__(self, other):
        return self._operate(other, operator.add, "Add")

    def __sub__(self, other):
        return self._operate(other, operator.sub, "Sub")

    def __mul__(self, other):
        return self._operate(other, operator.mul, "Mul")

    def __truediv__(self, other):
        return self._operate(other, operator.truediv, "Div")

    def __repr__(self) -> str:
        return f"BoundedUnit({float(self)})"


BoundedUnit.MIN = BoundedUnit(0.0)
BoundedUnit.MAX = BoundedUnit(1.0)


class WrappedAngle(int):
    """Whole degrees on a circle, always in ``[0, 360)``.

    Calling the class wraps its argument, so ``WrappedAngle(-30) == 330``.
    Use ``exact``/``try_exact`` to reject values outside 0..359 instead.
    """

    __slots__ = ()

    def __new__(cls, value: SupportsIndex = 0):
        if isinstance(value, bool):
            raise TypeError("Angle must be an integer, not bool")
        return super().__new__(cls, operator.index(value) % HUE_360)

    @classmethod
    def wrapped(cls, value: SupportsIndex) -> WrappedAngle:
        return cls(value)

    @classmethod
    def try_exact(cls, value: SupportsIndex) -> Optional[WrappedAngle]:
        """Return the angle for 0..359, None for anything else."""
        degrees = operator.index(value)
        if 0 <= degrees < HUE_360:
            return cls(degrees)
        return None

    @classmethod
    def exact(cls, value: SupportsIndex) -> WrappedAngle:
        angle = cls.try_exact(value)
        if angle is None:
            raise OutOfRangeError(value, EXACT_DEGREES_DOMAIN)
        return angle

    def value(self) -> int:
        return int(self)

    def __add__(self, other):
        if isinstance(other, int):
            return WrappedAngle(int(self) + int(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, int):
            return WrappedAngle(int(self) - int(other))
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, int):
            return WrappedAngle(int(other) - int(self))
        return NotImplemented

    def __repr__(self) -> str:
        return f"WrappedAngle({int(self)})"


def np_round_half_up(values: np.ndarray) -> np.ndarray:
    """Vectorized ``round_half_up``."""
    return np.floor(np.asarray(values, dtype=float) + 0.5)


def np_snap_unit(values: np.ndarray, name: str = "value") -> np.ndarray:
    """
    Vectorized ``snap_unit`` followed by a range check.

    Raises:
        OutOfRangeError: if any element is outside [0, 1] beyond rounding noise.
    """
    arr = np.asarray(values, dtype=float)
    arr = np.where((arr < 0.0) & (arr >= -UNIT_EPSILON), 0.0, arr)
    arr = np.where((arr > 1.0) & (arr <= 1.0 + UNIT_EPSILON), 1.0, arr)
    bad = ~((arr >= 0.0) & (arr <= 1.0))
    if np.any(bad):
        raise OutOfRangeError(float(arr[bad][0]), UNIT_DOMAIN, f"{name} conversion")
    return arr


def np_require_unit(values, name: str = "value") -> np.ndarray:
    """Return ``values`` as a float array, rejecting (not clipping) anything outside [0, 1]."""
    arr = np.asarray(values, dtype=float)
    bad = ~((arr >= 0.0) & (arr <= 1.0))
    if np.any(bad):
        raise OutOfRangeError(float(arr[bad][0]), f"{UNIT_DOMAIN} for {name}")
    return arr
