"""
Exceptions raised by chromaselect.

Two failure families exist:

- ``OutOfRangeError``: a scalar or channel value left its declared domain
  ([0, 1] for unit channels, 0..255 for byte channels, 0..359 for exact hue).
  It is a ``ValueError`` so callers validating user input can catch it the
  usual way.
- ``MissingSelectionError``: a channel selector returned an empty slot for a
  channel that was requested. This is a bug in a selector implementation,
  never a caller error.
"""
from __future__ import annotations
from typing import Optional, TypeVar

T = TypeVar('T')


class OutOfRangeError(ValueError):
    """A value falls outside the domain of the type holding it."""

    def __init__(self, value: object, domain: str, operation: str | None = None) -> None:
        self.value = value
        self.domain = domain
        self.operation = operation
        if operation is None:
            message = f"{value!r} is outside of valid range {domain}"
        else:
            message = f"{operation} resulted in a value outside of valid range {domain} ({value!r})"
        super().__init__(message)


class MissingSelectionError(RuntimeError):
    """A requested channel was not returned by a selector."""


def expect(value: Optional[T], message: str) -> T:
    """Return ``value``, raising ``MissingSelectionError`` with ``message`` if it is None."""
    if value is None:
        raise MissingSelectionError(message)
    return value
