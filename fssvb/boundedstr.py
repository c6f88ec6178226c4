"""Fixed-capacity byte strings with O(1) length and truncating copies."""

from __future__ import annotations

from typing import Union

__all__ = ["BoundedString"]

_Value = Union["BoundedString", bytes, bytearray, memoryview, str]


def _as_bytes(value: _Value) -> bytes:
    if isinstance(value, BoundedString):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("latin-1")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"cannot use {type(value).__name__} as string data")


class BoundedString:
    """A string descriptor: a buffer of fixed capacity and a current length.

    Assignments and appends that exceed the capacity are truncated to fit.
    """

    __slots__ = ("_buf", "_len")

    def __init__(self, capacity: int, value: _Value = b"") -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._buf = bytearray(capacity)
        self._len = 0
        self.assign(value)

    @property
    def capacity(self) -> int:
        return len(self._buf)

    @property
    def value(self) -> bytes:
        return bytes(self._buf[: self._len])

    @property
    def data(self) -> memoryview:
        """Writable view of the whole buffer; follow writes with set_length()."""
        return memoryview(self._buf)

    def assign(self, value: _Value) -> BoundedString:
        """Replace the contents, truncating to the capacity."""
        raw = _as_bytes(value)[: self.capacity]
        self._buf[: len(raw)] = raw
        self._len = len(raw)
        return self

    def append(self, value: _Value) -> BoundedString:
        """Append, truncating to the remaining space."""
        raw = _as_bytes(value)[: self.capacity - self._len]
        end = self._len + len(raw)
        self._buf[self._len : end] = raw
        self._len = end
        return self

    def compare(self, other: _Value) -> int:
        """Compare bytewise, shorter first on a common prefix: -1, 0 or 1."""
        mine = self.value
        theirs = _as_bytes(other)
        return (mine > theirs) - (mine < theirs)

    def set_length(self, length: int) -> None:
        """Set the current length; lengths beyond the capacity are ignored."""
        if 0 <= length <= self.capacity:
            self._len = length

    def clear(self) -> None:
        self._len = 0

    def view(self, start: int, length: int) -> memoryview:
        """Zero-copy substring, with start and length clamped to the contents."""
        start = min(max(start, 0), self._len)
        length = min(max(length, 0), self._len - start)
        return memoryview(self._buf)[start : start + length]

    def __len__(self) -> int:
        return self._len

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        return self.value.decode("latin-1")

    def __repr__(self) -> str:
        return f"BoundedString({self.capacity}, {self.value!r})"

    def __eq__(self, other: object) -> bool:
        try:
            return self.compare(other) == 0  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __iadd__(self, other: _Value) -> BoundedString:
        return self.append(other)