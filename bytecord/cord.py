"""Bounds-checked access to a buffer of bytes."""

from __future__ import annotations

from typing import Optional, Union

from .reader import ByteCordReader

Buffer = Union[bytes, bytearray, memoryview]


def _check_range(position: int, length: int) -> None:
    if position < 0 or length < 0:
        raise ValueError("position and length must not be negative")


class ByteCord:
    """Wraps a byte buffer and gives bounds-checked access to parts of it."""

    def __init__(self, data: Buffer) -> None:
        self._data = data

    def read(self) -> ByteCordReader:
        """Return a reader with 1-byte alignment."""
        return ByteCordReader(self, 1)

    def read_with_alignment(self, alignment: int) -> ByteCordReader:
        """Return a reader with the given alignment (a power of two)."""
        return ByteCordReader(self, alignment)

    def at_n(self, position: int, length: int) -> Optional[bytes]:
        """Return ``length`` bytes from ``position``, or ``None`` if out of bounds."""
        _check_range(position, length)
        if position + length > len(self._data):
            return None
        return bytes(self._data[position : position + length])

    def at(self, position: int, size: int) -> Optional[bytes]:
        """Return exactly ``size`` bytes from ``position``, or ``None`` if out of bounds."""
        return self.at_n(position, size)

    def at_n_mut(self, position: int, length: int) -> Optional[memoryview]:
        """Return a writable view of ``length`` bytes from ``position``.

        Returns ``None`` when the range reaches the end of the buffer or
        beyond it. Raises ``TypeError`` if the buffer is read-only.
        """
        _check_range(position, length)
        view = memoryview(self._data)
        if view.readonly:
            view.release()
            raise TypeError("underlying data is read-only")
        if position + length >= len(view):
            view.release()
            return None
        return view[position : position + length]

    def at_mut(self, position: int, size: int) -> Optional[memoryview]:
        """Return a writable view of exactly ``size`` bytes, or ``None``."""
        return self.at_n_mut(position, size)

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        """Return whether the underlying data is empty."""
        return len(self._data) == 0