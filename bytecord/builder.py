"""Building byte buffers with zero padding to a fixed alignment."""

from __future__ import annotations

from typing import Literal

from .reader import _check_alignment, _round_up

_ByteOrder = Literal["big", "little"]


class ByteCordBuilder:
    """Accumulates bytes, padding with zeros after each append to keep alignment."""

    def __init__(self, alignment: int) -> None:
        _check_alignment(alignment)
        self._alignment = alignment
        self._buffer = bytearray()

    @classmethod
    def with_capacity(cls, capacity: int, alignment: int) -> "ByteCordBuilder":
        """Return a new builder; ``capacity`` is a size hint and must not be negative."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        return cls(alignment)

    def append_from_slice(self, data: bytes | bytearray | memoryview) -> None:
        """Append ``data`` and pad with zeros to the next aligned length."""
        self._buffer += data
        padding = _round_up(len(self._buffer), self._alignment) - len(self._buffer)
        if padding:
            self._buffer += bytes(padding)

    def append(self, data: bytes | bytearray | memoryview) -> None:
        """Append ``data`` and pad with zeros to the next aligned length."""
        self.append_from_slice(data)

    def into_bytes(self) -> bytes:
        """Return the built bytes."""
        return bytes(self._buffer)

    def _append_int(self, value: int, size: int, byteorder: _ByteOrder, signed: bool) -> None:
        self.append(value.to_bytes(size, byteorder, signed=signed))

    def append_u8(self, value: int) -> None:
        self._append_int(value, 1, "big", False)

    def append_i8(self, value: int) -> None:
        self._append_int(value, 1, "big", True)

    def append_be_u16(self, value: int) -> None:
        self._append_int(value, 2, "big", False)

    def append_le_u16(self, value: int) -> None:
        self._append_int(value, 2, "little", False)

    def append_be_u32(self, value: int) -> None:
        self._append_int(value, 4, "big", False)

    def append_le_u32(self, value: int) -> None:
        self._append_int(value, 4, "little", False)

    def append_be_u64(self, value: int) -> None:
        self._append_int(value, 8, "big", False)

    def append_le_u64(self, value: int) -> None:
        self._append_int(value, 8, "little", False)

    def append_be_u128(self, value: int) -> None:
        self._append_int(value, 16, "big", False)

    def append_le_u128(self, value: int) -> None:
        self._append_int(value, 16, "little", False)

    def append_be_i16(self, value: int) -> None:
        self._append_int(value, 2, "big", True)

    def append_le_i16(self, value: int) -> None:
        self._append_int(value, 2, "little", True)

    def append_be_i32(self, value: int) -> None:
        self._append_int(value, 4, "big", True)

    def append_le_i32(self, value: int) -> None:
        self._append_int(value, 4, "little", True)

    def append_be_i64(self, value: int) -> None:
        self._append_int(value, 8, "big", True)

    def append_le_i64(self, value: int) -> None:
        self._append_int(value, 8, "little", True)

    def append_be_i128(self, value: int) -> None:
        self._append_int(value, 16, "big", True)

    def append_le_i128(self, value: int) -> None:
        self._append_int(value, 16, "little", True)