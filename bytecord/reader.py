"""Sequential, alignment-aware reading from a :class:`~bytecord.cord.ByteCord`."""

from __future__ import annotations

from typing import Literal, Optional, Protocol

_ByteOrder = Literal["big", "little"]


class _Cord(Protocol):
    def at_n(self, position: int, length: int) -> Optional[bytes]: ...

    def __len__(self) -> int: ...


def _check_alignment(alignment: int) -> None:
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError("alignment must be either a power of two or 1")


def _round_up(value: int, multiple: int) -> int:
    return -(-value // multiple) * multiple


class ByteCordReader:
    """Reads consecutive chunks of a cord, keeping every read position aligned.

    Each successful read advances the position past the bytes read and then
    up to the next multiple of the alignment. Reads past the end return
    ``None`` and leave the position unchanged.
    """

    def __init__(self, cord: _Cord, alignment: int = 1) -> None:
        _check_alignment(alignment)
        self._cord = cord
        self._alignment = alignment
        self._position = 0

    def next_n(self, length: int) -> Optional[bytes]:
        """Return ``length`` bytes at the current position, or ``None`` if out of bounds."""
        result = self._cord.at_n(self._position, length)
        if result is None:
            return None
        self._position = _round_up(self._position + length, self._alignment)
        return result

    def next(self, size: int) -> Optional[bytes]:
        """Return exactly ``size`` bytes at the current position, or ``None``."""
        return self.next_n(size)

    def skip(self, length: int) -> bool:
        """Advance past ``length`` bytes; return whether enough bytes remained."""
        return self.next_n(length) is not None

    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return max(0, len(self._cord) - self._position)

    def _next_int(self, size: int, byteorder: _ByteOrder, signed: bool) -> Optional[int]:
        chunk = self.next(size)
        if chunk is None:
            return None
        return int.from_bytes(chunk, byteorder, signed=signed)

    def next_u8(self) -> Optional[int]:
        return self._next_int(1, "big", False)

    def next_i8(self) -> Optional[int]:
        return self._next_int(1, "big", True)

    def next_be_u16(self) -> Optional[int]:
        return self._next_int(2, "big", False)

    def next_le_u16(self) -> Optional[int]:
        return self._next_int(2, "little", False)

    def next_be_u32(self) -> Optional[int]:
        return self._next_int(4, "big", False)

    def next_le_u32(self) -> Optional[int]:
        return self._next_int(4, "little", False)

    def next_be_u64(self) -> Optional[int]:
        return self._next_int(8, "big", False)

    def next_le_u64(self) -> Optional[int]:
        return self._next_int(8, "little", False)

    def next_be_u128(self) -> Optional[int]:
        return self._next_int(16, "big", False)

    def next_le_u128(self) -> Optional[int]:
        return self._next_int(16, "little", False)

    def next_be_i16(self) -> Optional[int]:
        return self._next_int(2, "big", True)

    def next_le_i16(self) -> Optional[int]:
        return self._next_int(2, "little", True)

    def next_be_i32(self) -> Optional[int]:
        return self._next_int(4, "big", True)

    def next_le_i32(self) -> Optional[int]:
        return self._next_int(4, "little", True)

    def next_be_i64(self) -> Optional[int]:
        return self._next_int(8, "big", True)

    def next_le_i64(self) -> Optional[int]:
        return self._next_int(8, "little", True)

    def next_be_i128(self) -> Optional[int]:
        return self._next_int(16, "big", True)

    def next_le_i128(self) -> Optional[int]:
        return self._next_int(16, "little", True)