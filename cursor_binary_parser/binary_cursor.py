"""Little-endian binary parsing over an in-memory byte buffer.

A :class:`BinaryCursor` reads primitive values from a byte buffer while
tracking its position, and keeps a stack of saved positions for temporary
detours. :class:`BinaryCursorJump` is a context manager that moves the
cursor somewhere else and puts it back when the block ends.
"""

from __future__ import annotations

import struct
from typing import Callable, TypeVar

__all__ = ["BinaryCursorError", "BinaryCursor", "BinaryCursorJump"]

T = TypeVar("T")

_U8 = struct.Struct("<B")
_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_I8 = struct.Struct("<b")
_I16 = struct.Struct("<h")
_I32 = struct.Struct("<i")
_I64 = struct.Struct("<q")
_F32 = struct.Struct("<f")
_F64 = struct.Struct("<d")


class BinaryCursorError(Exception):
    """Raised when a cursor operation cannot be carried out."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Parse error: {message}")
        self.reason = message


class BinaryCursor:
    """A position-tracking reader for little-endian binary data."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._position = 0
        self._location_stack: list[int] = []

    def __len__(self) -> int:
        return len(self._data)

    @property
    def position(self) -> int:
        """The current offset into the data."""
        return self._position

    @position.setter
    def position(self, pos: int) -> None:
        if pos < 0:
            raise ValueError("position must not be negative")
        self._position = pos

    def push_location(self) -> None:
        """Save the current position on the location stack."""
        self._location_stack.append(self._position)

    def pop_location(self) -> int | None:
        """Remove and return the most recently saved position, or None."""
        if not self._location_stack:
            return None
        return self._location_stack.pop()

    def restore_location(self) -> bool:
        """Move back to the most recently saved position.

        Returns True if a position was restored, False if the stack was empty.
        """
        if not self._location_stack:
            return False
        self._position = self._location_stack.pop()
        return True

    def _read(self, size: int) -> bytes:
        end = self._position + size
        if end > len(self._data):
            self._position = len(self._data)
            raise BinaryCursorError("failed to fill whole buffer")
        chunk = self._data[self._position:end]
        self._position = end
        return chunk

    def _unpack(self, layout: struct.Struct):
        return layout.unpack(self._read(layout.size))[0]

    def parse_u8(self) -> int:
        """Read an unsigned 8-bit integer."""
        return self._unpack(_U8)

    def parse_u16_le(self) -> int:
        """Read a little-endian unsigned 16-bit integer."""
        return self._unpack(_U16)

    def parse_u32_le(self) -> int:
        """Read a little-endian unsigned 32-bit integer."""
        return self._unpack(_U32)

    def parse_u64_le(self) -> int:
        """Read a little-endian unsigned 64-bit integer."""
        return self._unpack(_U64)

    def parse_f32_le(self) -> float:
        """Read a little-endian single-precision float."""
        return self._unpack(_F32)

    def parse_f64_le(self) -> float:
        """Read a little-endian double-precision float."""
        return self._unpack(_F64)

    def parse_bytes(self, count: int) -> bytes:
        """Read exactly ``count`` raw bytes."""
        if count < 0:
            raise ValueError("count must not be negative")
        return self._read(count)

    def parse_i8(self) -> int:
        """Read a signed 8-bit integer."""
        return self._unpack(_I8)

    def parse_i16_le(self) -> int:
        """Read a little-endian signed 16-bit integer."""
        return self._unpack(_I16)

    def parse_i32_le(self) -> int:
        """Read a little-endian signed 32-bit integer."""
        return self._unpack(_I32)

    def parse_i64_le(self) -> int:
        """Read a little-endian signed 64-bit integer."""
        return self._unpack(_I64)

    def count(self, parser: Callable[["BinaryCursor"], T], count: int) -> list[T]:
        """Apply ``parser`` to this cursor ``count`` times and collect the results."""
        return [parser(self) for _ in range(count)]


class BinaryCursorJump:
    """Context manager that temporarily moves a cursor.

    On exit (or :meth:`close`) the most recently saved location of the
    cursor is restored once.
    """

    def __init__(self, cursor: BinaryCursor) -> None:
        self.cursor = cursor
        self._closed = False

    def jump(self, location: int) -> None:
        """Save the current position and move to ``location``."""
        self.cursor.push_location()
        self.cursor.position = location

    def jump_relative(self, offset: int) -> None:
        """Save the current position and move by ``offset`` bytes."""
        self.cursor.push_location()
        new_pos = self.cursor.position + offset
        if new_pos < 0:
            raise BinaryCursorError("Position would overflow/underflow")
        self.cursor.position = new_pos

    def close(self) -> None:
        """Restore the saved location; further calls do nothing."""
        if not self._closed:
            self._closed = True
            self.cursor.restore_location()

    def __enter__(self) -> "BinaryCursorJump":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()