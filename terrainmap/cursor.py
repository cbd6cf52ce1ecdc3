"""
Forward-only little-endian reader over an in-memory byte buffer.
"""

from __future__ import annotations

import struct

from .errors import UnexpectedEof


class ByteCursor:
    def __init__(self, data: bytes, offset: int = 0) -> None:
        self.data = bytes(data)
        self.offset = offset

    @property
    def remaining(self) -> int:
        return max(0, len(self.data) - self.offset)

    def _take(self, size: int, what: str) -> int:
        off = self.offset
        if size < 0 or size > self.remaining:
            raise UnexpectedEof(what, off, size, self.remaining)
        self.offset = off + size
        return off

    def _unpack(self, fmt: str, what: str):
        off = self._take(struct.calcsize(fmt), what)
        return struct.unpack_from(fmt, self.data, off)[0]

    def read(self, size: int) -> bytes:
        off = self._take(size, f"{size} raw byte(s)")
        return self.data[off : off + size]

    def u8(self) -> int:
        return self._unpack("<B", "u8")

    def i8(self) -> int:
        return self._unpack("<b", "i8")

    def u16(self) -> int:
        return self._unpack("<H", "u16")

    def u32(self) -> int:
        return self._unpack("<I", "u32")

    def f32(self) -> float:
        return self._unpack("<f", "f32")

    def fixed_string(self, size: int) -> str:
        """Read a NUL-padded text field; undecodable text comes back as ""."""
        raw = self.read(size)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            text = ""
        return text.strip("\x00")
