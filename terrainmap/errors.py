"""
Failures raised while decoding or rasterizing a terrain map.
"""

from __future__ import annotations


class MapDecodeError(ValueError):
    """Base class for every map decode/rasterize failure."""


class UnexpectedEof(MapDecodeError):
    def __init__(self, what: str, offset: int, wanted: int, available: int) -> None:
        super().__init__(
            f"Unexpected end of data reading {what} @0x{offset:X}: wanted {wanted} byte(s), {available} left"
        )
        self.what = what
        self.offset = offset
        self.wanted = wanted
        self.available = available


class RunOverflow(MapDecodeError):
    def __init__(self, offset: int, run_len: int, consumed: int, total_cells: int) -> None:
        super().__init__(
            f"Run of {run_len} cell(s) @0x{offset:X} overflows grid: {consumed} of {total_cells} cells already covered"
        )
        self.offset = offset
        self.run_len = run_len
        self.consumed = consumed
        self.total_cells = total_cells


class InvalidHeader(MapDecodeError):
    pass


class HeightRangeError(MapDecodeError):
    pass
