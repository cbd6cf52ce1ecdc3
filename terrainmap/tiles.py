"""
Run-length tile stream and the decoded Map aggregate.

After the header the file holds a sequence of runs covering the grid in
row-major order. Each run starts with a signed byte ``n``:

- ``n >= 0``: data run, ``n + 1`` point records follow (8 bytes each).
- ``n < 0``: skip run, ``-n`` cells without data, nothing follows.

The runs must add up to exactly ``width * height`` cells.
"""

from __future__ import annotations

import dataclasses
import pathlib
import struct
from typing import List, Tuple, Union

from .cursor import ByteCursor
from .errors import RunOverflow
from .header import MapHeader, read_header

POINT_FMT = "<fBBBB"
POINT_SIZE = struct.calcsize(POINT_FMT)

CELL_ENABLED = 1
CELL_DISABLED = 0


@dataclasses.dataclass(frozen=True)
class TilePoint:
    height: float
    reserved: int
    red: int
    green: int
    blue: int

    @property
    def color(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue


@dataclasses.dataclass(frozen=True)
class Map:
    header: MapHeader
    points: Tuple[TilePoint, ...]
    enabled: bytes

    @property
    def total_cells(self) -> int:
        return self.header.total_cells

    @property
    def enabled_count(self) -> int:
        return self.enabled.count(CELL_ENABLED)


def read_tiles(cur: ByteCursor, width: int, height: int) -> Tuple[bytes, List[TilePoint]]:
    total_cells = width * height
    consumed = 0
    enabled = bytearray()
    points: List[TilePoint] = []

    while consumed < total_cells:
        run_off = cur.offset
        n = cur.i8()
        if n >= 0:
            run_len = n + 1
        else:
            run_len = -n
        if consumed + run_len > total_cells:
            raise RunOverflow(run_off, run_len, consumed, total_cells)

        if n >= 0:
            raw = cur.read(run_len * POINT_SIZE)
            points.extend(TilePoint(*rec) for rec in struct.iter_unpack(POINT_FMT, raw))
            enabled.extend(bytes([CELL_ENABLED]) * run_len)
        else:
            enabled.extend(bytes([CELL_DISABLED]) * run_len)
        consumed += run_len

    return bytes(enabled), points


def read_map(cur: ByteCursor) -> Map:
    header = read_header(cur)
    enabled, points = read_tiles(cur, header.width, header.height)
    return Map(header=header, points=tuple(points), enabled=enabled)


def decode_map(data: bytes) -> Map:
    return read_map(ByteCursor(data))


def load_map(path: Union[str, pathlib.Path]) -> Map:
    return decode_map(pathlib.Path(path).read_bytes())

