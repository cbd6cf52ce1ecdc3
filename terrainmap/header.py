"""
Map file header.

Layout (little-endian), 0x60 bytes:

    0x00 u32  signature
    0x04 u32  reserved_1
    0x08 f32  reserved_2, reserved_3
    0x10 f32  min_height, max_height
    0x18 u32  width, height
    0x20 f32  reserved_4 .. reserved_8
    0x34 u16  reserved_9, reserved_10
    0x38 f32  reserved_11, reserved_12
    0x40 char name[0x20]

The reserved slots have not been identified yet (reserved_4 may be a
horizontal scale); they are carried through untouched.
"""

from __future__ import annotations

import dataclasses
import math
from typing import Any, Dict

from .cursor import ByteCursor
from .errors import InvalidHeader

NAME_SIZE = 0x20
HEADER_SIZE = 0x40 + NAME_SIZE


@dataclasses.dataclass(frozen=True)
class MapHeader:
    signature: int
    reserved_1: int
    reserved_2: float
    reserved_3: float
    min_height: float
    max_height: float
    width: int
    height: int
    reserved_4: float
    reserved_5: float
    reserved_6: float
    reserved_7: float
    reserved_8: float
    reserved_9: int
    reserved_10: int
    reserved_11: float
    reserved_12: float
    name: str

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    def to_dict(self) -> Dict[str, Any]:
        out = dataclasses.asdict(self)
        out["signature"] = f"0x{self.signature:08X}"
        return out


def read_header(cur: ByteCursor) -> MapHeader:
    return MapHeader(
        signature=cur.u32(),
        reserved_1=cur.u32(),
        reserved_2=cur.f32(),
        reserved_3=cur.f32(),
        min_height=cur.f32(),
        max_height=cur.f32(),
        width=cur.u32(),
        height=cur.u32(),
        reserved_4=cur.f32(),
        reserved_5=cur.f32(),
        reserved_6=cur.f32(),
        reserved_7=cur.f32(),
        reserved_8=cur.f32(),
        reserved_9=cur.u16(),
        reserved_10=cur.u16(),
        reserved_11=cur.f32(),
        reserved_12=cur.f32(),
        name=cur.fixed_string(NAME_SIZE),
    )


def parse_header(data: bytes) -> MapHeader:
    return read_header(ByteCursor(data))


def validate_header(header: MapHeader) -> None:
    """Check the fields the rasterizer depends on."""
    if header.width <= 0 or header.height <= 0:
        raise InvalidHeader(f"Grid size must be non-zero, got {header.width}x{header.height}")
    if not (math.isfinite(header.min_height) and math.isfinite(header.max_height)):
        raise InvalidHeader(f"Height bounds must be finite, got {header.min_height}..{header.max_height}")
    if header.max_height <= header.min_height:
        raise InvalidHeader(
            f"max_height ({header.max_height}) must be greater than min_height ({header.min_height})"
        )
