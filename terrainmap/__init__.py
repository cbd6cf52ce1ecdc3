"""
Decode run-length-encoded terrain map files and rasterize their heightmaps.
"""

from .cursor import ByteCursor
from .errors import HeightRangeError, InvalidHeader, MapDecodeError, RunOverflow, UnexpectedEof
from .header import HEADER_SIZE, MapHeader, parse_header, read_header, validate_header
from .raster import (
    height_to_intensity,
    map_position,
    rasterize_colors,
    rasterize_heights,
    write_grayscale,
    write_rgb,
)
from .tiles import Map, TilePoint, decode_map, load_map, read_map, read_tiles

__all__ = [
    "ByteCursor",
    "HEADER_SIZE",
    "HeightRangeError",
    "InvalidHeader",
    "Map",
    "MapDecodeError",
    "MapHeader",
    "RunOverflow",
    "TilePoint",
    "UnexpectedEof",
    "decode_map",
    "height_to_intensity",
    "load_map",
    "map_position",
    "parse_header",
    "rasterize_colors",
    "rasterize_heights",
    "read_header",
    "read_map",
    "read_tiles",
    "validate_header",
    "write_grayscale",
    "write_rgb",
]
