"""
Turn a decoded Map into pixel grids and write them out with Pillow.

Tiles are stored row-major with row 0 at the top of the logical grid; the
raster's vertical axis runs bottom-up, so rows are flipped on the way out.
"""

from __future__ import annotations

import math
import pathlib
from typing import Tuple, Union

import numpy as np
from PIL import Image

from .errors import HeightRangeError
from .header import validate_header
from .tiles import CELL_ENABLED, Map

OVERFLOW_POLICIES = ("clamp", "wrap", "error")


def map_position(index: int, width: int, height: int) -> Tuple[int, int]:
    x = index % width
    y = height - 1 - (index // width)
    return x, y


def height_to_intensity(value: float, min_height: float, max_height: float, overflow: str = "clamp") -> int:
    """Scale a height into 0..255.

    ``overflow`` decides what happens to heights outside min..max:
    ``clamp`` saturates, ``wrap`` keeps the low 8 bits, ``error`` raises.
    NaN heights become 0 unless ``overflow`` is ``error``.
    """
    if overflow not in OVERFLOW_POLICIES:
        raise ValueError(f"Unsupported overflow policy: {overflow}")
    normalized = (value - min_height) / (max_height - min_height)
    if math.isnan(normalized):
        if overflow == "error":
            raise HeightRangeError(f"Height {value} is not a number")
        return 0
    scaled = 255.0 * normalized
    if 0.0 <= scaled <= 255.0:
        return int(round(scaled))
    if overflow == "error":
        raise HeightRangeError(f"Height {value} outside {min_height}..{max_height}")
    if overflow == "wrap" and math.isfinite(scaled):
        return int(round(scaled)) % 256
    return 0 if scaled < 0 else 255


def rasterize_heights(m: Map, overflow: str = "clamp") -> np.ndarray:
    header = m.header
    validate_header(header)
    w, h = header.width, header.height
    grid = np.zeros((h, w), dtype=np.uint8)

    point_offset = 0
    for index in range(header.total_cells):
        if m.enabled[index] != CELL_ENABLED:
            continue
        point = m.points[point_offset]
        point_offset += 1
        x, y = map_position(index, w, h)
        grid[y, x] = height_to_intensity(point.height, header.min_height, header.max_height, overflow)
    return grid


def rasterize_colors(m: Map) -> np.ndarray:
    header = m.header
    validate_header(header)
    w, h = header.width, header.height
    grid = np.zeros((h, w, 3), dtype=np.uint8)

    point_offset = 0
    for index in range(header.total_cells):
        if m.enabled[index] != CELL_ENABLED:
            continue
        point = m.points[point_offset]
        point_offset += 1
        x, y = map_position(index, w, h)
        grid[y, x] = point.color
    return grid


def _to_image(grid: np.ndarray, mode: str, scale: int) -> Image.Image:
    if scale < 1:
        raise ValueError(f"Scale must be >= 1, got {scale}")
    img = Image.fromarray(np.ascontiguousarray(grid, dtype=np.uint8)).convert(mode)
    if scale > 1:
        img = img.resize((img.width * scale, img.height * scale), resample=Image.NEAREST)
    return img


def write_grayscale(path: Union[str, pathlib.Path], grid: np.ndarray, scale: int = 1) -> None:
    if grid.ndim != 2:
        raise ValueError("Grayscale output expects a 2D grid")
    _to_image(grid, "L", scale).save(path)


def write_rgb(path: Union[str, pathlib.Path], grid: np.ndarray, scale: int = 1) -> None:
    if grid.ndim != 3 or grid.shape[2] != 3:
        raise ValueError("RGB output expects a (height, width, 3) grid")
    _to_image(grid, "RGB", scale).save(path)
