#!/usr/bin/env python3
"""
Command-line front-end: inspect a terrain map file or export it as images.
"""

from __future__ import annotations

import argparse
import json
import pathlib
import sys
from typing import Any, Dict, Optional, Sequence, Tuple

from .config import load_settings
from .cursor import ByteCursor
from .raster import OVERFLOW_POLICIES, rasterize_colors, rasterize_heights, write_grayscale, write_rgb
from .tiles import Map, read_map


def _decode_file(path: pathlib.Path) -> Tuple[Map, int]:
    cur = ByteCursor(path.read_bytes())
    m = read_map(cur)
    return m, cur.remaining


def _summary(path: pathlib.Path, m: Map, trailing: int) -> Dict[str, Any]:
    return {
        "map": str(path),
        "header": m.header.to_dict(),
        "points": len(m.points),
        "enabled": m.enabled_count,
        "cells": m.total_cells,
        "trailing_bytes": trailing,
    }


def _emit(report: Dict[str, Any], json_path: Optional[str]) -> None:
    text = json.dumps(report, indent=2)
    if json_path:
        pathlib.Path(json_path).write_text(text, encoding="utf-8")
    print(text)


def cmd_info(args: argparse.Namespace) -> int:
    path = pathlib.Path(args.map)
    m, trailing = _decode_file(path)
    _emit(_summary(path, m, trailing), args.json)
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    settings = load_settings(args.config).merged(
        outdir=args.outdir,
        image_format=args.format,
        scale=args.scale,
        overflow=args.overflow,
        colors=True if args.colors else None,
    )
    path = pathlib.Path(args.map)
    m, trailing = _decode_file(path)
    report = _summary(path, m, trailing)

    try:
        heights = rasterize_heights(m, overflow=settings.overflow)
        colors = rasterize_colors(m) if settings.colors else None
    except ValueError as e:
        report["error"] = str(e)
        _emit(report, args.json)
        raise

    out_dir = pathlib.Path(settings.outdir)
    out_dir.mkdir(parents=True, exist_ok=True)
    ext = settings.image_format.lower()
    wrote = []

    height_path = out_dir / f"{path.stem}.{ext}"
    write_grayscale(height_path, heights, scale=settings.scale)
    wrote.append(str(height_path))
    if colors is not None:
        color_path = out_dir / f"{path.stem}_color.{ext}"
        write_rgb(color_path, colors, scale=settings.scale)
        wrote.append(str(color_path))

    report["outputs"] = wrote
    _emit(report, args.json)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Terrain map decoder and heightmap exporter")
    sub = p.add_subparsers(dest="cmd", required=True)

    pin = sub.add_parser("info", help="Decode a map file and report its header and cell counts")
    pin.add_argument("map", help="Path to map file")
    pin.add_argument("--json", help="Optional output JSON path")
    pin.set_defaults(func=cmd_info)

    pex = sub.add_parser("export", help="Decode a map file and write its heightmap image")
    pex.add_argument("map", help="Path to map file")
    pex.add_argument("--config", help="Settings file (.json/.yaml/.yml)")
    pex.add_argument("--outdir", help="Output folder (default: ./output)")
    pex.add_argument("--format", help="Image file extension understood by Pillow (default: bmp)")
    pex.add_argument("--scale", type=int, help="Integer nearest-neighbour upscale factor (default: 1)")
    pex.add_argument("--overflow", choices=list(OVERFLOW_POLICIES), help="Out-of-range height policy (default: clamp)")
    pex.add_argument("--colors", action="store_true", help="Also write the per-tile RGB colour map")
    pex.add_argument("--json", help="Optional output JSON path")
    pex.set_defaults(func=cmd_export)

    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
