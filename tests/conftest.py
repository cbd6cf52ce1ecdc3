"""Shared fixtures: build map files byte by byte."""

import struct

import pytest


def header_bytes(width=2, height=1, min_height=0.0, max_height=1.0, name=b"test map", signature=0x5041_4D54):
    out = struct.pack("<II", signature, 7)
    out += struct.pack("<ff", 1.5, 2.5)
    out += struct.pack("<ff", min_height, max_height)
    out += struct.pack("<II", width, height)
    out += struct.pack("<5f", 1.0, 2.0, 3.0, 4.0, 5.0)
    out += struct.pack("<HH", 11, 12)
    out += struct.pack("<ff", 6.0, 7.0)
    out += name.ljust(0x20, b"\x00")[:0x20]
    return out


def point_bytes(height, reserved=0, red=0, green=0, blue=0):
    return struct.pack("<fBBBB", height, reserved, red, green, blue)


def data_run(*points):
    """Run code for ``len(points)`` data cells followed by the records."""
    return struct.pack("<b", len(points) - 1) + b"".join(points)


def skip_run(count):
    return struct.pack("<b", -count)


@pytest.fixture
def build_map():
    def _build(width, height, body, **header_kwargs):
        return header_bytes(width=width, height=height, **header_kwargs) + body

    return _build
