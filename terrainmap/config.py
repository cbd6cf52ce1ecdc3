"""
Export settings, optionally loaded from a JSON or YAML file.
"""

from __future__ import annotations

import dataclasses
import json
import pathlib
from typing import Any, Dict, Optional, Union

import yaml

from .raster import OVERFLOW_POLICIES


@dataclasses.dataclass
class ExportSettings:
    outdir: str = "output"
    image_format: str = "bmp"
    scale: int = 1
    overflow: str = "clamp"
    colors: bool = False

    def validate(self) -> None:
        for name, kind in (("outdir", str), ("image_format", str), ("overflow", str), ("colors", bool)):
            v = getattr(self, name)
            if not isinstance(v, kind):
                raise ValueError(f"{name} expected {kind.__name__}, got {type(v).__name__}")
        if not isinstance(self.scale, int) or isinstance(self.scale, bool):
            raise ValueError(f"scale expected int, got {type(self.scale).__name__}")
        if self.overflow not in OVERFLOW_POLICIES:
            raise ValueError(f"overflow must be one of: {','.join(OVERFLOW_POLICIES)}")
        if self.scale < 1:
            raise ValueError(f"scale must be >= 1, got {self.scale}")
        if not self.image_format or "." in self.image_format:
            raise ValueError(f"Invalid image format: {self.image_format!r}")

    def merged(self, **overrides: Any) -> "ExportSettings":
        """Copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        out = dataclasses.replace(self, **changes)
        out.validate()
        return out


def _load_config(path: pathlib.Path) -> Dict[str, Any]:
    ext = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if ext == ".json":
        data = json.loads(text)
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping/object")
    return data


def load_settings(path: Optional[Union[str, pathlib.Path]] = None) -> ExportSettings:
    if path is None:
        return ExportSettings()
    data = _load_config(pathlib.Path(path))
    known = {f.name for f in dataclasses.fields(ExportSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(unknown)}")
    settings = ExportSettings(**data)
    settings.validate()
    return settings
