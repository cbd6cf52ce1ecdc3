"""Tests for export settings loading."""

import json

import pytest

from terrainmap.config import ExportSettings, load_settings


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings == ExportSettings()
        assert settings.outdir == "output"
        assert settings.image_format == "bmp"
        assert settings.overflow == "clamp"

    def test_yaml(self, tmp_path):
        path = tmp_path / "export.yaml"
        path.write_text("outdir: renders\nimage_format: png\nscale: 4\ncolors: true\n", encoding="utf-8")
        settings = load_settings(path)

        assert settings.outdir == "renders"
        assert settings.image_format == "png"
        assert settings.scale == 4
        assert settings.colors is True
        assert settings.overflow == "clamp"

    def test_json(self, tmp_path):
        path = tmp_path / "export.json"
        path.write_text(json.dumps({"overflow": "wrap"}), encoding="utf-8")
        assert load_settings(path).overflow == "wrap"

    def test_root_must_be_mapping(self, tmp_path):
        path = tmp_path / "export.yml"
        path.write_text("- png\n- bmp\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_settings(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "export.json"
        path.write_text(json.dumps({"outdir": "x", "dpi": 300}), encoding="utf-8")
        with pytest.raises(ValueError, match="dpi"):
            load_settings(path)

    @pytest.mark.parametrize(
        "body",
        [
            '{"overflow": "saturate"}',
            '{"scale": 0}',
            '{"image_format": ".png"}',
            '{"colors": "false"}',
            '{"scale": 2.7}',
            '{"scale": [2]}',
            '{"scale": true}',
            '{"outdir": 5}',
        ],
    )
    def test_invalid_values(self, tmp_path, body):
        path = tmp_path / "export.json"
        path.write_text(body, encoding="utf-8")
        with pytest.raises(ValueError):
            load_settings(path)


class TestMerged:
    def test_none_keeps_file_value(self):
        base = ExportSettings(outdir="renders", scale=2)
        merged = base.merged(outdir=None, scale=3, image_format="png")

        assert merged.outdir == "renders"
        assert merged.scale == 3
        assert merged.image_format == "png"
        assert base.scale == 2

    def test_invalid_override(self):
        with pytest.raises(ValueError):
            ExportSettings().merged(overflow="bogus")


class TestYamlErrors:
    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "export.yaml"
        path.write_text("outdir: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML config"):
            load_settings(path)

    def test_wrong_type_message(self, tmp_path):
        path = tmp_path / "export.yaml"
        path.write_text("scale: [2]\n", encoding="utf-8")
        with pytest.raises(ValueError, match="scale expected int, got list"):
            load_settings(path)

    def test_string_bool_rejected(self, tmp_path):
        path = tmp_path / "export.yaml"
        path.write_text("colors: 'false'\n", encoding="utf-8")
        with pytest.raises(ValueError, match="colors expected bool, got str"):
            load_settings(path)
