"""Tests for entity_hints.config.HintsConfig."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from entity_hints.config import HintsConfig, default_config_path


class TestHintsConfigLoad:
    def test_missing_file_returns_defaults(self, tmp_path):
        cfg = HintsConfig.load(tmp_path / "missing.json")
        assert cfg.catalog_path is None
        assert cfg.languages == ["html"]
        assert cfg.priority == 1
        assert cfg.log_level == "WARNING"

    def test_load_existing_file(self, tmp_path):
        f = tmp_path / "cfg.json"
        f.write_text(json.dumps({
            "catalog_path": "/data/chars.json",
            "languages": ["html", "php"],
            "priority": 5,
        }))
        cfg = HintsConfig.load(f)
        assert cfg.catalog_path == Path("/data/chars.json")
        assert cfg.languages == ["html", "php"]
        assert cfg.priority == 5
        assert cfg.log_level == "WARNING"

    def test_invalid_file(self, tmp_path):
        f = tmp_path / "cfg.json"
        f.write_text(json.dumps({"priority": "high"}))
        with pytest.raises(ValidationError):
            HintsConfig.load(f)

    def test_empty_language_list_rejected(self, tmp_path):
        f = tmp_path / "cfg.json"
        f.write_text(json.dumps({"languages": []}))
        with pytest.raises(ValidationError):
            HintsConfig.load(f)

    def test_default_path(self):
        assert default_config_path().name == "entity_hints.json"


class TestHintsConfigSave:
    def test_save_creates_parent_dirs(self, tmp_path):
        nested = tmp_path / "a" / "b" / "cfg.json"
        cfg = HintsConfig(config_path=nested, priority=3)
        cfg.save()
        assert nested.exists()
        data = json.loads(nested.read_text())
        assert data["priority"] == 3
        assert data["catalog_path"] is None

    def test_round_trip(self, tmp_path):
        f = tmp_path / "cfg.json"
        cfg = HintsConfig(config_path=f, catalog_path=Path("/c.json"), log_level="DEBUG")
        cfg.languages = ["html", "xml"]
        cfg.save()
        loaded = HintsConfig.load(f)
        assert loaded.catalog_path == Path("/c.json")
        assert loaded.languages == ["html", "xml"]
        assert loaded.log_level == "DEBUG"
