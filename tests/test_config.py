"""Tests for season configuration loading."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from championship.config import QuickSimSettings, SeasonConfig, load_config


class TestSeasonConfig:
    def test_defaults(self):
        config = SeasonConfig()
        assert config.season_id == "25/26"
        assert config.shuffle_fixtures is False
        assert config.allow_bye is False
        assert config.check_unique_ids is False
        assert config.quick_sim.home_advantage == 1.15

    def test_invalid_home_advantage(self):
        with pytest.raises(ValidationError):
            QuickSimSettings(home_advantage=0.5)


class TestLoadConfig:
    def test_missing_file_uses_defaults(self, tmp_path, caplog):
        config = load_config(tmp_path / "nope.json")
        assert config == SeasonConfig()
        assert "not found" in caplog.text

    def test_load_from_json(self, tmp_path):
        path = tmp_path / "season.json"
        path.write_text(json.dumps({
            "season": {"season_id": "26/27", "shuffle_fixtures": True, "seed": 3},
            "quick_sim": {"goal_scale": 2.0, "max_goals": 5},
        }))
        config = load_config(path)
        assert config.season_id == "26/27"
        assert config.shuffle_fixtures is True
        assert config.seed == 3
        assert config.quick_sim.goal_scale == 2.0
        assert config.quick_sim.max_goals == 5
        assert config.quick_sim.home_advantage == 1.15

    def test_partial_file(self, tmp_path):
        path = tmp_path / "season.json"
        path.write_text(json.dumps({"season": {"allow_bye": True}}))
        config = load_config(str(path))
        assert config.allow_bye is True
        assert config.season_id == "25/26"
