"""Tests for GameConfig."""

import json

import pytest

from wrap_snake.config import GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert (cfg.cols, cfg.rows) == (20, 20)
        assert cfg.initial_speed == 6
        assert cfg.max_speed == 20
        assert cfg.speedup_every == 3
        assert cfg.min_interval_ms == 60
        assert cfg.spawn_attempts == 2000
        assert cfg.seed is None

    def test_frozen(self):
        cfg = GameConfig()
        with pytest.raises(AttributeError):
            cfg.cols = 5  # type: ignore[misc]

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(cols=12, rows=9, seed=7)
        path = tmp_path / "sub" / "config.json"
        cfg.save(path)
        assert json.loads(path.read_text())["cols"] == 12
        assert GameConfig.load(path) == cfg

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"cols": 2},
            {"rows": 0},
            {"initial_length": 0},
            {"cols": 4, "initial_length": 5},
            {"initial_speed": 0},
            {"initial_speed": 10, "max_speed": 8},
            {"speedup_every": 0},
            {"min_interval_ms": 0},
            {"spawn_attempts": 0},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs)
