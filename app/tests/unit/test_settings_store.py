"""Tests for SettingsStore - load/save of simulation configuration."""

import json
import logging

import pytest
from simulation.settings_store import SettingsStore, SimulationSettings


class TestSimulationSettings:
    def test_defaults(self):
        settings = SimulationSettings()
        assert settings.tick_interval_ms == 100.0
        assert settings.history_limit == 1000
        assert settings.random_seed is None
        assert (settings.broadcast_channel_min, settings.broadcast_channel_max) == (1, 100)

    @pytest.mark.parametrize("limit", [0, -1, 2.5, "10", True])
    def test_invalid_history_limit_falls_back(self, limit, caplog):
        with caplog.at_level(logging.WARNING):
            settings = SimulationSettings(history_limit=limit)
        assert settings.history_limit == 1000
        assert "history_limit" in caplog.text

    @pytest.mark.parametrize("interval", [0, -50, float("inf"), "fast"])
    def test_invalid_interval_falls_back(self, interval):
        assert SimulationSettings(tick_interval_ms=interval).tick_interval_ms == 100.0

    @pytest.mark.parametrize("seed", [-5, 1.5, "42"])
    def test_invalid_seed_is_dropped(self, seed):
        assert SimulationSettings(random_seed=seed).random_seed is None

    def test_valid_seed_kept(self):
        assert SimulationSettings(random_seed=0).random_seed == 0

    def test_inverted_channel_range_falls_back(self):
        settings = SimulationSettings(broadcast_channel_min=50, broadcast_channel_max=10)
        assert (settings.broadcast_channel_min, settings.broadcast_channel_max) == (1, 100)

    def test_from_dict_ignores_unknown_keys(self):
        settings = SimulationSettings.from_dict({"tick_interval_ms": 50, "theme": "dark"})
        assert settings.tick_interval_ms == 50


class TestSettingsStore:
    def test_missing_file_gives_defaults(self, tmp_path):
        store = SettingsStore(tmp_path / "simulation.json")
        assert store.settings == SimulationSettings()

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "nested" / "simulation.json"
        store = SettingsStore(path)
        store.update(tick_interval_ms=20, random_seed=7)
        assert json.loads(path.read_text())["random_seed"] == 7

        reloaded = SettingsStore(path)
        assert reloaded.settings.tick_interval_ms == 20
        assert reloaded.settings.random_seed == 7

    def test_corrupt_file_falls_back(self, tmp_path, caplog):
        path = tmp_path / "simulation.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING):
            store = SettingsStore(path)
        assert store.settings == SimulationSettings()
        assert "Failed to load" in caplog.text

    def test_invalid_values_in_file_fall_back(self, tmp_path):
        path = tmp_path / "simulation.json"
        path.write_text(json.dumps({"history_limit": -1, "tick_interval_ms": 0, "random_seed": -5}))
        assert SettingsStore(path).settings == SimulationSettings()

    def test_non_object_file_falls_back(self, tmp_path):
        path = tmp_path / "simulation.json"
        path.write_text("[1, 2, 3]")
        assert SettingsStore(path).settings == SimulationSettings()

    def test_default_path(self):
        assert SettingsStore._default_settings_path().parts[-2:] == (".pulseboard", "simulation.json")

    def test_path_property(self, tmp_path):
        path = tmp_path / "simulation.json"
        assert SettingsStore(path).path == path
