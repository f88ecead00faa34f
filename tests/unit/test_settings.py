"""
Unit tests for SettingsManager.
"""
import json

import pytest

from friendgraph.exceptions import SettingsError
from friendgraph.models import AnalyticsSettings
from friendgraph.settings import SettingsManager


class TestSettingsManager:
    def test_missing_file_yields_defaults(self, temp_dir):
        manager = SettingsManager(temp_dir / "absent.json")
        assert manager.settings == AnalyticsSettings()

    def test_loads_known_keys_and_ignores_others(self, settings_file):
        path = settings_file({"default_top_n": 3, "default_kind": "betweenness", "colour": "blue"})

        settings = SettingsManager(path).settings

        assert settings.default_top_n == 3
        assert settings.default_kind == "betweenness"
        assert not hasattr(settings, "colour")

    def test_log_level_normalized(self, settings_file):
        path = settings_file({"log_level": "debug"})
        assert SettingsManager(path).settings.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            json.dumps([1, 2, 3]),
            json.dumps({"default_top_n": 0}),
            json.dumps({"default_kind": "fame"}),
            json.dumps({"isolated_closeness": "n/a"}),
            json.dumps({"log_level": "LOUD"}),
        ],
    )
    def test_bad_file_falls_back_to_defaults(self, settings_file, content):
        path = settings_file(content)
        assert SettingsManager(path).settings == AnalyticsSettings()

    def test_strict_mode_raises(self, settings_file):
        path = settings_file("{not json")
        with pytest.raises(SettingsError) as excinfo:
            SettingsManager(path, strict=True)
        assert excinfo.value.original_error is not None

    def test_save_user_settings(self, temp_dir):
        path = temp_dir / "nested" / "settings.json"
        manager = SettingsManager(path)
        manager.settings.default_top_n = 4
        manager.settings.show_adjacency = False

        manager.save_user_settings()

        saved = json.loads(path.read_text())
        assert saved["default_top_n"] == 4
        assert saved["show_adjacency"] is False
        assert SettingsManager(path).settings.default_top_n == 4
