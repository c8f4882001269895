"""Tests for MapConfig."""

from worldmapidentity.loader import DEFAULT_COUNTRIES, MapConfig
from worldmapidentity.shapes import GEO_URL


class TestFromEnv:

    def test_empty_environment(self):
        config = MapConfig.from_env({})
        assert config.enabled is False
        assert config.sheet_id == ""
        assert config.sheet_name == "Sheet1"
        assert config.geo_url == GEO_URL
        assert config.default_countries == DEFAULT_COUNTRIES
        assert config.anchors == {"china": "CHN"}

    def test_reads_prefixed_variables(self):
        config = MapConfig.from_env({
            "WORLDMAP_ENABLE_SHEETS": "TRUE",
            "WORLDMAP_SHEET_ID": " abc123 ",
            "WORLDMAP_SHEET_NAME": "Offices",
            "WORLDMAP_SCRIPT_URL": "https://script.test/exec",
            "WORLDMAP_SHEETS_API_KEY": "secret",
            "WORLDMAP_GEO_URL": "https://example.test/110m.json",
        })
        assert config.enabled is True
        assert config.sheet_id == "abc123"
        assert config.sheet_name == "Offices"
        assert config.script_url == "https://script.test/exec"
        assert config.api_key == "secret"
        assert config.geo_url == "https://example.test/110m.json"

    def test_only_true_enables(self):
        for value in ("1", "yes", "false", ""):
            assert MapConfig.from_env({"WORLDMAP_ENABLE_SHEETS": value}).enabled is False

    def test_overrides_win(self):
        config = MapConfig.from_env({"WORLDMAP_SHEET_ID": "env"}, sheet_id="explicit", timeout=5)
        assert config.sheet_id == "explicit"
        assert config.timeout == 5

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("WORLDMAP_SHEET_ID", "from-os")
        assert MapConfig.from_env().sheet_id == "from-os"


def test_describe_masks_key():
    config = MapConfig(enabled=True, sheet_id="abc", api_key="secret")
    summary = config.describe()
    assert summary["api_key"] == "***"
    assert "secret" not in str(summary)
    assert MapConfig().describe()["api_key"] == ""
