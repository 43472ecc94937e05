"""Tests for the environment helper functionality in CAWA."""

import pytest

from cawa.environment_helper import EnvironmentHelper, debug_log


class TestDebugLog:
    """Test debug logging functionality."""

    def test_debug_log_no_output_when_disabled(self, capsys, monkeypatch):
        """Test that debug_log doesn't output when CAWA_DEBUG is not set."""
        monkeypatch.delenv("CAWA_DEBUG", raising=False)
        debug_log("test message")
        captured = capsys.readouterr()
        assert "test message" not in captured.err

    @pytest.mark.parametrize(
        "debug_value", ["1", "true", "yes", "on", "TRUE", "YES", "ON"]
    )
    def test_debug_log_outputs_when_enabled(self, capsys, monkeypatch, debug_value):
        """Test that debug_log outputs when CAWA_DEBUG is set to truthy values."""
        monkeypatch.setenv("CAWA_DEBUG", debug_value)
        test_message = "debug test message"
        debug_log(test_message)
        captured = capsys.readouterr()
        assert f"[DEBUG] {test_message}" in captured.err
        assert captured.out == ""

    @pytest.mark.parametrize("debug_value", ["0", "false", "", "maybe"])
    def test_debug_disabled_values(self, monkeypatch, debug_value):
        monkeypatch.setenv("CAWA_DEBUG", debug_value)
        assert EnvironmentHelper.is_debug_enabled() is False


class TestConfigOverride:
    def test_unset(self):
        assert EnvironmentHelper.get_config_override() is None

    def test_set(self, monkeypatch):
        monkeypatch.setenv("CAWA_CONFIG", " /tmp/a.json ")
        assert EnvironmentHelper.get_config_override() == "/tmp/a.json"

