"""Tests for the exception classes in CAWA."""

import pytest

from cawa.exceptions import (
    AliasNotFoundError,
    ArgumentParseError,
    CawaError,
    ConfigSaveError,
    InvalidAliasError,
    InvalidConfigError,
    NotificationError,
    SelectorError,
)


class TestExceptionsUnit:
    """Unit tests for the exception classes."""

    def test_cawa_error_with_message(self):
        error = CawaError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert isinstance(error, Exception)

    @pytest.mark.parametrize(
        "error",
        [
            InvalidConfigError("cfg.json"),
            ConfigSaveError("cfg.json"),
            AliasNotFoundError("x"),
            InvalidAliasError("bad"),
            ArgumentParseError("add", "bad"),
            NotificationError("no bus"),
            SelectorError("no tty"),
        ],
    )
    def test_all_are_cawa_errors(self, error):
        assert isinstance(error, CawaError)

    def test_invalid_config_error_message(self):
        error = InvalidConfigError("cfg.json", "bad value", alias="build")
        assert str(error) == "Invalid config in cfg.json (alias 'build'): bad value"
        assert error.path == "cfg.json"
        assert error.alias == "build"

    def test_invalid_config_error_default_message(self):
        assert str(InvalidConfigError("cfg.json")) == (
            "Invalid config in cfg.json: Invalid config format"
        )

    def test_config_save_error_message(self):
        error = ConfigSaveError("cfg.json", "Permission denied")
        assert str(error) == "Failed to write config file cfg.json: Permission denied"
        error = ConfigSaveError("cfg.json")
        assert str(error) == "Failed to write config file cfg.json"

    def test_alias_not_found_error_message(self):
        error = AliasNotFoundError("deploy")
        assert str(error) == "Alias 'deploy' not found."
        assert error.alias == "deploy"

    def test_argument_parse_error_message(self):
        error = ArgumentParseError("remove", "requires exactly one alias name")
        assert str(error) == (
            "Failed to parse argument 'remove': requires exactly one alias name"
        )
        assert error.argument == "remove"
