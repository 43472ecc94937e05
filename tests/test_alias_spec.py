"""Tests for the alias specifications in CAWA."""

import pytest

from cawa.alias_spec import AliasSpec, ParallelAlias, SingleAlias
from cawa.exceptions import CawaError, InvalidAliasError


class TestSingleAlias:
    """Unit tests for SingleAlias."""

    def test_display_is_the_command(self):
        assert SingleAlias("make all").display() == "make all"

    def test_to_json_is_a_string(self):
        assert SingleAlias("echo a && echo b").to_json() == "echo a && echo b"

    def test_empty_command_rejected(self):
        with pytest.raises(InvalidAliasError):
            SingleAlias("")

    def test_equality(self):
        assert SingleAlias("ls") == SingleAlias("ls")
        assert SingleAlias("ls") != SingleAlias("ls -la")
        assert SingleAlias("ls") != ParallelAlias(["ls"])


class TestParallelAlias:
    """Unit tests for ParallelAlias."""

    def test_display_is_bracketed_and_comma_joined(self):
        spec = ParallelAlias(["npm run watch", "cargo watch"])
        assert spec.display() == "[npm run watch, cargo watch]"

    def test_single_command_group_stays_parallel(self):
        spec = ParallelAlias(["sleep 1"])
        assert spec.display() == "[sleep 1]"
        assert spec.to_json() == ["sleep 1"]

    def test_to_json_returns_a_copy(self):
        spec = ParallelAlias(["a", "b"])
        value = spec.to_json()
        value.append("c")
        assert spec.commands == ["a", "b"]

    def test_accepts_any_sequence(self):
        assert ParallelAlias(("a", "b")).commands == ["a", "b"]

    @pytest.mark.parametrize("commands", [[], ["ok", ""]])
    def test_invalid_groups_rejected(self, commands):
        with pytest.raises(InvalidAliasError):
            ParallelAlias(commands)

    def test_invalid_alias_error_is_cawa_error(self):
        with pytest.raises(CawaError):
            ParallelAlias([])


def test_base_spec_is_abstract():
    with pytest.raises(NotImplementedError):
        AliasSpec().display()
    with pytest.raises(NotImplementedError):
        AliasSpec().to_json()
