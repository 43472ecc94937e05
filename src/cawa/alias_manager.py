"""Alias management functionality for CAWA."""

import logging

from .alias_config import AliasConfig
from .alias_spec import AliasSpec, ParallelAlias, SingleAlias
from .argument_processor import SUBCOMMANDS
from .exceptions import AliasNotFoundError, InvalidAliasError
from .types import AliasName, ArgsList


class AliasManager:
    """Manages adding, removing and listing aliases."""

    @staticmethod
    def build_alias_spec(commands: ArgsList, parallel: bool = False) -> AliasSpec:
        """
        Build the spec stored by `add`.

        Without the parallel flag, multiple command tokens are joined with
        single spaces into one command line, so `add build echo a '&&' echo b`
        stores "echo a && echo b".
        """
        if parallel:
            return ParallelAlias(commands)
        return SingleAlias(" ".join(commands))

    @staticmethod
    def add_alias(
        config: AliasConfig, name: AliasName, commands: ArgsList, parallel: bool = False
    ) -> AliasSpec:
        """Insert or overwrite an alias in config and return its spec."""
        if not name:
            raise InvalidAliasError("Alias name must not be empty")

        spec = AliasManager.build_alias_spec(commands, parallel)
        if name in SUBCOMMANDS:
            logging.warning(
                f"Alias '{name}' shadows the '{name}' subcommand; "
                "it can only be run from the selector"
            )
        config.set(name, spec)
        return spec

    @staticmethod
    def remove_alias(config: AliasConfig, name: AliasName) -> None:
        """Remove an alias from config."""
        if not config.remove(name):
            raise AliasNotFoundError(name)

    @staticmethod
    def format_alias_list(config: AliasConfig, program_name: str) -> list[str]:
        """Render the `list` output, one line per alias sorted by name."""
        if config.is_empty():
            return ["No aliases found."]

        lines = ["🐙 Aliases"]
        for name, display in config.sorted_entries():
            lines.append(f"{program_name} {name} → {display}")
        return lines
