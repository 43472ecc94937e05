"""Configuration management functionality for CAWA."""

import json
from pathlib import Path

from .alias_config import AliasConfig
from .alias_spec import AliasSpec, ParallelAlias, SingleAlias
from .environment_helper import debug_log
from .exceptions import ConfigSaveError, InvalidAliasError, InvalidConfigError
from .path_helper import PathHelper
from .types import RawConfig

MAX_CONFIG_SIZE = 10 * 1024 * 1024


class ConfigManager:
    """Manages loading and saving of the per-directory alias file."""

    @staticmethod
    def find_config_file() -> Path:
        """Find the alias file path for the current directory."""
        return PathHelper.get_config_path()

    @staticmethod
    def load_config(config_file: Path | None = None) -> AliasConfig:
        """
        Load the alias file.

        Args:
            config_file: Path to the alias file (defaults to find_config_file())

        Returns:
            AliasConfig with the alias map and flags; empty when the file
            does not exist

        Raises:
            InvalidConfigError: If the file cannot be read or parsed
        """
        if config_file is None:
            config_file = ConfigManager.find_config_file()

        if not config_file.exists():
            debug_log(f"load_config: {config_file} does not exist, using defaults")
            return AliasConfig()

        file_size = config_file.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            raise InvalidConfigError(
                str(config_file), f"Config file too large ({file_size} bytes)"
            )

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except UnicodeDecodeError as e:
            raise InvalidConfigError(
                str(config_file), f"Invalid file encoding: {e}"
            ) from e
        except json.JSONDecodeError as e:
            raise InvalidConfigError(
                str(config_file), f"Failed to parse config file: {e}"
            ) from e
        except OSError as e:
            raise InvalidConfigError(
                str(config_file), f"Failed to read config file: {e}"
            ) from e

        config = ConfigManager.parse_config(data, str(config_file))
        debug_log(f"load_config: loaded {len(config)} aliases from {config_file}")
        return config

    @staticmethod
    def parse_config(data: object, config_file: str) -> AliasConfig:
        """Validate a decoded alias file and build an AliasConfig from it."""
        if not isinstance(data, dict):
            raise InvalidConfigError(config_file, "Top level must be a JSON object")

        identifier = data.get("identifier")
        if identifier is not None and not isinstance(identifier, str):
            raise InvalidConfigError(config_file, "'identifier' must be a string")

        enable_timing = data.get("enable_timing")
        if enable_timing is not None and not isinstance(enable_timing, bool):
            raise InvalidConfigError(config_file, "'enable_timing' must be a boolean")

        raw_aliases = data.get("aliases")
        if raw_aliases is None:
            raw_aliases = {}
        if not isinstance(raw_aliases, dict):
            raise InvalidConfigError(config_file, "'aliases' must be a JSON object")

        aliases = {}
        for name, value in raw_aliases.items():
            if not name:
                raise InvalidConfigError(config_file, "Alias names must not be empty")
            aliases[name] = ConfigManager._parse_alias_value(name, value, config_file)

        return AliasConfig(aliases, identifier=identifier, enable_timing=enable_timing)

    @staticmethod
    def _parse_alias_value(name: str, value: object, config_file: str) -> AliasSpec:
        """Turn a JSON alias value into the matching AliasSpec."""
        try:
            if isinstance(value, str):
                return SingleAlias(value)
            if isinstance(value, list) and all(isinstance(v, str) for v in value):
                return ParallelAlias(value)
        except InvalidAliasError as e:
            raise InvalidConfigError(config_file, e.message, alias=name) from e

        raise InvalidConfigError(
            config_file,
            "Alias value must be a string or a list of strings",
            alias=name,
        )

    @staticmethod
    def save_config(config: AliasConfig, config_file: Path | None = None) -> None:
        """
        Write the alias file.

        Raises:
            ConfigSaveError: If the file cannot be written
        """
        if config_file is None:
            config_file = ConfigManager.find_config_file()

        content = ConfigManager.serialize_config(config.to_dict())
        try:
            with open(config_file, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise ConfigSaveError(str(config_file), str(e)) from e

        debug_log(f"save_config: wrote {len(config)} aliases to {config_file}")

    @staticmethod
    def serialize_config(data: RawConfig) -> str:
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
