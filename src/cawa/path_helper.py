"""Path operations for CAWA."""

from pathlib import Path
from typing import Sequence

from .environment_helper import EnvironmentHelper

CONFIG_FILE_NAME = ".cawa_cfg.json"
DEFAULT_PROGRAM_NAME = "cs"


class PathHelper:
    """Utility class for path operations."""

    @staticmethod
    def get_config_path() -> Path:
        """Get the path to the alias file (which may not exist yet)."""
        if override := EnvironmentHelper.get_config_override():
            return Path(override).expanduser()

        # Aliases are per directory
        return Path.cwd() / CONFIG_FILE_NAME

    @staticmethod
    def get_program_name(argv: Sequence[str]) -> str:
        """Return the name the program was invoked as, for display text."""
        if not argv or not argv[0]:
            return DEFAULT_PROGRAM_NAME
        name = Path(argv[0]).name
        return name or DEFAULT_PROGRAM_NAME
