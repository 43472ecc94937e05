"""Environment variable operations for CAWA."""

import os
import sys

TRUTHY_VALUES = ("1", "true", "yes", "on")


def debug_log(message: str) -> None:
    """Log debug message when CAWA_DEBUG=1 is set."""
    if EnvironmentHelper.is_debug_enabled():
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment variable operations."""

    @staticmethod
    def is_debug_enabled() -> bool:
        """Check if debug tracing was requested via CAWA_DEBUG."""
        return os.environ.get("CAWA_DEBUG", "").lower() in TRUTHY_VALUES

    @staticmethod
    def get_config_override() -> str | None:
        """Get the alias file path from CAWA_CONFIG, if set to a non-empty value."""
        value = os.environ.get("CAWA_CONFIG", "").strip()
        return value or None
