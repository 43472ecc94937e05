"""System detection functionality for CAWA."""

import shutil
import sys


class SystemDetector:
    """Handles environment detection functionality."""

    @staticmethod
    def find_executable(name: str) -> bool:
        """Check if executable exists in PATH."""
        return shutil.which(name) is not None

    @staticmethod
    def is_macos() -> bool:
        """Determine if system runs macOS."""
        return sys.platform == "darwin"

    @staticmethod
    def is_windows() -> bool:
        return sys.platform.startswith("win")
