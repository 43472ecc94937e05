"""Desktop notification functionality for CAWA."""

import subprocess

from .environment_helper import debug_log
from .exceptions import NotificationError
from .system_detector import SystemDetector
from .types import AliasName


class Notifier:
    """Tells the desktop to show a popup when an alias finishes."""

    def __init__(self, program_name: str = "cs"):
        self.program_name = program_name

    @staticmethod
    def build_message(success: bool, alias: AliasName | None = None) -> str:
        """Build the notification body for a finished run."""
        if success:
            if alias:
                return f"Alias '{alias}' finished successfully."
            return "Command finished successfully."
        if alias:
            return f"Alias '{alias}' failed."
        return "Command failed."

    def build_summary(self) -> str:
        return f"🐙 {self.program_name}"

    def notify(self, success: bool, alias: AliasName | None = None) -> None:
        """
        Show a notification for a finished run.

        Raises:
            NotificationError: If no notification tool is available or it fails
        """
        summary = self.build_summary()
        body = self.build_message(success, alias)

        if SystemDetector.is_macos():
            command = self._build_osascript_command(summary, body)
        elif SystemDetector.is_windows():
            raise NotificationError(
                "Desktop notifications are not supported on Windows"
            )
        else:
            command = ["notify-send", summary, body]

        if not SystemDetector.find_executable(command[0]):
            raise NotificationError(f"'{command[0]}' not found in PATH")

        debug_log(f"notify: running {command}")
        try:
            result = subprocess.run(
                command, capture_output=True, text=True, check=False
            )
        except OSError as e:
            raise NotificationError(f"{command[0]} could not be started: {e}") from e

        if result.returncode != 0:
            raise NotificationError(
                f"{command[0]} failed (exit code: {result.returncode}): "
                f"{result.stderr.strip()}"
            )

    @staticmethod
    def _build_osascript_command(summary: str, body: str) -> list[str]:
        """Build an AppleScript dialog that stays until dismissed."""
        script = (
            f"display dialog {Notifier._applescript_quote(body)} "
            f"with title {Notifier._applescript_quote(summary)} "
            'buttons {"OK"} default button "OK"'
        )
        return ["osascript", "-e", script]

    @staticmethod
    def _applescript_quote(text: str) -> str:
        escaped = text.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
