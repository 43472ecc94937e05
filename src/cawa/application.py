#!/usr/bin/env python3
"""Main application orchestrator for CAWA."""

import logging
import sys
from typing import Optional

from .alias_config import AliasConfig
from .alias_manager import AliasManager
from .argument_processor import (
    ACTION_ADD,
    ACTION_HELP,
    ACTION_LIST,
    ACTION_REMOVE,
    ACTION_TUI,
    ArgumentProcessor,
    ParsedCommand,
)
from .command_executor import PREFIX, CommandExecutor, ExecutionResult
from .config_manager import ConfigManager
from .environment_helper import debug_log
from .exceptions import ArgumentParseError, CawaError, NotificationError
from .notifier import Notifier
from .path_helper import PathHelper
from .selector import Selector
from .types import AliasName, ArgsList, ExitCode


def print_help(program_name: str = "cs") -> None:
    """Print concise help message about cawa functionality."""
    help_text = f"""cawa - Context-Aware Workspace Automation
Usage:
  {program_name} add <alias> <command...>              # Store a command
  {program_name} add --parallel <alias> <cmd> <cmd>    # Store commands run concurrently
  {program_name} remove <alias>                        # Delete an alias
  {program_name} list                                  # Show stored aliases
  {program_name} tui                                   # Pick an alias interactively
  {program_name} <alias> [args...]                     # Run an alias, appending args

Options:
  --notify    Show a desktop notification when the alias finishes
  -h, --help  Show this message

  Aliases are stored per directory in .cawa_cfg.json (override with CAWA_CONFIG)
  Set "enable_timing": true in that file to print how long each run took
  Set CAWA_DEBUG=1 for verbose tracing
"""
    print(help_text)


class Application:
    """Main application orchestrator."""

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
        alias_manager: Optional[AliasManager] = None,
        command_executor: Optional[CommandExecutor] = None,
        notifier: Optional[Notifier] = None,
        selector: Optional[Selector] = None,
        program_name: str = "cs",
    ):
        self.program_name = program_name
        self.config_manager = config_manager or ConfigManager()
        self.alias_manager = alias_manager or AliasManager()
        self.command_executor = command_executor or CommandExecutor()
        self.notifier = notifier or Notifier(program_name)
        self.selector = selector or Selector()

    def run(self, args: ArgsList) -> ExitCode:
        """Run the application with the given arguments."""
        try:
            command = ArgumentProcessor.parse_args(args)
        except ArgumentParseError as e:
            logging.error(str(e))
            print(f"Run '{self.program_name} --help' for usage.", file=sys.stderr)
            return 1

        debug_log(f"run: parsed {command}")

        if command.action == ACTION_HELP:
            print_help(self.program_name)
            return 0

        try:
            if command.action == ACTION_ADD:
                return self._add(command)
            if command.action == ACTION_REMOVE:
                return self._remove(command)
            if command.action == ACTION_LIST:
                return self._list()
            if command.action == ACTION_TUI:
                return self._select_and_run(command.notify)
            return self._run_alias(command.alias, command.extra_args, command.notify)
        except CawaError as e:
            logging.error(str(e))
            return 1

    def _add(self, command: ParsedCommand) -> ExitCode:
        config = self.config_manager.load_config()
        spec = self.alias_manager.add_alias(
            config, command.alias, command.commands, command.parallel
        )
        self.config_manager.save_config(config)
        print(f"{PREFIX} {self.program_name} now stores {spec.display()}", flush=True)
        return 0

    def _remove(self, command: ParsedCommand) -> ExitCode:
        config = self.config_manager.load_config()
        self.alias_manager.remove_alias(config, command.alias)
        self.config_manager.save_config(config)
        print(f"{PREFIX} {self.program_name} {command.alias} removed.", flush=True)
        return 0

    def _list(self) -> ExitCode:
        config = self.config_manager.load_config()
        for line in self.alias_manager.format_alias_list(config, self.program_name):
            print(line, flush=True)
        return 0

    def _select_and_run(self, notify: bool) -> ExitCode:
        """Let the user choose an alias, then run it without extra arguments."""
        config = self.config_manager.load_config()
        alias = self.selector.select(config, self.program_name)
        if alias is None:
            debug_log("_select_and_run: nothing selected")
            return 0
        return self._execute(config, alias, [], notify)

    def _run_alias(
        self, alias: AliasName, extra_args: ArgsList, notify: bool
    ) -> ExitCode:
        config = self.config_manager.load_config()
        return self._execute(config, alias, extra_args, notify)

    def _execute(
        self,
        config: AliasConfig,
        alias: AliasName,
        extra_args: ArgsList,
        notify: bool,
    ) -> ExitCode:
        spec = config.lookup(alias)
        if spec is None:
            logging.error(f"Unknown command or alias: {alias}")
            return 1

        result = self.command_executor.run(spec, extra_args)

        if config.timing_enabled:
            self._report_timing(result)

        if notify:
            self._send_notification(result.success, alias)

        return 0 if result.success else 1

    @staticmethod
    def _report_timing(result: ExecutionResult) -> None:
        if result.success:
            print(f"{PREFIX}⏱️  {result.elapsed:.3f} s", flush=True)
        else:
            print(
                f"{PREFIX}⏱️  {result.elapsed:.3f} s (Failed)",
                file=sys.stderr,
                flush=True,
            )

    def _send_notification(self, success: bool, alias: AliasName) -> None:
        try:
            self.notifier.notify(success, alias)
        except NotificationError as e:
            logging.error(f"Notification failed to show: {e}")


def main() -> ExitCode:
    """Main entry point."""
    try:
        app = Application(program_name=PathHelper.get_program_name(sys.argv))
        return app.run(sys.argv[1:])
    except KeyboardInterrupt:
        return 130
    except CawaError as e:
        logging.error(str(e))
        return 1
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        return 1
