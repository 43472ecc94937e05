"""Command building and execution functionality for CAWA."""

import logging
import subprocess
import time
from concurrent.futures import ThreadPoolExecutor

from .alias_spec import AliasSpec, ParallelAlias, SingleAlias
from .environment_helper import debug_log
from .types import ArgsList, CommandLine

PREFIX = "🐙"


class ExecutionResult:
    """Outcome of one alias invocation."""

    def __init__(self, success: bool, elapsed: float):
        self.success = success
        self.elapsed = elapsed

    def __repr__(self):
        return f"ExecutionResult(success={self.success}, elapsed={self.elapsed:.3f})"


class CommandExecutor:
    """Handles command building and execution."""

    @staticmethod
    def run_shell(cmd: CommandLine) -> bool:
        """Run cmd through the shell with inherited stdio, returning True on exit 0."""
        debug_log(f"run_shell: {cmd}")
        try:
            process = subprocess.Popen(cmd, shell=True)
        except (OSError, ValueError) as e:
            logging.error(f"Failed to launch shell for '{cmd}': {e}")
            return False

        exit_code = process.wait()
        debug_log(f"run_shell: '{cmd}' exited with {exit_code}")
        return exit_code == 0

    @staticmethod
    def build_command_line(cmd: CommandLine, extra_args: ArgsList) -> CommandLine:
        """Append extra arguments to a single command, space separated."""
        if not extra_args:
            return cmd
        return f"{cmd} {' '.join(extra_args)}"

    @staticmethod
    def run(spec: AliasSpec, extra_args: ArgsList | None = None) -> ExecutionResult:
        """Execute an alias and time it."""
        if extra_args is None:
            extra_args = []

        if isinstance(spec, SingleAlias):
            final_cmd = CommandExecutor.build_command_line(spec.command, extra_args)
            print(f"{PREFIX} Executing: {final_cmd}", flush=True)
            start = time.perf_counter()
            success = CommandExecutor.run_shell(final_cmd)
        elif isinstance(spec, ParallelAlias):
            print(f"{PREFIX} Executing (parallel): {spec.commands}", flush=True)
            if extra_args:
                logging.warning("Arguments ignored for parallel alias.")
            start = time.perf_counter()
            success = CommandExecutor.run_parallel(spec.commands)
        else:
            raise TypeError(f"Unsupported alias spec: {spec!r}")

        elapsed = time.perf_counter() - start
        debug_log(f"run: success={success}, elapsed={elapsed:.3f}s")
        return ExecutionResult(success, elapsed)

    @staticmethod
    def run_parallel(commands: ArgsList) -> bool:
        """
        Run every command concurrently and wait for all of them.

        A failing command does not stop its siblings. The group succeeds only
        when every command exits 0.
        """
        with ThreadPoolExecutor(max_workers=len(commands)) as executor:
            futures = [
                executor.submit(CommandExecutor.run_shell, cmd) for cmd in commands
            ]
            results = [future.result() for future in futures]

        for cmd, ok in zip(commands, results):
            if not ok:
                logging.error(f"Parallel command failed: {cmd}")

        return all(results)
