"""
Type aliases for CAWA.

This module provides centralized type definitions used throughout the application
to ensure consistency and maintainability.

Type Aliases:
    ArgsList: List of string arguments
    ExitCode: Integer representing exit codes
    AliasName: Name of a stored alias
    CommandLine: A single shell command line
    AliasEntry: (name, display string) pair shown in listings and the selector
    AliasEntries: Ordered list of AliasEntry pairs
    RawAliasValue: JSON value stored for an alias (string or list of strings)
    RawConfig: Decoded JSON object of the alias file
"""

from typing import Any, Dict, List, Optional, Tuple, Union

ArgsList = List[str]
"""List of string arguments used for command-line arguments and commands."""

ExitCode = int
"""Integer representing process exit codes (0 for success, non-zero for errors)."""

AliasName = str
"""Name under which an alias is stored (e.g. 'build')."""

CommandLine = str
"""A shell command line as passed to `sh -c`."""

AliasEntry = Tuple[AliasName, str]
"""Alias name paired with its display string (e.g. ('build', 'make all'))."""

AliasEntries = List[AliasEntry]
"""Ordered list of alias entries, sorted by name for display."""

RawAliasValue = Union[str, List[str]]
"""JSON value of an alias: a single command string or a list of commands."""

RawConfig = Dict[str, Any]
"""Decoded top-level JSON object of the alias file."""

SelectionResult = Optional[AliasName]
"""Outcome of the interactive selector: an alias name, or None when cancelled."""
