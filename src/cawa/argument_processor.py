"""Argument parsing functionality for CAWA."""

from .exceptions import ArgumentParseError
from .types import AliasName, ArgsList

ACTION_HELP = "help"
ACTION_ADD = "add"
ACTION_REMOVE = "remove"
ACTION_LIST = "list"
ACTION_TUI = "tui"
ACTION_RUN = "run"

SUBCOMMANDS = (ACTION_ADD, ACTION_REMOVE, ACTION_LIST, ACTION_TUI)

NOTIFY_FLAG = "--notify"
PARALLEL_FLAGS = ("-p", "--parallel")
HELP_FLAGS = ("-h", "--help")


class ParsedCommand:
    """Structured description of what the command line asked for."""

    def __init__(
        self,
        action: str,
        alias: AliasName | None = None,
        commands: ArgsList | None = None,
        extra_args: ArgsList | None = None,
        parallel: bool = False,
        notify: bool = False,
    ):
        self.action = action
        self.alias = alias
        self.commands = commands or []
        self.extra_args = extra_args or []
        self.parallel = parallel
        self.notify = notify

    def __eq__(self, other):
        if not isinstance(other, ParsedCommand):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"ParsedCommand({fields})"


class ArgumentProcessor:
    """Handles argument parsing."""

    @staticmethod
    def parse_args(args: ArgsList) -> ParsedCommand:
        """
        Parse command-line arguments (without the program name).

        Leading ``--notify`` flags are consumed before the subcommand. For
        the alias form every token after the alias name is passed through
        untouched, so flags meant for the aliased command are never eaten.
        """
        notify = False
        i = 0
        while i < len(args) and args[i] == NOTIFY_FLAG:
            notify = True
            i += 1

        if i >= len(args) or args[i] in HELP_FLAGS:
            return ParsedCommand(ACTION_HELP, notify=notify)

        head, rest = args[i], args[i + 1 :]

        if head == ACTION_ADD:
            return ArgumentProcessor._parse_add(rest, notify)
        if head == ACTION_REMOVE:
            return ArgumentProcessor._parse_remove(rest, notify)
        if head in (ACTION_LIST, ACTION_TUI):
            return ArgumentProcessor._parse_no_positionals(head, rest, notify)

        return ParsedCommand(ACTION_RUN, alias=head, extra_args=rest, notify=notify)

    @staticmethod
    def _parse_add(args: ArgsList, notify: bool) -> ParsedCommand:
        """Parse `add [-p|--parallel] <alias> <command...>`."""
        parallel = False
        positionals: ArgsList = []

        i = 0
        while i < len(args):
            arg = args[i]
            if arg == "--":
                positionals.extend(args[i + 1 :])
                break
            if arg in PARALLEL_FLAGS:
                parallel = True
            elif arg == NOTIFY_FLAG:
                notify = True
            elif arg in HELP_FLAGS:
                return ParsedCommand(ACTION_HELP, notify=notify)
            else:
                positionals.append(arg)
            i += 1

        if not positionals:
            raise ArgumentParseError(ACTION_ADD, "requires an alias name")
        alias, commands = positionals[0], positionals[1:]
        if not alias:
            raise ArgumentParseError(ACTION_ADD, "alias name must not be empty")
        if not commands:
            raise ArgumentParseError(alias, "requires at least one command")

        return ParsedCommand(
            ACTION_ADD, alias=alias, commands=commands, parallel=parallel, notify=notify
        )

    @staticmethod
    def _parse_remove(args: ArgsList, notify: bool) -> ParsedCommand:
        """Parse `remove <alias>`."""
        notify, positionals = ArgumentProcessor._strip_global_flags(args, notify)
        if len(positionals) != 1:
            raise ArgumentParseError(ACTION_REMOVE, "requires exactly one alias name")
        return ParsedCommand(ACTION_REMOVE, alias=positionals[0], notify=notify)

    @staticmethod
    def _parse_no_positionals(
        action: str, args: ArgsList, notify: bool
    ) -> ParsedCommand:
        """Parse `list` and `tui`, which take no positional arguments."""
        notify, positionals = ArgumentProcessor._strip_global_flags(args, notify)
        if positionals:
            raise ArgumentParseError(
                positionals[0], f"unexpected argument for {action}"
            )
        return ParsedCommand(action, notify=notify)

    @staticmethod
    def _strip_global_flags(args: ArgsList, notify: bool) -> tuple[bool, ArgsList]:
        """Pull --notify out of a subcommand's arguments."""
        positionals: ArgsList = []
        for i, arg in enumerate(args):
            if arg == "--":
                positionals.extend(args[i + 1 :])
                break
            if arg == NOTIFY_FLAG:
                notify = True
            else:
                positionals.append(arg)
        return notify, positionals
