"""Interactive alias selector for CAWA."""

import logging
import os
import sys
from typing import Optional

try:
    import curses
except ImportError:  # CPython on Windows ships without _curses
    curses = None

from .alias_config import AliasConfig
from .environment_helper import debug_log
from .exceptions import SelectorError
from .types import AliasEntries, AliasName, SelectionResult

POLL_INTERVAL_MS = 250

# ncurses key codes, so key handling does not need the curses module
KEY_DOWN = 0o402
KEY_UP = 0o403
KEY_ENTER = 0o527
KEY_ESCAPE = 27
KEY_CTRL_C = 3
CANCEL_KEYS = (ord("q"), KEY_ESCAPE, KEY_CTRL_C)
UP_KEYS = (KEY_UP, ord("k"))
DOWN_KEYS = (KEY_DOWN, ord("j"))
CONFIRM_KEYS = (10, 13, KEY_ENTER)

TITLE = " 🐙 CAWA Aliases "
HIGHLIGHT_SYMBOL = ">> "
HELP_TEXT = "↑/↓: Navigate • Enter: Execute • q: Quit"


class SelectorState:
    """Alias entries plus the cursor position (None when there are no entries)."""

    def __init__(self, entries: AliasEntries):
        self.entries = list(entries)
        self.cursor: Optional[int] = 0 if self.entries else None

    @classmethod
    def from_config(cls, config: AliasConfig) -> "SelectorState":
        return cls(config.sorted_entries())

    def next(self) -> None:
        """Move down, wrapping to the first entry."""
        if not self.entries:
            return
        if self.cursor is None or self.cursor >= len(self.entries) - 1:
            self.cursor = 0
        else:
            self.cursor += 1

    def previous(self) -> None:
        """Move up, wrapping to the last entry."""
        if not self.entries:
            return
        if self.cursor is None or self.cursor == 0:
            self.cursor = len(self.entries) - 1
        else:
            self.cursor -= 1

    def selected_name(self) -> Optional[AliasName]:
        if self.cursor is None or not 0 <= self.cursor < len(self.entries):
            return None
        return self.entries[self.cursor][0]


def handle_key(state: SelectorState, key: int) -> tuple[bool, SelectionResult]:
    """Apply one key press; return (finished, selected alias name)."""
    if key in CANCEL_KEYS:
        return True, None

    if key in UP_KEYS:
        state.previous()
        return False, None

    if key in DOWN_KEYS:
        state.next()
        return False, None

    if key in CONFIRM_KEYS:
        name = state.selected_name()
        if name is not None:
            return True, name
        return False, None

    return False, None


def safe_addstr(stdscr, y: int, x: int, text: str, attr: int = 0) -> None:
    """Write text clipped to the window; drawing past the edge is ignored."""
    height, width = stdscr.getmaxyx()
    if y < 0 or y >= height or x < 0 or x >= width:
        return
    clipped = text[: max(width - x - 1, 0)]
    if not clipped:
        return
    try:
        stdscr.addstr(y, x, clipped, attr)
    except curses.error:
        return


def init_colors() -> int:
    """Return the attribute used for the highlighted row."""
    highlight = curses.A_BOLD
    try:
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(1, curses.COLOR_CYAN, -1)
            highlight |= curses.color_pair(1)
    except curses.error:
        pass
    return highlight


def draw(stdscr, state: SelectorState, program_name: str, highlight: int) -> None:
    stdscr.erase()
    height, width = stdscr.getmaxyx()

    safe_addstr(stdscr, 0, 0, TITLE, curses.A_BOLD)

    # Rows between the title and the two-line footer
    list_height = max(height - 3, 0)
    top = 0
    if state.cursor is not None and state.cursor >= list_height > 0:
        top = state.cursor - list_height + 1

    for row, (name, display) in enumerate(state.entries[top : top + list_height]):
        index = top + row
        selected = index == state.cursor
        marker = HIGHLIGHT_SYMBOL if selected else " " * len(HIGHLIGHT_SYMBOL)
        attr = highlight if selected else 0
        safe_addstr(stdscr, row + 1, 0, f"{marker}{name}  ➜  {display}", attr)

    if state.cursor is not None:
        help_text = HELP_TEXT
    else:
        help_text = f"No aliases defined. Use `{program_name} add` to create one."
    safe_addstr(stdscr, height - 2, 0, "─" * max(width - 1, 0), curses.A_DIM)
    safe_addstr(stdscr, height - 1, 0, help_text, curses.A_DIM)

    stdscr.refresh()


def run_loop(stdscr, state: SelectorState, program_name: str) -> SelectionResult:
    """Poll keys and redraw until an alias is chosen or the user quits."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    stdscr.timeout(POLL_INTERVAL_MS)
    highlight = init_colors()

    while True:
        draw(stdscr, state, program_name, highlight)
        key = stdscr.getch()
        if key == -1:
            continue

        finished, name = handle_key(state, key)
        if finished:
            return name


def ensure_terminal() -> None:
    if curses is None:
        raise SelectorError("The selector needs curses, which this Python lacks")
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise SelectorError("The selector needs an interactive terminal")


def run_selector(config: AliasConfig, program_name: str = "cs") -> SelectionResult:
    """
    Let the user pick an alias in a full-screen list.

    curses.wrapper owns the terminal: it switches to raw mode and the
    alternate screen on entry and restores the previous mode exactly once,
    whether the loop returns, is interrupted, or raises.

    Returns:
        The chosen alias name, or None when the user cancelled or the
        terminal could not be driven.
    """
    state = SelectorState.from_config(config)
    debug_log(f"run_selector: {len(state.entries)} entries")

    # Esc should cancel without the default one second delay
    os.environ.setdefault("ESCDELAY", "25")

    try:
        ensure_terminal()
        return curses.wrapper(run_loop, state, program_name)
    except KeyboardInterrupt:
        return None
    except SelectorError as e:
        logging.error(str(e))
        return None
    except Exception as e:  # pylint: disable=broad-except
        logging.error(f"Selector failed: {e}")
        return None


class Selector:
    """Selector component used by the application."""

    @staticmethod
    def select(config: AliasConfig, program_name: str) -> SelectionResult:
        return run_selector(config, program_name)
