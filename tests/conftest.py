import json

import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's CAWA_* settings out of the tests."""
    monkeypatch.delenv("CAWA_CONFIG", raising=False)
    monkeypatch.delenv("CAWA_DEBUG", raising=False)


@pytest.fixture
def alias_dir(tmp_path, monkeypatch):
    """Run the test inside an empty working directory and return it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def alias_file(alias_dir):
    """
    Fixture that writes .cawa_cfg.json into the working directory.

    Usage:
        def test_something(alias_file):
            path = alias_file({"aliases": {"hello": "echo hi"}})
    """

    def _write(content):
        path = alias_dir / ".cawa_cfg.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def read_alias_file(alias_dir):
    """Fixture returning a function that decodes the working directory alias file."""

    def _read():
        return json.loads((alias_dir / ".cawa_cfg.json").read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def mock_run_shell(mocker):
    """
    Fixture to replace shell execution with a recorder.

    The returned mock records every command line; commands listed in
    `mock.failing` report failure.

    Usage:
        def test_run(mock_run_shell):
            mock_run_shell.failing.add("exit 1")
            ...
            assert mock_run_shell.call_args_list == [mocker.call("echo hi")]
    """
    failing = set()

    def side_effect(cmd):
        return cmd not in failing

    mock = mocker.patch(
        "cawa.command_executor.CommandExecutor.run_shell", side_effect=side_effect
    )
    mock.failing = failing
    return mock


class FakeScreen:
    """Stand-in for a curses window that replays a list of key codes."""

    def __init__(self, keys, height=24, width=80):
        self.keys = list(keys)
        self.height = height
        self.width = width
        self.lines = {}
        self.refresh_count = 0
        self.timeout_ms = None

    def getmaxyx(self):
        return self.height, self.width

    def addstr(self, y, x, text, attr=0):
        self.lines[y] = text

    def erase(self):
        self.lines = {}

    def refresh(self):
        self.refresh_count += 1

    def keypad(self, flag):
        pass

    def timeout(self, ms):
        self.timeout_ms = ms

    def getch(self):
        if not self.keys:
            raise AssertionError("FakeScreen ran out of keys")
        return self.keys.pop(0)

    def text(self):
        return "\n".join(self.lines[y] for y in sorted(self.lines))


@pytest.fixture
def fake_screen(mocker):
    """
    Fixture providing a FakeScreen factory with curses terminal calls stubbed.

    Usage:
        def test_keys(fake_screen):
            screen = fake_screen([curses.KEY_DOWN, 10])
            run_loop(screen, state, "cs")
    """
    mocker.patch("curses.curs_set")
    mocker.patch("curses.has_colors", return_value=False)

    def _create(keys, height=24, width=80):
        return FakeScreen(keys, height, width)

    return _create
