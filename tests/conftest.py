# tests/conftest.py

"""Shared fixtures: a fake curses window and a stubbed curses module."""

import curses
from typing import List, Optional

import pytest

from snaketerm.core.renderer import Element

PALETTE = {
    Element.WALL: 1,
    Element.SNAKE: 2,
    Element.FOOD: 3,
    Element.EMPTY: 0,
}


class FakeScreen:
    """Records what the game draws and replays scripted key presses."""

    def __init__(self, keys: Optional[List[int]] = None, rows: int = 24, cols: int = 80):
        self.keys = list(keys or [])
        self.rows = rows
        self.cols = cols
        self.cells = {}
        self.writes = 0
        self.timeouts = []
        self.erase_count = 0
        self.refresh_count = 0
        self.cursor = None
        self.keypad_enabled = False

    def timeout(self, ms):
        self.timeouts.append(ms)

    def getch(self):
        if self.keys:
            return self.keys.pop(0)
        return -1

    def erase(self):
        self.erase_count += 1
        self.cells.clear()

    def addstr(self, y, x, text, attr=0):
        self.cells[(x, y)] = (text, attr)
        self.writes += 1

    def move(self, y, x):
        self.cursor = (y, x)

    def refresh(self):
        self.refresh_count += 1

    def getmaxyx(self):
        return (self.rows, self.cols)

    def keypad(self, flag):
        self.keypad_enabled = flag

    def glyph(self, x, y):
        return self.cells[(x, y)][0]

    def attr(self, x, y):
        return self.cells[(x, y)][1]

    def row_text(self, y):
        xs = sorted(x for (x, row) in self.cells if row == y)
        return "".join(self.cells[(x, y)][0] for x in xs)


class FakeCurses:
    """Tracks calls made to the curses module functions we stub out."""

    def __init__(self, screen):
        self.screen = screen
        self.calls = []

    def record(self, name):
        def _call(*args):
            self.calls.append(name)
        return _call

    def initscr(self):
        self.calls.append("initscr")
        return self.screen


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def palette():
    return dict(PALETTE)


@pytest.fixture
def fake_curses(monkeypatch):
    """Replace terminal-touching curses functions with recorders."""
    fake = FakeCurses(FakeScreen())
    monkeypatch.setattr(curses, "initscr", fake.initscr)
    for name in ("noecho", "cbreak", "echo", "nocbreak", "endwin", "start_color",
                 "use_default_colors", "curs_set"):
        monkeypatch.setattr(curses, name, fake.record(name))
    monkeypatch.setattr(curses, "has_colors", lambda: False)
    return fake
