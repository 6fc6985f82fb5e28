"""Tests for window painting helpers (no terminal needed)."""

import curses
from typing import List, Tuple

import pytest

from zestien.core.buffer import Buffer
from zestien.core.view import HexView
from zestien.ui.window import WindowManager, safe_addstr


class FakeWindow:
    """Records writes the way a curses window would receive them."""

    def __init__(self, height: int, width: int, fail_on_write: bool = False) -> None:
        self.height = height
        self.width = width
        self.fail_on_write = fail_on_write
        self.writes: List[Tuple[int, int, str, int]] = []

    def getmaxyx(self) -> Tuple[int, int]:
        return self.height, self.width

    def addstr(self, y: int, x: int, string: str, attr: int = 0) -> None:
        if self.fail_on_write:
            raise curses.error("addwstr() returned ERR")
        self.writes.append((y, x, string, attr))

    def clear(self) -> None:
        pass

    def erase(self) -> None:
        pass

    def box(self) -> None:
        pass

    def noutrefresh(self) -> None:
        pass


@pytest.fixture
def fake_curses(monkeypatch: pytest.MonkeyPatch) -> List[FakeWindow]:
    """Replace the curses calls WindowManager makes; collects created windows."""

    created: List[FakeWindow] = []

    def newwin(height: int, width: int, y: int, x: int) -> FakeWindow:
        window = FakeWindow(height, width)
        created.append(window)
        return window

    monkeypatch.setattr(curses, "newwin", newwin)
    monkeypatch.setattr(curses, "start_color", lambda: None)
    monkeypatch.setattr(curses, "init_pair", lambda *args: None)
    return created


class TestSafeAddstr:
    """Tests for safe_addstr."""

    def test_truncates_at_right_edge(self) -> None:
        window = FakeWindow(5, 10)
        safe_addstr(window, 0, 5, "abcdefghij")
        assert window.writes == [(0, 5, "abcde", 0)]

    def test_fits_unchanged(self) -> None:
        window = FakeWindow(5, 10)
        safe_addstr(window, 2, 0, "abc", 7)
        assert window.writes == [(2, 0, "abc", 7)]

    @pytest.mark.parametrize("y, x", [(0, 10), (0, 12), (5, 0), (9, 3)])
    def test_outside_window_is_skipped(self, y: int, x: int) -> None:
        window = FakeWindow(5, 10)
        safe_addstr(window, y, x, "abc")
        assert window.writes == []

    def test_curses_error_is_swallowed(self) -> None:
        window = FakeWindow(5, 10, fail_on_write=True)
        safe_addstr(window, 4, 9, "x")


class TestWindowManager:
    """Tests for WindowManager sizing."""

    def test_min_size(self, fake_curses: List[FakeWindow]) -> None:
        manager = WindowManager(FakeWindow(40, 120), HexView(Buffer.load(b"AB")))
        assert manager.min_size() == (76 + 4 + 2, 10 + 4 + 3)

    def test_too_small_terminal_raises(self) -> None:
        with pytest.raises(ValueError, match="Terminal too small"):
            WindowManager(FakeWindow(10, 40), HexView(Buffer.load(b"AB")))

    def test_exact_minimum_fits(self, fake_curses: List[FakeWindow]) -> None:
        manager = WindowManager(FakeWindow(17, 82), HexView(Buffer.load(b"AB")))
        assert manager.status_window is not None
        assert manager.panel_window is not None
        assert manager.panel_window.getmaxyx() == (16, 82)

    def test_shrinking_resize_reports_error(self, fake_curses: List[FakeWindow]) -> None:
        stdscr = FakeWindow(40, 120)
        manager = WindowManager(stdscr, HexView(Buffer.load(b"AB")))

        stdscr.height, stdscr.width = 10, 40
        manager.resize()

        assert (manager.height, manager.width) == (10, 40)
        assert manager.panel_window is None
        assert manager.status_window is not None
        assert manager.status_message == "Error: Terminal too small"

    def test_growing_resize_restores_panel(self, fake_curses: List[FakeWindow]) -> None:
        stdscr = FakeWindow(40, 120)
        manager = WindowManager(stdscr, HexView(Buffer.load(b"AB")))

        stdscr.height, stdscr.width = 10, 40
        manager.resize()
        stdscr.height, stdscr.width = 30, 100
        manager.resize()

        assert manager.panel_window is not None
        assert manager.status_window.getmaxyx() == (1, 100)

    def test_draw_panel_writes_visible_rows(self, fake_curses: List[FakeWindow], monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(curses, "color_pair", lambda n: n << 8)
        manager = WindowManager(FakeWindow(40, 120), HexView(Buffer.load(b"AB")))

        manager.draw_panel()

        text = "".join(s for _, _, s, _ in manager.panel_window.writes)
        assert text.startswith("00000000: 41 42 ~~")
        assert {y for y, _, _, _ in manager.panel_window.writes} == {3}
