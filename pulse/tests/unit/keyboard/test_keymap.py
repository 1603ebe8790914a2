"""Unit tests for key translation."""

from __future__ import annotations

import pytest
from textual.binding import Binding

from pulse.constants.enums import InputEventKind, InputMode
from pulse.controllers.interaction import InputEvent
from pulse.keyboard import APP_BINDINGS, HELP_ENTRIES, translate_key
from pulse.models.state.dashboard_state import DashboardState


class TestNormalModeKeys:
    """Test translation of normal-mode keys."""

    @pytest.mark.parametrize(
        ("key", "character", "expected"),
        [
            ("q", "q", InputEventKind.QUIT),
            ("j", "j", InputEventKind.SELECT_NEXT),
            ("k", "k", InputEventKind.SELECT_PREVIOUS),
            ("down", None, InputEventKind.SELECT_NEXT),
            ("up", None, InputEventKind.SELECT_PREVIOUS),
            ("tab", "\t", InputEventKind.NEXT_PANEL),
            ("r", "r", InputEventKind.REFRESH),
            ("s", "s", InputEventKind.CYCLE_SORT),
            ("S", "S", InputEventKind.TOGGLE_SORT_DIRECTION),
            ("slash", "/", InputEventKind.ENTER_SEARCH),
            ("question_mark", "?", InputEventKind.TOGGLE_HELP),
            ("escape", "\x1b", InputEventKind.CLEAR_SEARCH),
        ],
    )
    def test_mapped_keys(
        self, state: DashboardState, key: str, character: str | None, expected: InputEventKind
    ) -> None:
        assert translate_key(state, key, character) == InputEvent(expected)

    def test_unmapped_key(self, state: DashboardState) -> None:
        assert translate_key(state, "x", "x") is None


class TestSearchModeKeys:
    """Test translation in search mode."""

    @pytest.fixture
    def searching(self) -> DashboardState:
        return DashboardState(input_mode=InputMode.SEARCH)

    def test_printable_chars_are_pushed(self, searching: DashboardState) -> None:
        assert translate_key(searching, "q", "q") == InputEvent(InputEventKind.PUSH_CHAR, "q")
        assert translate_key(searching, "slash", "/") == InputEvent(
            InputEventKind.PUSH_CHAR, "/"
        )

    def test_editing_keys(self, searching: DashboardState) -> None:
        assert translate_key(searching, "escape", "\x1b") == InputEvent(
            InputEventKind.CANCEL_SEARCH
        )
        assert translate_key(searching, "enter", "\r") == InputEvent(InputEventKind.EXIT_SEARCH)
        assert translate_key(searching, "backspace", "\x08") == InputEvent(
            InputEventKind.POP_CHAR
        )

    def test_arrow_keys_ignored(self, searching: DashboardState) -> None:
        assert translate_key(searching, "down", None) is None


class TestBindingsAndHelp:
    def test_app_bindings_are_binding_objects(self) -> None:
        for binding in APP_BINDINGS:
            assert isinstance(binding, Binding)

    def test_help_lists_every_shortcut(self) -> None:
        keys = {keys for keys, _ in HELP_ENTRIES}
        assert {"q", "Tab", "r", "s", "S", "/", "?"} <= keys
