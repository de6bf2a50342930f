"""Tests for key dispatch in keys.py."""

from __future__ import annotations

import pytest

from product_viewer.tui.keys import KeyAction, LoopState, handle_key, resolve_key
from product_viewer.tui.selection import SelectionState


@pytest.fixture
def state(three_products) -> SelectionState:
    """Return a selection over three products."""
    return SelectionState(three_products)


class TestResolveKey:
    """Tests for resolve_key."""

    @pytest.mark.parametrize("key", ["q", "Q", "shift+q"])
    def test_quit_keys(self, key):
        """q in either case quits."""
        assert resolve_key(key) is KeyAction.QUIT

    def test_arrows(self):
        """Down advances, Up retreats."""
        assert resolve_key("down") is KeyAction.ADVANCE
        assert resolve_key("up") is KeyAction.RETREAT

    @pytest.mark.parametrize("key", ["x", "j", "k", "enter", "left", "escape", "ctrl+q"])
    def test_other_keys_ignored(self, key):
        """Everything else is inert."""
        assert resolve_key(key) is KeyAction.IGNORE


class TestHandleKey:
    """Tests for handle_key as a state machine."""

    def test_down_sequence_wraps(self, state):
        """Down, Down, Down visits 1, 2, 0."""
        seen = []
        for _ in range(3):
            assert handle_key(state, "down") is LoopState.RUNNING
            seen.append(state.selected)
        assert seen == [1, 2, 0]

    def test_up_from_zero_wraps(self, state):
        """Up from 0 selects the last row."""
        assert handle_key(state, "up") is LoopState.RUNNING
        assert state.selected == 2

    def test_quit_stops_without_mutation(self, state):
        """q stops the loop and leaves the selection alone."""
        handle_key(state, "down")
        assert handle_key(state, "q") is LoopState.STOPPED
        assert state.selected == 1

    def test_other_key_keeps_running(self, state):
        """Unbound keys change nothing."""
        assert handle_key(state, "x") is LoopState.RUNNING
        assert state.selected == 0

    def test_empty_catalog(self):
        """Navigation on an empty catalog keeps running with no selection."""
        empty = SelectionState([])
        assert handle_key(empty, "down") is LoopState.RUNNING
        assert handle_key(empty, "up") is LoopState.RUNNING
        assert empty.selected is None
        assert handle_key(empty, "q") is LoopState.STOPPED
