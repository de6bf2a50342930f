"""Tests for SelectionState wrap-around navigation."""

from __future__ import annotations

import pytest

from product_viewer.tui.selection import SelectionState


@pytest.fixture
def make_state(make_products):
    """Return a factory for a SelectionState over count products."""

    def _make(count: int) -> SelectionState:
        return SelectionState(make_products(count))

    return _make


class TestInitialSelection:
    """Tests for the selection right after construction."""

    def test_non_empty_starts_at_zero(self, make_state):
        """A non-empty catalog selects the first row."""
        state = make_state(3)
        assert state.selected == 0
        assert state.selected_product.title == "Product 0"

    def test_empty_is_unset(self, make_state):
        """An empty catalog has no selection."""
        state = make_state(0)
        assert state.selected is None
        assert state.selected_product is None
        assert len(state) == 0


class TestAdvance:
    """Tests for advance()."""

    @pytest.mark.parametrize("count", [1, 2, 3, 7])
    def test_full_cycle_visits_every_index_once(self, count, make_state):
        """N advances from 0 visit every index once, ascending, and return to 0."""
        state = make_state(count)
        visited = []
        for _ in range(count):
            state.advance()
            visited.append(state.selected)

        assert visited[-1] == 0
        assert sorted(visited) == list(range(count))
        assert visited[:-1] == list(range(1, count))

    def test_wraps_from_last_to_first(self, make_state):
        """advance() from the last index goes to 0."""
        state = make_state(4)
        state.selected = 3
        state.advance()
        assert state.selected == 0

    def test_unset_selection_goes_to_zero(self, make_state):
        """advance() with no selection picks the first row."""
        state = make_state(2)
        state.selected = None
        state.advance()
        assert state.selected == 0

    def test_empty_is_noop(self, make_state):
        """advance() on an empty catalog leaves the selection unset."""
        state = make_state(0)
        state.advance()
        assert state.selected is None


class TestRetreat:
    """Tests for retreat()."""

    def test_wraps_from_first_to_last(self, make_state):
        """retreat() from 0 goes to the last index."""
        state = make_state(5)
        state.retreat()
        assert state.selected == 4

    def test_steps_back(self, make_state):
        """retreat() decrements inside the range."""
        state = make_state(5)
        state.selected = 3
        state.retreat()
        assert state.selected == 2

    def test_single_item_stays(self, make_state):
        """With one product the selection never moves."""
        state = make_state(1)
        state.retreat()
        assert state.selected == 0

    def test_empty_is_noop(self, make_state):
        """retreat() on an empty catalog leaves the selection unset."""
        state = make_state(0)
        state.retreat()
        assert state.selected is None


class TestRoundTrip:
    """advance/retreat undo each other."""

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_advance_then_retreat(self, count, make_state):
        """advance(); retreat() restores every index."""
        state = make_state(count)
        for i in range(count):
            state.selected = i
            state.advance()
            state.retreat()
            assert state.selected == i

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_retreat_then_advance(self, count, make_state):
        """retreat(); advance() restores every index."""
        state = make_state(count)
        for i in range(count):
            state.selected = i
            state.retreat()
            state.advance()
            assert state.selected == i
