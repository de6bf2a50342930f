"""
Key dispatch for the product table.

Maps Textual key names to selection moves and decides whether the viewer
keeps running. Kept free of widgets so the state machine can be driven
directly.
"""

from __future__ import annotations

import logging
from enum import Enum

from product_viewer.tui.selection import SelectionState

logger = logging.getLogger(__name__)


class KeyAction(Enum):
    """What a key press does to the viewer."""

    ADVANCE = "advance"
    RETREAT = "retreat"
    QUIT = "quit"
    IGNORE = "ignore"


class LoopState(Enum):
    """Whether the viewer keeps reading input."""

    RUNNING = "running"
    STOPPED = "stopped"


KEY_ACTIONS: dict[str, KeyAction] = {
    "q": KeyAction.QUIT,
    "Q": KeyAction.QUIT,
    "shift+q": KeyAction.QUIT,
    "down": KeyAction.ADVANCE,
    "up": KeyAction.RETREAT,
}


def resolve_key(key: str) -> KeyAction:
    """Return the action bound to a Textual key name.

    Examples:
        >>> resolve_key("down")
        <KeyAction.ADVANCE: 'advance'>
        >>> resolve_key("x")
        <KeyAction.IGNORE: 'ignore'>
    """
    return KEY_ACTIONS.get(key, KeyAction.IGNORE)


def handle_key(state: SelectionState, key: str) -> LoopState:
    """Apply one key press to the selection.

    Args:
        state: The selection to mutate.
        key: The Textual key name (e.g. 'down', 'up', 'q').

    Returns:
        LoopState.STOPPED for the quit key, LoopState.RUNNING otherwise.
    """
    action = resolve_key(key)
    if action is KeyAction.QUIT:
        return LoopState.STOPPED
    if action is KeyAction.ADVANCE:
        state.advance()
    elif action is KeyAction.RETREAT:
        state.retreat()
    else:
        return LoopState.RUNNING
    logger.debug("Selection moved to %s", state.selected)
    return LoopState.RUNNING
