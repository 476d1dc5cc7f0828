"""Action enumerations and keyboard bindings.

The four directions double as the tick input of :func:`grid_board.step.step`.
Arrow keys and WASD both map onto them; ``ACTION_DELTAS`` gives the
``(dr, dc)`` offset of each, rows counting down and columns to the right.
"""

from enum import StrEnum, auto
from typing import Dict, Optional

from grid_board.types import Delta


class Action(StrEnum):
    """String enum of player actions.

    Members:
        UP, DOWN, LEFT, RIGHT: Movement directions.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

ACTION_DELTAS: Dict[Action, Delta] = {
    Action.UP: (-1, 0),
    Action.DOWN: (1, 0),
    Action.LEFT: (0, -1),
    Action.RIGHT: (0, 1),
}

KEY_BINDINGS: Dict[str, Action] = {
    "ArrowUp": Action.UP,
    "ArrowDown": Action.DOWN,
    "ArrowLeft": Action.LEFT,
    "ArrowRight": Action.RIGHT,
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
}


def action_from_key(key: str) -> Optional[Action]:
    """Map a key name to a movement action (case-insensitive for letters)."""
    if key in KEY_BINDINGS:
        return KEY_BINDINGS[key]
    return KEY_BINDINGS.get(key.lower())
