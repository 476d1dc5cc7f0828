"""Simulation reducer.

This module wires the systems together to implement a single *tick* for one
directional ``Action``. The exported :func:`step` is pure: it returns a new
:class:`grid_board.state.Board` and leaves its inputs untouched.

Ordering:

1. Locate the player. Without one the tick does nothing.
2. ``enemy_system`` moves every enemy relative to the player's position at
    the start of the tick.
3. If an enemy landed on that position the player is captured:
    ``respawn_system`` moves it to the spawn tile and the move input is
    discarded.
4. Otherwise ``movement_system`` applies the player's own step, resolving
    walls and portals.

Enemy moves are kept whatever happens to the player.
"""

import logging
import random
from typing import Optional

from grid_board.actions import ACTION_DELTAS, Action, MOVE_ACTIONS
from grid_board.board import find_player
from grid_board.config import DEFAULT_CONFIG, EditorConfig
from grid_board.portals import PortalRegistry
from grid_board.state import Board
from grid_board.systems.enemy import enemy_system
from grid_board.systems.movement import movement_system
from grid_board.systems.respawn import is_captured, respawn_system
from grid_board.utils.grid import offset

logger = logging.getLogger(__name__)


def step(
    board: Board,
    portals: PortalRegistry,
    action: Action,
    config: EditorConfig = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
) -> Board:
    """Advance the simulation by one tick.

    Args:
        board (Board): Board before the tick.
        portals (PortalRegistry): Portal links used when the player enters an
            ``enterPortal`` tile.
        action (Action): Direction of the player's intended move.
        config (EditorConfig): Enemy heuristic probabilities.
        rng (random.Random | None): Source of randomness for enemy moves. If
            ``None`` a generator seeded with ``config.seed`` is created.

    Returns:
        Board: Board after the tick. The same object is returned when there
            is no player.

    Raises:
        ValueError: If ``action`` is not a movement action.
    """
    if action not in MOVE_ACTIONS:
        raise ValueError(f"Action is not valid: {action!r}")

    player = find_player(board)
    if player is None:
        logger.debug("tick skipped: no player on the board")
        return board

    if rng is None:
        rng = random.Random(config.seed)

    board = enemy_system(board, player, config, rng)

    if is_captured(board, player):
        return respawn_system(board, player)

    next_pos = offset(player.position, ACTION_DELTAS[Action(action)])
    return movement_system(board, portals, player, next_pos)
