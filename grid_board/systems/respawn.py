"""Capture detection and respawn.

A capture happens when any enemy ends its move on the cell the player
occupied at the start of the tick. The captured player is taken off the
board and re-appended at the first ``spawn`` tile. With no spawn tile the
player is left where it stands.
"""

import logging
from dataclasses import replace

from pyrsistent import pvector

from grid_board.board import find_spawn
from grid_board.components import Entity
from grid_board.state import Board
from grid_board.types import EntityType

logger = logging.getLogger(__name__)


def is_captured(board: Board, player: Entity) -> bool:
    """Return True if an enemy stands on the player's (pre-move) cell."""
    return any(
        e.type == EntityType.ENEMY and e.position == player.position
        for e in board.entities
    )


def respawn_system(board: Board, player: Entity) -> Board:
    """Move ``player`` to the spawn tile; unchanged if there is no spawn."""
    spawn = find_spawn(board)
    if spawn is None:
        logger.debug("player captured at %s but no spawn tile exists", player.position)
        return board
    entities = [e for e in board.entities if e.type != EntityType.PLAYER]
    entities.append(player.at(spawn))
    logger.debug("player captured at %s, respawned at %s", player.position, spawn)
    return replace(board, entities=pvector(entities))
