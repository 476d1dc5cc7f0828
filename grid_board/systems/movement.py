"""Player movement system.

Attempts to move the player to ``next_pos``:

1. Out of bounds, or a tile other than ``empty``/``enterPortal``
    (wall, spawn, exit, reserved or unknown values): no move.
2. ``enterPortal``: the player lands on the linked coordinate, or stays put
    if the portal has no usable link (see :mod:`grid_board.systems.portal`).
3. ``empty``: the player moves onto the tile.

A moved player is re-appended at the end of the entity list. Returns the
input ``Board`` when no movement happens.
"""

import logging
from dataclasses import replace

from grid_board.components import Entity, Position
from grid_board.portals import PortalRegistry
from grid_board.state import Board
from grid_board.systems.portal import portal_destination
from grid_board.types import TileType, WALKABLE_TILES
from grid_board.utils.grid import tile_at

logger = logging.getLogger(__name__)


def movement_system(
    board: Board, portals: PortalRegistry, player: Entity, next_pos: Position
) -> Board:
    """Move ``player`` one tile if allowed.

    Args:
        board (Board): Board after enemy moves.
        portals (PortalRegistry): Links consulted for ``enterPortal`` tiles.
        player (Entity): The player entity as found at the start of the tick.
        next_pos (Position): Desired destination.

    Returns:
        Board: Same board if blocked, otherwise a board with the player moved.
    """
    tile = tile_at(board, next_pos)
    if tile not in WALKABLE_TILES:
        logger.debug("player move to %s blocked (tile=%s)", next_pos, tile)
        return board

    destination = next_pos
    if tile == TileType.ENTER_PORTAL:
        linked = portal_destination(board, portals, next_pos)
        if linked is None:
            return board
        destination = linked

    index = board.entities.index(player)
    entities = board.entities.delete(index).append(player.at(destination))
    return replace(board, entities=entities)
