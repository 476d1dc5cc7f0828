"""Board editing operations and queries.

Every mutation takes a :class:`grid_board.state.Board` and returns a new one.
Coordinates outside the grid are ignored: the input board is returned
unchanged (and the call is logged at DEBUG), so painting with a stale
pointer position can never corrupt or crash the editor.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from pyrsistent import pvector

from grid_board.components import Entity, Position
from grid_board.state import Board, create_empty_board
from grid_board.types import EntityType, TileType
from grid_board.utils.grid import is_in_bounds

logger = logging.getLogger(__name__)


def set_tile(board: Board, pos: Position, tile: str) -> Board:
    """Replace the tile type at ``pos``. Entities on the cell are untouched."""
    if not is_in_bounds(board, pos):
        logger.debug("set_tile ignored: %s outside %dx%d", pos, board.rows, board.cols)
        return board
    row = board.tiles[pos.r].set(pos.c, tile)
    return replace(board, tiles=board.tiles.set(pos.r, row))


def toggle_entity(board: Board, pos: Position, entity_type: str) -> Board:
    """Remove the entity of ``entity_type`` at ``pos`` if present, else add one.

    Distinct types may share a cell; a second entity of the same type on the
    same cell is never created.
    """
    if not is_in_bounds(board, pos):
        logger.debug("toggle_entity ignored: %s outside %dx%d", pos, board.rows, board.cols)
        return board
    target = Entity(type=entity_type, r=pos.r, c=pos.c)
    for index, entity in enumerate(board.entities):
        if entity == target:
            return replace(board, entities=board.entities.delete(index))
    return replace(board, entities=board.entities.append(target))


def clear_cell(board: Board, pos: Position) -> Board:
    """Reset the tile at ``pos`` to empty and drop every entity on it."""
    if not is_in_bounds(board, pos):
        logger.debug("clear_cell ignored: %s outside %dx%d", pos, board.rows, board.cols)
        return board
    board = set_tile(board, pos, TileType.EMPTY)
    kept = [e for e in board.entities if e.position != pos]
    return replace(board, entities=pvector(kept))


def resize(board: Board, rows: int, cols: int) -> Board:
    """Return a ``rows`` x ``cols`` board keeping the top-left overlap.

    Tiles inside ``min(old, new)`` on both axes are copied, new cells are
    empty. Entities outside the new bounds are dropped.
    """
    resized = create_empty_board(rows, cols)
    overlap_rows = min(board.rows, resized.rows)
    overlap_cols = min(board.cols, resized.cols)
    tiles = resized.tiles
    for r in range(overlap_rows):
        row = tiles[r]
        for c in range(overlap_cols):
            row = row.set(c, board.tiles[r][c])
        tiles = tiles.set(r, row)
    entities = [e for e in board.entities if is_in_bounds(resized, e.position)]
    dropped = len(board.entities) - len(entities)
    if dropped:
        logger.debug("resize dropped %d out-of-bounds entities", dropped)
    return replace(resized, tiles=tiles, entities=pvector(entities))


def entities_at(board: Board, pos: Position) -> List[Entity]:
    """Return entities located at ``pos`` in board order."""
    return [e for e in board.entities if e.position == pos]


def find_player(board: Board) -> Optional[Entity]:
    """Return the first player entity, or ``None``."""
    return next((e for e in board.entities if e.type == EntityType.PLAYER), None)


def find_spawn(board: Board) -> Optional[Position]:
    """Return the first ``spawn`` tile scanning row-major, or ``None``."""
    for r, row in enumerate(board.tiles):
        for c, tile in enumerate(row):
            if tile == TileType.SPAWN:
                return Position(r, c)
    return None
