"""Coordinate helpers shared by the board edits, the systems and the renderer.

``tile_at`` is the only safe way to read a cell whose position may be off the
board; the mutations in :mod:`grid_board.board` go through ``is_in_bounds``.
"""

from typing import Optional

from grid_board.components import Position
from grid_board.state import Board
from grid_board.types import Delta


def is_in_bounds(board: Board, pos: Position) -> bool:
    """Return True if ``pos`` lies within the board rectangle."""
    return 0 <= pos.r < board.rows and 0 <= pos.c < board.cols


def sign(value: int) -> int:
    """Return -1, 0 or 1 following the sign of ``value``."""
    return (value > 0) - (value < 0)


def offset(pos: Position, delta: Delta) -> Position:
    """Translate ``pos`` by ``(dr, dc)``."""
    dr, dc = delta
    return Position(pos.r + dr, pos.c + dc)


def tile_at(board: Board, pos: Position) -> Optional[str]:
    """Return the tile type at ``pos`` or ``None`` when out of bounds."""
    if not is_in_bounds(board, pos):
        return None
    return board.tiles[pos.r][pos.c]
