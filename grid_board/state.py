"""Core immutable :class:`Board` dataclass.

This module defines the frozen :class:`Board` object that represents the
whole editable grid at one moment. Every operation in :mod:`grid_board.board`
and every system in :mod:`grid_board.systems` takes a previous ``Board`` and
returns a *new* one; nothing is mutated in place. A reader holding a snapshot
therefore never observes a half-applied update.

Design notes:

* ``tiles`` is a persistent vector of persistent row vectors
    (``pyrsistent.PVector``), indexed ``tiles[r][c]``. Tiles and entities are
    independent layers: painting a tile never touches the entities on it.
* ``entities`` is an ordered persistent vector of :class:`Entity` records.
    Several entities may share a cell; order matters only for "first match"
    lookups (e.g. the player is the first ``player`` entity).
* Portal links and stat counters live in their own containers
    (:mod:`grid_board.portals`, :mod:`grid_board.stats`) and are passed
    explicitly to the systems that need them.
"""

from dataclasses import dataclass

from pyrsistent import PVector, pvector

from grid_board.components import Entity
from grid_board.types import TileType


@dataclass(frozen=True)
class Board:
    """Immutable board snapshot.

    Attributes:
        rows (int): Grid height in cells.
        cols (int): Grid width in cells.
        tiles (PVector[PVector[str]]): Tile type per cell, ``tiles[r][c]``.
        entities (PVector[Entity]): Placed entities in insertion order.
    """

    rows: int
    cols: int
    tiles: PVector[PVector[str]] = pvector()
    entities: PVector[Entity] = pvector()


def create_empty_board(rows: int, cols: int) -> Board:
    """Return a ``rows`` x ``cols`` board of empty tiles and no entities.

    Sizes below 1 are clamped to 1.
    """
    rows = max(1, int(rows))
    cols = max(1, int(cols))
    empty_row: PVector[str] = pvector([TileType.EMPTY] * cols)
    return Board(
        rows=rows,
        cols=cols,
        tiles=pvector([empty_row] * rows),
        entities=pvector(),
    )
