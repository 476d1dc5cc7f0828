"""Paint brushes.

A :class:`Brush` is what the user holds when clicking a cell: a tile brush
paints terrain, an entity brush toggles a token, and the eraser clears the
cell. ``PALETTE`` lists the brushes offered by the editor, in display order.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, List

from grid_board.board import clear_cell, set_tile, toggle_entity
from grid_board.components import Position
from grid_board.state import Board
from grid_board.types import EntityType, TileType


class BrushKind(StrEnum):
    TILE = auto()
    ENTITY = auto()
    ERASER = auto()


@dataclass(frozen=True)
class Brush:
    """Palette entry.

    Attributes:
        kind: What the brush does.
        type: Tile or entity type painted; ``"eraser"`` for the eraser.
        label: Display label.
    """

    kind: BrushKind
    type: str
    label: str


ERASER = Brush(BrushKind.ERASER, "eraser", "Eraser")

PALETTE: List[Brush] = [
    Brush(BrushKind.TILE, TileType.WALL, "Wall"),
    Brush(BrushKind.TILE, TileType.SPAWN, "Spawn"),
    Brush(BrushKind.TILE, TileType.EXIT, "Exit"),
    Brush(BrushKind.TILE, TileType.ENTER_PORTAL, "Portal"),
    Brush(BrushKind.TILE, TileType.EMPTY, "Empty"),
    Brush(BrushKind.ENTITY, EntityType.SMALL_DOT, "Small Dot"),
    Brush(BrushKind.ENTITY, EntityType.BIG_DOT, "Big Dot"),
    Brush(BrushKind.ENTITY, EntityType.PLAYER, "Player"),
    Brush(BrushKind.ENTITY, EntityType.ENEMY, "Enemy"),
    ERASER,
]

BRUSHES_BY_LABEL: Dict[str, Brush] = {brush.label: brush for brush in PALETTE}


def apply_brush(board: Board, pos: Position, brush: Brush) -> Board:
    """Apply one paint gesture at ``pos``. Out-of-range cells are ignored."""
    if brush.kind == BrushKind.TILE:
        return set_tile(board, pos, brush.type)
    if brush.kind == BrushKind.ENTITY:
        return toggle_entity(board, pos, brush.type)
    if brush.kind == BrushKind.ERASER:
        return clear_cell(board, pos)
    raise ValueError(f"Unknown brush kind: {brush.kind!r}")
