"""Plain-text board rendering (one glyph per cell).

Handy for logs, test failure messages and terminals. An entity glyph hides
the tile below it; when several entities share a cell the highest in
``ENTITY_GLYPHS`` order wins.
"""

from typing import Dict, List

from grid_board.state import Board
from grid_board.types import EntityType, TileType

TILE_GLYPHS: Dict[str, str] = {
    TileType.EMPTY: ".",
    TileType.WALL: "#",
    TileType.SPAWN: "S",
    TileType.EXIT: "E",
    TileType.ENTER_PORTAL: "O",
    TileType.EXIT_PORTAL: "o",
}

# Highest priority first.
ENTITY_GLYPHS: Dict[str, str] = {
    EntityType.PLAYER: "@",
    EntityType.ENEMY: "X",
    EntityType.BIG_DOT: "*",
    EntityType.SMALL_DOT: "+",
}

UNKNOWN_GLYPH = "?"


def render_text(board: Board) -> str:
    rows: List[List[str]] = [
        [TILE_GLYPHS.get(tile, UNKNOWN_GLYPH) for tile in row] for row in board.tiles
    ]
    priority = list(ENTITY_GLYPHS)
    best: Dict[tuple[int, int], int] = {}
    for entity in board.entities:
        if entity.type not in ENTITY_GLYPHS:
            continue
        rank = priority.index(entity.type)
        cell = (entity.r, entity.c)
        if cell not in best or rank < best[cell]:
            best[cell] = rank
    for (r, c), rank in best.items():
        if 0 <= r < len(rows) and 0 <= c < len(rows[r]):
            rows[r][c] = ENTITY_GLYPHS[priority[rank]]
    return "\n".join("".join(row) for row in rows)
