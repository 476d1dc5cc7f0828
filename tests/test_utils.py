import random
from typing import Iterable, Optional, Sequence

from pyrsistent import pvector

from grid_board.components import Entity, Position
from grid_board.portals import PortalRegistry, link_portal
from grid_board.state import Board, create_empty_board
from grid_board.types import EntityType, TileType

Cell = tuple[int, int]


class ScriptedRandom(random.Random):
    """``random.Random`` whose ``random()`` replays a fixed list of draws."""

    def __init__(self, values: Sequence[float]) -> None:
        super().__init__(0)
        self._values = list(values)

    def random(self) -> float:
        assert self._values, "ScriptedRandom ran out of draws"
        return self._values.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._values)


def make_board(
    *,
    rows: int = 9,
    cols: int = 9,
    player: Optional[Cell] = None,
    enemies: Iterable[Cell] = (),
    walls: Iterable[Cell] = (),
    spawn: Optional[Cell] = None,
    exits: Iterable[Cell] = (),
    portals: Iterable[Cell] = (),
    small_dots: Iterable[Cell] = (),
    big_dots: Iterable[Cell] = (),
) -> Board:
    """Standard board builder for tests; cells are ``(r, c)`` tuples."""
    board = create_empty_board(rows, cols)
    grid = [list(row) for row in board.tiles]
    for cells, tile in (
        (walls, TileType.WALL),
        (exits, TileType.EXIT),
        (portals, TileType.ENTER_PORTAL),
    ):
        for r, c in cells:
            grid[r][c] = tile
    if spawn is not None:
        grid[spawn[0]][spawn[1]] = TileType.SPAWN

    entities: list[Entity] = []
    for cells, entity_type in (
        (small_dots, EntityType.SMALL_DOT),
        (big_dots, EntityType.BIG_DOT),
        (enemies, EntityType.ENEMY),
    ):
        entities.extend(Entity(type=entity_type, r=r, c=c) for r, c in cells)
    if player is not None:
        entities.append(Entity(type=EntityType.PLAYER, r=player[0], c=player[1]))

    return Board(
        rows=board.rows,
        cols=board.cols,
        tiles=pvector(pvector(row) for row in grid),
        entities=pvector(entities),
    )


def make_portals(links: dict[Cell, Cell]) -> PortalRegistry:
    registry = PortalRegistry()
    for src, dst in links.items():
        registry = link_portal(registry, Position(*src), Position(*dst))
    return registry


def positions_of(board: Board, entity_type: str) -> list[Cell]:
    return [(e.r, e.c) for e in board.entities if e.type == entity_type]


def player_cell(board: Board) -> Optional[Cell]:
    cells = positions_of(board, EntityType.PLAYER)
    return cells[0] if cells else None


def assert_all_in_bounds(board: Board) -> None:
    for entity in board.entities:
        assert 0 <= entity.r < board.rows and 0 <= entity.c < board.cols, (
            f"{entity} outside {board.rows}x{board.cols}"
        )
