"""Board snapshot import / export.

The persisted format is a flat JSON object::

    {"rows": 9, "cols": 9,
     "tiles": [["empty", ...], ...],
     "entities": [{"type": "player", "r": 0, "c": 0}, ...]}

Import rejects data without the top-level shape (numeric ``rows``/``cols``,
list ``tiles``/``entities``, object entity entries). Anything past that is
fitted rather than rejected: the grid is padded with ``empty`` or trimmed to
``rows`` x ``cols``, and entities whose ``r``/``c`` are not on-board integers
are dropped. Tile values and entity types are carried as-is.
"""

import json
import logging
import math
from numbers import Real
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from pyrsistent import PVector, freeze, pvector, thaw

from grid_board.components import Entity
from grid_board.errors import InvalidBoardFormat
from grid_board.state import Board
from grid_board.types import TileType

logger = logging.getLogger(__name__)

INVALID_BOARD_MESSAGE = "Invalid board JSON."
PARSE_ERROR_MESSAGE = "Failed to parse JSON."


def export_snapshot(board: Board) -> Dict[str, Any]:
    """Return the board as plain JSON-compatible data."""
    return {
        "rows": board.rows,
        "cols": board.cols,
        "tiles": thaw(board.tiles),
        "entities": [
            {"type": thaw(e.type), "r": e.r, "c": e.c} for e in board.entities
        ],
    }


def _is_number(value: object) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _fit_tiles(raw_tiles: list, rows: int, cols: int) -> PVector:
    """Pad or trim ``raw_tiles`` to ``rows`` x ``cols`` with ``empty``."""
    fitted = []
    for r in range(rows):
        row = raw_tiles[r] if r < len(raw_tiles) else []
        if not isinstance(row, list):
            row = []
        cells = [freeze(tile) for tile in row[:cols]]
        cells.extend([TileType.EMPTY] * (cols - len(cells)))
        fitted.append(pvector(cells))
    return pvector(fitted)


def import_snapshot(obj: object) -> Board:
    """Build a :class:`Board` from decoded JSON data.

    Tile values and entity types are kept as they are, but the grid is
    fitted to ``rows`` x ``cols`` and entities without integer in-range
    ``r``/``c`` are dropped, so every later board operation can index
    ``tiles`` safely.

    Raises:
        InvalidBoardFormat: If ``obj`` lacks the top-level board shape.
    """
    if not (
        isinstance(obj, Mapping)
        and _is_number(obj.get("rows"))
        and _is_number(obj.get("cols"))
        and isinstance(obj.get("tiles"), list)
        and isinstance(obj.get("entities"), list)
    ):
        raise InvalidBoardFormat(INVALID_BOARD_MESSAGE)
    if not all(isinstance(e, Mapping) for e in obj["entities"]):
        raise InvalidBoardFormat(INVALID_BOARD_MESSAGE)

    rows, cols = max(1, int(obj["rows"])), max(1, int(obj["cols"]))
    entities = [
        Entity(type=freeze(e.get("type")), r=e["r"], c=e["c"])
        for e in obj["entities"]
        if _is_index(e.get("r"))
        and _is_index(e.get("c"))
        and 0 <= e["r"] < rows
        and 0 <= e["c"] < cols
    ]
    dropped = len(obj["entities"]) - len(entities)
    if dropped:
        logger.debug("import dropped %d entities without an on-board position", dropped)
    return Board(
        rows=rows,
        cols=cols,
        tiles=_fit_tiles(obj["tiles"], rows, cols),
        entities=pvector(entities),
    )


def dumps_board(board: Board) -> str:
    return json.dumps(export_snapshot(board), indent=2)


def loads_board(text: Union[str, bytes]) -> Board:
    """Parse JSON text into a :class:`Board`.

    Raises:
        InvalidBoardFormat: On malformed JSON or a bad top-level shape.
    """
    try:
        obj = json.loads(text)
    except ValueError as e:
        raise InvalidBoardFormat(PARSE_ERROR_MESSAGE) from e
    return import_snapshot(obj)


def save_board(board: Board, path: Union[str, Path]) -> None:
    Path(path).write_text(dumps_board(board), encoding="utf-8")
    logger.info("saved %dx%d board to %s", board.rows, board.cols, path)


def load_board(path: Union[str, Path]) -> Board:
    """Read and import a board file."""
    return loads_board(Path(path).read_text(encoding="utf-8"))
