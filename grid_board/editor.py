"""Editor store.

:class:`Editor` owns the three independent state containers (board, portal
registry, stats) and exposes the user-facing operations as methods. Each
method computes the next immutable snapshot with the pure functions of the
core and then assigns it in one statement, so a renderer reading
``editor.board`` between events always sees a complete board.

The Streamlit app keeps one ``Editor`` in ``st.session_state``; tests build
one directly.
"""

import logging
import random
from typing import Any, Callable, Dict, Optional, Union

from grid_board.actions import Action, MOVE_ACTIONS
from grid_board.board import resize
from grid_board.brush import ERASER, Brush, apply_brush
from grid_board.components import Position
from grid_board.config import DEFAULT_CONFIG, EditorConfig
from grid_board.portals import (
    PortalRegistry,
    clear_portals,
    link_portal,
    unlink_portal,
)
from grid_board.serialize import (
    dumps_board,
    export_snapshot,
    import_snapshot,
    loads_board,
)
from grid_board.state import Board, create_empty_board
from grid_board.stats import (
    adjust_stat,
    can_move,
    create_stats,
    reset_stats,
    spend_move,
)
from grid_board.step import step
from grid_board.types import StatKey, TileType
from grid_board.utils.grid import tile_at

logger = logging.getLogger(__name__)


class Editor:
    """Mutable holder of the current board, portal and stat snapshots.

    Attributes:
        config (EditorConfig): Active configuration.
        board (Board): Current board snapshot.
        portals (PortalRegistry): Current portal links.
        stats (Stats): Current stat counters.
        turn (int): Ticks run on the current board. Reset to 0 whenever the
            board is replaced (reset or import), since a seeded editor draws
            each tick's enemy moves from ``(seed, turn)``.
    """

    def __init__(
        self,
        config: EditorConfig = DEFAULT_CONFIG,
        board: Optional[Board] = None,
    ) -> None:
        self.config = config
        if board is None:
            board = create_empty_board(config.rows, config.cols)
        self.board = board
        self.portals = PortalRegistry()
        self.stats = create_stats(config.stat_default)
        self.turn = 0
        self._rng = random.Random(config.seed)

    def configure(self, config: EditorConfig) -> None:
        """Swap the configuration.

        The session generator is rebuilt when the seed changes. It only
        drives unseeded play; with a seed each tick gets its own generator
        keyed on ``(seed, turn)``.
        """
        if config.seed != self.config.seed:
            self._rng = random.Random(config.seed)
        self.config = config

    # -------- Board editing --------

    def paint(self, pos: Position, brush: Brush) -> None:
        self.board = apply_brush(self.board, pos, brush)

    def erase(self, pos: Position) -> None:
        self.paint(pos, ERASER)

    def resize(self, rows: int, cols: int) -> None:
        """Resize keeping the overlap; sizes below 1 become 1."""
        self.board = resize(self.board, rows, cols)
        logger.info("board resized to %dx%d", self.board.rows, self.board.cols)

    def reset_board(self, rows: Optional[int] = None, cols: Optional[int] = None) -> None:
        """Replace the board with an empty one (configured size by default)."""
        self.board = create_empty_board(
            self.config.rows if rows is None else rows,
            self.config.cols if cols is None else cols,
        )
        self.turn = 0
        logger.info("board reset to %dx%d", self.board.rows, self.board.cols)

    # -------- Import / export --------

    def import_snapshot(self, obj: object) -> None:
        """Replace the board with decoded JSON data.

        Raises:
            InvalidBoardFormat: The data is rejected; the board is unchanged.
        """
        board = self._checked_import(import_snapshot, obj)
        self.board = board
        self.turn = 0

    def import_json(self, text: Union[str, bytes]) -> None:
        """Replace the board with a JSON document (see :meth:`import_snapshot`)."""
        board = self._checked_import(loads_board, text)
        self.board = board
        self.turn = 0

    def _checked_import(self, loader: Callable[[Any], Board], data: Any) -> Board:
        try:
            board = loader(data)
        except ValueError:
            logger.warning("board import rejected")
            raise
        logger.info(
            "imported %dx%d board with %d entities",
            board.rows,
            board.cols,
            len(board.entities),
        )
        return board

    def export_snapshot(self) -> Dict[str, Any]:
        return export_snapshot(self.board)

    def export_json(self) -> str:
        return dumps_board(self.board)

    # -------- Portals --------

    def link_portal(self, src: Position, dst: Position) -> bool:
        """Link ``src`` to ``dst`` if ``src`` is an ``enterPortal`` tile.

        Returns:
            bool: True if the link was stored.
        """
        if tile_at(self.board, src) != TileType.ENTER_PORTAL:
            logger.debug("link ignored: %s is not a portal tile", src)
            return False
        self.portals = link_portal(self.portals, src, dst)
        logger.info("portal %s linked to %s", src, dst)
        return True

    def unlink_portal(self, src: Position) -> None:
        self.portals = unlink_portal(self.portals, src)

    def clear_portals(self) -> None:
        self.portals = clear_portals(self.portals)

    # -------- Stats --------

    def adjust_stat(self, key: StatKey, delta: int) -> None:
        self.stats = adjust_stat(self.stats, key, delta)

    def reset_stats(self) -> None:
        self.stats = reset_stats(self.stats, self.config.stat_default)

    # -------- Simulation --------

    def move(self, action: Action) -> bool:
        """Run one tick for a directional input.

        With ``enforce_move_budget`` a move is rejected once the ``moves``
        stat reaches zero. An accepted move spends one point, then the tick
        runs whether or not the player can actually move.

        Returns:
            bool: False if the input was rejected by the move budget.
        """
        if action not in MOVE_ACTIONS:
            raise ValueError(f"Action is not valid: {action!r}")
        if self.config.enforce_move_budget and not can_move(self.stats):
            logger.debug("move %s rejected: no movement points left", action)
            return False

        board = step(self.board, self.portals, action, self.config, self._tick_rng())
        self.stats = spend_move(self.stats)
        self.board = board
        self.turn += 1
        return True

    def _tick_rng(self) -> random.Random:
        # Seeded sessions replay identically: one generator per (seed, turn).
        if self.config.seed is None:
            return self._rng
        return random.Random(hash((self.config.seed, self.turn)))

