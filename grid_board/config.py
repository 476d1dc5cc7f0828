"""Editor and simulation configuration.

A single frozen :class:`EditorConfig` carries every tunable of the editor.
Callers derive variants with :func:`dataclasses.replace` (the Streamlit app
rebuilds it from sidebar widgets on every rerun).
"""

from dataclasses import dataclass
from typing import Optional


DEFAULT_ROWS = 9
DEFAULT_COLS = 9
DEFAULT_STAT_VALUE = 5


@dataclass(frozen=True)
class EditorConfig:
    """Tunables for the board editor and the enemy heuristic.

    Attributes:
        rows: Row count of a freshly created board.
        cols: Column count of a freshly created board.
        stat_default: Value every stat counter starts at and resets to.
        near_toward_chance: Probability that an enemy within one row or one
            column of the player steps toward it (otherwise away). At 1.0 the
            enemy always closes in.
        far_away_chance: Probability that a distant enemy steps away from the
            player (otherwise toward).
        drift_chance: Threshold for the perpendicular drift of a distant enemy;
            drift happens when a draw exceeds it.
        enforce_move_budget: Reject move inputs once the ``moves`` stat is 0.
        seed: Base RNG seed. ``None`` gives non-reproducible enemy movement.
        cell_size: Pixel size of one cell in rendered images.
        log_level: Level name passed to ``logging.basicConfig`` by the app.
    """

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    stat_default: int = DEFAULT_STAT_VALUE
    near_toward_chance: float = 1.0
    far_away_chance: float = 0.7
    drift_chance: float = 0.5
    enforce_move_budget: bool = True
    seed: Optional[int] = None
    cell_size: int = 44
    log_level: str = "INFO"


DEFAULT_CONFIG = EditorConfig()
