"""grid_board.components
=======================

Value objects stored inside the immutable board, portal and stat snapshots.
All component classes are frozen ``@dataclass`` instances; they carry no
behavior beyond their fields and are replaced, never mutated, by the
functions in :mod:`grid_board.board`, :mod:`grid_board.stats` and the
``systems`` package::

    from grid_board.components import Entity, Position
"""

from .entity import Entity
from .position import Position
from .stat import Stat

__all__ = [
    "Entity",
    "Position",
    "Stat",
]
