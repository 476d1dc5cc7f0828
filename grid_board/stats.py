"""Stat point allocator.

Four independent counters (movement, attack, defense, magic). Values are
clamped at zero with no upper bound. The ``moves`` counter doubles as the
player's movement budget: :func:`spend_move` is called once per accepted
move input and :func:`can_move` tells the editor whether another move may be
taken.
"""

from dataclasses import dataclass, replace
from typing import Dict, Tuple

from pyrsistent import PMap, pmap

from grid_board.components import Stat
from grid_board.config import DEFAULT_STAT_VALUE
from grid_board.types import StatKey


# (label, color) per counter; presentation attributes only.
STAT_DISPLAY: Dict[StatKey, Tuple[str, str]] = {
    StatKey.MOVES: ("Movement", "#89CFF0"),
    StatKey.ATTACK: ("Attack", "#FF9DB4"),
    StatKey.DEFENSE: ("Defense", "#7DD6A1"),
    StatKey.MAGIC: ("Magic", "#C293F2"),
}


@dataclass(frozen=True)
class Stats:
    """Immutable set of stat counters.

    Attributes:
        counters (PMap[StatKey, Stat]): One :class:`Stat` per key.
    """

    counters: PMap[StatKey, Stat] = pmap()

    def __getitem__(self, key: StatKey) -> Stat:
        return self.counters[key]

    def ordered(self) -> list[Stat]:
        """Counters in display order."""
        return [self.counters[key] for key in StatKey]


def create_stats(default: int = DEFAULT_STAT_VALUE) -> Stats:
    """Return all counters set to ``default`` (clamped at zero)."""
    value = max(0, default)
    return Stats(
        counters=pmap(
            {
                key: Stat(id=key, label=label, value=value, color=color)
                for key, (label, color) in STAT_DISPLAY.items()
            }
        )
    )


def stat_value(stats: Stats, key: StatKey) -> int:
    return stats.counters[key].value


def adjust_stat(stats: Stats, key: StatKey, delta: int) -> Stats:
    """Add ``delta`` to counter ``key``, clamping the result at zero."""
    key = StatKey(key)
    stat = stats.counters[key]
    updated = replace(stat, value=max(0, stat.value + delta))
    return replace(stats, counters=stats.counters.set(key, updated))


def increment_stat(stats: Stats, key: StatKey) -> Stats:
    return adjust_stat(stats, key, 1)


def decrement_stat(stats: Stats, key: StatKey) -> Stats:
    return adjust_stat(stats, key, -1)


def reset_stats(stats: Stats, default: int = DEFAULT_STAT_VALUE) -> Stats:
    """Restore every counter to ``default``; labels and colors are kept."""
    value = max(0, default)
    counters = stats.counters
    for key, stat in stats.counters.items():
        counters = counters.set(key, replace(stat, value=value))
    return replace(stats, counters=counters)


def can_move(stats: Stats) -> bool:
    """Return True while at least one movement point remains."""
    return stat_value(stats, StatKey.MOVES) > 0


def spend_move(stats: Stats) -> Stats:
    """Consume one movement point (never below zero)."""
    return decrement_stat(stats, StatKey.MOVES)
