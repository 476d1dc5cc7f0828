from dataclasses import dataclass


@dataclass(frozen=True)
class Stat:
    """One allocatable stat counter.

    Attributes:
        id: Stat key (matches :class:`grid_board.types.StatKey`).
        label: Display label.
        value: Current points, never negative.
        color: Display color (hex string); presentation only.
    """

    id: str
    label: str
    value: int
    color: str
