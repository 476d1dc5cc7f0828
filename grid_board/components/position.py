"""Position component.

Immutable integer grid coordinates, row first. Used as the key type of the
portal registry and as the coordinate of every entity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        r: Row index (0 at top).
        c: Column index (0 at left).
    """

    r: int
    c: int
