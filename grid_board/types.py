"""Common type aliases and enumerations.

Tile and entity type values are string enums whose values are the exact
strings used in the persisted board JSON, so members compare equal to the
raw strings found in imported files.
"""

from enum import StrEnum


class TileType(StrEnum):
    """Static terrain of a single cell.

    ``EXIT_PORTAL`` is reserved: it is a valid value in board files but no
    system gives it behavior and the brush palette does not offer it.
    """

    EMPTY = "empty"
    WALL = "wall"
    SPAWN = "spawn"
    EXIT = "exit"
    ENTER_PORTAL = "enterPortal"
    EXIT_PORTAL = "exitPortal"


class EntityType(StrEnum):
    """Placeable token kinds."""

    SMALL_DOT = "smallDot"
    BIG_DOT = "bigDot"
    PLAYER = "player"
    ENEMY = "enemy"


class StatKey(StrEnum):
    """Stat counter identifiers (values match the allocator's ids)."""

    MOVES = "moves"
    ATTACK = "attack"
    DEFENSE = "defense"
    MAGIC = "magic"


# Tiles the player may step onto directly.
WALKABLE_TILES = (TileType.EMPTY, TileType.ENTER_PORTAL)

Delta = tuple[int, int]
