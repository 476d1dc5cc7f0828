from dataclasses import dataclass, replace

from grid_board.components.position import Position


@dataclass(frozen=True)
class Entity:
    """A token placed on the board.

    Attributes:
        type: One of :class:`grid_board.types.EntityType` for boards built by
            the editor. Imported boards carry whatever value the file held.
        r: Row index.
        c: Column index.
    """

    type: str
    r: int
    c: int

    @property
    def position(self) -> Position:
        return Position(self.r, self.c)

    def at(self, pos: Position) -> "Entity":
        """Return a copy of this entity moved to ``pos``."""
        return replace(self, r=pos.r, c=pos.c)
