"""Portal registry.

A directed mapping from a source coordinate to a destination coordinate.
Linking A to B says nothing about B; linking A again overwrites its previous
destination. The registry does not know about tiles: whether the source is
actually an ``enterPortal`` tile is checked by the caller
(:meth:`grid_board.editor.Editor.link_portal`), and entries survive the tile
underneath being repainted.
"""

from dataclasses import dataclass, replace
from typing import Optional

from pyrsistent import PMap, pmap

from grid_board.components import Position


@dataclass(frozen=True)
class PortalRegistry:
    """Immutable portal link table.

    Attributes:
        connections (PMap[Position, Position]): Source to destination.
    """

    connections: PMap[Position, Position] = pmap()


def link_portal(registry: PortalRegistry, src: Position, dst: Position) -> PortalRegistry:
    """Insert or overwrite the link ``src -> dst``."""
    return replace(registry, connections=registry.connections.set(src, dst))


def unlink_portal(registry: PortalRegistry, src: Position) -> PortalRegistry:
    """Remove the link leaving ``src``; no-op when there is none."""
    return replace(registry, connections=registry.connections.discard(src))


def lookup_portal(registry: PortalRegistry, src: Position) -> Optional[Position]:
    """Return the destination linked from ``src`` or ``None``."""
    return registry.connections.get(src)


def clear_portals(registry: PortalRegistry) -> PortalRegistry:
    """Drop every link."""
    return replace(registry, connections=pmap())
