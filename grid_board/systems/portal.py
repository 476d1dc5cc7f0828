"""Portal resolution.

Stepping onto an ``enterPortal`` tile sends the player straight to the
linked coordinate. There is no chaining: the destination is not checked for
another portal. A portal without a usable link is closed: the move is
dropped rather than leaving the player standing on the portal tile.
"""

import logging
from typing import Optional

from grid_board.components import Position
from grid_board.portals import PortalRegistry, lookup_portal
from grid_board.state import Board
from grid_board.utils.grid import is_in_bounds

logger = logging.getLogger(__name__)


def portal_destination(
    board: Board, portals: PortalRegistry, portal_pos: Position
) -> Optional[Position]:
    """Return where a player entering ``portal_pos`` lands, or ``None``.

    ``None`` means the link is missing or points outside the board.
    """
    linked = lookup_portal(portals, portal_pos)
    if linked is None:
        logger.info("portal at %s has no link; move dropped", portal_pos)
        return None
    if not is_in_bounds(board, linked):
        logger.info("portal at %s links outside the board (%s); move dropped", portal_pos, linked)
        return None
    return linked
