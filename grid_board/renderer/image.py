"""Pillow + NumPy board renderer.

Tiles are painted into an ``(H, W, 3)`` uint8 array one cell block at a
time, grid lines are drawn as array slices, then entities are drawn on top
as discs with :class:`PIL.ImageDraw.ImageDraw`. Portal cells that carry a
link get a small marker so linked and dangling portals can be told apart.
"""

from typing import Dict, Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from grid_board.portals import PortalRegistry
from grid_board.state import Board
from grid_board.types import EntityType, TileType
from grid_board.utils.grid import tile_at

RGB = Tuple[int, int, int]
UInt8Array = npt.NDArray[np.uint8]

DEFAULT_CELL_SIZE = 44


def hex_to_rgb(value: str) -> RGB:
    value = value.lstrip("#")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


BACKGROUND: RGB = hex_to_rgb("#3f5172")
GRID_LINE: RGB = hex_to_rgb("#2b3b5a")

TILE_COLORS: Dict[str, RGB] = {
    TileType.WALL: hex_to_rgb("#233553"),
    TileType.SPAWN: hex_to_rgb("#9BE7C5"),
    TileType.EXIT: hex_to_rgb("#F2D388"),
    TileType.ENTER_PORTAL: hex_to_rgb("#6C8CD5"),
    TileType.EXIT_PORTAL: hex_to_rgb("#4A6AB3"),
}

# (color, radius as a fraction of the cell size); later entries draw on top.
ENTITY_STYLES: Dict[str, Tuple[RGB, float]] = {
    EntityType.SMALL_DOT: (hex_to_rgb("#7DD6A1"), 0.08),
    EntityType.BIG_DOT: (hex_to_rgb("#7DF6A0"), 0.18),
    EntityType.ENEMY: (hex_to_rgb("#FF9DB4"), 0.32),
    EntityType.PLAYER: (hex_to_rgb("#C293F2"), 0.32),
}

LINK_MARKER: RGB = hex_to_rgb("#FFFFFF")


def _tile_array(board: Board, cell_size: int) -> UInt8Array:
    height, width = board.rows * cell_size, board.cols * cell_size
    pixels: UInt8Array = np.empty((height, width, 3), dtype=np.uint8)
    pixels[:, :] = BACKGROUND
    for r, row in enumerate(board.tiles):
        for c, tile in enumerate(row):
            color: Optional[RGB] = TILE_COLORS.get(tile)
            if color is None:
                continue
            y, x = r * cell_size, c * cell_size
            pixels[y : y + cell_size, x : x + cell_size] = color
    pixels[::cell_size, :] = GRID_LINE
    pixels[:, ::cell_size] = GRID_LINE
    pixels[-1, :] = GRID_LINE
    pixels[:, -1] = GRID_LINE
    return pixels


def render_image(
    board: Board,
    portals: Optional[PortalRegistry] = None,
    cell_size: int = DEFAULT_CELL_SIZE,
) -> Image.Image:
    """Render ``board`` to an RGB image of ``cols*cell_size`` by ``rows*cell_size``."""
    image = Image.fromarray(_tile_array(board, cell_size))
    draw = ImageDraw.Draw(image)

    if portals is not None:
        marker = max(2, cell_size // 8)
        for src in portals.connections:
            if tile_at(board, src) != TileType.ENTER_PORTAL:
                continue
            x, y = src.c * cell_size + marker, src.r * cell_size + marker
            draw.rectangle((x, y, x + marker, y + marker), fill=LINK_MARKER)

    order = list(ENTITY_STYLES)
    entities = sorted(
        (e for e in board.entities if e.type in ENTITY_STYLES),
        key=lambda e: order.index(e.type),
    )
    for entity in entities:
        color, fraction = ENTITY_STYLES[entity.type]
        radius = max(3.0, cell_size * fraction)
        cx = entity.c * cell_size + cell_size / 2
        cy = entity.r * cell_size + cell_size / 2
        draw.ellipse((cx - radius, cy - radius, cx + radius, cy + radius), fill=color)
    return image

