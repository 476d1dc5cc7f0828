"""Rendering subpackage.

Turns immutable board snapshots into something a person can look at:

* :func:`render_image` - Pillow + NumPy raster used by the Streamlit app.
* :func:`render_text` - one glyph per cell, for logs and terminals.

Both are pure functions of a snapshot; neither touches editor state.
"""

from .image import DEFAULT_CELL_SIZE, render_image
from .text import render_text

__all__ = ["DEFAULT_CELL_SIZE", "render_image", "render_text"]
