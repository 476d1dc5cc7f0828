"""Exceptions raised by the board core.

Only snapshot import can fail loudly; every other operation degrades to a
no-op on bad input.
"""


class BoardError(Exception):
    """Base class for board errors."""


class InvalidBoardFormat(BoardError, ValueError):
    """Imported data does not have the top-level board shape."""
