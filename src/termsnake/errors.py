from __future__ import annotations


class SnakeError(Exception):
    """Base class for errors raised by termsnake."""


class SurfaceError(SnakeError):
    """The terminal or window could not be set up."""


class BoardTooSmallError(SnakeError):
    """The screen cannot fit a playable board."""


class BoardFullError(SnakeError):
    """No free interior cell is left to place food on."""
