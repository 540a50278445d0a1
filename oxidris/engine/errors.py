"""Exceptions raised by the game engine."""

from __future__ import annotations


class _EngineError(Exception):
    """Base for engine errors that carry a fixed default message."""

    message: str = ""

    def __str__(self) -> str:
        if self.args:
            return str(self.args[0])
        return self.message


class PieceCollisionError(_EngineError):
    """The requested piece placement collides with occupied cells."""

    message = "piece colliding when setting falling piece"


class HoldError(_EngineError):
    """Holding the falling piece is not possible."""


class HoldPieceCollisionError(HoldError, PieceCollisionError):
    """The piece that would come out of hold collides with the board."""

    message = "piece colliding when holding piece"


class HoldAlreadyUsedError(HoldError):
    """Hold was already used during the current turn."""

    message = "hold already used in this turn"


class CompletePieceDropError(_EngineError):
    """No room to spawn the next piece after a drop was completed.

    The number of lines cleared by the drop is kept in ``cleared_lines``.
    """

    message = "no space to spawn new piece after completing drop"

    def __init__(self, cleared_lines: int) -> None:
        super().__init__()
        self.cleared_lines = cleared_lines