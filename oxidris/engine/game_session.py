"""A playable game: field, statistics, gravity timing and the render board."""

from __future__ import annotations

import random
from datetime import timedelta
from enum import Enum
from typing import Iterator

from .block_board import BlockBoard
from .errors import (
    CompletePieceDropError,
    HoldAlreadyUsedError,
    HoldPieceCollisionError,
    PieceCollisionError,
)
from .game_field import GameField
from .game_stats import GameStats
from .piece import Piece, PieceKind


class SessionState(Enum):
    """Whether the game is running, paused or over."""

    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


def _drop_frames(level: int, fps: int) -> int:
    millis = 100 + max(0, 900 - level * 100)
    return millis * fps // 1000


class GameSession:
    """One game driven frame by frame at a fixed frame rate."""

    def __init__(self, fps: int, rng: random.Random | None = None) -> None:
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.field = GameField(rng)
        self.stats = GameStats()
        self.hold_used = False
        self.render_board = BlockBoard()
        self.session_state = SessionState.PLAYING
        self.fps = fps
        self.total_frames = 0
        self._drop_frames = _drop_frames(0, fps)

    @property
    def duration(self) -> timedelta:
        """Game time elapsed, counted in frames."""
        secs, frames = divmod(self.total_frames, self.fps)
        micros = frames * 1_000_000 // self.fps
        return timedelta(seconds=secs, microseconds=micros)

    def toggle_pause(self) -> None:
        """Switch between playing and paused; a finished game stays over."""
        if self.session_state is SessionState.PLAYING:
            self.session_state = SessionState.PAUSED
        elif self.session_state is SessionState.PAUSED:
            self.session_state = SessionState.PLAYING

    @property
    def falling_piece(self) -> Piece:
        """The piece currently under control."""
        return self.field.falling_piece

    @property
    def held_piece(self) -> PieceKind | None:
        """The held piece kind, if any."""
        return self.field.held_piece

    def next_pieces(self) -> Iterator[PieceKind]:
        """Yield the upcoming piece kinds in order."""
        return self.field.next_pieces()

    def simulate_drop_position(self) -> Piece:
        """Where the falling piece would land if dropped straight down."""
        return self.field.simulate_drop_position()

    def increment_frame(self) -> None:
        """Advance one frame, applying gravity when its timer runs out."""
        self.total_frames += 1
        self._drop_frames = max(0, self._drop_frames - 1)
        if self._drop_frames == 0:
            self._drop_frames = _drop_frames(self.stats.level, self.fps)
            self.auto_drop_and_complete()

    def _move_to(self, piece: Piece | None) -> None:
        if piece is None:
            raise PieceCollisionError()
        self.field.set_falling_piece(piece)

    def try_move_left(self) -> None:
        """Move the falling piece one column left or raise ``PieceCollisionError``."""
        self._move_to(self.field.falling_piece.left())

    def try_move_right(self) -> None:
        """Move the falling piece one column right or raise ``PieceCollisionError``."""
        self._move_to(self.field.falling_piece.right())

    def try_soft_drop(self) -> None:
        """Move the falling piece one row down or raise ``PieceCollisionError``."""
        self._move_to(self.field.falling_piece.down())

    def _rotate_to(self, piece: Piece | None) -> None:
        if piece is None:
            raise PieceCollisionError()
        self.field.set_falling_piece_unchecked(piece)

    def try_rotate_left(self) -> None:
        """Rotate left with wall kicks or raise ``PieceCollisionError``."""
        self._rotate_to(self.field.falling_piece.super_rotated_left(self.field.board))

    def try_rotate_right(self) -> None:
        """Rotate right with wall kicks or raise ``PieceCollisionError``."""
        self._rotate_to(self.field.falling_piece.super_rotated_right(self.field.board))

    def try_hold(self) -> None:
        """Hold the falling piece once per turn.

        Raises ``HoldAlreadyUsedError`` on a second hold in the same turn and
        ``HoldPieceCollisionError`` when the incoming piece does not fit.
        """
        if self.hold_used:
            raise HoldAlreadyUsedError()
        try:
            self.field.try_hold()
        except PieceCollisionError as exc:
            raise HoldPieceCollisionError() from exc
        self.hold_used = True

    def hard_drop_and_complete(self) -> None:
        """Drop the piece as far as it goes and lock it."""
        while True:
            try:
                self.try_soft_drop()
            except PieceCollisionError:
                break
        self._complete_piece_drop()

    def auto_drop_and_complete(self) -> None:
        """Move the piece down one row, locking it when it cannot move."""
        try:
            self.try_soft_drop()
        except PieceCollisionError:
            self._complete_piece_drop()

    def _complete_piece_drop(self) -> None:
        self.render_board.fill_piece(self.field.falling_piece)
        try:
            cleared_lines = self.field.complete_piece_drop()
        except CompletePieceDropError as exc:
            self.stats.complete_piece_drop(exc.cleared_lines)
            self.hold_used = False
            self.session_state = SessionState.GAME_OVER
            return
        self.stats.complete_piece_drop(cleared_lines)
        self.hold_used = False
        rendered = self.render_board.clear_lines()
        if rendered != cleared_lines:
            raise RuntimeError(
                f"render board cleared {rendered} lines, field cleared {cleared_lines}"
            )