"""Board state with the falling piece and the piece queue."""

from __future__ import annotations

import random
from typing import Iterator

from .bit_board import BitBoard
from .errors import CompletePieceDropError, PieceCollisionError
from .piece import Piece, PieceKind
from .piece_buffer import PieceBuffer


class GameField:
    """The collision board, the falling piece and the upcoming/held pieces."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._piece_buffer = PieceBuffer(rng)
        self._falling_piece = Piece.spawn(self._piece_buffer.pop_next())
        self._board = BitBoard.initial()

    @property
    def board(self) -> BitBoard:
        """The collision board."""
        return self._board

    @property
    def falling_piece(self) -> Piece:
        """The piece currently under control."""
        return self._falling_piece

    def set_falling_piece(self, piece: Piece) -> None:
        """Replace the falling piece; raise ``PieceCollisionError`` if it collides."""
        if self._board.is_colliding(piece):
            raise PieceCollisionError()
        self._falling_piece = piece

    def set_falling_piece_unchecked(self, piece: Piece) -> None:
        """Replace the falling piece without a collision check."""
        self._falling_piece = piece

    @property
    def held_piece(self) -> PieceKind | None:
        """The held piece kind, if any."""
        return self._piece_buffer.held_piece

    def next_pieces(self) -> Iterator[PieceKind]:
        """Yield the upcoming piece kinds in order."""
        return self._piece_buffer.next_pieces()

    def simulate_drop_position(self) -> Piece:
        """Where the falling piece would land if dropped straight down."""
        return self._falling_piece.simulate_drop_position(self._board)

    def can_hold(self) -> bool:
        """True when the piece that holding brings in fits at spawn."""
        return not self._board.is_colliding(self.peek_falling_piece_after_hold())

    def peek_falling_piece_after_hold(self) -> Piece:
        """The falling piece that a hold would produce."""
        return Piece.spawn(self._piece_buffer.peek_hold_result())

    def try_hold(self) -> None:
        """Swap the falling piece with the hold slot; raise ``PieceCollisionError`` if blocked."""
        if not self.can_hold():
            raise PieceCollisionError()
        next_kind = self._piece_buffer.hold(self._falling_piece.kind)
        self._falling_piece = Piece.spawn(next_kind)

    def complete_piece_drop(self) -> int:
        """Lock the falling piece, clear lines and spawn the next piece.

        Returns the number of cleared lines. If the new piece collides at
        spawn, ``CompletePieceDropError`` is raised carrying that number; the
        board and the new falling piece are kept as they are.
        """
        self._board.fill_piece(self._falling_piece)
        cleared_lines = self._board.clear_lines()
        self._falling_piece = Piece.spawn(self._piece_buffer.pop_next())
        if self._board.is_colliding(self._falling_piece):
            raise CompletePieceDropError(cleared_lines)
        return cleared_lines