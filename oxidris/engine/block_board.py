"""Board of typed blocks used for rendering.

The layout matches ``BitBoard``: two wall columns on each side, two top rows
with side walls only and two fully walled bottom rows, so coordinates of a
``Piece`` can be used on both boards unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterator

from .constants import (
    PLAYABLE_HEIGHT,
    PLAYABLE_WIDTH,
    SENTINEL_MARGIN_BOTTOM,
    SENTINEL_MARGIN_LEFT,
    SENTINEL_MARGIN_TOP,
    TOTAL_HEIGHT,
    TOTAL_WIDTH,
)
from .piece import Piece, PieceKind


class _Tag(Enum):
    EMPTY = "empty"
    WALL = "wall"
    GHOST = "ghost"
    PIECE = "piece"


@dataclass(frozen=True)
class Block:
    """Content of one board cell: empty, wall, ghost or a piece of some kind."""

    tag: _Tag
    piece: PieceKind | None = None

    EMPTY: ClassVar[Block]
    WALL: ClassVar[Block]
    GHOST: ClassVar[Block]

    def __post_init__(self) -> None:
        if (self.tag is _Tag.PIECE) != (self.piece is not None):
            raise ValueError("a piece kind is required for piece blocks and only for them")

    @classmethod
    def of_piece(cls, kind: PieceKind) -> Block:
        """A block belonging to a piece of ``kind``."""
        return cls(_Tag.PIECE, PieceKind(kind))

    def is_empty(self) -> bool:
        """True for an empty cell."""
        return self.tag is _Tag.EMPTY

    def __repr__(self) -> str:
        if self.piece is not None:
            return f"Block.of_piece(PieceKind.{self.piece.name})"
        return f"Block.{self.tag.name}"


Block.EMPTY = Block(_Tag.EMPTY)
Block.WALL = Block(_Tag.WALL)
Block.GHOST = Block(_Tag.GHOST)

_PLAYABLE = slice(SENTINEL_MARGIN_LEFT, SENTINEL_MARGIN_LEFT + PLAYABLE_WIDTH)


def _top_row() -> list[Block]:
    row = [Block.WALL] * TOTAL_WIDTH
    row[_PLAYABLE] = [Block.EMPTY] * PLAYABLE_WIDTH
    return row


def _bottom_row() -> list[Block]:
    return [Block.WALL] * TOTAL_WIDTH


def _is_filled(row: list[Block]) -> bool:
    return not any(cell.is_empty() for cell in row[_PLAYABLE])


class BlockBoard:
    """The full board, sentinels included; ``rows[y][x]`` is a ``Block``."""

    PLAYABLE_WIDTH: ClassVar[int] = PLAYABLE_WIDTH
    PLAYABLE_HEIGHT: ClassVar[int] = PLAYABLE_HEIGHT

    def __init__(self) -> None:
        self.rows: list[list[Block]] = [
            _top_row() for _ in range(TOTAL_HEIGHT - SENTINEL_MARGIN_BOTTOM)
        ] + [_bottom_row() for _ in range(SENTINEL_MARGIN_BOTTOM)]

    def playable_rows(self) -> Iterator[tuple[Block, ...]]:
        """Yield the playable cells of each playable row, top to bottom."""
        for row in self.rows[SENTINEL_MARGIN_TOP : SENTINEL_MARGIN_TOP + PLAYABLE_HEIGHT]:
            yield tuple(row[_PLAYABLE])

    def fill_piece(self, piece: Piece) -> None:
        """Write the piece's cells as blocks of its kind."""
        self.fill_piece_as(piece, Block.of_piece(piece.kind))

    def fill_piece_as(self, piece: Piece, cell: Block) -> None:
        """Write ``cell`` into every cell the piece covers."""
        for x, y in piece.occupied_positions():
            self.rows[y][x] = cell

    def clear_lines(self) -> int:
        """Remove filled playable rows, shift the rest down, return the count."""
        top = SENTINEL_MARGIN_TOP
        bottom = top + PLAYABLE_HEIGHT
        kept = [row for row in self.rows[top:bottom] if not _is_filled(row)]
        count = PLAYABLE_HEIGHT - len(kept)
        self.rows[top:bottom] = [_top_row() for _ in range(count)] + kept
        return count

    def __repr__(self) -> str:
        return f"BlockBoard(rows={self.rows!r})"