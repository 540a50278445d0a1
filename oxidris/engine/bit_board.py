"""Bit-mask board used for fast collision detection and line clearing.

Each row is a 16-bit mask; bit ``x`` is the cell in column ``x``. Columns 0-1
and 12-13 are wall sentinels, columns 2-11 are the playable area. Two
sentinel columns on each side let every piece, including the I-piece in its
4x4 grid, reach the outermost playable columns. The top two rows only carry
side walls so pieces can spawn there; the bottom two rows are fully occupied.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator, Protocol, Sequence

from .constants import (
    PLAYABLE_HEIGHT,
    PLAYABLE_WIDTH,
    SENTINEL_MARGIN_LEFT,
    SENTINEL_MARGIN_TOP,
    TOTAL_HEIGHT,
    TOTAL_WIDTH,
)

PIECE_SPAWN_X = 5
PIECE_SPAWN_Y = 0

LEFT_SENTINEL_MASK = 0b11
RIGHT_SENTINEL_MASK = 0b11 << (SENTINEL_MARGIN_LEFT + PLAYABLE_WIDTH)
SENTINEL_MASK = LEFT_SENTINEL_MASK | RIGHT_SENTINEL_MASK
FULL_ROW_MASK = (1 << TOTAL_WIDTH) - 1
PLAYABLE_MASK = FULL_ROW_MASK & ~SENTINEL_MASK

_ROW_BITS = 0xFFFF
_HEX_PER_ROW = 4


class _Position(Protocol):
    x: int
    y: int


class _PieceLike(Protocol):
    position: _Position

    def mask(self) -> Sequence[int]: ...


@dataclass(frozen=True)
class BitRow:
    """One board row stored as a bit mask."""

    bits: int

    EMPTY: ClassVar[BitRow]
    FULL_SENTINEL: ClassVar[BitRow]

    def is_playable_filled(self) -> bool:
        """True when every playable cell of the row is occupied."""
        return (self.bits & PLAYABLE_MASK) == PLAYABLE_MASK

    def is_cell_occupied(self, x: int) -> bool:
        """True when the cell in column ``x`` is occupied."""
        return bool((self.bits >> x) & 1)

    def is_any_cell_occupied(self, x0: int, mask: int) -> bool:
        """True when any cell of ``mask`` shifted by ``x0`` is occupied."""
        return (self.bits & (mask << x0)) != 0

    def occupy_cells(self, x0: int, mask: int) -> BitRow:
        """Return a row with the cells of ``mask`` shifted by ``x0`` occupied."""
        return BitRow((self.bits | (mask << x0)) & _ROW_BITS)

    def iter_playable_cells(self) -> Iterator[bool]:
        """Yield the occupied state of each playable cell, left to right."""
        for x in range(SENTINEL_MARGIN_LEFT, SENTINEL_MARGIN_LEFT + PLAYABLE_WIDTH):
            yield self.is_cell_occupied(x)


BitRow.EMPTY = BitRow(SENTINEL_MASK)
BitRow.FULL_SENTINEL = BitRow(FULL_ROW_MASK)


@dataclass
class BitBoard:
    """The full board, sentinels included, as a list of ``BitRow``."""

    rows: list[BitRow]

    TOTAL_WIDTH: ClassVar[int] = TOTAL_WIDTH
    TOTAL_HEIGHT: ClassVar[int] = TOTAL_HEIGHT
    PLAYABLE_WIDTH: ClassVar[int] = PLAYABLE_WIDTH
    PLAYABLE_HEIGHT: ClassVar[int] = PLAYABLE_HEIGHT
    PLAYABLE_X_RANGE: ClassVar[range] = range(
        SENTINEL_MARGIN_LEFT, SENTINEL_MARGIN_LEFT + PLAYABLE_WIDTH
    )
    PLAYABLE_Y_RANGE: ClassVar[range] = range(
        SENTINEL_MARGIN_TOP, SENTINEL_MARGIN_TOP + PLAYABLE_HEIGHT
    )

    def __post_init__(self) -> None:
        rows = [row if isinstance(row, BitRow) else BitRow(int(row)) for row in self.rows]
        if len(rows) != TOTAL_HEIGHT:
            raise ValueError(f"expected {TOTAL_HEIGHT} rows, got {len(rows)}")
        self.rows = rows

    @classmethod
    def initial(cls) -> BitBoard:
        """An empty board: side walls everywhere, full rows at the bottom."""
        bottom = TOTAL_HEIGHT - SENTINEL_MARGIN_TOP - PLAYABLE_HEIGHT
        return cls([BitRow.EMPTY] * (TOTAL_HEIGHT - bottom) + [BitRow.FULL_SENTINEL] * bottom)

    def copy(self) -> BitBoard:
        """An independent copy of the board."""
        return BitBoard(list(self.rows))

    def playable_row(self, y: int) -> BitRow:
        """The playable row ``y`` (0 is the top playable row)."""
        return self.rows[y + SENTINEL_MARGIN_TOP]

    def playable_rows(self) -> Iterator[BitRow]:
        """Yield the playable rows from top to bottom."""
        yield from self.rows[SENTINEL_MARGIN_TOP : SENTINEL_MARGIN_TOP + PLAYABLE_HEIGHT]

    def is_colliding(self, piece: _PieceLike) -> bool:
        """True when the piece overlaps an occupied cell."""
        x0, y0 = piece.position.x, piece.position.y
        return any(
            row.is_any_cell_occupied(x0, mask)
            for mask, row in zip(piece.mask(), self.rows[y0:])
        )

    def fill_piece(self, piece: _PieceLike) -> None:
        """Mark the cells covered by the piece as occupied."""
        x0, y0 = piece.position.x, piece.position.y
        for y, mask in enumerate(piece.mask(), start=y0):
            if y >= TOTAL_HEIGHT:
                break
            self.rows[y] = self.rows[y].occupy_cells(x0, mask)

    def clear_lines(self) -> int:
        """Remove filled playable rows, shift the rest down, return the count."""
        top = SENTINEL_MARGIN_TOP
        bottom = top + PLAYABLE_HEIGHT
        kept = [row for row in self.rows[top:bottom] if not row.is_playable_filled()]
        count = PLAYABLE_HEIGHT - len(kept)
        self.rows[top:bottom] = [BitRow.EMPTY] * count + kept
        return count

    def max_height(self) -> int:
        """Height of the highest occupied playable cell, 0 for an empty board."""
        for y, row in enumerate(self.playable_rows()):
            if any(row.iter_playable_cells()):
                return PLAYABLE_HEIGHT - y
        return 0

    @classmethod
    def from_ascii(cls, art: str) -> BitBoard:
        """Build a board from rows of ``#`` (occupied) and ``.`` (empty).

        Rows are given top to bottom; blank lines are ignored.
        """
        lines = [line for line in art.splitlines() if line.strip()]
        if len(lines) > PLAYABLE_HEIGHT:
            raise ValueError(
                f"at most {PLAYABLE_HEIGHT} rows are allowed, got {len(lines)}"
            )
        board = cls.initial()
        for y, line in enumerate(lines):
            cells = [ch for ch in line if ch in "#."]
            if len(cells) != PLAYABLE_WIDTH:
                raise ValueError(
                    f"Each row must have exactly {PLAYABLE_WIDTH} cells, "
                    f"got {len(cells)} at row {y}"
                )
            row_index = y + SENTINEL_MARGIN_TOP
            for x, ch in enumerate(cells):
                if ch == "#":
                    board.rows[row_index] = board.rows[row_index].occupy_cells(
                        x + SENTINEL_MARGIN_LEFT, 0b1
                    )
        return board

    def to_hex(self) -> str:
        """Serialise as one lowercase hex string, four digits per row."""
        return "".join(f"{row.bits:04x}" for row in self.rows)

    @classmethod
    def from_hex(cls, text: str) -> BitBoard:
        """Parse the format written by ``to_hex``."""
        expected_len = TOTAL_HEIGHT * _HEX_PER_ROW
        if len(text) != expected_len:
            raise ValueError(
                f"expected {expected_len} characters "
                f"({_HEX_PER_ROW} per row * {TOTAL_HEIGHT} rows), got {len(text)}"
            )
        chunks = [text[i : i + _HEX_PER_ROW] for i in range(0, expected_len, _HEX_PER_ROW)]
        return cls([_parse_hex_row(chunk) for chunk in chunks])


def _parse_hex_row(chunk: str) -> BitRow:
    if not all(ch in string.hexdigits for ch in chunk):
        raise ValueError(f"invalid hex digits in row {chunk!r}")
    return BitRow(int(chunk, 16))


def _rows_from_ints(values: Iterable[int]) -> list[BitRow]:
    return [BitRow(value) for value in values]