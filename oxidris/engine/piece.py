"""Tetromino kinds, rotations, positions and movement on a ``BitBoard``."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Any, ClassVar, Iterator, Mapping

from .bit_board import PIECE_SPAWN_X, PIECE_SPAWN_Y, BitBoard
from .constants import TOTAL_HEIGHT, TOTAL_WIDTH

_Shape = tuple[tuple[bool, ...], ...]
_Mask = tuple[int, int, int, int]


class PieceKind(IntEnum):
    """The seven tetromino kinds."""

    I = 0  # noqa: E741
    O = 1  # noqa: E741
    S = 2
    Z = 3
    J = 4
    L = 5
    T = 6

    def mask(self, rotation: PieceRotation) -> _Mask:
        """Row bit masks of the 4x4 grid for the given rotation."""
        return _PIECE_MASKS[self][rotation.value]

    def occupied_positions(self, rotation: PieceRotation) -> Iterator[tuple[int, int]]:
        """Yield ``(dx, dy)`` offsets of occupied cells within the 4x4 grid."""
        for dy, row in enumerate(_PIECE_SHAPES[self][rotation.value]):
            for dx, cell in enumerate(row):
                if cell:
                    yield dx, dy

    @classmethod
    def random(cls, rng: random.Random | None = None) -> PieceKind:
        """A uniformly chosen kind."""
        source = rng if rng is not None else random
        return cls(source.randint(0, len(cls) - 1))


@dataclass(frozen=True)
class PieceRotation:
    """Rotation state: 0 is spawn, 1 is 90° right, 2 is 180°, 3 is 90° left."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value < 4:
            raise ValueError(f"rotation must be in 0..3, got {self.value}")

    def rotated_right(self) -> PieceRotation:
        return PieceRotation((self.value + 1) % 4)

    def rotated_left(self) -> PieceRotation:
        return PieceRotation((self.value + 3) % 4)


@dataclass(frozen=True)
class PiecePosition:
    """Top-left corner of a piece's 4x4 grid in board coordinates."""

    x: int
    y: int

    SPAWN_POSITION: ClassVar[PiecePosition]

    def __post_init__(self) -> None:
        if not 0 <= self.x < TOTAL_WIDTH:
            raise ValueError(f"x must be in 0..{TOTAL_WIDTH - 1}, got {self.x}")
        if not 0 <= self.y < TOTAL_HEIGHT:
            raise ValueError(f"y must be in 0..{TOTAL_HEIGHT - 1}, got {self.y}")

    def left(self) -> PiecePosition | None:
        return None if self.x == 0 else PiecePosition(self.x - 1, self.y)

    def right(self) -> PiecePosition | None:
        return None if self.x >= TOTAL_WIDTH - 1 else PiecePosition(self.x + 1, self.y)

    def up(self) -> PiecePosition | None:
        return None if self.y == 0 else PiecePosition(self.x, self.y - 1)

    def down(self) -> PiecePosition | None:
        return None if self.y >= TOTAL_HEIGHT - 1 else PiecePosition(self.x, self.y + 1)


PiecePosition.SPAWN_POSITION = PiecePosition(PIECE_SPAWN_X, PIECE_SPAWN_Y)


@dataclass(frozen=True)
class Piece:
    """A piece of some kind at a position and rotation."""

    position: PiecePosition
    rotation: PieceRotation = field(default_factory=PieceRotation)
    kind: PieceKind = PieceKind.I

    @classmethod
    def spawn(cls, kind: PieceKind) -> Piece:
        """A piece of ``kind`` at the spawn position with no rotation."""
        return cls(PiecePosition.SPAWN_POSITION, PieceRotation(), kind)

    def mask(self) -> _Mask:
        return self.kind.mask(self.rotation)

    def occupied_positions(self) -> Iterator[tuple[int, int]]:
        """Yield ``(x, y)`` board coordinates of the occupied cells."""
        for dx, dy in self.kind.occupied_positions(self.rotation):
            yield self.position.x + dx, self.position.y + dy

    def _moved(self, position: PiecePosition | None) -> Piece | None:
        return None if position is None else replace(self, position=position)

    def left(self) -> Piece | None:
        return self._moved(self.position.left())

    def right(self) -> Piece | None:
        return self._moved(self.position.right())

    def up(self) -> Piece | None:
        return self._moved(self.position.up())

    def down(self) -> Piece | None:
        return self._moved(self.position.down())

    def rotated_right(self) -> Piece:
        return replace(self, rotation=self.rotation.rotated_right())

    def rotated_left(self) -> Piece:
        return replace(self, rotation=self.rotation.rotated_left())

    def super_rotated_left(self, board: BitBoard) -> Piece | None:
        """Rotate left, kicking up/right/down/left if needed; None if impossible."""
        return _with_kick(board, self.rotated_left())

    def super_rotated_right(self, board: BitBoard) -> Piece | None:
        """Rotate right, kicking up/right/down/left if needed; None if impossible."""
        return _with_kick(board, self.rotated_right())

    def super_rotations(self, board: BitBoard) -> list[Piece]:
        """This piece followed by the successive reachable right rotations."""
        rotations = [self]
        if self.kind is PieceKind.O:
            return rotations
        prev = self
        for _ in range(3):
            piece = prev.super_rotated_right(board)
            if piece is None:
                break
            rotations.append(piece)
            prev = piece
        return rotations

    def simulate_drop_position(self, board: BitBoard) -> Piece:
        """The lowest position reachable by moving straight down."""
        dropped = self
        while (below := dropped.down()) is not None and not board.is_colliding(below):
            dropped = below
        return dropped

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": {"x": self.position.x, "y": self.position.y},
            "rotation": self.rotation.value,
            "kind": self.kind.name,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Piece:
        try:
            position = data["position"]
            kind = PieceKind[data["kind"]]
            return cls(
                PiecePosition(int(position["x"]), int(position["y"])),
                PieceRotation(int(data["rotation"])),
                kind,
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid piece data: {data!r}") from exc


def _with_kick(board: BitBoard, piece: Piece) -> Piece | None:
    if not board.is_colliding(piece):
        return piece
    for candidate in (piece.up(), piece.right(), piece.down(), piece.left()):
        if candidate is not None and not board.is_colliding(candidate):
            return candidate
    return None


def _parse_shape(rows: tuple[str, ...]) -> _Shape:
    padded = list(rows) + ["...."] * (4 - len(rows))
    return tuple(tuple(ch == "#" for ch in row) for row in padded)


def _rotate(size: int, shape: _Shape) -> _Shape:
    return tuple(
        tuple(
            shape[size - 1 - x][y] if x < size and y < size else False
            for x in range(4)
        )
        for y in range(4)
    )


def _rotations(size: int, base: _Shape) -> tuple[_Shape, ...]:
    shapes = [base]
    for _ in range(3):
        shapes.append(_rotate(size, shapes[-1]))
    return tuple(shapes)


def _shape_mask(shape: _Shape) -> _Mask:
    rows = [sum(1 << x for x, cell in enumerate(row) if cell) for row in shape]
    return rows[0], rows[1], rows[2], rows[3]


_BASE_SHAPES: dict[PieceKind, tuple[int, tuple[str, ...]]] = {
    PieceKind.I: (4, ("....", "####")),
    PieceKind.O: (2, ("##..", "##..")),
    PieceKind.S: (3, (".##.", "##..")),
    PieceKind.Z: (3, ("##..", ".##.")),
    PieceKind.J: (3, ("#...", "###.")),
    PieceKind.L: (3, ("..#.", "###.")),
    PieceKind.T: (3, (".#..", "###.")),
}

_PIECE_SHAPES: dict[PieceKind, tuple[_Shape, ...]] = {
    kind: _rotations(size, _parse_shape(rows)) for kind, (size, rows) in _BASE_SHAPES.items()
}

_PIECE_MASKS: dict[PieceKind, tuple[_Mask, ...]] = {
    kind: tuple(_shape_mask(shape) for shape in shapes)
    for kind, shapes in _PIECE_SHAPES.items()
}