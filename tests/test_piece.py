import random

import pytest

from oxidris.engine.bit_board import PIECE_SPAWN_X, PIECE_SPAWN_Y, BitBoard
from oxidris.engine.piece import Piece, PieceKind, PiecePosition, PieceRotation

FULL_ROW = "#" * 10
EMPTY_ROW = "." * 10


@pytest.mark.parametrize("kind", list(PieceKind))
@pytest.mark.parametrize("rot", range(4))
def test_each_rotation_has_four_cells(kind, rot):
    cells = list(kind.occupied_positions(PieceRotation(rot)))
    assert len(cells) == 4
    assert len(set(cells)) == 4


@pytest.mark.parametrize("kind", list(PieceKind))
@pytest.mark.parametrize("rot", range(4))
def test_mask_matches_occupied_positions(kind, rot):
    rotation = PieceRotation(rot)
    mask = kind.mask(rotation)
    from_mask = {(x, y) for y, bits in enumerate(mask) for x in range(4) if bits >> x & 1}
    assert from_mask == set(kind.occupied_positions(rotation))


def test_i_piece_spawn_mask():
    assert PieceKind.I.mask(PieceRotation()) == (0, 0b1111, 0, 0)


def test_o_piece_is_rotation_invariant():
    masks = {PieceKind.O.mask(PieceRotation(r)) for r in range(4)}
    assert len(masks) == 1


def test_rotation_cycle():
    rot = PieceRotation()
    for _ in range(4):
        rot = rot.rotated_right()
    assert rot == PieceRotation()
    assert PieceRotation(2).rotated_left().rotated_right() == PieceRotation(2)
    assert PieceRotation(0).rotated_left() == PieceRotation(3)


def test_rotation_out_of_range():
    with pytest.raises(ValueError):
        PieceRotation(4)


def test_spawn_position():
    piece = Piece.spawn(PieceKind.T)
    assert piece.position == PiecePosition(PIECE_SPAWN_X, PIECE_SPAWN_Y)
    assert piece.rotation == PieceRotation()
    assert piece.kind is PieceKind.T


def test_position_bounds():
    assert PiecePosition(0, 3).left() is None
    assert PiecePosition(3, 0).up() is None
    assert PiecePosition(BitBoard.TOTAL_WIDTH - 1, 0).right() is None
    assert PiecePosition(0, BitBoard.TOTAL_HEIGHT - 1).down() is None
    with pytest.raises(ValueError):
        PiecePosition(BitBoard.TOTAL_WIDTH, 0)
    with pytest.raises(ValueError):
        PiecePosition(0, -1)


def test_moves_are_inverse():
    piece = Piece.spawn(PieceKind.S)
    assert piece.right().left() == piece
    assert piece.down().up() == piece
    assert piece.up() is None


def test_occupied_positions_offset_by_position():
    piece = Piece.spawn(PieceKind.L).down()
    offsets = list(PieceKind.L.occupied_positions(piece.rotation))
    assert list(piece.occupied_positions()) == [
        (piece.position.x + dx, piece.position.y + dy) for dx, dy in offsets
    ]


def test_rotate_left_right_inverse():
    piece = Piece.spawn(PieceKind.J)
    assert piece.rotated_right().rotated_left() == piece
    assert piece.rotated_right().position == piece.position


def test_super_rotation_on_empty_board_is_plain_rotation():
    board = BitBoard.initial()
    piece = Piece.spawn(PieceKind.T).down()
    assert piece.super_rotated_right(board) == piece.rotated_right()
    assert piece.super_rotated_left(board) == piece.rotated_left()


def test_super_rotation_blocked_returns_none():
    board = BitBoard.from_ascii("\n".join([FULL_ROW] * 20))
    piece = Piece.spawn(PieceKind.I)
    assert not board.is_colliding(piece)
    assert piece.super_rotated_right(board) is None


def test_super_rotation_kicks_up():
    board = BitBoard.from_ascii("\n".join([EMPTY_ROW] * 2 + [FULL_ROW] * 18))
    piece = Piece.spawn(PieceKind.I).down()
    assert not board.is_colliding(piece)
    assert board.is_colliding(piece.rotated_right())
    result = piece.super_rotated_right(board)
    assert result == piece.rotated_right().up()
    assert not board.is_colliding(result)


def test_super_rotations_o_piece():
    piece = Piece.spawn(PieceKind.O)
    assert piece.super_rotations(BitBoard.initial()) == [piece]


def test_super_rotations_t_piece_empty_board():
    piece = Piece.spawn(PieceKind.T).down()
    rotations = piece.super_rotations(BitBoard.initial())
    assert len(rotations) == 4
    assert {r.rotation for r in rotations} == {PieceRotation(r) for r in range(4)}


@pytest.mark.parametrize("kind", list(PieceKind))
def test_simulate_drop_position(kind):
    board = BitBoard.initial()
    piece = Piece.spawn(kind)
    dropped = piece.simulate_drop_position(board)
    assert not board.is_colliding(dropped)
    assert board.is_colliding(dropped.down())
    assert dropped.position.x == piece.position.x
    assert dropped.position.y > piece.position.y


def test_dict_round_trip():
    piece = Piece.spawn(PieceKind.Z).rotated_left()
    data = piece.to_dict()
    assert data == {
        "position": {"x": PIECE_SPAWN_X, "y": PIECE_SPAWN_Y},
        "rotation": 3,
        "kind": "Z",
    }
    assert Piece.from_dict(data) == piece


def test_from_dict_rejects_bad_kind():
    with pytest.raises(ValueError):
        Piece.from_dict({"position": {"x": 5, "y": 0}, "rotation": 0, "kind": "X"})


def test_random_kind_is_deterministic_with_seed():
    kinds_a = [PieceKind.random(random.Random(7)) for _ in range(3)]
    kinds_b = [PieceKind.random(random.Random(7)) for _ in range(3)]
    assert kinds_a == kinds_b
    rng = random.Random(1)
    assert {PieceKind.random(rng) for _ in range(500)} == set(PieceKind)