import random

from oxidris.engine.piece import PieceKind
from oxidris.engine.piece_buffer import PieceBuffer


def make_buffer(seed=3):
    return PieceBuffer(random.Random(seed))


def test_pieces_come_in_complete_bags():
    buffer = make_buffer()
    first = [buffer.pop_next() for _ in range(7)]
    second = [buffer.pop_next() for _ in range(7)]
    assert sorted(first) == list(PieceKind)
    assert sorted(second) == list(PieceKind)


def test_same_seed_same_sequence():
    a = make_buffer(11)
    b = make_buffer(11)
    assert [a.pop_next() for _ in range(30)] == [b.pop_next() for _ in range(30)]


def test_next_pieces_preview_matches_pops():
    buffer = make_buffer()
    preview = list(buffer.next_pieces())
    assert len(preview) > len(PieceKind)
    assert [buffer.pop_next() for _ in range(len(preview))] == preview


def test_preview_never_runs_short():
    buffer = make_buffer()
    for _ in range(50):
        buffer.pop_next()
        assert len(list(buffer.next_pieces())) >= len(PieceKind)


def test_hold_with_empty_slot_takes_next_piece():
    buffer = make_buffer()
    upcoming = list(buffer.next_pieces())
    assert buffer.held_piece is None
    assert buffer.peek_hold_result() == upcoming[0]
    assert buffer.hold(PieceKind.T) == upcoming[0]
    assert buffer.held_piece is PieceKind.T
    assert list(buffer.next_pieces())[0] == upcoming[1]


def test_hold_swaps_with_held_piece():
    buffer = make_buffer()
    buffer.hold(PieceKind.I)
    before = list(buffer.next_pieces())
    assert buffer.peek_hold_result() is PieceKind.I
    assert buffer.hold(PieceKind.O) is PieceKind.I
    assert buffer.held_piece is PieceKind.O
    assert list(buffer.next_pieces()) == before