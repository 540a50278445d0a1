"""Upcoming-piece queue using the 7-bag system, plus the hold slot."""

from __future__ import annotations

import random
from collections import deque
from typing import Iterator

from .piece import PieceKind


class PieceBuffer:
    """Supplies pieces from shuffled bags of all seven kinds and keeps the hold slot."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._bag: deque[PieceKind] = deque()
        self._held: PieceKind | None = None
        self._fill_bag()

    def _fill_bag(self) -> None:
        # Keep more than one full bag queued so a bag is visible after any pop.
        while len(self._bag) <= len(PieceKind):
            new_bag = list(PieceKind)
            self._rng.shuffle(new_bag)
            self._bag.extend(new_bag)

    def pop_next(self) -> PieceKind:
        """Remove and return the next piece."""
        self._fill_bag()
        return self._bag.popleft()

    def next_pieces(self) -> Iterator[PieceKind]:
        """Yield the upcoming pieces in order."""
        return iter(tuple(self._bag))

    def peek_hold_result(self) -> PieceKind:
        """The piece that holding would bring into play."""
        return self._held if self._held is not None else self._bag[0]

    def hold(self, current: PieceKind) -> PieceKind:
        """Put ``current`` on hold and return the piece that replaces it."""
        previous, self._held = self._held, current
        return previous if previous is not None else self.pop_next()

    @property
    def held_piece(self) -> PieceKind | None:
        """The held piece, if any."""
        return self._held