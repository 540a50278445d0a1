# oxidris

A small, self-contained engine for a falling-block puzzle game on a
10×20 field, together with statistics helpers that are useful when
analysing played or simulated games.

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The game engine (`oxidris.engine`)

- `bit_board.BitBoard` – a bitmask board with 2-cell sentinel walls on
  every side, used for collision checks (`is_colliding`), locking pieces
  (`fill_piece`), line clearing (`clear_lines`) and `max_height`. Boards
  can be built from ASCII art of `#` and `.` (`BitBoard.from_ascii`) and
  serialised to and from a hex string, four digits per row
  (`to_hex` / `from_hex`). `BitBoard.initial()` gives an empty board.
- `block_board.BlockBoard` and `block_board.Block` – a board of cells
  (`Block.EMPTY`, `Block.WALL`, `Block.GHOST` or `Block.of_piece(kind)`)
  with the same coordinates as `BitBoard`, meant for rendering.
- `piece.Piece`, `piece.PieceKind`, `piece.PieceRotation`,
  `piece.PiecePosition` – the seven pieces, their rotations and movement.
  `Piece.super_rotated_left` / `super_rotated_right` try a plain rotation
  and then kicks up, right, down and left; `simulate_drop_position` finds
  where a piece lands. Pieces convert to and from plain dicts
  (`to_dict` / `from_dict`).
- `piece_buffer.PieceBuffer` – the 7-bag piece generator with a hold slot.
- `game_field.GameField` – board, falling piece and piece buffer.
- `game_stats.GameStats` – score (0/100/300/500/800 for 0–4 lines),
  level (one per ten cleared lines) and line-clear counters.
- `game_session.GameSession` and `game_session.SessionState` – a
  frame-driven session with gravity, pause, hold and game-over handling.
  Gravity interval shrinks from 1 s at level 0 to 100 ms at level 9.
- `errors` – `PieceCollisionError`, `HoldError` (with
  `HoldPieceCollisionError` and `HoldAlreadyUsedError`) and
  `CompletePieceDropError`, which carries `cleared_lines`.

```python
import random

from oxidris.engine.game_session import GameSession, SessionState

session = GameSession(60, random.Random(42))
session.try_move_left()
session.try_rotate_right()
session.hard_drop_and_complete()
print(session.stats.score, session.stats.level)

while session.session_state is SessionState.PLAYING:
    session.increment_frame()
print(session.duration, session.stats.completed_pieces)
```

Moves and rotations that are blocked raise `PieceCollisionError`; a
second hold in the same turn raises `HoldAlreadyUsedError`, and a hold
whose incoming piece does not fit raises `HoldPieceCollisionError`.
When a new piece cannot spawn, the session state becomes
`SessionState.GAME_OVER`.

## Statistics (`oxidris.stats`)

- `descriptive.DescriptiveStats` – min, max, mean, median, variance,
  standard deviation and range-normalised standard deviation.
- `percentiles.Percentiles` and `percentiles.compute_percentile` –
  nearest-rank percentiles.
- `histogram.Histogram` and `histogram.HistogramBin` – P5–P95 binning
  with underflow and overflow bins for the tails, optional explicit
  bounds and bin widths aligned to a unit.
- `comprehensive.ComprehensiveStats` – all of the above at once.
- `survival.KaplanMeierCurve` – Kaplan–Meier survival curves with
  censoring, median survival and step-function lookup.

Functions that take pre-sorted data (`from_sorted`) raise `ValueError`
when the data is not sorted; the `from_values` variants sort first.
Empty datasets give `None` for `DescriptiveStats` and
`ComprehensiveStats`.

```python
from oxidris.stats.comprehensive import ComprehensiveStats
from oxidris.stats.survival import KaplanMeierCurve

values = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]
stats = ComprehensiveStats.from_values(values, [25.0, 50.0, 75.0], 5, None, None, None)
assert stats.stats.mean == 5.5
assert stats.get_percentile(50.0) == 6.0

curve = KaplanMeierCurve.from_data([(10, False), (20, True), (30, False)])
print(curve.survival_at(15), curve.median_survival())
```

## What the package does not do

There is no command to run, no screen or keyboard handling and no
computer player. To play a game, drive a `GameSession` from your own
loop: call `increment_frame` at the session's frame rate, map input to
the `try_*` methods, and draw `session.render_board`.