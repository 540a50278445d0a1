"""Score, line and piece counters for a game."""

from __future__ import annotations

from dataclasses import dataclass, field

SCORE_TABLE = (0, 100, 300, 500, 800)
LINES_PER_LEVEL = 10


@dataclass
class GameStats:
    """Running statistics of one game."""

    score: int = 0
    completed_pieces: int = 0
    total_cleared_lines: int = 0
    line_cleared_counter: list[int] = field(default_factory=lambda: [0] * len(SCORE_TABLE))

    @property
    def level(self) -> int:
        """Current level: one per ten cleared lines."""
        return self.total_cleared_lines // LINES_PER_LEVEL

    def complete_piece_drop(self, cleared_lines: int) -> None:
        """Record a locked piece that cleared ``cleared_lines`` lines."""
        if not 0 <= cleared_lines < len(SCORE_TABLE):
            raise ValueError(
                f"cleared lines must be in 0..{len(SCORE_TABLE) - 1}, got {cleared_lines}"
            )
        self.completed_pieces += 1
        self.total_cleared_lines += cleared_lines
        self.line_cleared_counter[cleared_lines] += 1
        self.score += SCORE_TABLE[cleared_lines]