"""Sequences of moves and their PGN and analysis-board forms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator
from urllib.parse import quote

LICHESS_ANALYSIS_URL = "https://lichess.org/analysis/pgn/"


@dataclass
class MoveSequence:
    """An ordered list of moves in algebraic notation."""

    moves: list[str] = field(default_factory=list)

    def add_move(self, move: str) -> None:
        """Append a move."""
        self.moves.append(move)

    def remove_last_move(self) -> None:
        """Drop the last move; does nothing when the sequence is empty."""
        if self.moves:
            self.moves.pop()

    def is_empty(self) -> bool:
        """Whether no moves have been played."""
        return not self.moves

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[str]:
        return iter(self.moves)

    def to_key(self) -> str:
        """The sequence as a dash-joined key, e.g. ``e4-c6-d4``."""
        return "-".join(self.moves)

    def to_pgn(self) -> str:
        """The sequence as numbered PGN movetext."""
        pairs = (
            " ".join([f"{number}.", *self.moves[start : start + 2]])
            for number, start in enumerate(range(0, len(self.moves), 2), start=1)
        )
        return " ".join(pairs)

    def to_lichess_url(self) -> str:
        """An analysis-board URL showing the current position."""
        return LICHESS_ANALYSIS_URL + quote(self.to_pgn(), safe="")