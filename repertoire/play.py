"""Interactive practice games against the moves recorded in an opening."""

from __future__ import annotations

import random
import sys
from enum import Enum
from typing import Any, TextIO

from repertoire.explore import MoveSequence
from repertoire.theme import Theme

DEVIATION_MESSAGE = "Deviation! This is not a recorded move in the opening."


class PlayerColor(Enum):
    """The side the user plays."""

    WHITE = "white"
    BLACK = "black"


class Deviation(Exception):
    """Raised when a played move is not part of the recorded opening."""

    def __init__(self, message: str = DEVIATION_MESSAGE) -> None:
        super().__init__(message)


class PlaySession:
    """A practice game where the computer answers with recorded moves.

    ``opening`` needs a ``moves`` mapping from dash-joined move keys to
    objects carrying a ``note`` string.
    """

    def __init__(
        self,
        opening: Any,
        player_color: PlayerColor,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        rng: random.Random | None = None,
        theme: Theme | None = None,
    ) -> None:
        self.opening = opening
        self.player_color = player_color
        self.move_sequence = MoveSequence()
        self.theme = theme if theme is not None else Theme()
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._rng = rng if rng is not None else random.Random()

    def _print(self, text: str = "", end: str = "\n") -> None:
        self._stdout.write(text + end)
        self._stdout.flush()

    def run(self) -> None:
        """Read commands until ``stop`` or end of input."""
        prompt = self.theme.format_prompt
        self._print("\n" + prompt("Starting practice game. Available commands:"))
        self._print(f"  {prompt('move <chess move>')} - Make a move (e.g., 'move e4')")
        self._print(f"  {prompt('explore')} - Open current position in LiChess")
        self._print(f"  {prompt('stop')} - End practice game")
        self._print()

        if self.player_color is PlayerColor.BLACK:
            self.make_computer_move()

        while True:
            self._print(prompt("(practice) > "), end="")
            line = self._stdin.readline()
            if not line:
                break
            command = line.strip()

            if command == "stop":
                break
            if command == "explore":
                self.handle_explore()
            elif command.startswith("move "):
                try:
                    self.handle_player_move(command.removeprefix("move "))
                except Deviation:
                    continue
                self.make_computer_move()
            else:
                self._print(
                    "\n"
                    + prompt(
                        "Unknown command. Type 'move <chess move>', 'explore', or 'stop'.\n"
                    )
                )

    def handle_explore(self) -> str:
        """Show and return an analysis URL for the current position."""
        url = self.move_sequence.to_lichess_url()
        self._print(
            "\n" + self.theme.format_prompt("Open this URL in your browser to explore the position:")
        )
        self._print(url + "\n")
        return url

    def handle_player_move(self, move: str) -> None:
        """Play the user's move; raise :class:`Deviation` if it is not recorded."""
        move = move.strip()
        self.move_sequence.add_move(move)
        entry = self.opening.moves.get(self.move_sequence.to_key())
        if entry is None:
            self.move_sequence.remove_last_move()
            self._print("\n" + self.theme.format_deviation(DEVIATION_MESSAGE))
            self._print(self.theme.format_deviation("Explore this position in LiChess:"))
            self._print(self.move_sequence.to_lichess_url() + "\n")
            raise Deviation()

        self._print("\n" + self.theme.format_prompt(f"Your move: {move}"))
        self._print(self.theme.format_note(f"Note: {entry.note}"))
        self._print()

    def next_moves(self) -> list[str]:
        """Recorded moves that directly continue the current sequence."""
        if self.move_sequence.is_empty():
            return [key for key in self.opening.moves if "-" not in key]

        prefix = self.move_sequence.to_key() + "-"
        return [
            key[len(prefix):]
            for key in self.opening.moves
            if key.startswith(prefix) and "-" not in key[len(prefix):]
        ]

    def make_computer_move(self) -> str | None:
        """Play a random recorded reply; return it, or None if there is none."""
        candidates = self.next_moves()
        if not candidates:
            return None

        response = self._rng.choice(candidates)
        self.move_sequence.add_move(response)
        self._print("\n" + self.theme.format_prompt(f"Computer plays: {response}"))
        entry = self.opening.moves.get(self.move_sequence.to_key())
        if entry is not None:
            self._print(self.theme.format_note(f"Note: {entry.note}"))
        self._print()
        return response