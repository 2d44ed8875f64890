"""Opening study files and the interactive study session."""

from __future__ import annotations

import json
import random
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO

from repertoire.play import PlayerColor, PlaySession
from repertoire.theme import Theme

OPENING_EXTENSION = "opening"
_U64_LIMIT = 2**64


class OpeningError(Exception):
    """Base class for problems loading an opening file."""


class InvalidExtensionError(OpeningError):
    """The file does not carry the ``.opening`` extension."""

    def __init__(self, extension: str) -> None:
        super().__init__(
            f"Invalid file extension. Expected .{OPENING_EXTENSION}, got {extension}"
        )
        self.extension = extension


class FileReadError(OpeningError):
    """The file could not be read."""

    def __init__(self, detail: object) -> None:
        super().__init__(f"Failed to read file: {detail}")


class ParseError(OpeningError):
    """The file contents are not a valid opening study."""

    def __init__(self, detail: object) -> None:
        super().__init__(f"Failed to parse opening file: {detail}")


@dataclass
class MoveNote:
    """The note attached to one move sequence."""

    note: str


def _require(data: dict[str, Any], key: str, kind: type) -> Any:
    if key not in data:
        raise ParseError(f"missing field `{key}`")
    value = data[key]
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ParseError(f"field `{key}` must be an unsigned integer")
        if not 0 <= value < _U64_LIMIT:
            raise ParseError(f"field `{key}` is out of range")
    elif not isinstance(value, kind):
        raise ParseError(f"field `{key}` must be of type {kind.__name__}")
    return value


@dataclass
class Opening:
    """A complete opening study.

    ``moves`` maps dash-joined move sequences such as ``e4-c6-d4`` to
    their notes.
    """

    author: str
    date_modified: int
    name: str
    description: str
    moves: dict[str, MoveNote] = field(default_factory=dict)

    @classmethod
    def create(cls, name: str, author: str, description: str) -> Opening:
        """A new, empty study stamped with the current time."""
        return cls(
            author=author,
            date_modified=int(time.time()),
            name=name,
            description=description,
        )

    @classmethod
    def from_dict(cls, data: Any) -> Opening:
        """Build a study from decoded JSON; raise :class:`ParseError` if malformed."""
        if not isinstance(data, dict):
            raise ParseError("expected a JSON object")
        author = _require(data, "author", str)
        date_modified = _require(data, "date_modified", int)
        name = _require(data, "name", str)
        description = _require(data, "description", str)
        raw_moves = _require(data, "moves", dict)

        moves: dict[str, MoveNote] = {}
        for key, entry in raw_moves.items():
            if not isinstance(entry, dict):
                raise ParseError(f"entry for `{key}` must be an object")
            moves[key] = MoveNote(_require(entry, "note", str))

        return cls(
            author=author,
            date_modified=date_modified,
            name=name,
            description=description,
            moves=moves,
        )

    def to_dict(self) -> dict[str, Any]:
        """The study as a JSON-ready dictionary."""
        return {
            "author": self.author,
            "date_modified": self.date_modified,
            "name": self.name,
            "description": self.description,
            "moves": {key: {"note": entry.note} for key, entry in self.moves.items()},
        }

    @classmethod
    def from_file(cls, path: str | Path) -> Opening:
        """Load a ``.opening`` file."""
        path = Path(path)
        extension = path.suffix[1:] if path.suffix else ""
        if extension != OPENING_EXTENSION:
            raise InvalidExtensionError(extension or "none")

        try:
            contents = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(exc) from exc

        try:
            data = json.loads(contents)
        except json.JSONDecodeError as exc:
            raise ParseError(exc) from exc
        return cls.from_dict(data)

    def study_loop(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Run the interactive study session until ``quit`` or end of input."""
        stdin = stdin if stdin is not None else sys.stdin
        stdout = stdout if stdout is not None else sys.stdout
        theme = Theme()
        prompt = theme.format_prompt

        def say(text: str = "", end: str = "\n") -> None:
            stdout.write(text + end)
            stdout.flush()

        say("\n" + prompt(f"Studying: {self.name}"))
        say(prompt(f"Author: {self.author}"))
        say(prompt(f"Description: {self.description}"))
        say("\n" + prompt("Available commands:"))
        say(f"  {prompt('list')} - List all move sequences")
        say(f"  {prompt('play')} - Start a practice game")
        say(f"  {prompt('show <sequence>')} - Show notes for a specific sequence")
        say(f"  {prompt('quit')} - Exit the study session")
        say()

        while True:
            say(prompt("> "), end="")
            line = stdin.readline()
            if not line:
                break
            command = line.strip()

            if command == "quit":
                break
            if command == "list":
                say("\n" + prompt("Move sequences:"))
                for sequence in self.moves:
                    say(f"  {sequence}")
                say()
            elif command == "play":
                say("\n" + prompt("Choose your color:"))
                say(f"  {prompt('white')} - Play as White")
                say(f"  {prompt('black')} - Play as Black")
                say(prompt("Color > "), end="")
                choice = stdin.readline().strip().lower()
                try:
                    color = PlayerColor(choice)
                except ValueError:
                    say(
                        "\n"
                        + prompt("Invalid color. Please choose 'white' or 'black'.\n")
                    )
                    continue
                session = PlaySession(
                    self, color, stdin=stdin, stdout=stdout, rng=rng, theme=theme
                )
                try:
                    session.run()
                except OSError as exc:
                    print(prompt(f"Error during play session: {exc}"), file=sys.stderr)
            elif command.startswith("show "):
                sequence = command.removeprefix("show ").strip()
                entry = self.moves.get(sequence)
                if entry is None:
                    say(
                        "\n"
                        + prompt(f"No notes found for sequence: {sequence}\n")
                    )
                else:
                    say("\n" + prompt(f"Notes for {sequence}:"))
                    say(theme.format_note(entry.note) + "\n")
            else:
                say(
                    "\n"
                    + prompt("Unknown command. Type 'list' to see available commands.\n")
                )