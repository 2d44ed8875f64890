"""Terminal colours used by the interactive study and practice sessions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_RESET = "\x1b[0m"


class Colour(Enum):
    """Standard ANSI foreground colours."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    PURPLE = 35
    CYAN = 36
    WHITE = 37

    def paint(self, text: str) -> str:
        """Wrap ``text`` in the escape codes for this colour."""
        return f"\x1b[{self.value}m{text}{_RESET}"


@dataclass(frozen=True)
class Theme:
    """Colours for prompts, notes and deviation warnings."""

    prompt: Colour = Colour.BLUE
    note: Colour = Colour.GREEN
    deviation: Colour = Colour.RED

    def format_prompt(self, prompt: str) -> str:
        """Colour a prompt or command hint."""
        return self.prompt.paint(prompt)

    def format_note(self, note: str) -> str:
        """Colour a move note or annotation."""
        return self.note.paint(note)

    def format_deviation(self, message: str) -> str:
        """Colour a deviation warning."""
        return self.deviation.paint(message)