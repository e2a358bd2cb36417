"""
User commands entered at the per-image prompt.
"""

from dataclasses import dataclass
from typing import Optional, Union

NEXT_KEY = "n"
PREVIOUS_KEY = "p"
QUIT_KEY = "q"


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class NextImage:
    pass


@dataclass(frozen=True)
class PreviousImage:
    pass


@dataclass(frozen=True)
class Label:
    text: str


UserCommand = Union[Quit, NextImage, PreviousImage, Label]


def parse_command(line: str) -> Optional[UserCommand]:
    """Interpret one line of input. Returns None for blank input.

    The single-letter navigation keys win over labels, so a place literally
    named "n", "p" or "q" cannot be entered.
    """
    text = line.strip()
    key = text.lower()
    if key == NEXT_KEY:
        return NextImage()
    if key == PREVIOUS_KEY:
        return PreviousImage()
    if key == QUIT_KEY:
        return Quit()
    if not text:
        return None
    return Label(text)
