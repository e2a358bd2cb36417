"""
Interactive review of a date group: step through its images until the user
names the place they were taken.
"""

from typing import List

from rich.console import Console
from rich.markup import escape

from .commands import Label, NextImage, PreviousImage, Quit, UserCommand, parse_command
from .constants import get_logger
from .errors import InputError, UserCancelled
from .grouping import DateGroup
from .relocation import label_problem
from .rendering import ImageRenderer

LABEL_PROMPT = "What city was this?"
COMMAND_HELP = "Enter city name, or enter 'n' for next image, or 'p' for previous. 'q' to quit"


class NavigationState:
    """Current image index within a group, wrapping at both ends."""

    def __init__(self, size: int, index: int = 0):
        if size <= 0:
            raise ValueError("Cannot navigate an empty group")
        self.size = size
        self.index = index % size

    def next(self) -> int:
        self.index = (self.index + 1) % self.size
        return self.index

    def previous(self) -> int:
        self.index = (self.index - 1 + self.size) % self.size
        return self.index


class Navigator:
    """Walks the user through each image of a group and collects a label."""

    def __init__(self, console: Console, renderer: ImageRenderer):
        self.console = console
        self.renderer = renderer
        self.logger = get_logger()

    def review_group(self, group: DateGroup) -> str:
        """Show the group's images until a label is entered, then return it.

        Raises UserCancelled on quit, InputError if input cannot be read and
        RenderError if the current image cannot be displayed.
        """
        state = NavigationState(len(group.files))

        while True:
            self.show(group, state.index)
            command = self.read_command()

            if isinstance(command, Quit):
                self.console.print("Exiting")
                raise UserCancelled("Operation aborted by the user.")
            elif isinstance(command, NextImage):
                self.console.print("Showing next image")
                state.next()
            elif isinstance(command, PreviousImage):
                self.console.print("Showing previous image")
                state.previous()
            elif isinstance(command, Label):
                self.console.print(f"City entered: {escape(command.text)}")
                return command.text

    def show(self, group: DateGroup, index: int) -> None:
        """Print the group listing and render the image at `index`."""
        self.console.print(f"\n[bold]{group.date.isoformat()}[/bold] ({len(group.files)} files)")
        self.console.print(escape(self._format_listing(group.files)))
        self.console.print(f"image idx: {index}")
        self.logger.debug(f"Rendering {group.files[index]}")
        self.renderer.render(group.files[index])

    def read_command(self) -> UserCommand:
        """Prompt until a command or a usable label is entered."""
        while True:
            self.console.print(LABEL_PROMPT)
            self.console.print(COMMAND_HELP)
            try:
                line = self.console.input("> ")
            except EOFError as e:
                raise InputError("Standard input closed while waiting for a command") from e
            except OSError as e:
                raise InputError(f"Could not read from standard input: {e}") from e

            command = parse_command(line)
            if command is None:
                self.console.print("Enter a valid city name")
                continue

            problem = label_problem(command.text) if isinstance(command, Label) else None
            if problem:
                self.console.print(f"Enter a valid city name (the name {problem})")
                continue
            return command

    @staticmethod
    def _format_listing(files: List) -> str:
        return "[" + ", ".join(f'"{path.name}"' for path in files) + "]"
