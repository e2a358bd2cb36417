"""
Terminal image rendering.

One renderer is chosen from the config at startup: either the external
`chafa` program, or in-process decoding with Pillow drawn as ANSI half blocks.
"""

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence

from PIL import Image, UnidentifiedImageError
from rich.console import Console
from rich.markup import escape
from rich.style import Style
from rich.text import Text

from .constants import MOVIE_EXTENSIONS, check_tool_availability, get_logger
from .errors import ConfigError, RenderError

# Upper half block: foreground is the top pixel, background the bottom pixel
HALF_BLOCK = "▀"


class ImageRenderer(ABC):
    """Renders a single media file to the terminal."""

    name = "renderer"

    def __init__(self, console: Console):
        self.console = console
        self.logger = get_logger()

    def supports(self, file_path: Path) -> bool:
        """Video files are listed but never decoded."""
        return file_path.suffix.lower() not in MOVIE_EXTENSIONS

    def render(self, file_path: Path) -> None:
        if not self.supports(file_path):
            self.console.print(f"[dim]\\[video] {escape(file_path.name)} (no preview)[/dim]",
                               highlight=False)
            return
        self.draw(file_path)

    @abstractmethod
    def draw(self, file_path: Path) -> None:
        """Draw an image file. Raises RenderError on failure."""


class ChafaRenderer(ImageRenderer):
    """Shells out to chafa, which writes straight to the terminal."""

    name = "chafa"

    def __init__(self, console: Console, extra_args: Sequence[str] = ()):
        super().__init__(console)
        self.extra_args = list(extra_args)

    def draw(self, file_path: Path) -> None:
        cmd = ["chafa", *self.extra_args, str(file_path)]
        self.logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, check=False)
        except OSError as e:
            raise RenderError(f"Failed to display {file_path} with chafa: {e}") from e

        if result.returncode != 0:
            raise RenderError(f"chafa exited with status {result.returncode} for {file_path}")


class AnsiRenderer(ImageRenderer):
    """Decodes images with Pillow and prints them as colored half blocks."""

    name = "ansi"

    def __init__(self, console: Console, max_width: Optional[int] = None,
                 max_height: Optional[int] = None):
        super().__init__(console)
        self.max_width = max_width
        self.max_height = max_height

    def _cell_bounds(self) -> tuple:
        """Terminal area (columns, rows) available for the picture."""
        width = self.max_width or self.console.size.width
        # Leave room for the listing and prompt below the picture
        height = self.max_height or max(self.console.size.height - 6, 4)
        return max(width, 1), max(height, 1)

    def draw(self, file_path: Path) -> None:
        try:
            with Image.open(file_path) as img:
                img = img.convert("RGB")
                columns, rows = self._cell_bounds()
                # Each character cell holds two vertically stacked pixels
                img.thumbnail((columns, rows * 2))
                pixels = img.load()
                width, height = img.size
                text = self._to_text(pixels, width, height)
        except (OSError, UnidentifiedImageError) as e:
            raise RenderError(f"Failed to decode image {file_path}: {e}") from e

        self.console.print(text, no_wrap=True, crop=False)

    @staticmethod
    def _to_text(pixels, width: int, height: int) -> Text:
        text = Text()
        for y in range(0, height, 2):
            for x in range(width):
                top = pixels[x, y]
                style = Style(color=f"rgb({top[0]},{top[1]},{top[2]})")
                if y + 1 < height:
                    bottom = pixels[x, y + 1]
                    style += Style(bgcolor=f"rgb({bottom[0]},{bottom[1]},{bottom[2]})")
                text.append(HALF_BLOCK, style=style)
            if y + 2 < height:
                text.append("\n")
        return text


def create_renderer(name: str, console: Console,
                    chafa_args: Sequence[str] = ()) -> ImageRenderer:
    """Build the renderer selected in the config."""
    if name == ChafaRenderer.name:
        if not check_tool_availability("chafa"):
            raise ConfigError("chafa is not installed; install it or set 'renderer: ansi'")
        return ChafaRenderer(console, chafa_args)
    if name == AnsiRenderer.name:
        return AnsiRenderer(console)
    raise ConfigError(f"Unknown renderer: {name}")
