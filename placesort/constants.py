"""
File extension constants and shared console/logger accessors.
"""

import logging
import subprocess
from typing import Optional

from rich.console import Console

PROGRAM = "placesort"

# File extension constants
JPG_EXTENSIONS = (".jpg", ".jpeg")
MOVIE_EXTENSIONS = (
    ".3gp", ".avi", ".m4v", ".mkv", ".mov", ".mp4", ".mpeg", ".mpg", ".mts",
    ".webm", ".wmv",
)
DEFAULT_EXTENSIONS = JPG_EXTENSIONS + (".mp4",)

# Destination folders are named "<date>_<label>"
DEST_DATE_FORMAT = "%d-%m-%Y"

RENDERERS = ("chafa", "ansi")
DEFAULT_RENDERER = "chafa"

_console: Optional[Console] = None
_error_console: Optional[Console] = None


def get_console() -> Console:
    """Shared console for prompts and regular output."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def get_error_console() -> Console:
    """Shared console writing to stderr, used for log records and fatal errors."""
    global _error_console
    if _error_console is None:
        _error_console = Console(stderr=True)
    return _error_console


def get_logger(name: str = PROGRAM) -> logging.Logger:
    return logging.getLogger(name)


def check_tool_availability(cmd: str, version_flag: str = "--version") -> bool:
    """Check whether an external command can be executed."""
    try:
        subprocess.run([cmd, version_flag], capture_output=True, check=False)
        return True
    except (FileNotFoundError, PermissionError):
        return False
