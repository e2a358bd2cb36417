"""
Moving a labelled date group into its destination folder.
"""

import os
import shutil
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape

from .constants import DEST_DATE_FORMAT, get_logger
from .errors import RelocationError


def destination_name(day: date, label: str) -> str:
    """Folder name for a group: "DD-MM-YYYY_<label>"."""
    return f"{day.strftime(DEST_DATE_FORMAT)}_{label}"


def label_problem(label: str) -> Optional[str]:
    """Why a label cannot name a folder directly inside the working directory, or None."""
    if "\0" in label:
        return "contains a null character"
    separators = {"/", os.sep, os.altsep} - {None}
    if any(sep in label for sep in separators):
        return "contains a path separator"
    return None


@dataclass
class RelocationResult:
    """Outcome of relocating one group. Failed moves are not rolled back."""
    destination: Path
    moved: List[Path] = field(default_factory=list)
    failed: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        return bool(self.failed)


class Relocator:
    """Creates destination folders under `base_dir` and moves files into them."""

    def __init__(self, base_dir: Path, console: Optional[Console] = None):
        self.base_dir = base_dir
        self.console = console
        self.logger = get_logger()

    def ensure_directory(self, directory: Path) -> None:
        """Create directory and parents if needed. Raises RelocationError."""
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            raise RelocationError(directory, f"Could not create directory {directory}: {e}") from e

    def move_file(self, source: Path, dest: Path) -> None:
        """Move a single file, refusing to overwrite. Raises OSError on failure."""
        if dest.exists():
            raise FileExistsError(f"Destination already exists: {dest}")

        # rename within a filesystem, copy + delete across filesystems
        shutil.move(str(source), str(dest))

        if not dest.exists():
            raise FileNotFoundError(f"File not found after move: {dest}")

    def relocate(self, day: date, label: str, files: Sequence[Path]) -> RelocationResult:
        """Move every file of a group into "DD-MM-YYYY_<label>".

        An invalid label or a directory creation failure is fatal. A file that
        fails to move is logged and recorded, and the remaining files are still
        moved.
        """
        problem = label_problem(label)
        if problem:
            raise RelocationError(label, f"Invalid label {label!r}: {problem}")

        dest_dir = self.base_dir / destination_name(day, label)
        self.ensure_directory(dest_dir)
        result = RelocationResult(destination=dest_dir)

        for file_path in files:
            dest_path = dest_dir / file_path.name
            try:
                self.move_file(file_path, dest_path)
            except OSError as e:
                self.logger.error(f"Failed to move {file_path} -> {dest_path}: {e}")
                result.failed.append((file_path, str(e)))
                continue

            result.moved.append(dest_path)
            self.logger.info(f"{file_path} -> {dest_path}")
            if self.console:
                self.console.print(f"Moved {escape(str(file_path))} to {escape(str(dest_path))}")

        return result
