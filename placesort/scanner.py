"""
Directory scanning for supported media files.
"""

from dataclasses import dataclass, field
from datetime import date, tzinfo
from pathlib import Path
from typing import Iterable, List, Optional

from .constants import DEFAULT_EXTENSIONS, get_logger
from .timestamps import get_modified_date

logger = get_logger()


@dataclass(frozen=True)
class MediaFile:
    """A media file and the local calendar date it was last modified."""
    path: Path
    modified_date: date


@dataclass
class ScanResult:
    """Files found by a directory scan, plus those skipped on metadata errors."""
    media_files: List[MediaFile] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)


def is_media_file(path: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> bool:
    """Check for a regular file with a supported (case-insensitive) extension."""
    return path.suffix.lower() in extensions and path.is_file()


def scan_directory(directory: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS,
                   tz: Optional[tzinfo] = None) -> ScanResult:
    """Find supported media files directly inside `directory` (not recursive).

    Files keep the order the filesystem lists them in. An unreadable directory
    raises OSError; a file whose modification time cannot be read is logged
    and skipped.
    """
    extensions = tuple(ext.lower() for ext in extensions)
    result = ScanResult()

    for file_path in directory.iterdir():
        if not is_media_file(file_path, extensions):
            continue

        try:
            modified_date = get_modified_date(file_path, tz)
        except OSError as e:
            logger.error(f"Unable to get modified date for {file_path}: {e}")
            result.skipped.append(file_path)
            continue

        logger.debug(f"{file_path.name}: modified {modified_date.isoformat()}")
        result.media_files.append(MediaFile(file_path, modified_date))

    return result
