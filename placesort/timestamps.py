"""Conversion of file modification times to calendar dates."""

from datetime import date, datetime, tzinfo
from pathlib import Path
from typing import Optional


def local_date(timestamp: float, tz: Optional[tzinfo] = None) -> date:
    """Convert a POSIX timestamp to a calendar date in `tz` (system local time if None)."""
    return datetime.fromtimestamp(timestamp, tz=tz).date()


def get_modified_date(file_path: Path, tz: Optional[tzinfo] = None) -> date:
    """Get the last-modified date of a file. Raises OSError if stat fails."""
    return local_date(file_path.stat().st_mtime, tz)
