"""
Grouping of media files by the calendar date they were modified.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, Iterator, List

from .scanner import MediaFile


@dataclass
class DateGroup:
    """Files modified on one calendar date, in scan order."""
    date: date
    files: List[Path] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.files)


class GroupedCollection:
    """Mapping of date -> file paths, iterated in ascending date order."""

    def __init__(self):
        self._groups: Dict[date, List[Path]] = defaultdict(list)

    def add(self, media_file: MediaFile) -> None:
        """Append a file to the group for its modified date."""
        self._groups[media_file.modified_date].append(media_file.path)

    def dates(self) -> List[date]:
        return sorted(self._groups)

    def get(self, day: date) -> List[Path]:
        return list(self._groups.get(day, []))

    @property
    def file_count(self) -> int:
        return sum(len(files) for files in self._groups.values())

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[DateGroup]:
        for day in self.dates():
            yield DateGroup(day, list(self._groups[day]))


def group_by_date(media_files: Iterable[MediaFile]) -> GroupedCollection:
    """Bucket scanned files by modified date."""
    groups = GroupedCollection()
    for media_file in media_files:
        groups.add(media_file)
    return groups
