"""
Statistics tracking for an organizing session.
"""

from pathlib import Path
from typing import Dict, List

from .relocation import RelocationResult


class StatsManager:
    """Encapsulates statistics tracking for a session."""

    def __init__(self):
        self._stats = {
            'groups': 0,
            'moved': 0,
            'failed': 0,
            'skipped': 0,
        }
        self._partial: List[Path] = []

    def increment_skipped(self, count: int = 1) -> None:
        """Increment skipped count when file(s) could not be scanned."""
        self._stats['skipped'] += count

    def record_relocation(self, result: RelocationResult) -> None:
        """Record a labelled group and the outcome of moving its files."""
        self._stats['groups'] += 1
        self._stats['moved'] += len(result.moved)
        self._stats['failed'] += len(result.failed)
        if result.is_partial:
            self._partial.append(result.destination)

    def get_stats(self) -> Dict[str, int]:
        """Get a copy of current statistics."""
        return self._stats.copy()

    def get_partial_destinations(self) -> List[Path]:
        """Destination folders that received only part of their group."""
        return list(self._partial)

    def has_errors(self) -> bool:
        return self._stats['failed'] > 0 or self._stats['skipped'] > 0

    def get_groups(self) -> int:
        return self._stats['groups']

    def get_moved(self) -> int:
        return self._stats['moved']

    def get_failed(self) -> int:
        return self._stats['failed']

    def get_skipped(self) -> int:
        return self._stats['skipped']
