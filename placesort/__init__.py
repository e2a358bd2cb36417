"""
placesort - Sort photos and videos into DD-MM-YYYY_<place> folders.

Groups the media files of a directory by the day they were last modified,
shows each day's pictures in the terminal and asks where they were taken,
then moves the whole day into a folder named after the date and place.

MIT License.
"""

__version__ = "1.0.0"
__copyright__ = "Copyright (c) 2025 placesort contributors"


# Public API
from .cli import main
from .config import Config
from .grouping import DateGroup, GroupedCollection, group_by_date
from .relocation import Relocator
from .scanner import MediaFile, scan_directory
from .session import OrganizeSession

__all__ = [ "main", "Config", "DateGroup", "GroupedCollection", "group_by_date", "Relocator",
            "MediaFile", "scan_directory", "OrganizeSession" ]
