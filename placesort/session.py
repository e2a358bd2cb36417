"""
Core session: scan a directory, review each date group and relocate it.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import Config
from .constants import get_console, get_error_console, get_logger
from .grouping import GroupedCollection, group_by_date
from .history import HistoryManager
from .navigator import Navigator
from .relocation import Relocator
from .rendering import create_renderer
from .scanner import scan_directory
from .stats import StatsManager


class OrganizeSession:
    """One interactive session over the media files of a single directory."""

    def __init__(self, directory: Path, config: Config,
                 console: Optional[Console] = None, verbose: bool = False):
        self.directory = directory
        self.config = config
        self.console = console or get_console()
        self.stats_manager = StatsManager()

        # Resolve config first so a bad value fails before any handler is attached
        self.extensions = config.get_extensions()
        self.timezone = config.get_timezone()
        renderer = create_renderer(config.get_renderer(), self.console,
                                   chafa_args=config.get_chafa_args())

        # Setup logging: session file for everything, then console handler for warnings
        self.logger = get_logger()
        self.history_manager = HistoryManager(source_dir=directory, root_dir=config.program_root)
        self.history_manager.setup_session_logger(self.logger)

        self._console_handler = RichHandler(console=get_error_console(), show_path=False)
        self._console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
        self._console_handler.setFormatter(logging.Formatter("%(message)s"))
        self.logger.addHandler(self._console_handler)

        self.navigator = Navigator(self.console, renderer)
        self.relocator = Relocator(directory, console=self.console)

        self.logger.info(f"Starting session in {self.directory}")
        self.logger.info(f"Renderer: {renderer.name}; extensions: {' '.join(self.extensions)}")

    def scan(self) -> GroupedCollection:
        """Scan the directory and group its media files by modified date."""
        result = scan_directory(self.directory, self.extensions, self.timezone)
        if result.skipped:
            self.stats_manager.increment_skipped(len(result.skipped))

        groups = group_by_date(result.media_files)
        self.logger.info(f"Found {groups.file_count} media files on {len(groups)} dates")
        return groups

    def run(self) -> None:
        """Review and relocate every group in ascending date order.

        Fatal errors (user cancellation, unreadable input, rendering or
        directory creation failures) propagate to the caller.
        """
        groups = self.scan()
        if not groups:
            self.console.print("[yellow]No media files found in directory[/yellow]")
            return

        self.console.print(f"Found {groups.file_count} media files on {len(groups)} dates")

        for position, group in enumerate(groups, start=1):
            self.logger.debug(f"Reviewing group {position}/{len(groups)}: {group.date}")
            label = self.navigator.review_group(group)

            result = self.relocator.relocate(group.date, label, group.files)
            self.stats_manager.record_relocation(result)
            self.history_manager.log_relocation(label, result)

        self.print_summary()

    def close(self) -> None:
        """Detach this session's log handlers."""
        self.history_manager.close_session_logger(self.logger)
        self.logger.removeHandler(self._console_handler)

    def print_summary(self) -> None:
        """Print session summary."""
        table = Table(title="Session Summary")
        table.add_column("Category", style="cyan")
        table.add_column("Count", style="green")

        table.add_row("Groups Labelled", str(self.stats_manager.get_groups()))
        table.add_row("Files Moved", str(self.stats_manager.get_moved()))
        table.add_row("Failed Moves", str(self.stats_manager.get_failed()))
        table.add_row("Skipped (unreadable)", str(self.stats_manager.get_skipped()))

        self.console.print(table)

        for destination in self.stats_manager.get_partial_destinations():
            self.console.print(f"[red]Partially relocated: {escape(str(destination))}[/red]")
