"""
Session history: a per-session debug log and a global audit log of relocations.
"""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Optional

from .relocation import RelocationResult


class HistoryManager:
    """Manages session log files under the program root."""

    def __init__(self, source_dir: Path, root_dir: Path):
        self.source_dir = source_dir
        self.root_dir = root_dir
        self.history_dir = self.root_dir / "history"
        self.relocations_audit_log = self.root_dir / "relocations.log"
        self._file_handler: Optional[logging.Handler] = None
        self._previous_level: Optional[int] = None

        timestamp = datetime.now().strftime("%Y-%m-%d")
        self.session_log = self.history_dir / f"{timestamp}+{self._sanitize_name(source_dir)}.log"

    @staticmethod
    def _sanitize_name(path: Path) -> str:
        """Convert a directory path to a safe file name."""
        name = path.name or "root"
        sanitized = re.sub(r'[^\w\-_]', '-', name)
        sanitized = re.sub(r'-+', '-', sanitized)
        return sanitized.strip('-') or "root"

    def setup_session_logger(self, logger: logging.Logger) -> None:
        """Configure logger to also write to the session log file."""
        self.history_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(self.session_log, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter(
            '%(asctime)s [%(name)s] %(levelname)s: %(message)s'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        self._file_handler = file_handler

        # Ensure logger level allows DEBUG messages to reach the file handler
        self._previous_level = logger.level
        logger.setLevel(logging.DEBUG)

    def close_session_logger(self, logger: logging.Logger) -> None:
        if self._file_handler is None:
            return
        logger.removeHandler(self._file_handler)
        self._file_handler.close()
        self._file_handler = None
        if self._previous_level is not None:
            logger.setLevel(self._previous_level)
            self._previous_level = None

    def log_relocation(self, label: str, result: RelocationResult) -> None:
        """Append one line per relocated group to the global audit log."""
        self.root_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        status = "PARTIAL" if result.is_partial else "SUCCESS"
        record = (
            f"{timestamp} | {status} | "
            f"Source: {self.source_dir} | Dest: {result.destination} | "
            f"Label: {label} | Moved: {len(result.moved)} | Failed: {len(result.failed)}\n"
        )

        with open(self.relocations_audit_log, 'a', encoding='utf-8') as f:
            f.write(record)
