"""
Configuration management for placesort.
"""

import logging
import zoneinfo
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from .constants import DEFAULT_EXTENSIONS, DEFAULT_RENDERER, PROGRAM, RENDERERS
from .errors import ConfigError


class Config:
    """Loads user preferences from the YAML config file."""

    def __init__(self, config_path: Optional[Path] = None):
        # Default config location: ~/.<PROGRAM>/config.yml
        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path.home() / f".{PROGRAM}" / "config.yml"
        self.program_root = self.config_path.parent
        self.data = self._load_config()

    def _load_config(self) -> Dict:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            return {}

        try:
            with open(self.config_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except Exception as e:
            logger = logging.getLogger(PROGRAM)
            logger.warning(f"Could not load config: {e}")
            return {}

        if not isinstance(data, dict):
            logging.getLogger(PROGRAM).warning(f"Ignoring malformed config: {self.config_path}")
            return {}
        return data

    def get_extensions(self) -> Tuple[str, ...]:
        """Get the supported media extensions, lowercased with a leading dot."""
        extensions = self.data.get('extensions')
        if not extensions:
            return DEFAULT_EXTENSIONS
        if isinstance(extensions, str):
            extensions = [extensions]

        normalized = []
        for ext in extensions:
            ext = str(ext).strip().lower()
            if not ext:
                continue
            if not ext.startswith('.'):
                ext = f".{ext}"
            if ext not in normalized:
                normalized.append(ext)
        return tuple(normalized) or DEFAULT_EXTENSIONS

    def get_renderer(self) -> str:
        """Get the name of the image renderer (default: chafa)."""
        renderer = str(self.data.get('renderer') or DEFAULT_RENDERER).strip().lower()
        if renderer not in RENDERERS:
            raise ConfigError(
                f"Unknown renderer '{renderer}' in {self.config_path} "
                f"(expected one of: {', '.join(RENDERERS)})"
            )
        return renderer

    def get_chafa_args(self) -> List[str]:
        """Get extra command-line arguments for chafa."""
        args = self.data.get('chafa_args') or []
        if isinstance(args, str):
            return args.split()
        return [str(arg) for arg in args]

    def get_timezone(self) -> Optional[zoneinfo.ZoneInfo]:
        """Get the configured timezone, or None for system local time."""
        name = self.data.get('timezone')
        if not name:
            return None
        try:
            return zoneinfo.ZoneInfo(str(name))
        except (zoneinfo.ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigError(f"Unknown timezone '{name}': {e}") from e
