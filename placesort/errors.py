"""
Exceptions raised by placesort. Anything derived from PlacesortError is fatal
for the session and is reported by the command-line interface.
"""


class PlacesortError(Exception):
    """Base class for fatal session errors."""


class UserCancelled(PlacesortError):
    """The user declined the startup prompt or quit during navigation."""


class InputError(PlacesortError):
    """Standard input could not be read."""


class RenderError(PlacesortError):
    """An image could not be rendered to the terminal."""


class RelocationError(PlacesortError):
    """A destination directory could not be named or created."""

    def __init__(self, directory, message=None):
        super().__init__(message or f"Could not create directory: {directory}")
        self.directory = directory


class ConfigError(PlacesortError):
    """A configuration value is invalid."""
