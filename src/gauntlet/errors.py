"""Exception hierarchy for the gauntlet simulator."""
from __future__ import annotations


class GauntletError(Exception):
    """Base error for all simulator failures."""


class InvalidArgument(GauntletError, ValueError):
    """Raised for programming errors such as an empty choice set."""


class ConfigError(InvalidArgument):
    """Raised when a configuration document cannot be parsed or validated."""


class IOFailure(GauntletError, OSError):
    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"{message}: {path}")
