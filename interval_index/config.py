"""
Configuration for the interval index.

Handles TOML file parsing. Example:

    [General]
    debug = true
    timezone = "Europe/Amsterdam"
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .debug import set_debug
from . import timezone_utils


@dataclass
class Config:
    """Package-wide settings."""
    debug: bool = False
    timezone: str = "UTC"  # Used to interpret naive datetimes

    @classmethod
    def load(cls, config_path: Union[str, Path]) -> 'Config':
        """Load configuration from TOML file."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)

        # Parse General section
        general = data.get('General', {})
        return cls(
            debug=bool(general.get('debug', cls.debug)),
            timezone=general.get('timezone', cls.timezone),
        )

    def apply(self):
        """Push these settings into the debug switch and timezone helpers."""
        set_debug(self.debug)
        timezone_utils.set_timezone(self.timezone)
