"""Configuration for shell output."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from shellui.streams import Coloring

# Environment toggles
NOCOLORING_ENVVAR = "SHELLUI_NOCOLORING"
NONINTERACTIVE_ENVVAR = "SHELLUI_NONINTERACTIVE"
COLOR_ENVVAR = "SHELLUI_COLOR"
LOG_LEVEL_ENVVAR = "SHELLUI_LOG_LEVEL"
LOG_FILE_ENVVAR = "SHELLUI_LOG_FILE"

_TRUTHY = ("1", "true", "yes", "on")


def env_flag(name: str) -> bool:
    """Read a boolean-like environment variable (true/1/yes/on)."""
    return os.environ.get(name, "").strip().lower() in _TRUTHY


class ShellConfig(BaseModel):
    """Shell output configuration with Pydantic validation."""

    color: Coloring = Field(default=Coloring.AUTO)
    no_coloring: bool = Field(default=False)
    non_interactive: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="WARNING")
    log_file: Path | None = None

    def coloring(self) -> Coloring:
        """Resolve the effective coloring preference."""
        if self.no_coloring:
            return Coloring.NEVER
        return self.color

    def isatty_override(self) -> bool | None:
        """Return False for non-interactive runs, None to probe the streams."""
        if self.non_interactive:
            return False
        return None

    @classmethod
    def from_env(cls) -> "ShellConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        # Coloring
        if COLOR_ENVVAR in os.environ:
            try:
                config_dict["color"] = Coloring(os.environ[COLOR_ENVVAR].strip().lower())
            except ValueError:
                pass  # Keep default if invalid
        # https://no-color.org/
        if env_flag(NOCOLORING_ENVVAR) or os.environ.get("NO_COLOR"):
            config_dict["no_coloring"] = True
        if env_flag(NONINTERACTIVE_ENVVAR):
            config_dict["non_interactive"] = True

        # Logging
        if LOG_LEVEL_ENVVAR in os.environ:
            level = os.environ[LOG_LEVEL_ENVVAR].strip().upper()
            if isinstance(logging.getLevelName(level), int):
                config_dict["log_level"] = level
        if os.environ.get(LOG_FILE_ENVVAR):
            config_dict["log_file"] = Path(os.environ[LOG_FILE_ENVVAR])

        return cls(**config_dict)
