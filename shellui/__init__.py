"""Capability-aware terminal output for command-line tools.

This package provides:
- Shell: stdin/stdout/stderr streams with tty and color capability
- UI: status lines, headings, diagnostics and prompts over a Shell
- Status/CustomStatus: the status vocabulary
- Coloring: the auto/always/never coloring preference
- ShellConfig: environment-driven configuration
"""

from shellui.config import ShellConfig
from shellui.exceptions import (
    PromptAborted,
    ShellUIError,
    StreamIOError,
    TermInfoError,
    UnknownStatusError,
)
from shellui.negotiation import WriteStream, negotiate
from shellui.shell import Shell
from shellui.status import ColorCategory, CustomStatus, Status, StatusParts
from shellui.streams import Coloring, InputStream, OutputStream, should_colorize
from shellui.tty import StdStream, isatty
from shellui.ui import UI

__version__ = "0.1.0"

__all__ = [
    # Facade
    "UI",
    "Shell",
    "ShellConfig",
    # Streams
    "Coloring",
    "InputStream",
    "OutputStream",
    "WriteStream",
    "StdStream",
    "isatty",
    "negotiate",
    "should_colorize",
    # Statuses
    "Status",
    "CustomStatus",
    "StatusParts",
    "ColorCategory",
    # Exceptions
    "ShellUIError",
    "StreamIOError",
    "TermInfoError",
    "UnknownStatusError",
    "PromptAborted",
]
