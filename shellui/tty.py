"""Terminal attachment probe for the standard process streams.

The probe answers one question per stream: is it attached to an
interactive terminal? Two strategies exist, a POSIX file-descriptor query
and a Windows console-mode query. Both treat any OS-level failure as
"not a terminal".
"""

import logging
import os
import sys
from enum import Enum

logger = logging.getLogger(__name__)

# Win32 standard handle identifiers (DWORD values of STD_*_HANDLE)
_STD_INPUT_HANDLE = -10
_STD_OUTPUT_HANDLE = -11
_STD_ERROR_HANDLE = -12


class StdStream(Enum):
    """The three standard process streams."""

    STDIN = "stdin"
    STDOUT = "stdout"
    STDERR = "stderr"

    @property
    def fileno(self) -> int:
        return _FILENOS[self]

    @property
    def win_handle(self) -> int:
        return _WIN_HANDLES[self]


_FILENOS = {
    StdStream.STDIN: 0,
    StdStream.STDOUT: 1,
    StdStream.STDERR: 2,
}

_WIN_HANDLES = {
    StdStream.STDIN: _STD_INPUT_HANDLE,
    StdStream.STDOUT: _STD_OUTPUT_HANDLE,
    StdStream.STDERR: _STD_ERROR_HANDLE,
}


def _posix_isatty(stream: StdStream) -> bool:
    return os.isatty(stream.fileno)


def console_api():
    """Load kernel32 with the console function prototypes declared."""
    import ctypes
    from ctypes import wintypes

    kernel32 = ctypes.windll.kernel32
    kernel32.GetStdHandle.restype = wintypes.HANDLE
    kernel32.GetConsoleMode.argtypes = [wintypes.HANDLE, ctypes.POINTER(wintypes.DWORD)]
    kernel32.GetConsoleMode.restype = wintypes.BOOL
    kernel32.SetConsoleMode.argtypes = [wintypes.HANDLE, wintypes.DWORD]
    kernel32.SetConsoleMode.restype = wintypes.BOOL
    return kernel32


def _windows_isatty(stream: StdStream) -> bool:
    handle = console_api().GetStdHandle(stream.win_handle)
    return windows_console_mode(handle) is not None


def windows_console_mode(handle: int) -> int | None:
    """Return the console mode flags for a Win32 handle.

    Args:
        handle: Raw Win32 handle (e.g. from ``msvcrt.get_osfhandle``).

    Returns:
        The mode flags, or None when the handle is not a console.
    """
    import ctypes
    from ctypes import wintypes

    mode = wintypes.DWORD()
    if console_api().GetConsoleMode(handle, ctypes.pointer(mode)) == 0:
        return None
    return mode.value


def _strategy(platform: str):
    if platform == "win32":
        return _windows_isatty
    return _posix_isatty


def isatty(stream: StdStream, platform: str | None = None) -> bool:
    """Check whether a standard stream is attached to an interactive terminal.

    Args:
        stream: Which standard stream to query.
        platform: Platform name to select the strategy for (defaults to
            ``sys.platform``).

    Returns:
        True if the OS reports the stream as a terminal. Query failures
        are reported as False.
    """
    probe = _strategy(platform or sys.platform)
    try:
        return bool(probe(stream))
    except (OSError, ValueError, AttributeError) as e:
        logger.debug(f"tty probe for {stream.value} failed: {e}")
        return False
