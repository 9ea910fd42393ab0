"""Color negotiation for writable sinks.

``negotiate`` wraps a sink in a color-capable terminal when it can and in a
plain writer when it cannot. It never raises: color is an enhancement and
losing it must not cost the caller its output.

Strategies are tried in order for the running platform:
  win32  console API probe, then terminfo lookup
  other  terminfo lookup

Each strategy returns a rich color system name ("standard", "256",
"truecolor") or None to hand over to the next one.
"""

import logging
import os
import sys
from collections.abc import Callable, Mapping
from typing import TextIO

from rich.color import ColorSystem
from rich.console import COLOR_SYSTEMS, Console

from shellui import terminfo
from shellui.tty import console_api, windows_console_mode

logger = logging.getLogger(__name__)

# Console mode flag enabling ANSI escape processing on Windows 10+
ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004

TRUECOLOR_COLORTERMS = ("truecolor", "24bit")

Strategy = Callable[[TextIO, Mapping[str, str]], str | None]


class WriteStream:
    """A sink owned either plainly or through a color-rendering terminal.

    Use ``WriteStream.plain`` or ``WriteStream.color`` to construct one; the
    variant is fixed for the lifetime of the object.
    """

    def __init__(self, sink: TextIO, terminal: Console | None = None):
        self._sink = sink
        self._terminal = terminal

    @classmethod
    def plain(cls, sink: TextIO) -> "WriteStream":
        return cls(sink)

    @classmethod
    def color(cls, sink: TextIO, color_system: str = "standard") -> "WriteStream":
        """Wrap a sink in a terminal rendering with the given color system."""
        terminal = Console(
            file=sink,
            color_system=color_system,
            force_terminal=True,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
        return cls(sink, terminal)

    @property
    def sink(self) -> TextIO:
        return self._sink

    @property
    def terminal(self) -> Console | None:
        return self._terminal

    @property
    def is_color(self) -> bool:
        return self._terminal is not None

    @property
    def color_system(self) -> ColorSystem | None:
        if self._terminal is None:
            return None
        return COLOR_SYSTEMS.get(self._terminal.color_system or "")

    def write(self, text: str) -> int:
        return self._sink.write(text)

    def flush(self) -> None:
        self._sink.flush()

    def __repr__(self) -> str:
        kind = "Color" if self.is_color else "NoColor"
        return f"WriteStream.{kind}({self._sink!r})"


def color_system_for(colors: int, environ: Mapping[str, str]) -> str | None:
    """Map a terminfo color count to a rich color system name."""
    if colors < 8:
        return None
    colorterm = environ.get("COLORTERM", "").strip().lower()
    if colors >= 1 << 24 or colorterm in TRUECOLOR_COLORTERMS:
        return "truecolor"
    if colors >= 256:
        return "256"
    return "standard"


def terminfo_strategy(sink: TextIO, environ: Mapping[str, str]) -> str | None:
    """Look up ``$TERM`` in the terminfo database.

    Runs regardless of whether the sink is a tty: the coloring preference
    may still ask for color on a redirected stream.
    """
    info = terminfo.from_env(environ)
    if info is None:
        return None
    logger.debug(f"terminfo entry {info.name!r} reports {info.colors} colors")
    return color_system_for(info.colors, environ)


def windows_console_strategy(sink: TextIO, environ: Mapping[str, str]) -> str | None:
    """Probe the Windows console behind the sink for ANSI support."""
    import msvcrt

    handle = msvcrt.get_osfhandle(sink.fileno())
    mode = windows_console_mode(handle)
    if mode is None:
        return None
    if not mode & ENABLE_VIRTUAL_TERMINAL_PROCESSING:
        new_mode = mode | ENABLE_VIRTUAL_TERMINAL_PROCESSING
        if console_api().SetConsoleMode(handle, new_mode) == 0:
            logger.debug("console does not accept virtual terminal processing")
            return None
    return "truecolor"


def strategies_for(platform: str) -> list[Strategy]:
    if platform == "win32":
        return [windows_console_strategy, terminfo_strategy]
    return [terminfo_strategy]


def negotiate(
    sink: TextIO,
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> WriteStream:
    """Build the best writer available for a sink.

    Args:
        sink: Text stream to write to.
        environ: Environment to read TERM/COLORTERM/TERMINFO from
            (defaults to ``os.environ``).
        platform: Platform name selecting the strategies (defaults to
            ``sys.platform``).

    Returns:
        A color-capable WriteStream when a strategy found color support,
        otherwise a plain WriteStream around the original sink.
    """
    env = os.environ if environ is None else environ
    for strategy in strategies_for(platform or sys.platform):
        try:
            color_system = strategy(sink, env)
        except (ImportError, OSError, ValueError, AttributeError) as e:
            logger.debug(f"{strategy.__name__} failed: {e}")
            continue
        if color_system is None:
            continue
        try:
            stream = WriteStream.color(sink, color_system)
        except (OSError, ValueError) as e:
            logger.debug(f"could not wrap sink in a color terminal: {e}")
            continue
        if stream.color_system is None:
            logger.debug(f"{strategy.__name__}: terminal reports no color support")
            continue
        return stream
    return WriteStream.plain(sink)
