"""Input and output stream wrappers with terminal capability metadata.

An OutputStream is a capability oracle plus a raw conduit: it knows whether
its sink is a terminal and whether color can be rendered there, but it
never decides what text gets written. That is the formatter's job.
"""

import sys
from enum import Enum
from typing import TextIO

from rich.color import ColorSystem

from shellui.exceptions import StreamIOError
from shellui.negotiation import WriteStream, negotiate
from shellui.tty import StdStream, isatty


class Coloring(str, Enum):
    """User preference for colored output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def should_colorize(coloring: Coloring, is_a_terminal: bool, supports_color: bool) -> bool:
    """Combine preference and capability into a single coloring decision."""
    return supports_color and (
        (is_a_terminal and coloring == Coloring.AUTO) or coloring == Coloring.ALWAYS
    )


def _io_error(action: str, error: Exception) -> StreamIOError:
    return StreamIOError(f"failed to {action} stream: {error}", getattr(error, "errno", None))


class OutputStream:
    """Writable stream that knows its terminal and color capabilities."""

    def __init__(self, inner: WriteStream, coloring: Coloring, isatty: bool):
        self._inner = inner
        self._coloring = coloring
        self._isatty = isatty

    @classmethod
    def from_stdout(cls, coloring: Coloring, isatty_override: bool | None = None) -> "OutputStream":
        return cls._from_std(sys.stdout, StdStream.STDOUT, coloring, isatty_override)

    @classmethod
    def from_stderr(cls, coloring: Coloring, isatty_override: bool | None = None) -> "OutputStream":
        return cls._from_std(sys.stderr, StdStream.STDERR, coloring, isatty_override)

    @classmethod
    def _from_std(
        cls,
        sink: TextIO,
        stream: StdStream,
        coloring: Coloring,
        isatty_override: bool | None,
    ) -> "OutputStream":
        tty = isatty(stream) if isatty_override is None else isatty_override
        return cls(negotiate(sink), coloring, tty)

    @property
    def coloring(self) -> Coloring:
        return self._coloring

    @property
    def color_system(self) -> ColorSystem | None:
        """Color system negotiated for the sink, or None for plain sinks."""
        return self._inner.color_system

    def is_a_terminal(self) -> bool:
        return self._isatty

    def supports_color(self) -> bool:
        return self._inner.is_color

    def is_colored(self) -> bool:
        return should_colorize(self._coloring, self._isatty, self.supports_color())

    def write(self, text: str) -> int:
        """Write text to the underlying sink.

        Raises:
            StreamIOError: If the sink rejects the write (e.g. broken pipe).
        """
        try:
            return self._inner.write(text)
        except (OSError, ValueError) as e:
            raise _io_error("write to", e) from e

    def flush(self) -> None:
        """Flush the underlying sink.

        Raises:
            StreamIOError: If the sink fails to flush.
        """
        try:
            self._inner.flush()
        except (OSError, ValueError) as e:
            raise _io_error("flush", e) from e

    def __repr__(self) -> str:
        return (
            f"OutputStream(is_colored={self.is_colored()}, "
            f"supports_color={self.supports_color()}, "
            f"is_a_terminal={self.is_a_terminal()})"
        )


class InputStream:
    """Readable stream that knows whether it is attached to a terminal."""

    def __init__(self, inner: TextIO, isatty: bool):
        self._inner = inner
        self._isatty = isatty

    @classmethod
    def from_stdin(cls, isatty_override: bool | None = None) -> "InputStream":
        tty = isatty(StdStream.STDIN) if isatty_override is None else isatty_override
        return cls(sys.stdin, tty)

    def is_a_terminal(self) -> bool:
        return self._isatty

    def read(self, size: int = -1) -> str:
        try:
            return self._inner.read(size)
        except (OSError, ValueError) as e:
            raise _io_error("read from", e) from e

    def readline(self) -> str:
        try:
            return self._inner.readline()
        except (OSError, ValueError) as e:
            raise _io_error("read from", e) from e

    def __repr__(self) -> str:
        return f"InputStream(is_a_terminal={self.is_a_terminal()})"
