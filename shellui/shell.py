"""The process's interaction surface: one input and two output streams."""

import logging

from shellui.streams import Coloring, InputStream, OutputStream

logger = logging.getLogger(__name__)


class Shell:
    """Bundles stdin, stdout and stderr streams.

    Each stream is probed and negotiated independently, so stdout and
    stderr may differ in color capability (e.g. one redirected to a file,
    the other left on the terminal).
    """

    def __init__(self, input: InputStream, out: OutputStream, err: OutputStream):
        self._input = input
        self._out = out
        self._err = err

    @classmethod
    def default_with(cls, coloring: Coloring, isatty: bool | None = None) -> "Shell":
        """Create a shell over the standard process streams.

        Args:
            coloring: Coloring preference applied to both output streams.
            isatty: When set, used instead of probing each stream (e.g.
                False for non-interactive runs).
        """
        stdin = InputStream.from_stdin(isatty)
        logger.debug(f"InputStream(stdin): {{ is_a_terminal(): {stdin.is_a_terminal()} }}")
        stdout = OutputStream.from_stdout(coloring, isatty)
        logger.debug(
            f"OutputStream(stdout): {{ is_colored(): {stdout.is_colored()}, "
            f"supports_color(): {stdout.supports_color()}, "
            f"is_a_terminal(): {stdout.is_a_terminal()} }}"
        )
        stderr = OutputStream.from_stderr(coloring, isatty)
        logger.debug(
            f"OutputStream(stderr): {{ is_colored(): {stderr.is_colored()}, "
            f"supports_color(): {stderr.supports_color()}, "
            f"is_a_terminal(): {stderr.is_a_terminal()} }}"
        )
        return cls(stdin, stdout, stderr)

    @classmethod
    def default(cls) -> "Shell":
        return cls.default_with(Coloring.AUTO)

    def input(self) -> InputStream:
        return self._input

    def out(self) -> OutputStream:
        return self._out

    def err(self) -> OutputStream:
        return self._err
