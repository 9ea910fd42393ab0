"""Status and heading formatter over a Shell.

Every operation renders a complete block of text, writes it with a single
call and flushes straight away, so output stays in order relative to
subprocesses sharing the same terminal.
"""

import textwrap
from typing import Any

from rich.style import Style

from shellui.config import ShellConfig
from shellui.exceptions import PromptAborted
from shellui.shell import Shell
from shellui.status import ColorCategory, StatusLike
from shellui.streams import Coloring, OutputStream

BEGIN_SYMBOL = "»"
END_SYMBOL = "★"
WARN_SYMBOL = "∅"
FATAL_SYMBOL = "✗✗✗"

PARA_WIDTH = 79

_YES = ("y", "yes")
_NO = ("n", "no")
_QUIT = ("q", "quit")


def paint(stream: OutputStream, text: str, category: ColorCategory, bold: bool = True) -> str:
    """Wrap text in escape sequences for the stream's color system."""
    style = Style(color=category.color, bold=bold)
    return style.render(text, color_system=stream.color_system)


def _emit(stream: OutputStream, text: str) -> None:
    stream.write(text)
    stream.flush()


class UI:
    """Formats status lines, headings and prompts onto a Shell."""

    def __init__(self, shell: Shell):
        self.shell = shell

    @classmethod
    def default_with(cls, coloring: Coloring, isatty: bool | None = None) -> "UI":
        return cls(Shell.default_with(coloring, isatty))

    @classmethod
    def default(cls) -> "UI":
        return cls.default_with(Coloring.AUTO)

    @classmethod
    def from_config(cls, config: ShellConfig) -> "UI":
        """Create a UI from resolved configuration."""
        return cls.default_with(config.coloring(), config.isatty_override())

    # --- Status lines ----------------------------------------------------

    def begin(self, message: Any) -> None:
        """Announce the start of a unit of work: ``» message``."""
        self._write_heading(self.shell.out(), ColorCategory.BEGIN, BEGIN_SYMBOL, message)

    def end(self, message: Any) -> None:
        """Announce successful completion of a unit of work: ``★ message``."""
        self._write_heading(self.shell.out(), ColorCategory.END, END_SYMBOL, message)

    def status(self, status: StatusLike, message: Any) -> None:
        """Report a status line: ``symbol label message``.

        Only the ``symbol label`` segment is colored; the message is always
        written as-is.
        """
        stream = self.shell.out()
        parts = status.parts()
        if stream.is_colored():
            head = paint(stream, f"{parts.symbol} {parts.label}", parts.color)
            line = f"{head} {message}\n"
        else:
            line = f"{parts.symbol} {parts.label} {message}\n"
        _emit(stream, line)

    def _write_heading(
        self, stream: OutputStream, category: ColorCategory, symbol: str, message: Any
    ) -> None:
        text = f"{symbol} {message}"
        if stream.is_colored():
            text = paint(stream, text, category)
        _emit(stream, f"{text}\n")

    # --- Diagnostics -----------------------------------------------------

    def warn(self, message: Any) -> None:
        """Write a warning line to the diagnostic stream."""
        self._write_heading(self.shell.err(), ColorCategory.WARNING, WARN_SYMBOL, message)

    def fatal(self, error: Any) -> None:
        """Write an error description to the diagnostic stream.

        The caller decides what happens to the process afterwards.
        """
        stream = self.shell.err()
        lines = str(error).splitlines() or [""]
        colored = stream.is_colored()
        marker = paint(stream, FATAL_SYMBOL, ColorCategory.FATAL) if colored else FATAL_SYMBOL

        block = [marker]
        for line in lines:
            body = paint(stream, line, ColorCategory.FATAL, bold=False) if colored else line
            block.append(f"{marker} {body}")
        block.append(marker)
        _emit(stream, "\n".join(block) + "\n")

    # --- Plain text ------------------------------------------------------

    def heading(self, text: Any) -> None:
        stream = self.shell.out()
        line = str(text)
        if stream.is_colored():
            line = paint(stream, line, ColorCategory.HEADING)
        _emit(stream, f"{line}\n")

    def info(self, message: Any) -> None:
        _emit(self.shell.out(), f"{message}\n")

    def para(self, text: Any) -> None:
        """Write a paragraph wrapped at 79 columns, followed by a blank line."""
        wrapped = textwrap.fill(str(text), width=PARA_WIDTH)
        _emit(self.shell.out(), f"{wrapped}\n\n")

    def br(self) -> None:
        _emit(self.shell.out(), "\n")

    # --- Prompts ---------------------------------------------------------

    def prompt_yes_no(self, question: str, default: bool | None = None) -> bool:
        """Ask a yes/no question on stdout and read the answer from stdin.

        An empty answer picks the default (and asks again if there is none).

        Raises:
            PromptAborted: If the user answers quit, or input ends without a
                default to fall back on.
        """
        if default is None:
            choices = "[yes/no/quit]"
        elif default:
            choices = "[Yes/no/quit]"
        else:
            choices = "[yes/No/quit]"

        while True:
            self._ask(f"{question} {choices}")
            line = self.shell.input().readline()
            if not line:
                if default is None:
                    raise PromptAborted(f"No answer given for: {question}")
                return default
            answer = line.strip().lower()
            if not answer and default is not None:
                return default
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            if answer in _QUIT:
                raise PromptAborted(f"Aborted at: {question}")

    def prompt_ask(self, question: str, default: str | None = None) -> str:
        """Ask a free-form question; an empty answer returns the default.

        Raises:
            PromptAborted: If input ends and there is no default.
        """
        prompt = f"{question} [default: {default}]" if default is not None else question
        self._ask(prompt)
        line = self.shell.input().readline()
        if not line and default is None:
            raise PromptAborted(f"No answer given for: {question}")
        answer = line.strip()
        if not answer and default is not None:
            return default
        return answer

    def _ask(self, prompt: str) -> None:
        stream = self.shell.out()
        text = f"{prompt}:"
        if stream.is_colored():
            text = paint(stream, text, ColorCategory.SECONDARY)
        _emit(stream, f"{text} ")
