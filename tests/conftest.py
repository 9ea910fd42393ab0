import ctypes
import io
import struct
import sys
from types import SimpleNamespace

import pytest

from shellui.negotiation import WriteStream
from shellui.shell import Shell
from shellui.streams import Coloring, InputStream, OutputStream
from shellui.terminfo import COLORS_INDEX, EXTENDED_MAGIC, LEGACY_MAGIC
from shellui.ui import UI

ENV_VARS = (
    "NO_COLOR",
    "SHELLUI_COLOR",
    "SHELLUI_NOCOLORING",
    "SHELLUI_NONINTERACTIVE",
    "SHELLUI_LOG_LEVEL",
    "SHELLUI_LOG_FILE",
    "COLORTERM",
    "FORCE_COLOR",
    "TTY_COMPATIBLE",
)


class RecordingSink(io.StringIO):
    """StringIO that records the order of write and flush calls."""

    def __init__(self):
        super().__init__()
        self.calls: list[tuple[str, str]] = []

    def write(self, text: str) -> int:
        self.calls.append(("write", text))
        return super().write(text)

    def flush(self) -> None:
        self.calls.append(("flush", ""))
        super().flush()


class BrokenSink(io.StringIO):
    """Sink whose reader has gone away."""

    def write(self, text: str) -> int:
        raise BrokenPipeError(32, "Broken pipe")

    def flush(self) -> None:
        raise BrokenPipeError(32, "Broken pipe")


class ConsoleSink(io.StringIO):
    """StringIO standing in for a stream backed by descriptor 1."""

    def fileno(self) -> int:
        return 1


class FakeFunction:
    """Callable stand-in for a ctypes foreign function; records its calls."""

    def __init__(self, impl):
        self.impl = impl
        self.calls: list[tuple] = []

    def __call__(self, *args):
        self.calls.append(args)
        return self.impl(*args)


class FakeKernel32:
    """Console API of kernel32 with a fixed console mode.

    ``mode=None`` means the handle is not a console. ``accept`` controls
    whether SetConsoleMode succeeds.
    """

    def __init__(self, mode: int | None = None, accept: bool = True):
        self.mode = mode
        self.GetStdHandle = FakeFunction(lambda which: 1000 - which)
        self.GetConsoleMode = FakeFunction(self._get_console_mode)
        self.SetConsoleMode = FakeFunction(lambda handle, mode: 1 if accept else 0)

    def _get_console_mode(self, handle, mode_ptr) -> int:
        if self.mode is None:
            return 0
        mode_ptr.contents.value = self.mode
        return 1


def build_terminfo(names: str, numbers: list[int], extended: bool = False, bool_count: int = 3) -> bytes:
    """Build a compiled terminfo entry with the given numeric capabilities."""
    raw_names = names.encode("ascii") + b"\0"
    magic = EXTENDED_MAGIC if extended else LEGACY_MAGIC
    num_format = "i" if extended else "h"
    header = struct.pack("<6h", magic, len(raw_names), bool_count, len(numbers), 0, 0)
    body = raw_names + b"\1" * bool_count
    if len(body) % 2:
        body += b"\0"
    body += struct.pack(f"<{len(numbers)}{num_format}", *numbers)
    return header + body


def color_numbers(colors: int) -> list[int]:
    """Numeric capability table with only ``colors`` (and ``pairs``) set."""
    numbers = [-1] * (COLORS_INDEX + 2)
    numbers[0] = 80
    numbers[COLORS_INDEX] = colors
    return numbers


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment toggles that would change coloring decisions."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def terminfo_db(tmp_path):
    """Install compiled terminfo entries into a temporary database.

    Returns a function ``install(name, colors, extended=False, hashed=False)``
    that writes an entry and returns an environment mapping pointing at it.
    """
    root = tmp_path / "terminfo"

    def install(name: str, colors: int, extended: bool = False, hashed: bool = False) -> dict:
        subdir = f"{ord(name[0]):x}" if hashed else name[0]
        entry = root / subdir / name
        entry.parent.mkdir(parents=True, exist_ok=True)
        entry.write_bytes(
            build_terminfo(f"{name}|test terminal", color_numbers(colors), extended=extended)
        )
        return {"TERM": name, "TERMINFO": str(root)}

    install.root = root
    return install


def make_output(
    sink, coloring: Coloring = Coloring.AUTO, isatty: bool = False, color: bool = False
) -> OutputStream:
    inner = WriteStream.color(sink) if color else WriteStream.plain(sink)
    return OutputStream(inner, coloring, isatty)


@pytest.fixture
def make_ui():
    """Build a UI over in-memory streams.

    Returns a function ``make(coloring, isatty, color, stdin)`` giving
    ``(ui, out, err)``.
    """

    def make(
        coloring: Coloring = Coloring.AUTO,
        isatty: bool = False,
        color: bool = False,
        stdin: str = "",
    ):
        out = RecordingSink()
        err = RecordingSink()
        shell = Shell(
            InputStream(io.StringIO(stdin), isatty),
            make_output(out, coloring, isatty, color),
            make_output(err, coloring, isatty, color),
        )
        return UI(shell), out, err

    return make


@pytest.fixture
def win_console(monkeypatch):
    """Replace the Win32 console API with a fake.

    Returns a function ``install(mode=None, accept=True)`` giving the
    FakeKernel32 now reachable as ``ctypes.windll.kernel32``. Descriptors
    map to OS handles as ``500 + fd`` through a fake ``msvcrt``.
    """

    def install(mode: int | None = None, accept: bool = True) -> FakeKernel32:
        kernel32 = FakeKernel32(mode, accept)
        monkeypatch.setattr(ctypes, "windll", SimpleNamespace(kernel32=kernel32), raising=False)
        monkeypatch.setitem(
            sys.modules, "msvcrt", SimpleNamespace(get_osfhandle=lambda fd: 500 + fd)
        )
        return kernel32

    return install
