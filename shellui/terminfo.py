"""Compiled terminfo database lookup.

Locates the compiled description for a terminal type the way ncurses
does and reads the numeric ``colors`` capability from it.

Search order:
  $TERMINFO, ~/.terminfo, each entry of $TERMINFO_DIRS (an empty entry
  stands for the system directories), then the system directories.

Entries live at ``<dir>/<first letter>/<name>`` or, on systems with
case-insensitive filesystems, ``<dir>/<hex of first letter>/<name>``.

Binary layout (all integers little-endian):
  header     six 16-bit shorts: magic, names size, boolean count,
             number count, string count, string table size
  names      NUL terminated, '|' separated aliases
  booleans   one byte each, padded to an even offset
  numbers    16-bit (legacy magic 0o432) or 32-bit (magic 0o1036) signed
"""

import logging
import os
import struct
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from shellui.exceptions import TermInfoError

logger = logging.getLogger(__name__)

LEGACY_MAGIC = 0o432
EXTENDED_MAGIC = 0o1036

_HEADER = struct.Struct("<6h")

# Position of "colors" in the standard numeric capability table
COLORS_INDEX = 13

SYSTEM_DIRS = (
    Path("/etc/terminfo"),
    Path("/lib/terminfo"),
    Path("/usr/share/terminfo"),
    Path("/usr/lib/terminfo"),
)


@dataclass(frozen=True)
class TermInfo:
    """Parsed subset of a compiled terminfo entry."""

    names: tuple[str, ...]
    numbers: tuple[int, ...]

    @property
    def name(self) -> str:
        return self.names[0] if self.names else ""

    @property
    def colors(self) -> int:
        """Number of colors the terminal supports, or -1 when absent."""
        if len(self.numbers) <= COLORS_INDEX:
            return -1
        return self.numbers[COLORS_INDEX]

    @classmethod
    def parse(cls, data: bytes) -> "TermInfo":
        """Parse a compiled terminfo entry.

        Raises:
            TermInfoError: If the data is not a valid compiled entry.
        """
        if len(data) < _HEADER.size:
            raise TermInfoError("terminfo entry is truncated")
        magic, names_size, bool_count, num_count, _str_count, _str_size = (
            _HEADER.unpack_from(data)
        )
        if magic == LEGACY_MAGIC:
            num_format = "h"
        elif magic == EXTENDED_MAGIC:
            num_format = "i"
        else:
            raise TermInfoError(f"bad terminfo magic number: {magic:#o}")
        if min(names_size, bool_count, num_count) < 0:
            raise TermInfoError("negative section size in terminfo header")

        offset = _HEADER.size
        raw_names = data[offset : offset + names_size]
        offset += names_size + bool_count
        # Numbers start on an even byte boundary
        if offset % 2:
            offset += 1

        numbers_struct = struct.Struct(f"<{num_count}{num_format}")
        try:
            numbers = numbers_struct.unpack_from(data, offset)
        except struct.error as e:
            raise TermInfoError(f"terminfo numbers section is truncated: {e}") from e

        names = raw_names.split(b"\0", 1)[0].decode("ascii", errors="replace")
        return cls(names=tuple(names.split("|")), numbers=numbers)


def search_dirs(environ: Mapping[str, str] | None = None) -> list[Path]:
    """Return terminfo directories in lookup order."""
    env = os.environ if environ is None else environ
    dirs: list[Path] = []
    if env.get("TERMINFO"):
        dirs.append(Path(env["TERMINFO"]))
    if env.get("HOME"):
        dirs.append(Path(env["HOME"]) / ".terminfo")
    if env.get("TERMINFO_DIRS"):
        for entry in env["TERMINFO_DIRS"].split(os.pathsep):
            if entry:
                dirs.append(Path(entry))
            else:
                dirs.extend(SYSTEM_DIRS)
    dirs.extend(SYSTEM_DIRS)

    seen = set()
    ordered = []
    for directory in dirs:
        if directory not in seen:
            seen.add(directory)
            ordered.append(directory)
    return ordered


def find_entry(term: str, environ: Mapping[str, str] | None = None) -> Path | None:
    """Find the compiled terminfo file for a terminal type."""
    if not term or "/" in term or term in (".", ".."):
        return None
    for directory in search_dirs(environ):
        for subdir in (term[0], f"{ord(term[0]):x}"):
            candidate = directory / subdir / term
            if candidate.is_file():
                return candidate
    return None


def lookup(term: str, environ: Mapping[str, str] | None = None) -> TermInfo | None:
    """Load the terminfo description for a terminal type.

    Returns None when there is no usable description.
    """
    try:
        path = find_entry(term, environ)
        if path is None:
            logger.debug(f"no terminfo entry found for TERM={term!r}")
            return None
        return TermInfo.parse(path.read_bytes())
    except (OSError, TermInfoError) as e:
        logger.debug(f"unusable terminfo entry for TERM={term!r}: {e}")
        return None


def from_env(environ: Mapping[str, str] | None = None) -> TermInfo | None:
    """Load the terminfo description for ``$TERM``."""
    env = os.environ if environ is None else environ
    return lookup(env.get("TERM", ""), env)
