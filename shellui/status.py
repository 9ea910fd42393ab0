"""Status vocabulary for one-line progress reporting.

Each status maps to a display symbol, a label and a color category.
Several statuses share a symbol (Signed and Verified both render a
checkmark); that is intended.
"""

from dataclasses import dataclass
from enum import Enum

from shellui.exceptions import UnknownStatusError


class ColorCategory(str, Enum):
    """Color categories used by the formatter."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    BEGIN = "begin"
    END = "end"
    HEADING = "heading"
    WARNING = "warning"
    FATAL = "fatal"

    @property
    def color(self) -> str:
        """Rich color name the category renders in."""
        return _CATEGORY_COLORS[self]


_CATEGORY_COLORS = {
    ColorCategory.PRIMARY: "green",
    ColorCategory.SECONDARY: "cyan",
    ColorCategory.BEGIN: "yellow",
    ColorCategory.END: "blue",
    ColorCategory.HEADING: "green",
    ColorCategory.WARNING: "yellow",
    ColorCategory.FATAL: "red",
}


@dataclass(frozen=True)
class StatusParts:
    """Resolved display parts of a status."""

    symbol: str
    label: str
    color: ColorCategory


class Status(Enum):
    """Fixed set of operational statuses."""

    APPLYING = StatusParts("↑", "Applying", ColorCategory.PRIMARY)
    CACHED = StatusParts("☑", "Cached", ColorCategory.PRIMARY)
    CREATING = StatusParts("Ω", "Creating", ColorCategory.PRIMARY)
    DOWNLOADING = StatusParts("↓", "Downloading", ColorCategory.PRIMARY)
    ENCRYPTING = StatusParts("☛", "Encrypting", ColorCategory.PRIMARY)
    INSTALLED = StatusParts("✓", "Installed", ColorCategory.PRIMARY)
    MISSING = StatusParts("∵", "Missing", ColorCategory.SECONDARY)
    SIGNING = StatusParts("☛", "Signing", ColorCategory.SECONDARY)
    SIGNED = StatusParts("✓", "Signed", ColorCategory.SECONDARY)
    UPLOADED = StatusParts("✓", "Uploaded", ColorCategory.PRIMARY)
    UPLOADING = StatusParts("↑", "Uploading", ColorCategory.PRIMARY)
    USING = StatusParts("→", "Using", ColorCategory.PRIMARY)
    VERIFIED = StatusParts("✓", "Verified", ColorCategory.PRIMARY)

    def parts(self) -> StatusParts:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Status":
        """Look up a status by its case-sensitive identifier (e.g. "Installed").

        Raises:
            UnknownStatusError: If no status has that identifier.
        """
        for status in cls:
            if status.value.label == name:
                return status
        known = ", ".join(s.value.label for s in cls)
        raise UnknownStatusError(f"Unknown status: {name!r}. Known statuses: {known}, Custom")


@dataclass(frozen=True)
class CustomStatus:
    """Caller-supplied status rendered with the primary color."""

    symbol: str
    label: str

    def parts(self) -> StatusParts:
        return StatusParts(self.symbol, self.label, ColorCategory.PRIMARY)


StatusLike = Status | CustomStatus
