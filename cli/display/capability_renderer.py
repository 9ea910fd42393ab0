"""Capability renderer for the probe command."""

from dataclasses import dataclass

from rich.table import Table

from cli.display.console import console
from shellui.streams import Coloring
from shellui.terminfo import TermInfo


@dataclass
class StreamCapability:
    """Detected capability of one standard stream for display."""

    name: str
    is_a_terminal: bool
    supports_color: bool | None = None
    is_colored: bool | None = None
    color_system: str | None = None


def _yes_no(value: bool | None) -> str:
    if value is None:
        return "-"
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


class CapabilityRenderer:
    """Render detected terminal capabilities.

    Uses Rich's Table class for consistent, well-formatted output.
    """

    def render_preference(self, coloring: Coloring, non_interactive: bool) -> None:
        """Render the resolved coloring preference.

        Args:
            coloring: Effective coloring preference.
            non_interactive: Whether tty probing was overridden.
        """
        console.print(f"Coloring: [cyan]{coloring.value}[/cyan]")
        if non_interactive:
            console.print("  [dim]non-interactive: all streams treated as non-terminals[/dim]")

    def render_terminal(self, term: str, info: TermInfo | None) -> None:
        """Render the terminfo description found for TERM.

        Args:
            term: Value of the TERM environment variable.
            info: Parsed terminfo entry, or None when none was found.
        """
        if not term:
            console.print("Terminal: [dim]TERM is not set[/dim]")
        elif info is None:
            console.print(f"Terminal: {term} [dim](no terminfo entry)[/dim]")
        else:
            console.print(f"Terminal: {term} [dim]({info.colors} colors)[/dim]")
        console.print()

    def render_streams(self, streams: list[StreamCapability]) -> None:
        """Render one row per standard stream.

        Args:
            streams: Capabilities to display, in display order.
        """
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("STREAM", style="cyan")
        table.add_column("TTY")
        table.add_column("COLOR SUPPORT")
        table.add_column("COLORED")
        table.add_column("COLOR SYSTEM", style="dim")

        for stream in streams:
            table.add_row(
                stream.name,
                _yes_no(stream.is_a_terminal),
                _yes_no(stream.supports_color),
                _yes_no(stream.is_colored),
                stream.color_system or "-",
            )

        console.print(table)
