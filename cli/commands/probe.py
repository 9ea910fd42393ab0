"""Show detected terminal capabilities."""

import os

from cli.context import get_context
from cli.display.capability_renderer import CapabilityRenderer, StreamCapability
from shellui import terminfo


def probe() -> None:
    """Show tty attachment and color support for stdin, stdout and stderr."""
    ctx = get_context()
    shell = ctx.ui.shell

    stdin = shell.input()
    rows = [StreamCapability("stdin", stdin.is_a_terminal())]
    for name, stream in (("stdout", shell.out()), ("stderr", shell.err())):
        color_system = stream.color_system
        rows.append(
            StreamCapability(
                name,
                stream.is_a_terminal(),
                supports_color=stream.supports_color(),
                is_colored=stream.is_colored(),
                color_system=color_system.name.lower() if color_system else None,
            )
        )

    term = os.environ.get("TERM", "")
    info = terminfo.lookup(term)

    renderer = CapabilityRenderer()
    renderer.render_preference(ctx.config.coloring(), ctx.config.non_interactive)
    renderer.render_terminal(term, info)
    renderer.render_streams(rows)
