"""CLI application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import (
    begin_command,
    confirm_command,
    end_command,
    probe_command,
    status_command,
    warn_command,
)
from cli.context import CLIContext, set_context
from shellui.streams import Coloring

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="shellui",
    help="Capability-aware status output for shell scripts.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def callback(
    color: Annotated[
        Coloring | None,
        typer.Option(
            "--color",
            help="Color output: auto (terminals only), always or never. "
            "Overrides SHELLUI_COLOR, SHELLUI_NOCOLORING and NO_COLOR.",
            case_sensitive=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only log errors"),
    ] = False,
) -> None:
    """Capability-aware status output for shell scripts."""
    ctx = CLIContext(color=color, verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    logger.debug(f"resolved config: {ctx.config!r}")


app.command("status")(status_command)
app.command("begin")(begin_command)
app.command("end")(end_command)
app.command("warn")(warn_command)
app.command("confirm")(confirm_command)
app.command("probe")(probe_command)
