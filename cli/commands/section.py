"""Section start/end markers and warnings."""

import typer
from typing_extensions import Annotated

from cli.context import get_context, reporting_errors


def begin(
    message: Annotated[str, typer.Argument(help="Description of the work starting")],
) -> None:
    """Announce the start of a unit of work ('» message')."""
    with reporting_errors():
        get_context().ui.begin(message)


def end(
    message: Annotated[str, typer.Argument(help="Description of the work completed")],
) -> None:
    """Announce successful completion of a unit of work ('★ message')."""
    with reporting_errors():
        get_context().ui.end(message)


def warn(
    message: Annotated[str, typer.Argument(help="Warning text")],
) -> None:
    """Write a warning to stderr ('∅ message')."""
    with reporting_errors():
        get_context().ui.warn(message)
