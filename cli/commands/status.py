"""Write a single status line."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context, reporting_errors
from shellui.status import CustomStatus, Status, StatusLike

logger = logging.getLogger(__name__)

CUSTOM = "Custom"


def _resolve(name: str, symbol: str | None, label: str | None) -> StatusLike:
    if name != CUSTOM:
        return Status.from_name(name)
    if symbol is None or label is None:
        raise typer.BadParameter(
            "Custom status requires both --symbol and --label", param_hint="STATUS"
        )
    return CustomStatus(symbol, label)


def status(
    name: Annotated[
        str,
        typer.Argument(
            metavar="STATUS",
            help="Status identifier (e.g. Installed, Downloading) or Custom",
        ),
    ],
    message: Annotated[
        str,
        typer.Argument(help="Message written after the status"),
    ],
    symbol: Annotated[
        str | None,
        typer.Option("--symbol", help="Symbol for a Custom status"),
    ] = None,
    label: Annotated[
        str | None,
        typer.Option("--label", help="Label for a Custom status"),
    ] = None,
) -> None:
    """Write one status line, e.g. '✓ Installed core/redis'.

    STATUS is case-sensitive.
    """
    ctx = get_context()
    with reporting_errors():
        resolved = _resolve(name, symbol, label)
        logger.debug(f"status {resolved!r}: {message}")
        ctx.ui.status(resolved, message)
