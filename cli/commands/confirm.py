"""Ask a yes/no question and report the answer through the exit status."""

from enum import Enum

import typer
from typing_extensions import Annotated

from cli.context import get_context, reporting_errors


class Answer(str, Enum):
    YES = "yes"
    NO = "no"


def confirm(
    question: Annotated[str, typer.Argument(help="Question to ask")],
    default: Annotated[
        Answer | None,
        typer.Option(
            "--default",
            help="Answer used when the reply is empty or input has ended",
        ),
    ] = None,
) -> None:
    """Ask QUESTION on stdout and read the answer from stdin.

    Exits 0 for yes and 1 for no. Answering quit, or reaching end of input
    without a default, is reported as an error.
    """
    fallback = None if default is None else default == Answer.YES
    with reporting_errors():
        answer = get_context().ui.prompt_yes_no(question, fallback)
    if not answer:
        raise typer.Exit(1)
