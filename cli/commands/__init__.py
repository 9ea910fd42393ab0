"""CLI commands package."""

from cli.commands.confirm import confirm as confirm_command
from cli.commands.probe import probe as probe_command
from cli.commands.section import begin as begin_command
from cli.commands.section import end as end_command
from cli.commands.section import warn as warn_command
from cli.commands.status import status as status_command

__all__ = [
    "begin_command",
    "confirm_command",
    "end_command",
    "probe_command",
    "status_command",
    "warn_command",
]
