"""Shared CLI context with lazy-initialized dependencies."""

import logging
from contextlib import contextmanager

import typer

from shellui.config import ShellConfig
from shellui.exceptions import ShellUIError
from shellui.streams import Coloring
from shellui.ui import UI

logger = logging.getLogger(__name__)


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    The UI is built on first use so that it binds to whatever standard
    streams are in place when a command actually runs.

    Usage:
        ctx = CLIContext()
        ctx.ui.status(Status.INSTALLED, "core/redis")
    """

    def __init__(
        self, color: Coloring | None = None, verbose: bool = False, quiet: bool = False
    ):
        """Initialize CLI context.

        Args:
            color: Explicit coloring preference; overrides the environment
            verbose: If True, enable debug logging
            quiet: If True, suppress non-error output
        """
        self.color = color
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: ShellConfig | None = None
        self._ui: UI | None = None

    @property
    def config(self) -> ShellConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            config = ShellConfig.from_env()
            if self.color is not None:
                config.color = self.color
                config.no_coloring = False
            self._config = config
        return self._config

    @property
    def ui(self) -> UI:
        """Get the UI over the standard streams (lazy-loaded)."""
        if self._ui is None:
            self._ui = UI.from_config(self.config)
        return self._ui


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx


@contextmanager
def reporting_errors():
    """Report ShellUIError through the UI and exit with status 1."""
    try:
        yield
    except ShellUIError as e:
        logger.debug(f"command failed: {e!r}")
        get_context().ui.fatal(e)
        raise typer.Exit(1)
