"""Exception hierarchy for shell output operations."""


class ShellUIError(Exception):
    """Base exception for shell output operations."""

    pass


class StreamIOError(ShellUIError):
    """Reading, writing or flushing an underlying stream failed.

    The original ``OSError`` is chained as ``__cause__`` and its ``errno``
    is kept so callers can tell a broken pipe from other failures.
    """

    def __init__(self, message: str, errno: int | None = None):
        super().__init__(message)
        self.errno = errno


class TermInfoError(ShellUIError):
    """Compiled terminfo entry could not be parsed."""

    pass


class UnknownStatusError(ShellUIError):
    """Status identifier is not part of the status vocabulary."""

    pass


class PromptAborted(ShellUIError):
    """User quit a prompt, or input ended before an answer was given."""

    pass
