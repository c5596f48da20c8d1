class PdError(Exception):
    """Base class for errors raised by pd."""


class UsageError(PdError):
    """Raised when the command line does not contain a search term."""


class AdapterError(PdError):
    """Raised when a package source cannot produce its output."""

    def __init__(self, program: str, message: str):
        super().__init__(f"{program}: {message}")
        self.program = program


class LaunchError(AdapterError):
    """Raised when an external program cannot be started."""


class ProcessIOError(AdapterError):
    """Raised when the output of an external program cannot be read."""


class PagerError(PdError):
    """Raised when the report cannot be handed to the pager."""
