import subprocess
from types import TracebackType
from typing import IO, Final

from logly import logger

from pd.core.errors import PagerError

# -R: pass ANSI colors through; +Gg: read to the end, then show the top;
# -~: no tildes on lines past the end of the report.
PAGER_ARGV: Final[tuple[str, ...]] = ("less", "-R", "+Gg", "-~")


class Pager:
    """An interactive pager subprocess fed through its standard input.

    Use as a context manager. Leaving the block always closes the pager's
    input and waits for it to exit, including when the body raised.
    """

    def __init__(self, argv: tuple[str, ...] = PAGER_ARGV):
        self._argv = list(argv)
        self._process: subprocess.Popen[bytes] | None = None

    def __enter__(self) -> "Pager":
        try:
            self._process = subprocess.Popen(self._argv, stdin=subprocess.PIPE)
        except OSError as e:
            raise PagerError(f"Failed to start pager {self._argv[0]}: {e}") from e
        logger.info(f"Pager started argv={' '.join(self._argv)}")
        return self

    def _stdin(self) -> IO[bytes]:
        if self._process is None or self._process.stdin is None:
            raise PagerError("Pager is not running")
        return self._process.stdin

    def write(self, text: str) -> None:
        """Writes text to the pager as UTF-8."""
        try:
            self._stdin().write(text.encode("utf-8"))
        except OSError as e:
            raise PagerError(f"Failed to write to pager: {e}") from e

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        process = self._process
        if process is None:
            return
        self._process = None

        close_error: OSError | None = None
        if process.stdin is not None:
            try:
                process.stdin.close()
            except OSError as e:
                close_error = e

        try:
            returncode = process.wait()
        except OSError as e:
            if exc is None:
                raise PagerError(f"Failed to wait for pager: {e}") from e
            logger.warning(f"Failed to wait for pager: {e}")
            return

        if returncode != 0:
            logger.info(f"Pager exited returncode={returncode}")

        if close_error is not None and exc is None:
            raise PagerError(f"Failed to write to pager: {close_error}") from close_error
