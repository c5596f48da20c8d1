import subprocess

from logly import logger

from pd.core.errors import LaunchError, ProcessIOError


def decode_output(data: bytes) -> str:
    """Decodes process output bytes as UTF-8, replacing invalid sequences."""
    return data.decode("utf-8", errors="replace")


def run_process(argv: list[str]) -> bytes:
    """Runs a program to completion and returns its standard output.

    Standard input is bound to the null device and standard error is left
    attached to the terminal. The exit status is logged but not inspected: the
    search tools exit non-zero when nothing matches and may still print partial
    results on other failures.

    Args:
        argv: Program name followed by its arguments.

    Returns:
        Everything the program wrote to standard output.

    Raises:
        LaunchError: The program could not be started.
        ProcessIOError: Reading the program's output failed.
    """
    program = argv[0]
    logger.info(f"Starting subprocess argv={' '.join(argv)}")
    try:
        process = subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
        )
    except OSError as e:
        raise LaunchError(program, str(e)) from e

    with process:
        try:
            stdout, _ = process.communicate()
        except OSError as e:
            raise ProcessIOError(program, str(e)) from e

    logger.info(f"Subprocess finished program={program} returncode={process.returncode}")
    return stdout or b""
