from logly import logger


def init_logger(level: str = "WARNING"):
    """Initialize the logger.

    Output goes to the console only; pd keeps no files between runs. The
    default level stays quiet so log lines do not run into the report.

    Args:
        level: Minimum level to emit, e.g. "INFO" when debugging a source.

    """
    logger.configure(
        level=level,
        color=True,
        console=True,
        auto_sink=True,
    )

    logger.info("logger initialized!")

    return logger
