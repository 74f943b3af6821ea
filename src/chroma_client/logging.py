import sys

from loguru import logger

DEV_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"


def setup_logger(mode: str = "DEV", level: str = "INFO") -> int:
    """
    Replace loguru's default sink with a single stderr sink.

    Args:
        mode: Environment name; DEV gets the verbose colorized format
        level: Minimum level written to the sink

    Returns:
        Handler id of the installed sink
    """
    logger.remove()

    if mode.upper() == "DEV":
        return logger.add(sys.stderr, level=level.upper(), format=DEV_FORMAT, colorize=True)

    return logger.add(sys.stderr, level=level.upper(), format=DEFAULT_FORMAT, colorize=False)
