"""Logger configuration for the menu admin core.

Store operations log with structured kwargs (``logger.info("...", day_id=1)``);
the sinks render them through ``{extra}``.
"""

import sys
from pathlib import Path

from loguru import logger

from menu_admin.config.settings import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level> {extra}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} {extra}"


def setup_logger(config: Settings) -> None:
    """Install the console sink and, when HIGHLIGHTS_LOG_FILE is set, a rotating file sink.

    Args:
        config: Settings carrying log_level, log_file, log_rotation and log_retention
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=config.log_level, colorize=True)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=config.log_level,
            rotation=config.log_rotation,
            retention=config.log_retention,
            compression="zip",
            backtrace=True,
            diagnose=True,
        )

    logger.debug("Logger initialized", level=config.log_level, log_file=config.log_file)
