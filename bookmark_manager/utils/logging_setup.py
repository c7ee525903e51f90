"""
Logging configuration for the Bookmark Manager.

This module sets up logging based on configuration settings.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config=None, verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Set up logging configuration.

    Args:
        config: Configuration object; its ``logging`` section is used when given
        verbose: Force DEBUG level
        log_file: Optional log file path override
    """
    log_level = "WARNING"
    console_output = True

    if config is not None:
        log_level = config.config.logging.level
        console_output = config.config.logging.console_output
        if log_file is None and config.config.logging.log_file:
            log_file = str(config.config.logging.log_file)

    if verbose:
        log_level = "DEBUG"

    handlers = []
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    # File handler
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Console handler; stdout is reserved for command output
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=getattr(logging, log_level.upper()), handlers=handlers, force=True
    )

    logger = logging.getLogger(__name__)
    logger.debug(f"Log level: {log_level}")
    if log_file:
        logger.debug(f"Log file: {log_file}")

    # Reduce noise from the HTML parser stack
    logging.getLogger("bs4").setLevel(logging.WARNING)
    logging.getLogger("chardet").setLevel(logging.WARNING)
