"""Logging setup for command-line runs.

Each parsed input gets its own log file, e.g. ``log/sample_parsed.log``.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .config_loader import LoggingConfig, OutputConfig

PACKAGE_LOGGER = "policy_ocr"


def log_path_for(
    input_file: Union[str, Path],
    config: Optional[LoggingConfig] = None,
    output: Optional[OutputConfig] = None,
) -> Path:
    config = config or LoggingConfig()
    output = output or OutputConfig()
    return Path(config.directory) / f"{Path(input_file).stem}{output.suffix}.log"


def setup_logging(
    input_file: Union[str, Path],
    config: Optional[LoggingConfig] = None,
    output: Optional[OutputConfig] = None,
) -> Path:
    """Attach a file handler for ``input_file`` to the package logger.

    Handlers from a previous call are replaced, so repeated runs in one
    process do not write to stale files.

    Returns:
        Path of the log file
    """
    config = config or LoggingConfig()
    log_file = log_path_for(input_file, config, output)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)
    logger.setLevel(config.level_number)

    return log_file
