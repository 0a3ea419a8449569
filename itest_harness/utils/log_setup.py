"""Logging setup shared by the CLI and the pytest plugin."""

import logging
import logging.config
import os
from typing import Optional

from itest_harness.utils.exceptions import LoggingConfigError

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def configure_logging(
    level: str = "INFO",
    config_file: Optional[str] = None
) -> None:
    """Configure logging for the harness.

    Args:
        level: Root log level used when no config file is given.
        config_file: Optional path to a ``logging.config.fileConfig`` file.

    Raises:
        LoggingConfigError: If the config file is missing or malformed.
    """
    if config_file:
        if not os.path.isfile(config_file):
            raise LoggingConfigError(f"Logging config file not found: {config_file}")
        try:
            logging.config.fileConfig(config_file, disable_existing_loggers=False)
        except (KeyError, ValueError, RuntimeError) as e:
            raise LoggingConfigError(f"Cannot load logging config {config_file}: {e}") from e
        return

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
