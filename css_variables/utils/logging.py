"""Logging utility for CSS Variables."""

import logging
import os
from typing import Optional, Union
from .config import LOG_FORMAT, LOG_DATE_FORMAT, LOG_LEVEL

def setup_logging(log_level: Union[int, str] = LOG_LEVEL, log_file: Optional[str] = None) -> None:
    """Set up logging configuration.

    Args:
        log_level: Root log level, a number or a level name
        log_file: Optional file that receives a copy of every record
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True
    )

# Exported functions
__all__ = ['setup_logging']
