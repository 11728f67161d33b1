"""
Utility Functions Module for Helm Chart Updater

This module provides helpers for logging and for generating random values.

Functions:
    setup_logging: Configures application logging
    log_multiline: Logs a block of text one line per record
    random_suffix: Generates random string suffixes for branch names
"""

import logging
import random
import string
from typing import Optional

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def log_multiline(text: str, log: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
    """Log every line of ``text`` as its own record."""
    log = log or logger
    for line in text.split("\n"):
        log.log(level, line)


def random_suffix(length=6):
    """Generate a random string suffix."""
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))
