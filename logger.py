"""Logging for Alfred.

Everything goes to a dated file under LOG_DIR; the console only gets a copy
when the bot runs in a terminal. Both handlers pass records through
RedactingFilter, so the Steam key and bot token never reach either output.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

import config
from utils.log_sanitizer import redact_secret

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


class RedactingFilter(logging.Filter):
    """Scrub configured secrets and credential-looking text from records."""

    def filter(self, record: logging.LogRecord) -> bool:
        text = record.getMessage()
        for secret in (config.STEAM_API_KEY, config.DISCORD_TOKEN):
            text = redact_secret(text, secret)
        # Message is pre-rendered, drop args so it is not formatted twice
        record.msg = text
        record.args = None
        return True


def setup_logging(log_dir: Path | None = None, name: str = "alfred") -> logging.Logger:
    """Attach the file and (TTY only) console handlers to the named logger."""
    log_dir = log_dir or config.LOG_DIR
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.handlers.clear()

    redactor = RedactingFilter()

    log_file = log_dir / f"{datetime.now().strftime('%Y-%m-%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    file_handler.addFilter(redactor)
    logger.addHandler(file_handler)

    if sys.stdout is not None and sys.stdout.isatty():
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        console_handler.addFilter(redactor)
        logger.addHandler(console_handler)

    return logger


logger = setup_logging()
