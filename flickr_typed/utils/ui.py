"""
User interface utilities for the command line.
Handles logging setup and console output.
"""
import logging
import os
from datetime import datetime
from ..config import config

LOGGER_NAME = "flickr_typed"


def setup_logging(level=logging.DEBUG):
    """Setup logging to the log file under CACHE_DIR."""
    os.makedirs(config.CACHE_DIR, exist_ok=True)

    # Disable flickrapi's verbose logging
    flickr_logger = logging.getLogger('flickrapi')
    flickr_logger.setLevel(logging.WARNING)

    # Package logger; library modules log through its children
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(config.log_file, mode='a', encoding='utf-8')
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(message)s', datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(file_handler)

    return logger


def get_logger():
    """Get the package logger."""
    return logging.getLogger(LOGGER_NAME)


def print_and_log(message, level="INFO"):
    """Print message to console and log it with timestamp."""
    logger = get_logger()

    # DEBUG messages only go to the log file
    if level.upper() != "DEBUG":
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        print(f"{timestamp} - {message}")

    if level.upper() == "ERROR":
        logger.error(message)
    elif level.upper() == "WARNING":
        logger.warning(message)
    elif level.upper() == "DEBUG":
        logger.debug(message)
    else:
        logger.info(message)
