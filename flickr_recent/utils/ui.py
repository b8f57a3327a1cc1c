"""
Console and logging utilities for Flickr Recent Photos.
Handles timestamped console output and the log file.
"""
import logging
import os
import traceback
from datetime import datetime
from ..config import config


def setup_logging():
    """Setup logging to the log file; console output goes through print_and_log."""
    # Create cache directory if it doesn't exist
    os.makedirs(config.CACHE_DIR, exist_ok=True)

    # Disable flickrapi's verbose logging
    flickr_logger = logging.getLogger('flickrapi')
    flickr_logger.setLevel(logging.WARNING)

    # Set up our custom logger
    logger = logging.getLogger(__name__)
    logger.setLevel(logging.DEBUG)  # Set to DEBUG to capture all levels

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(config.log_file, mode='a', encoding='utf-8')
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s',
                                                datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(file_handler)

    global _logger
    _logger = logger
    return logger


# Initialize logger
_logger = None


def get_logger():
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger


def print_and_log(message, level="INFO"):
    """Print message to console and log to file with timestamp."""
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


def print_exception(message):
    """Report the exception being handled: message and stack trace on console and in the log."""
    print_and_log(message, "ERROR")
    traceback.print_exc()
    get_logger().debug("Stack trace:\n%s", traceback.format_exc())
