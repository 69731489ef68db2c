"""
Utility functions for the converter.

This module contains helper functions that are used across the package but
are not directly related to reading exports or detecting overlap.
"""

import logging
import pathlib

logger = logging.getLogger(__name__)


def setup_logging(debug=False, log_level='info', log_file=None):
    """Configure logging for the application.

    Args:
        debug (bool): Log at DEBUG level regardless of log_level
        log_level (str): Name of the log level to use otherwise
        log_file (str or Path, optional): Also write log records to this file

    Returns:
        pathlib.Path or None: Path of the log file, if one is used
    """
    # Determine log level
    if debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, log_level.upper(), logging.INFO)

    format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    handlers = [logging.StreamHandler()]
    if log_file:
        log_file = pathlib.Path(log_file)
        ensure_parent_directory(log_file)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    # Replace handlers from an earlier call
    package_logger = logging.getLogger('nordea_ynab')
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setFormatter(logging.Formatter(format))
        package_logger.addHandler(handler)

    return log_file


def ensure_parent_directory(file_path):
    """Create the directory a file will be written to.

    Args:
        file_path (str or pathlib.Path): File about to be written

    Returns:
        pathlib.Path: The parent directory
    """
    # Convert to Path object if string
    if isinstance(file_path, str):
        file_path = pathlib.Path(file_path)

    parent = file_path.parent
    if not parent.exists():
        logger.debug(f"Creating directory {parent}")
        parent.mkdir(parents=True, exist_ok=True)
    return parent
