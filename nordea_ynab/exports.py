"""
Finding export files.

Nordea names its exports like
``Tapahtumat FI12 3456 7890 1234 56 - 2024.01.31 14.05.csv``. Older exports use
``2024.01.31 14.05`` for the timestamp, newer ones ``2024-01-31 14.05.12``.
Anything in the directory that does not look like an export is ignored.
"""

import logging
import pathlib
from datetime import datetime

from .models import ExportFile, NORDEA_SCHEMA

logger = logging.getLogger(__name__)


def parse_timestamp(text, formats):
    """Parse export timestamp text with the first format that fits.

    Args:
        text (str): Timestamp part of a file name
        formats (Iterable[str]): strptime formats, tried in order

    Returns:
        datetime or None: Parsed timestamp, or None if no format fits
    """
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def parse_export_filename(path, schema=NORDEA_SCHEMA):
    """Build an ExportFile from a file name.

    Args:
        path (str or pathlib.Path): Path of a directory entry
        schema (ExportSchema): Export description holding the filename pattern

    Returns:
        ExportFile or None: Parsed export, or None if the name is not an export name
    """
    path = pathlib.Path(path)
    file_name = path.name

    match = schema.filename_regex.fullmatch(file_name)
    if not match:
        logger.debug(f"Ignoring {file_name}: name does not match export pattern")
        return None

    account_id, timestamp_text = match.group(1), match.group(2)
    timestamp = parse_timestamp(timestamp_text, schema.timestamp_formats)
    if timestamp is None:
        logger.debug(f"Ignoring {file_name}: unrecognised timestamp '{timestamp_text}'")
        return None

    return ExportFile(
        file_name=file_name,
        path=path,
        timestamp=timestamp,
        account_id=account_id
    )


def scan_exports(folder_path, schema=NORDEA_SCHEMA):
    """Find all export files in a folder.

    Args:
        folder_path (str or Path): Directory to scan

    Returns:
        list: ExportFile entries for every file whose name parses

    Raises:
        FileNotFoundError: If the folder does not exist
        NotADirectoryError: If the path is not a directory
    """
    # Convert to Path object if string
    if isinstance(folder_path, str):
        folder_path = pathlib.Path(folder_path)

    if not folder_path.exists():
        raise FileNotFoundError(f"Folder not found: {folder_path}")
    if not folder_path.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {folder_path}")

    exports = []
    for entry in sorted(folder_path.iterdir()):  # Sort for consistent order
        if not entry.is_file():
            continue
        export = parse_export_filename(entry, schema)
        if export is not None:
            exports.append(export)

    logger.debug(f"Found {len(exports)} export file(s) in {folder_path}")
    return exports


def select_exports(exports):
    """Pick the newest export and the previous export of the same account.

    Args:
        exports (Iterable[ExportFile]): Parsed exports

    Returns:
        tuple: (current, previous) where previous is None on the first run for an account

    Raises:
        ValueError: If there are no exports
    """
    ordered = sorted(exports, key=lambda export: export.timestamp, reverse=True)
    if not ordered:
        raise ValueError("Could not find any matching files")

    current = ordered[0]
    previous = next(
        (export for export in ordered[1:] if export.account_id == current.account_id),
        None
    )
    return current, previous
