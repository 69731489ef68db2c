"""
Reading Nordea export files.

Exports are semicolon-delimited with a header row. Only the mapped columns
are kept. Broken rows are logged and skipped rather than failing the run,
and reservations (date column set to the pending marker) are dropped since
they are not final and may still change or disappear.

The encoding is chosen from the header line, so a stray undecodable byte in
one row only costs that row.

Precondition: rows are listed newest first, as Nordea writes them. Nothing is
reordered here; `check_row_order` only warns when the dates disagree.
"""

import csv
import io
import logging
import pathlib

import pandas as pd

from .models import NORDEA_SCHEMA, TransactionRecord

logger = logging.getLogger(__name__)


def _choose_encoding(data, schema):
    """Pick the encoding to read an export with.

    Only encodings whose decoded header contains every mapped column are
    considered, preferring one that also decodes the whole file. If no header
    holds the columns, the first encoding that decodes it is used.

    Returns:
        str or None: Encoding name, or None if the header decodes with none of them
    """
    header_line = data.split(b'\n', 1)[0]
    candidates = []
    for encoding in schema.encodings:
        try:
            header = header_line.decode(encoding)
        except UnicodeDecodeError:
            continue
        header_cols = [col.strip().strip('"') for col in header.rstrip('\r').split(schema.delimiter)]
        candidates.append((encoding, all(col in header_cols for col in schema.column_mapping)))

    if not candidates:
        return None

    matching = [enc for enc, has_columns in candidates if has_columns]
    if not matching:
        return candidates[0][0]
    for encoding in matching:
        try:
            data.decode(encoding)
            return encoding
        except UnicodeDecodeError:
            continue
    return matching[0]


def _is_decoded(row):
    """Return False if a row holds bytes that did not decode."""
    try:
        '\x1f'.join(row).encode('utf-8')
        return True
    except UnicodeEncodeError:
        return False


def _read_rows(file_path, schema):
    """Read header and well-formed rows.

    Returns:
        tuple: (header columns, list of rows)
    """
    data = file_path.read_bytes()
    encoding = _choose_encoding(data, schema)
    if encoding is None:
        raise ValueError(f"Could not read {file_path} with any supported encoding")
    logger.debug(f"Reading {file_path.name} with encoding: {encoding}")

    # Undecodable bytes become lone surrogates and their rows are skipped below
    text = data.decode(encoding, errors='surrogateescape')
    reader = csv.reader(io.StringIO(text, newline=''), delimiter=schema.delimiter, quotechar='"')

    header_cols = next(reader, None)
    if header_cols is None:
        return [], []

    rows = []
    while True:
        try:
            row = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            logger.warning(f"Skipping malformed row {reader.line_num} in {file_path.name}: {str(e)}")
            continue

        # Skip empty rows
        if not any(cell.strip() for cell in row):
            continue
        if not _is_decoded(row):
            logger.warning(f"Skipping malformed row {reader.line_num} in {file_path.name}: undecodable bytes")
        elif len(row) == len(header_cols):
            rows.append(row)
        elif len(row) == len(header_cols) + 1 and row[-1].strip() == '':
            # Accept row with trailing delimiter (extra empty column)
            rows.append(row[:-1])
        else:
            logger.warning(
                f"Skipping malformed row {reader.line_num} in {file_path.name}: "
                f"{row} (len={len(row)}, expected {len(header_cols)})"
            )

    return [col.strip() for col in header_cols], rows


def read_export(file_path, schema=NORDEA_SCHEMA):
    """Read an export file into transaction records.

    Args:
        file_path (str or pathlib.Path): Path to the export
        schema (ExportSchema): Column mapping and pending marker

    Returns:
        list: TransactionRecord objects in file order, pending rows removed

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the header cannot be decoded with any supported encoding
    """
    file_path = pathlib.Path(file_path)
    header_cols, rows = _read_rows(file_path, schema)

    mapping = schema.column_mapping
    missing_columns = [col for col in mapping if col not in header_cols]
    if missing_columns:
        logger.error(f"{file_path.name} is missing required columns {missing_columns}, no rows can be used")
        return []

    df = pd.DataFrame(rows, columns=header_cols, dtype=str)[list(mapping)]
    pending = df[schema.source_column('date')] == schema.pending_marker
    df = df.rename(columns=mapping)

    for row in df[pending].itertuples(index=False):
        logger.warning(f"Skipping pending transaction in {file_path.name}: {row.description} {row.amount}")
    df = df[~pending]

    records = [
        TransactionRecord(date=row.date, amount=row.amount, description=row.description)
        for row in df.itertuples(index=False)
    ]
    logger.info(f"Read {len(records)} transaction(s) from {file_path.name}")
    check_row_order(records, schema, source=file_path.name)
    return records


def check_row_order(records, schema=NORDEA_SCHEMA, source='export'):
    """Warn if records are not listed newest first.

    Dates that do not parse with the schema's date format are ignored.

    Returns:
        bool: True if the parsed dates are in newest-first order
    """
    if not records:
        return True

    dates = pd.to_datetime(
        pd.Series([record.date for record in records]),
        format=schema.date_format,
        errors='coerce'
    ).dropna()

    if dates.is_monotonic_decreasing:
        return True

    logger.warning(f"Rows in {source} are not ordered newest first; new transactions may be misidentified")
    return False
