"""
Writing transactions in YNAB's CSV import format.

Dates and amounts are written exactly as Nordea exported them; YNAB's importer
accepts Nordea's formatting.
"""

import csv
import logging
import pathlib

import pandas as pd

from .utils import ensure_parent_directory

logger = logging.getLogger(__name__)

YNAB_COLUMNS = ['Date', 'Payee', 'Memo', 'Amount']


def to_ynab_frame(records):
    """Map transaction records to YNAB columns.

    Args:
        records (Iterable[TransactionRecord]): Transactions to convert

    Returns:
        pd.DataFrame: One row per record with Date, Payee, Memo and Amount
    """
    return pd.DataFrame(
        [
            {
                'Date': record.date,
                'Payee': record.description,
                'Memo': '',
                'Amount': record.amount,
            }
            for record in records
        ],
        columns=YNAB_COLUMNS,
        dtype=str
    )


def write_ynab_csv(records, output_path):
    """Write transactions to a YNAB import file.

    Args:
        records (Iterable[TransactionRecord]): Transactions to write
        output_path (str or pathlib.Path): Destination CSV file

    Returns:
        int: Number of transactions written
    """
    output_path = pathlib.Path(output_path)
    ensure_parent_directory(output_path)

    result = to_ynab_frame(records)
    result.to_csv(output_path, index=False, quoting=csv.QUOTE_MINIMAL, encoding='utf-8')

    logger.info(f"Results written to {output_path}")
    return len(result)
