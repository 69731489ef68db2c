"""
Nordea to YNAB - converts Nordea bank CSV exports into YNAB's CSV import format.

This package provides functionality to:
- Find the newest Nordea export in a directory and the previous export for the same account
- Read export files into transaction records, dropping pending reservations
- Work out which transactions of the newest export were already processed
- Write the new transactions in YNAB's import format

The YNAB format includes:
- Date: Posting date, passed through as exported
- Payee: Transaction description
- Memo: Always empty
- Amount: Amount, passed through as exported
"""

from .models import ExportFile, ExportSchema, OverlapAnchor, TransactionRecord, NORDEA_SCHEMA
from .exports import parse_export_filename, scan_exports, select_exports
from .reader import read_export, check_row_order
from .overlap import ReconciliationError, find_anchor, find_cut_index, select_new_transactions
from .writer import to_ynab_frame, write_ynab_csv
from .convert import convert_directory

__all__ = [
    'ExportFile',
    'ExportSchema',
    'OverlapAnchor',
    'TransactionRecord',
    'NORDEA_SCHEMA',
    'parse_export_filename',
    'scan_exports',
    'select_exports',
    'read_export',
    'check_row_order',
    'ReconciliationError',
    'find_anchor',
    'find_cut_index',
    'select_new_transactions',
    'to_ynab_frame',
    'write_ynab_csv',
    'convert_directory'
]
