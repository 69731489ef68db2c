"""
Data types shared by the conversion steps.

Export files are identified by their name, which carries the account IBAN and
the moment the export was taken. Rows inside an export are listed newest first;
the overlap detection in `overlap.py` depends on that ordering.
"""

import re
from dataclasses import dataclass
from datetime import datetime
import pathlib
from typing import Dict, Tuple


@dataclass(frozen=True)
class ExportFile:
    """A transaction export found in the input directory."""
    file_name: str
    path: pathlib.Path
    timestamp: datetime
    account_id: str


@dataclass(frozen=True)
class TransactionRecord:
    """One row of an export.

    Equality compares all fields, and is how the same transaction is
    recognised in two different exports.
    """
    date: str
    amount: str
    description: str


@dataclass(frozen=True)
class OverlapAnchor:
    """Most recent transaction of the previous export and how many identical rows it had."""
    transaction: TransactionRecord
    repetitions: int


@dataclass(frozen=True)
class ExportSchema:
    """Describes the bank's export files.

    Attributes:
        columns: Ordered (source header, logical field) pairs. Logical fields are
            'date', 'amount' and 'description'.
        pending_marker: Value of the date column for reservations that have not posted yet.
        date_format: strptime format of the date column.
        delimiter: Field delimiter of the export files.
        encodings: Encodings tried in order when reading a file.
        filename_pattern: Regex with two groups, account id and timestamp text.
        timestamp_formats: strptime formats tried in order on the timestamp text.
    """
    columns: Tuple[Tuple[str, str], ...] = (
        ('Kirjauspäivä', 'date'),
        ('Määrä', 'amount'),
        ('Otsikko', 'description'),
    )
    pending_marker: str = 'Varaus'
    date_format: str = '%Y/%m/%d'
    delimiter: str = ';'
    encodings: Tuple[str, ...] = ('utf-8-sig', 'cp1252')
    filename_pattern: str = r'.+ ([A-Z]{2}\d{2} \d{4} \d{4} \d{4} \d{2}) - (.+)\.csv'
    timestamp_formats: Tuple[str, ...] = (
        '%Y.%m.%d %H.%M',
        '%Y-%m-%d %H.%M.%S',
    )

    @property
    def column_mapping(self) -> Dict[str, str]:
        return dict(self.columns)

    @property
    def filename_regex(self):
        return re.compile(self.filename_pattern)

    def source_column(self, field):
        """Return the export header that holds a logical field."""
        for source, logical in self.columns:
            if logical == field:
                return source
        raise KeyError(f"No column mapped to field: {field}")


NORDEA_SCHEMA = ExportSchema()
