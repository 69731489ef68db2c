import logging

import pytest

from nordea_ynab.models import TransactionRecord

NORDEA_HEADER = [
    'Kirjauspäivä', 'Määrä', 'Maksaja', 'Maksunsaaja', 'Nimi',
    'Otsikko', 'Viitenumero', 'Valuutta'
]

ACCOUNT = 'FI12 3456 7890 1234 56'
OTHER_ACCOUNT = 'FI98 7654 3210 9876 54'


def nordea_row(date, amount, description):
    """Build a full export row from the three fields the converter uses."""
    return [date, amount, 'Testi Henkilö', '', '', description, '', 'EUR']


def export_name(timestamp, account=ACCOUNT):
    return f"Tapahtumat {account} - {timestamp}.csv"


@pytest.fixture
def write_export(tmp_path):
    """Helper fixture to write Nordea export files.

    Rows are (date, amount, description) tuples, or raw lines when given as str.
    """
    def _write(file_name, rows, header=None, directory=None):
        directory = directory or tmp_path
        header = header or NORDEA_HEADER
        lines = [';'.join(header)]
        for row in rows:
            if isinstance(row, str):
                lines.append(row)
            else:
                lines.append(';'.join(nordea_row(*row)))
        path = directory / file_name
        path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
        return path
    return _write


@pytest.fixture
def sample_rows():
    """Newest-first export rows, no duplicates."""
    return [
        ('2025/03/17', '-4,50', 'K-Market Kamppi'),
        ('2025/03/16', '-23,90', 'Alko Arkadia'),
        ('2025/03/15', '2500,00', 'Palkka'),
        ('2025/03/14', '-12,00', 'HSL Mobiili'),
    ]


@pytest.fixture
def records():
    """Factory turning (date, amount, description) tuples into records."""
    def _records(rows):
        return [TransactionRecord(*row) for row in rows]
    return _records


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so they don't outlive a test."""
    yield
    package_logger = logging.getLogger('nordea_ynab')
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
