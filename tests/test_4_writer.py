"""
YNAB Output Tests

This module tests mapping transactions to YNAB's import format and writing
the CSV file.
"""

import pandas as pd

from nordea_ynab.writer import YNAB_COLUMNS, to_ynab_frame, write_ynab_csv


def read_output(path):
    return pd.read_csv(path, dtype=str, keep_default_na=False)


class TestToYnabFrame:
    """Test suite for column mapping"""

    def test_columns_and_values(self, records, sample_rows):
        result = to_ynab_frame(records(sample_rows))
        assert result.columns.tolist() == YNAB_COLUMNS
        assert result['Date'].tolist() == [row[0] for row in sample_rows]
        assert result['Amount'].tolist() == [row[1] for row in sample_rows]
        assert result['Payee'].tolist() == [row[2] for row in sample_rows]
        assert (result['Memo'] == '').all()

    def test_no_records(self):
        result = to_ynab_frame([])
        assert result.empty
        assert result.columns.tolist() == YNAB_COLUMNS


class TestWriteYnabCsv:
    """Test suite for writing the YNAB file"""

    def test_writes_rows_verbatim(self, tmp_path, records, sample_rows):
        output = tmp_path / 'out.csv'
        assert write_ynab_csv(records(sample_rows), output) == len(sample_rows)

        written = read_output(output)
        assert written.columns.tolist() == YNAB_COLUMNS
        assert written.values.tolist() == [[date, payee, '', amount] for date, amount, payee in sample_rows]

    def test_header_only_when_empty(self, tmp_path):
        output = tmp_path / 'out.csv'
        assert write_ynab_csv([], output) == 0
        assert output.read_text(encoding='utf-8').strip() == 'Date,Payee,Memo,Amount'

    def test_creates_output_directory(self, tmp_path, records, sample_rows):
        output = tmp_path / 'ynab' / 'imports' / 'out.csv'
        write_ynab_csv(records(sample_rows[:1]), str(output))
        assert output.exists()
