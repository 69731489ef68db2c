"""
Nordea to YNAB conversion.

Point the converter at the directory holding Nordea CSV exports (for example
your Downloads directory). It takes the most recent export, finds the previous
export of the same account, and writes a YNAB CSV containing only the
transactions made since that previous export.

The previous export is the only state kept between runs: keep it next to the
new one and the overlap between the two decides what is new.

Steps:
1. Scan the directory for export files and parse their names
2. Select the newest export and the previous export of the same account
3. Read both exports, dropping pending reservations
4. Cut the newest export where the previous export's newest transaction appears
5. Write the remaining rows in YNAB's format
"""

import argparse
import logging
import pathlib
import sys

from .exports import scan_exports, select_exports
from .models import NORDEA_SCHEMA
from .overlap import ReconciliationError, select_new_transactions
from .reader import read_export
from .utils import setup_logging
from .writer import write_ynab_csv

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = 'out.csv'


def convert_directory(folder_path, output_path=DEFAULT_OUTPUT, schema=NORDEA_SCHEMA):
    """Convert the newest export in a folder into a YNAB import file.

    Args:
        folder_path (str or pathlib.Path): Directory containing exports
        output_path (str or pathlib.Path): YNAB CSV to write
        schema (ExportSchema): Export description

    Returns:
        int: Number of transactions written

    Raises:
        ValueError: If no exports are found or the previous export has no usable rows
        ReconciliationError: If the newest export does not overlap the previous one
        OSError: If the folder cannot be read or the output cannot be written
    """
    exports = scan_exports(folder_path, schema)
    current, previous = select_exports(exports)

    logger.info(f"Using most recently exported file: {current.file_name}")

    previous_rows = None
    if previous is not None:
        logger.info(f"Using previously exported file: {previous.file_name}")
        previous_rows = read_export(previous.path, schema)
        if not previous_rows:
            raise ValueError(f"{previous.file_name} does not contain any valid rows")
    else:
        logger.info("No previous export found, including all rows from the csv file")

    current_rows = read_export(current.path, schema)

    try:
        new_rows = select_new_transactions(current_rows, previous_rows)
    except ReconciliationError as e:
        raise ReconciliationError(
            f"The most recent transaction in '{previous.file_name}' was found in "
            f"'{current.file_name}' {e.found} time(s), which is fewer than the "
            f"{e.required} time(s) it appears in '{previous.file_name}'. Make sure the "
            f"most recent export contains rows from the previous export.",
            found=e.found,
            required=e.required
        ) from e

    logger.info(f"{len(new_rows)} of {len(current_rows)} transaction(s) are new")
    return write_ynab_csv(new_rows, output_path)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='nordea-ynab',
        description='Convert Nordea CSV exports to YNAB CSV, including only transactions '
                    'made since the previous export'
    )
    parser.add_argument('path', type=str,
                        help='Path to directory containing exported csv files')
    parser.add_argument('--output', type=str, default=DEFAULT_OUTPUT,
                        help='YNAB CSV file to write')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write log output to this file')
    return parser


def main(argv=None):
    """Main execution function."""
    args = build_parser().parse_args(argv)
    setup_logging(debug=args.debug, log_file=args.log_file)

    try:
        count = convert_directory(pathlib.Path(args.path), args.output)
    except (ValueError, OSError) as e:
        logger.error(f"Conversion failed: {str(e)}")
        return 1

    print(f"Wrote {count} transaction(s) to {args.output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
