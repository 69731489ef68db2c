"""
Detecting transactions that were already exported.

The previous export's first row is the newest transaction processed last time
(the anchor). Its position in the newest export separates new rows from old
ones. Identical transactions are common (two coffees on the same day), so the
anchor is matched as many times as it occurs in the previous export, counting
back from the oldest match in the newest export:

    previous: [A, A, B, A]          anchor A, repetitions 3
    current:  [N1, N2, A, A, B, A]  matches at 2, 3, 5 -> cut at 2 -> [N1, N2]

These functions work on plain record sequences and do no I/O.
"""

from .models import OverlapAnchor


class ReconciliationError(ValueError):
    """The newest export does not reach back to the previously processed transactions."""

    def __init__(self, message, found=0, required=0):
        super().__init__(message)
        self.found = found
        self.required = required


def find_anchor(previous_rows):
    """Return the newest transaction of the previous export and its repetition count.

    Raises:
        ValueError: If the previous export has no rows
    """
    if not previous_rows:
        raise ValueError("Previous export does not contain any valid rows")

    anchor = previous_rows[0]
    repetitions = sum(1 for row in previous_rows if row == anchor)
    return OverlapAnchor(transaction=anchor, repetitions=repetitions)


def find_cut_index(current_rows, anchor):
    """Find the index of the first already processed row in the current export.

    Args:
        current_rows (Sequence[TransactionRecord]): Rows of the newest export
        anchor (OverlapAnchor): Anchor taken from the previous export

    Returns:
        int: Rows before this index are new

    Raises:
        ReconciliationError: If the anchor occurs fewer times than it did in the previous export
    """
    positions = [i for i, row in enumerate(current_rows) if row == anchor.transaction]

    if len(positions) < anchor.repetitions:
        raise ReconciliationError(
            f"Most recent previous transaction found {len(positions)} time(s), "
            f"expected at least {anchor.repetitions}",
            found=len(positions),
            required=anchor.repetitions
        )

    # Count back from the last match
    return positions[len(positions) - anchor.repetitions]


def select_new_transactions(current_rows, previous_rows=None):
    """Return the rows of the current export that were not in the previous one.

    Args:
        current_rows (Sequence[TransactionRecord]): Rows of the newest export
        previous_rows (Sequence[TransactionRecord], optional): Rows of the previous
            export, or None when there is no previous export

    Returns:
        list: New transactions, newest first
    """
    if previous_rows is None:
        return list(current_rows)

    anchor = find_anchor(previous_rows)
    cut_index = find_cut_index(current_rows, anchor)
    return list(current_rows[:cut_index])
