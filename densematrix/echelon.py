"""Row-echelon utilities for dense real matrices.

This module holds the Gaussian elimination engine the rest of the package is
built on:

* ``forward_eliminate`` drives a matrix to (unnormalized) row-echelon form in
  place using partial pivoting, and reports how many row swaps it made.
* ``gauss`` runs forward elimination and then drops the rows that became
  zero, leaving as many rows as the matrix has rank.
* ``rank`` is the non-mutating counterpart of ``gauss``.

Every "is this zero" decision goes through the matrix's field, so the
tolerance used for pivot skipping and zero-row removal is the one the caller
configured on ``RealField``.
"""

import logging

from .field import RealField
from .matrix import Matrix

logger = logging.getLogger(__name__)


def _select_pivot(A: Matrix, row: int, col: int) -> int:
    """Index of the largest-magnitude entry of column ``col`` in rows ``row..``.

    Ties keep the earliest row.
    """
    magnitude = A.field.magnitude
    data = A.data
    best = row
    for cur in range(row + 1, A.nrows):
        if magnitude(data[best][col]) < magnitude(data[cur][col]):
            best = cur
    return best


def forward_eliminate(A: Matrix) -> int:
    """Reduce ``A`` to row-echelon form in place with partial pivoting.

    The routine walks a (row, column) cursor from the top-left corner. For
    each column it picks the row with the largest entry in magnitude among
    the rows not yet used as pivots and swaps it up. If that entry is zero
    under the field's tolerance the column is skipped and the row cursor
    stays put. Otherwise every row below the pivot has the scaled pivot row
    subtracted from it, which clears its entry in the pivot column. Pivots
    are not normalized and columns are never reordered.

    Args:
        A: Matrix to reduce. It is modified in place.

    Returns:
        The number of row swaps performed, for callers that need the sign of
        the row permutation.
    """

    field: RealField = A.field
    n_rows, n_cols = A.nrows, A.ncols
    data = A.data

    swaps = 0
    row = 0  # Tracks the pivot row index, which doubles as the current rank.

    for col in range(n_cols):
        if row >= n_rows:
            break

        best = _select_pivot(A, row, col)
        if field.is_zero(data[best][col]):
            logger.debug("column %d has no pivot below row %d, skipping", col, row)
            continue

        if best != row:
            A.row_swap(row, best)
            swaps += 1

        pivot_row = data[row]
        pivot = pivot_row[col]
        for i in range(row + 1, n_rows):
            target = data[i]
            factor = target[col]
            for j in range(col, n_cols):
                ratio = field.div(pivot_row[j], pivot)
                target[j] = field.sub(target[j], field.mul(ratio, factor))

        row += 1

    logger.debug("forward elimination of %dx%d matrix: %d pivots, %d swaps",
                 n_rows, n_cols, row, swaps)
    return swaps


def gauss(A: Matrix) -> None:
    """Forward-eliminate ``A`` in place and strip the resulting zero rows."""
    forward_eliminate(A)
    removed = A.remove_zero_rows()
    if removed:
        logger.debug("removed %d zero rows, %d remain", removed, A.nrows)


def rank(A: Matrix) -> int:
    """Rank of ``A`` as the row count left by ``gauss`` on a copy."""
    T = A.copy()
    gauss(T)
    return T.nrows
