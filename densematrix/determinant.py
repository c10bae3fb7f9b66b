import logging

from .echelon import forward_eliminate
from .matrix import Matrix, NotSquareError

logger = logging.getLogger(__name__)


def determinant(A: Matrix):
    """
    Determinant of a square matrix by forward elimination.

    Works on a copy, so ``A`` is left untouched. Elimination only swaps rows
    and subtracts multiples of one row from another, so the determinant is
    the product of the resulting diagonal times the sign of the row
    permutation. An empty (0x0) matrix has determinant one.
    """
    n = A.nrows
    if n != A.ncols:
        raise NotSquareError(
            f"The determinant is undefined for a {n}x{A.ncols} matrix"
        )

    field = A.field
    T = A.copy()
    swaps = forward_eliminate(T)

    det = field.one
    for k in range(n):
        det = field.mul(det, T.data[k][k])

    if swaps % 2:
        det = field.neg(det)
    logger.debug("determinant: %d swaps, value %r", swaps, det)
    return det
