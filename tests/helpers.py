import random

from densematrix.matrix import Matrix


def make_random_matrix(nrows: int, ncols: int, field=None, *,
                       low: float = -10.0, high: float = 10.0) -> Matrix:
    """Random matrix with entries drawn uniformly from [low, high)."""
    data = [
        [random.uniform(low, high) for _ in range(ncols)]
        for _ in range(nrows)
    ]
    return Matrix.from_rows(data, field)


def make_random_int_matrix(nrows: int, ncols: int, field=None, *,
                           bound: int = 9) -> Matrix:
    data = [
        [random.randint(-bound, bound) for _ in range(ncols)]
        for _ in range(nrows)
    ]
    return Matrix.from_rows(data, field)


def det_cofactor(M: Matrix):
    """
    Naive determinant by cofactor expansion along the first row.
    Only for small square matrices in tests.
    """
    field = M.field
    data = M.data
    n = M.nrows
    assert n == M.ncols

    if n == 0:
        return field.one
    if n == 1:
        return data[0][0]
    if n == 2:
        a, b = data[0]
        c, d = data[1]
        return field.sub(field.mul(a, d), field.mul(b, c))

    det = field.zero
    for j in range(n):
        sub_rows = [row[:j] + row[j + 1:] for row in data[1:]]
        sub_det = det_cofactor(Matrix(sub_rows, field))
        term = field.mul(data[0][j], sub_det)
        if j % 2 == 0:
            det = field.add(det, term)
        else:
            det = field.sub(det, term)
    return det


def verify_echelon_structure(T: Matrix) -> bool:
    """
    Check:
    - For each non-zero row, the first non-zero column index strictly increases.
    - Once a zero row appears, all later rows are zero.
    """
    field = T.field
    nrows, ncols = T.nrows, T.ncols
    last_pivot_col = -1
    zero_row_seen = False

    for r in range(nrows):
        row = T.data[r]
        pivot_col = -1
        for c in range(ncols):
            if not field.is_zero(row[c]):
                pivot_col = c
                break

        if pivot_col == -1:
            zero_row_seen = True
            if any(not all(field.is_zero(x) for x in T.data[rr])
                   for rr in range(r + 1, nrows)):
                return False
        else:
            if zero_row_seen:
                return False
            if pivot_col <= last_pivot_col:
                return False
            last_pivot_col = pivot_col

    return True


def with_dependent_row(rows, coeffs):
    """Append the linear combination ``sum(c * row)`` to ``rows``."""
    ncols = len(rows[0])
    combo = [sum(c * row[j] for c, row in zip(coeffs, rows)) for j in range(ncols)]
    return [list(r) for r in rows] + [combo]


def permutation_sign(perm) -> int:
    inversions = sum(
        1
        for i in range(len(perm))
        for j in range(i + 1, len(perm))
        if perm[i] > perm[j]
    )
    return -1 if inversions % 2 else 1
