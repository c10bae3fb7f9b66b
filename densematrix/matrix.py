from dataclasses import dataclass, field as dataclass_field
from typing import Any, List, NamedTuple, Sequence, Tuple

from densematrix.field import RealField


class MatrixError(ValueError):
    """Base class for misuse of the matrix API (shape or field errors)."""


class DimensionMismatch(MatrixError):
    pass


class NotSquareError(MatrixError):
    pass


class FieldMismatch(MatrixError):
    pass


class Dimension(NamedTuple):
    m: int
    n: int


@dataclass
class Matrix:
    data: List[List[Any]]
    field: RealField = dataclass_field(default_factory=RealField)
    _ncols: int = dataclass_field(init=False, repr=False, default=0)

    def __post_init__(self):
        rows = [list(row) for row in self.data]
        ncols = len(rows[0]) if rows else 0
        for row in rows:
            if len(row) != ncols:
                raise ValueError("All rows must have the same length")
        coerce = self.field.coerce
        self.data = [[coerce(x) for x in row] for row in rows]
        self._ncols = ncols

    @property
    def nrows(self) -> int:
        return len(self.data)

    @property
    def ncols(self) -> int:
        return self._ncols

    @property
    def shape(self) -> Tuple[int, int]:
        return self.nrows, self.ncols

    @property
    def dimension(self) -> Dimension:
        return Dimension(self.nrows, self.ncols)

    @classmethod
    def zeros(cls, m: int, n: int, field: RealField = None) -> "Matrix":
        field = field if field is not None else RealField()
        M = cls([], field)
        M.data = [[field.zero] * n for _ in range(m)]
        M._ncols = n
        return M

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]],
                  field: RealField = None) -> "Matrix":
        return cls(rows, field if field is not None else RealField())

    @classmethod
    def identity(cls, n: int, field: RealField = None) -> "Matrix":
        M = cls.zeros(n, n, field)
        for i in range(n):
            M.data[i][i] = M.field.one
        return M

    @classmethod
    def from_numpy(cls, array, field: RealField = None) -> "Matrix":
        rows, cols = array.shape
        M = cls.zeros(rows, cols, field)
        for i in range(rows):
            for j in range(cols):
                M.data[i][j] = M.field.coerce(array[i, j].item())
        return M

    def __getitem__(self, index: Tuple[int, int]):
        i, j = index
        return self.data[i][j]

    def __setitem__(self, index: Tuple[int, int], value) -> None:
        i, j = index
        self.data[i][j] = self.field.coerce(value)

    def copy(self) -> "Matrix":
        M = Matrix([], self.field)
        M.data = [row[:] for row in self.data]
        M._ncols = self._ncols
        return M

    def row_swap(self, i: int, j: int) -> None:
        self.data[i], self.data[j] = self.data[j], self.data[i]

    def remove_zero_rows(self) -> int:
        """Drop every row whose entries are all zero under the field predicate.

        The column count is unchanged. Returns the number of rows removed.
        """
        is_zero = self.field.is_zero
        kept = [row for row in self.data
                if not all(is_zero(x) for x in row)]
        removed = len(self.data) - len(kept)
        self.data = kept
        return removed

    def transpose(self) -> "Matrix":
        """Replace the receiver with its transpose; returns self."""
        m, n = self.shape
        self.data = [[self.data[i][j] for i in range(m)] for j in range(n)]
        self._ncols = m
        return self

    def _check_field(self, other: "Matrix") -> None:
        if self.field != other.field:
            raise FieldMismatch(
                f"Cannot combine matrices over {self.field!r} and {other.field!r}"
            )

    def _check_same_dimension(self, other: "Matrix") -> None:
        self._check_field(other)
        if self.dimension != other.dimension:
            raise DimensionMismatch(
                f"Dimension mismatch: {tuple(self.dimension)} "
                f"!= {tuple(other.dimension)}"
            )

    def add(self, other: "Matrix") -> "Matrix":
        """In place: self <- self + other. Returns self."""
        self._check_same_dimension(other)
        add = self.field.add
        for row, other_row in zip(self.data, other.data):
            for j in range(self._ncols):
                row[j] = add(row[j], other_row[j])
        return self

    def subtract(self, other: "Matrix") -> "Matrix":
        """In place: self <- self - other. Returns self."""
        self._check_same_dimension(other)
        sub = self.field.sub
        for row, other_row in zip(self.data, other.data):
            for j in range(self._ncols):
                row[j] = sub(row[j], other_row[j])
        return self

    def multiply(self, other: "Matrix") -> "Matrix":
        """In place: self <- self * other. Returns self.

        The product is accumulated into a fresh matrix which then replaces
        the receiver's storage, so ``A.multiply(A)`` is well defined.
        """
        self._check_field(other)
        rA, cA = self.shape
        rB, cB = other.shape
        if cA != rB:
            raise DimensionMismatch(f"Dimension mismatch: {cA} != {rB}")

        field = self.field
        A = self.data
        B = other.data

        C = [[field.zero] * cB for _ in range(rA)]

        for i in range(rA):
            Ai = A[i]
            Ci = C[i]
            for j in range(cB):
                acc = field.zero
                for k in range(cA):
                    acc = field.add(acc, field.mul(Ai[k], B[k][j]))
                Ci[j] = acc

        self.data = C
        self._ncols = cB
        return self

    def __add__(self, other: "Matrix") -> "Matrix":
        return self.copy().add(other)

    def __sub__(self, other: "Matrix") -> "Matrix":
        return self.copy().subtract(other)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        return self.copy().multiply(other)

    def __iadd__(self, other: "Matrix") -> "Matrix":
        return self.add(other)

    def __isub__(self, other: "Matrix") -> "Matrix":
        return self.subtract(other)

    def __imatmul__(self, other: "Matrix") -> "Matrix":
        return self.multiply(other)

    def isclose(self, other: "Matrix") -> bool:
        """Elementwise equality under the field's tolerance."""
        if self.dimension != other.dimension:
            return False
        equal = self.field.equal
        return all(
            equal(a, b)
            for row, other_row in zip(self.data, other.data)
            for a, b in zip(row, other_row)
        )

    def format(self, width: int = 20) -> str:
        fmt = self.field.format_entry
        return "".join(
            "".join(fmt(x, width) for x in row) + "\n"
            for row in self.data
        )

    def __str__(self) -> str:
        return self.format()

    def to_numpy(self):
        import numpy as np
        dtype = float if type(self.field) is RealField else object
        return np.array(self.data, dtype=dtype).reshape(self.shape)

    def to_sympy(self):
        import sympy as sp
        return sp.Matrix(self.nrows, self.ncols,
                         lambda i, j: self.data[i][j])

    def pprint(self):
        from sympy import pprint
        pprint(self.to_sympy())
