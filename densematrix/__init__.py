import logging as _logging

from .determinant import determinant
from .echelon import forward_eliminate, gauss, rank
from .field import ExactField, RealField
from .matrix import (
    Dimension,
    DimensionMismatch,
    FieldMismatch,
    Matrix,
    MatrixError,
    NotSquareError,
)

__all__ = [
    "Dimension",
    "DimensionMismatch",
    "ExactField",
    "FieldMismatch",
    "Matrix",
    "MatrixError",
    "NotSquareError",
    "RealField",
    "determinant",
    "forward_eliminate",
    "gauss",
    "rank",
]

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
