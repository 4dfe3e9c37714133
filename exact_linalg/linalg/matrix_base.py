################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Square matrices over an arbitrary field, stored as column vectors.

``self[j]`` is column j and ``entry(i, j)`` reads ``self[j][i]``; the
storage is transposed relative to the row/column reading convention.
"""

from __future__ import annotations

import abc
import logging
import numbers
from typing import Any
from typing import Callable
from typing import ClassVar
from typing import Generic
from typing import Iterator
from typing import NoReturn
from typing import Optional
from typing import Sequence
from typing import TypeVar
from typing import Union

import numpy as np
from numpy.typing import NDArray

from exact_linalg.errors import DegenerateBasisError
from exact_linalg.errors import InvalidArgumentError
from exact_linalg.errors import InvalidIndexError
from exact_linalg.errors import SingularMatrixError
from exact_linalg.fields.field import F
from exact_linalg.fields.field import field_type_of
from exact_linalg.fields.real import Real
from exact_linalg.linalg.vector_base import VectorBase
from exact_linalg.linalg.vector_base import format_entry


_LOG: logging.Logger = logging.getLogger(__name__)


M = TypeVar("M", bound="MatrixBase[Any]")


class MatrixBase(abc.ABC, Generic[F]):
    """
    DIM x DIM matrix whose columns are ``VECTOR_TYPE`` instances.

    Arithmetic returns new matrices; ``set`` replaces the columns in place.
    """

    DIM: ClassVar[int]
    VECTOR_TYPE: ClassVar[type[VectorBase[Any]]]

    __slots__ = ("_columns",)

    def __init__(self, *columns: VectorBase[F]) -> None:
        self._columns: list[VectorBase[F]] = self._validate_columns(columns)

    @classmethod
    def _validate_columns(
        cls, columns: Sequence[VectorBase[F]]
    ) -> list[VectorBase[F]]:
        if len(columns) != cls.DIM:
            raise InvalidArgumentError(
                f"{cls.__name__} needs {cls.DIM} columns, got {len(columns)}"
            )
        for column in columns:
            if not isinstance(column, cls.VECTOR_TYPE):
                raise InvalidArgumentError(
                    f"All columns must be {cls.VECTOR_TYPE.__name__} instances"
                )
        return list(columns)

    ############################################################################
    # Factories
    ############################################################################

    @classmethod
    def from_columns(cls: type[M], columns: Sequence[Sequence[Any]]) -> M:
        """Build a matrix from column component lists."""
        return cls(*(cls.VECTOR_TYPE(*column) for column in columns))

    @classmethod
    def from_rows(cls: type[M], rows: Sequence[Sequence[Any]]) -> M:
        """Build a matrix whose entry(i, j) is rows[i][j]."""
        if len(rows) != cls.DIM or any(len(row) != cls.DIM for row in rows):
            raise InvalidArgumentError(f"rows must be {cls.DIM}x{cls.DIM}")
        return cls(
            *(
                cls.VECTOR_TYPE(*(rows[i][j] for i in range(cls.DIM)))
                for j in range(cls.DIM)
            )
        )

    @classmethod
    def diagonal(cls: type[M], *entries: Any) -> M:
        """Return the diagonal matrix with the given entries."""
        if len(entries) != cls.DIM:
            raise InvalidArgumentError(f"diagonal needs {cls.DIM} entries")
        field_type: type[Any] = field_type_of(entries[0])
        return cls(
            *(
                cls.VECTOR_TYPE(
                    *(entries[j] if i == j else field_type.zero for i in range(cls.DIM))
                )
                for j in range(cls.DIM)
            )
        )

    @classmethod
    def identity(cls: type[M], field_type: type[Any]) -> M:
        """Return the identity matrix over ``field_type``."""
        return cls(*(cls.VECTOR_TYPE.basis(j, field_type) for j in range(cls.DIM)))

    @classmethod
    def zero(cls: type[M], field_type: type[Any]) -> M:
        """Return the zero matrix over ``field_type``."""
        return cls(*(cls.VECTOR_TYPE.zeros(field_type) for _ in range(cls.DIM)))

    @classmethod
    def from_numpy(cls: type[M], array: NDArray[np.float64]) -> M:
        """Build a Real-valued matrix from a float array in row/column order."""
        mat: NDArray[np.float64] = np.asarray(array, dtype=float)
        if mat.shape != (cls.DIM, cls.DIM):
            raise InvalidArgumentError(f"array must have shape ({cls.DIM}, {cls.DIM})")
        if not np.all(np.isfinite(mat)):
            raise InvalidArgumentError("array must be finite")
        return cls.from_rows(
            [[Real(float(mat[i, j])) for j in range(cls.DIM)] for i in range(cls.DIM)]
        )

    ############################################################################
    # Access
    ############################################################################

    @property
    def field_type(self) -> type[F]:
        return field_type_of(self.entry(0, 0))

    @property
    def columns(self) -> tuple[VectorBase[F], ...]:
        return tuple(self._columns)

    def set(self: M, *columns: VectorBase[F]) -> M:
        """Replace the columns in place and return self."""
        self._columns = self._validate_columns(columns)
        return self

    def entry(self, i: int, j: int) -> F:
        """Return the entry at row i, column j."""
        if not (0 <= i < self.DIM and 0 <= j < self.DIM):
            raise InvalidIndexError(
                f"entry index must be in [0, {self.DIM - 1}] (got ({i}, {j}))"
            )
        return self._columns[j][i]

    ############################################################################
    # Arithmetic
    ############################################################################

    def clone(self: M) -> M:
        return type(self)(*(column.clone() for column in self._columns))

    def equals(self: M, other: M) -> bool:
        """Entrywise comparison; other kinds and fields compare unequal."""
        if type(other) is not type(self) or other.field_type is not self.field_type:
            return False
        return all(a.equals(b) for a, b in zip(self._columns, other._columns))

    def add(self: M, other: M) -> M:
        self._check_same_kind(other)
        return type(self)(*(a.add(b) for a, b in zip(self._columns, other._columns)))

    def sub(self: M, other: M) -> M:
        self._check_same_kind(other)
        return type(self)(*(a.sub(b) for a, b in zip(self._columns, other._columns)))

    def neg(self: M) -> M:
        return type(self)(*(column.neg() for column in self._columns))

    def scale(self: M, scalar: F) -> M:
        return type(self)(*(column.scale(scalar) for column in self._columns))

    def right_mul(self: M, other: M) -> M:
        """Return self * other by applying self to each column of other."""
        self._check_same_kind(other)
        return type(self)(*(column.apply_matrix(self) for column in other._columns))

    def left_mul(self: M, other: M) -> M:
        """Return other * self."""
        return other.right_mul(self)

    def vec_mul(self, vector: VectorBase[F]) -> VectorBase[F]:
        """Return the matrix-vector product self * vector."""
        if not isinstance(vector, self.VECTOR_TYPE):
            raise InvalidArgumentError(
                f"Expected a {self.VECTOR_TYPE.__name__}, got {type(vector).__name__}"
            )
        return vector.apply_matrix(self)

    def trace(self) -> F:
        total: F = self.entry(0, 0)
        for i in range(1, self.DIM):
            total = total.add(self.entry(i, i))
        return total

    def transpose(self: M) -> M:
        return type(self)(
            *(
                self.VECTOR_TYPE(*(self.entry(j, i) for i in range(self.DIM)))
                for j in range(self.DIM)
            )
        )

    @abc.abstractmethod
    def det(self) -> F:
        """Return the determinant using only ring operations."""

    @abc.abstractmethod
    def inverse(self: M) -> M:
        """Return the inverse, raising SingularMatrixError when det is zero."""

    def is_singular(self) -> bool:
        """Return True when the determinant is exactly zero."""
        return self.det().is_zero()

    def is_valid_basis(self) -> bool:
        """Return True when the columns are linearly independent."""
        return not self.is_singular()

    def pow(self: M, n: int) -> M:
        """
        Raise to an integer power by repeated squaring.

        Negative powers invert first, so they raise SingularMatrixError on a
        singular matrix.
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise InvalidArgumentError(f"Power must be an integer (got {n!r})")

        exponent: int = int(n)
        if exponent == 0:
            return type(self).identity(self.field_type)
        if exponent < 0:
            return self.inverse().pow(-exponent)

        result: M = type(self).identity(self.field_type)
        base: M = self.clone()
        while exponent > 0:
            if exponent & 1:
                result = result.right_mul(base)
            base = base.right_mul(base)
            exponent >>= 1

        return result

    def conj(self: M, other: M) -> M:
        """Return other * self * other^-1."""
        return other.right_mul(self).right_mul(other.inverse())

    ############################################################################
    # Change of basis
    ############################################################################

    @classmethod
    def change_of_basis_matrix(
        cls: type[M], from_or_new_basis: M, to_basis: Optional[M] = None
    ) -> M:
        """
        Return the coordinate transform between bases.

        With one argument the result maps standard coordinates to coordinates
        in ``from_or_new_basis`` (its inverse). With two it maps coordinates
        in ``from_or_new_basis`` to coordinates in ``to_basis``.
        """
        if to_basis is None:
            new_basis: M = from_or_new_basis
            if new_basis.is_singular():
                raise DegenerateBasisError(
                    "Basis vectors are not linearly independent (determinant is zero)"
                )
            return new_basis.inverse()

        from_basis: M = from_or_new_basis
        if from_basis.is_singular():
            raise DegenerateBasisError(
                "'from' basis vectors are not linearly independent"
            )
        if to_basis.is_singular():
            raise DegenerateBasisError(
                "'to' basis vectors are not linearly independent"
            )

        return to_basis.inverse().right_mul(from_basis)

    @classmethod
    def create_basis_transform(
        cls: type[M], from_or_new_basis: M, to_basis: Optional[M] = None
    ) -> Callable[[VectorBase[Any]], VectorBase[Any]]:
        """Return a function applying ``change_of_basis_matrix`` to vectors."""
        transform: M = cls.change_of_basis_matrix(from_or_new_basis, to_basis)

        def apply(vector: VectorBase[Any]) -> VectorBase[Any]:
            if not isinstance(vector, cls.VECTOR_TYPE):
                raise InvalidArgumentError(
                    f"Input must be a {cls.DIM}-dimensional vector"
                )
            return transform.vec_mul(vector)

        return apply

    ############################################################################
    # Real boundary
    ############################################################################

    def real_embedding(self: M) -> M:
        """Embed every entry into the Real field."""
        return type(self)(*(column.real_embedding() for column in self._columns))

    def to_numpy(self) -> NDArray[np.float64]:
        """Return the real embedding as a float64 array indexed [row, column]."""
        return np.column_stack([column.to_numpy() for column in self._columns])

    def pretty_print(self) -> str:
        """Return one line per row, e.g. ``[ 1 , 0 , 0 ]``."""
        rows: list[str] = []
        for i in range(self.DIM):
            entries: str = " , ".join(
                format_entry(self.entry(i, j)) for j in range(self.DIM)
            )
            rows.append(f"[ {entries} ]")
        return "\n".join(rows)

    def _check_same_kind(self, other: Any) -> None:
        if not isinstance(other, MatrixBase) or other.DIM != self.DIM:
            raise InvalidArgumentError(
                f"Expected a {type(self).__name__}, got {type(other).__name__}"
            )

    ############################################################################
    # Python protocol
    ############################################################################

    def __getitem__(self, j: int) -> VectorBase[F]:
        return self._columns[j]

    def __len__(self) -> int:
        return self.DIM

    def __iter__(self) -> Iterator[VectorBase[F]]:
        return iter(self._columns)

    def __add__(self: M, other: M) -> M:
        return self.add(other)

    def __sub__(self: M, other: M) -> M:
        return self.sub(other)

    def __neg__(self: M) -> M:
        return self.neg()

    def __matmul__(
        self, other: Union[MatrixBase[F], VectorBase[F]]
    ) -> Union[MatrixBase[F], VectorBase[F]]:
        if isinstance(other, VectorBase):
            return self.vec_mul(other)
        return self.right_mul(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.pretty_print()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pretty_print()!r})"


def raise_singular(matrix: MatrixBase[Any], det: Any) -> NoReturn:
    """Log and raise for a singular matrix."""
    _LOG.debug(
        "%s is singular (determinant %s)", type(matrix).__name__, format_entry(det)
    )
    raise SingularMatrixError(
        f"{type(matrix).__name__} is singular (determinant is zero) "
        "and cannot be inverted"
    )
