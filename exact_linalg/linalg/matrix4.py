################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""4x4 matrices over an arbitrary field."""

from __future__ import annotations

import logging
from typing import Any
from typing import ClassVar

from exact_linalg.fields.field import F
from exact_linalg.linalg.matrix3 import det3x3
from exact_linalg.linalg.matrix_base import MatrixBase
from exact_linalg.linalg.matrix_base import raise_singular
from exact_linalg.linalg.vector4 import Vector4


_LOG: logging.Logger = logging.getLogger(__name__)


class Matrix4(MatrixBase[F]):
    """4x4 matrix stored as four column Vector4s."""

    DIM: ClassVar[int] = 4
    VECTOR_TYPE: ClassVar[type[Any]] = Vector4

    __slots__ = ()

    def __init__(
        self, c0: Vector4[F], c1: Vector4[F], c2: Vector4[F], c3: Vector4[F]
    ) -> None:
        super().__init__(c0, c1, c2, c3)

    def _minor(self, col: int) -> F:
        """Determinant after removing row 0 and the given column."""
        cols: list[int] = [j for j in range(4) if j != col]
        return det3x3(*(self.entry(i, j) for i in range(1, 4) for j in cols))

    def det(self) -> F:
        """Cofactor expansion along the first row."""
        return (
            self.entry(0, 0)
            .mul(self._minor(0))
            .sub(self.entry(0, 1).mul(self._minor(1)))
            .add(self.entry(0, 2).mul(self._minor(2)))
            .sub(self.entry(0, 3).mul(self._minor(3)))
        )

    def inverse(self) -> Matrix4[F]:
        """
        Invert by Gauss-Jordan elimination on [A | I].

        The pivot in each column is the first candidate that is exactly
        nonzero. Fields such as Q(sqrt(5)) carry no order, so magnitude-based
        pivoting is not available.
        """
        det: F = self.det()
        if det.is_zero():
            raise_singular(self, det)

        field_type: type[Any] = self.field_type
        n: int = self.DIM

        aug: list[list[Any]] = [
            [self.entry(i, j) for j in range(n)]
            + [field_type.one if i == j else field_type.zero for j in range(n)]
            for i in range(n)
        ]

        for col in range(n):
            pivot: int = -1
            for k in range(col, n):
                if not aug[k][col].is_zero():
                    pivot = k
                    break
            if pivot < 0:
                raise_singular(self, det)

            if pivot != col:
                _LOG.debug("Swapping rows %d and %d during elimination", col, pivot)
                aug[col], aug[pivot] = aug[pivot], aug[col]

            pivot_inv: Any = aug[col][col].inv()
            aug[col] = [value.mul(pivot_inv) for value in aug[col]]

            for k in range(n):
                if k == col:
                    continue
                factor: Any = aug[k][col]
                if factor.is_zero():
                    continue
                aug[k] = [
                    value.sub(factor.mul(pivot_value))
                    for value, pivot_value in zip(aug[k], aug[col])
                ]

        return Matrix4(
            *(Vector4(*(aug[i][j + n] for i in range(n))) for j in range(n))
        )
