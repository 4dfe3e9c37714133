################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""3x3 matrices over an arbitrary field."""

from __future__ import annotations

from typing import Any
from typing import ClassVar

from exact_linalg.fields.field import F
from exact_linalg.linalg.matrix_base import MatrixBase
from exact_linalg.linalg.matrix_base import raise_singular
from exact_linalg.linalg.vector3 import Vector3


def det3x3(a: F, b: F, c: F, d: F, e: F, f: F, g: F, h: F, i: F) -> F:
    """
    Determinant of the row-major matrix

        | a b c |
        | d e f |
        | g h i |

    by expansion along the first row, using only ring operations.
    """
    return (
        a.mul(e.mul(i).sub(f.mul(h)))
        .sub(b.mul(d.mul(i).sub(f.mul(g))))
        .add(c.mul(d.mul(h).sub(e.mul(g))))
    )


class Matrix3(MatrixBase[F]):
    """3x3 matrix stored as three column Vector3s."""

    DIM: ClassVar[int] = 3
    VECTOR_TYPE: ClassVar[type[Any]] = Vector3

    __slots__ = ()

    def __init__(self, c0: Vector3[F], c1: Vector3[F], c2: Vector3[F]) -> None:
        super().__init__(c0, c1, c2)

    def det(self) -> F:
        return det3x3(
            self.entry(0, 0), self.entry(0, 1), self.entry(0, 2),
            self.entry(1, 0), self.entry(1, 1), self.entry(1, 2),
            self.entry(2, 0), self.entry(2, 1), self.entry(2, 2),
        )  # fmt: skip

    def inverse(self) -> Matrix3[F]:
        """Return the adjugate divided by the determinant."""
        a, b, c = self.entry(0, 0), self.entry(0, 1), self.entry(0, 2)
        d, e, f = self.entry(1, 0), self.entry(1, 1), self.entry(1, 2)
        g, h, i = self.entry(2, 0), self.entry(2, 1), self.entry(2, 2)

        det: F = self.det()
        if det.is_zero():
            raise_singular(self, det)
        det_inv: F = det.inv()

        # Columns of the adjugate, the transposed cofactor matrix
        return Matrix3(
            Vector3(
                e.mul(i).sub(f.mul(h)),
                f.mul(g).sub(d.mul(i)),
                d.mul(h).sub(e.mul(g)),
            ).scale(det_inv),
            Vector3(
                c.mul(h).sub(b.mul(i)),
                a.mul(i).sub(c.mul(g)),
                b.mul(g).sub(a.mul(h)),
            ).scale(det_inv),
            Vector3(
                b.mul(f).sub(c.mul(e)),
                c.mul(d).sub(a.mul(f)),
                a.mul(e).sub(b.mul(d)),
            ).scale(det_inv),
        )
