################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""3D vectors over an arbitrary field."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import ClassVar

from exact_linalg.fields.field import F
from exact_linalg.linalg.vector_base import VectorBase


if TYPE_CHECKING:
    from exact_linalg.linalg.matrix3 import Matrix3


class Vector3(VectorBase[F]):
    """Vector (x, y, z) over a field."""

    DIM: ClassVar[int] = 3

    __slots__ = ()

    def __init__(self, x: F, y: F, z: F) -> None:
        super().__init__(x, y, z)

    @property
    def x(self) -> F:
        return self._components[0]

    @property
    def y(self) -> F:
        return self._components[1]

    @property
    def z(self) -> F:
        return self._components[2]

    def apply_matrix3(self, matrix: Matrix3[F]) -> Vector3[F]:
        """Return M v as M[0]*x + M[1]*y + M[2]*z."""
        return self.apply_matrix(matrix)

    def cross(self, other: Vector3[F]) -> Vector3[F]:
        """Return the coordinate cross product over the field."""
        u: list[F] = self._components
        w: list[F] = list(other)
        return Vector3(
            u[1].mul(w[2]).sub(u[2].mul(w[1])),
            u[2].mul(w[0]).sub(u[0].mul(w[2])),
            u[0].mul(w[1]).sub(u[1].mul(w[0])),
        )
