################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""4D vectors over an arbitrary field."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import ClassVar

from exact_linalg.fields.field import F
from exact_linalg.linalg.vector_base import VectorBase


if TYPE_CHECKING:
    from exact_linalg.linalg.matrix4 import Matrix4


class Vector4(VectorBase[F]):
    """Vector (x, y, z, w) over a field."""

    DIM: ClassVar[int] = 4

    __slots__ = ()

    def __init__(self, x: F, y: F, z: F, w: F) -> None:
        super().__init__(x, y, z, w)

    @property
    def x(self) -> F:
        return self._components[0]

    @property
    def y(self) -> F:
        return self._components[1]

    @property
    def z(self) -> F:
        return self._components[2]

    @property
    def w(self) -> F:
        return self._components[3]

    def apply_matrix4(self, matrix: Matrix4[F]) -> Vector4[F]:
        """Return M v as M[0]*x + M[1]*y + M[2]*z + M[3]*w."""
        return self.apply_matrix(matrix)
