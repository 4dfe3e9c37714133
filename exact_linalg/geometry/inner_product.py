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
Geometry of a symmetric bilinear form on 3-space.

The form need not be positive definite: Lorentzian forms of signature
(2, 1) give hyperbolic geometry on the hyperboloid of vectors with
negative norm^2. Exact queries stay in the field of the Gram matrix;
angles, lengths and distances need square roots and inverse
trigonometric functions, so they are returned as Real values.
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Generic

import numpy as np
from numpy.typing import NDArray

from exact_linalg.config.linalg_params import get_params
from exact_linalg.errors import DivisionByZeroError
from exact_linalg.errors import InvalidArgumentError
from exact_linalg.errors import NotOnHyperboloidError
from exact_linalg.errors import SingularMatrixError
from exact_linalg.fields.field import F
from exact_linalg.fields.real import Real
from exact_linalg.linalg.matrix3 import Matrix3
from exact_linalg.linalg.vector3 import Vector3


_LOG: logging.Logger = logging.getLogger(__name__)

# Slack allowed on |cos| > 1 before clamping is reported
_CLAMP_REPORT_TOL: float = 1e-9


class InnerProduct(Generic[F]):
    """Symmetric bilinear form B(v, w) = v^T B w given by its Gram matrix."""

    def __init__(self, gram: Matrix3[F]) -> None:
        """Store the Gram matrix and infer the field from its entries."""
        if not isinstance(gram, Matrix3):
            raise InvalidArgumentError("Gram matrix must be a Matrix3")
        if not gram.transpose().equals(gram):
            raise InvalidArgumentError("Gram matrix must be symmetric")

        self._gram: Matrix3[F] = gram
        self._field_type: type[F] = gram.field_type

    @property
    def gram(self) -> Matrix3[F]:
        return self._gram

    @property
    def field_type(self) -> type[F]:
        return self._field_type

    ############################################################################
    # Exact queries
    ############################################################################

    def dot(self, v: Vector3[F], w: Vector3[F]) -> F:
        """Return v . (B w)."""
        return v.dot_euclidean(self._gram.vec_mul(w))

    def norm2(self, v: Vector3[F]) -> F:
        return self.dot(v, v)

    def is_isotropic(self, v: Vector3[F]) -> bool:
        """Return True when norm^2 is exactly zero."""
        return self.norm2(v).is_zero()

    def cross(self, v: Vector3[F], w: Vector3[F]) -> Vector3[F]:
        """Return the coordinate cross product of B v and B w."""
        return self._gram.vec_mul(v).cross(self._gram.vec_mul(w))

    def reflect_in(self, n: Vector3[F]) -> Matrix3[F]:
        """
        Return the reflection in the plane B-orthogonal to n.

        Column i is e_i - 2 B(e_i, n) / B(n, n) * n.
        """
        denom: F = self.norm2(n)
        if denom.is_zero():
            raise DivisionByZeroError("Cannot reflect in an isotropic vector")

        one: F = self._field_type.one
        two: F = one.add(one)

        columns: list[Vector3[F]] = []
        for i in range(3):
            e_i: Vector3[F] = Vector3.basis(i, self._field_type)
            coef: F = self.dot(e_i, n).mul(two).div(denom)
            columns.append(e_i.sub(n.scale(coef)))

        return Matrix3(*columns)

    def project_onto(self, v: Vector3[F]) -> Matrix3[F]:
        """
        Return the B-orthogonal projection onto the line spanned by v.

        P = v v^T B / B(v, v), so column j is B(v, e_j) / B(v, v) * v.
        """
        denom: F = self.norm2(v)
        if denom.is_zero():
            raise DivisionByZeroError("Cannot project onto an isotropic vector")

        columns: list[Vector3[F]] = []
        for j in range(3):
            e_j: Vector3[F] = Vector3.basis(j, self._field_type)
            columns.append(v.scale(self.dot(v, e_j).div(denom)))

        return Matrix3(*columns)

    ############################################################################
    # Real-valued queries
    ############################################################################

    def real_norm(self, v: Vector3[F]) -> Real:
        """Return sqrt(|B(v, v)|), defined for indefinite forms too."""
        n2: float = self.norm2(v).real_embedding().value
        return Real(float(np.sqrt(abs(n2))))

    def real_angle(self, v: Vector3[F], w: Vector3[F]) -> Real:
        """
        Return the angle between v and w in radians.

        Only meaningful for positive definite forms; no check is made.
        """
        denom: Real = self.real_norm(v).mul(self.real_norm(w))
        cos_angle: float = self.dot(v, w).real_embedding().div(denom).value
        return Real(float(np.arccos(_clamp(cos_angle, -1.0, 1.0, "cos"))))

    def real_distance(self, v: Vector3[F], w: Vector3[F]) -> Real:
        """
        Return the hyperbolic distance between the rays of v and w.

        Both vectors must have negative norm^2, i.e. lie inside the light
        cone of a form of signature (2, 1).
        """
        if not self._is_timelike(v) or not self._is_timelike(w):
            raise NotOnHyperboloidError(
                "At least one vector is not on the hyperboloid; "
                "the distance is undefined"
            )

        denom: Real = self.real_norm(v).mul(self.real_norm(w))
        cosh_dist: float = self.dot(v, w).real_embedding().neg().div(denom).value
        return Real(float(np.arccosh(_clamp(cosh_dist, 1.0, None, "cosh"))))

    def real_diagonalize(self) -> Matrix3[Real]:
        """
        Return a Real matrix C with C^T B C diagonal with entries +-1.

        Positive axes come first, so the result is diag(1, 1, 1) for a
        Euclidean form and diag(1, 1, -1) for signature (2, 1). The columns
        of C map coordinates in that model back to the original space.
        """
        axes: list[NDArray[np.float64]]
        norms: list[float]
        axes, norms = self._orthogonal_axes()

        ordered: list[NDArray[np.float64]] = [
            axis / np.sqrt(abs(n2))
            for positive in (True, False)
            for axis, n2 in zip(axes, norms)
            if (n2 > 0.0) == positive
        ]
        return Matrix3.from_numpy(np.column_stack(ordered))

    def signature(self) -> tuple[int, int]:
        """Return the number of positive and negative axes of the form."""
        norms: list[float]
        _, norms = self._orthogonal_axes()
        positive: int = sum(1 for n2 in norms if n2 > 0.0)
        return positive, len(norms) - positive

    def pretty_print(self) -> str:
        return self._gram.pretty_print()

    def __str__(self) -> str:
        return self.pretty_print()

    def __repr__(self) -> str:
        return f"InnerProduct({self._gram.pretty_print()!r})"

    def _is_timelike(self, v: Vector3[F]) -> bool:
        return self.norm2(v).real_embedding().value < 0.0

    def _orthogonal_axes(
        self,
    ) -> tuple[list[NDArray[np.float64]], list[float]]:
        """
        Gram-Schmidt over float64 with respect to the real Gram matrix.

        Each round takes the first candidate among e0, e1, e2, e0+e1,
        e0+e2, e1+e2 whose residual is not isotropic. For a nondegenerate
        form some candidate always qualifies, since otherwise the form
        would vanish on the remaining complement.
        """
        gram: NDArray[np.float64] = self._gram.to_numpy()
        eps: float = get_params().isotropy_eps

        eye: NDArray[np.float64] = np.eye(3, dtype=float)
        candidates: list[NDArray[np.float64]] = [
            eye[0],
            eye[1],
            eye[2],
            eye[0] + eye[1],
            eye[0] + eye[2],
            eye[1] + eye[2],
        ]

        axes: list[NDArray[np.float64]] = []
        norms: list[float] = []
        while len(axes) < 3:
            accepted: bool = False
            for index, candidate in enumerate(candidates):
                residual: NDArray[np.float64] = candidate.copy()
                for axis, n2 in zip(axes, norms):
                    residual = residual - (float(residual @ gram @ axis) / n2) * axis
                residual_n2: float = float(residual @ gram @ residual)
                if abs(residual_n2) <= eps:
                    continue
                _LOG.debug(
                    "Accepted candidate %d as axis %d (norm^2 %.6g)",
                    index,
                    len(axes),
                    residual_n2,
                )
                axes.append(residual)
                norms.append(residual_n2)
                accepted = True
                break
            if not accepted:
                raise SingularMatrixError(
                    "Gram matrix is degenerate and cannot be diagonalized"
                )

        return axes, norms


def _clamp(value: float, lower: float, upper: float | None, name: str) -> float:
    """Clamp rounding noise outside the domain of an inverse function."""
    clamped: float = float(np.clip(value, lower, upper))
    if abs(clamped - value) > _CLAMP_REPORT_TOL:
        _LOG.debug("Clamped %s from %.12g to %.12g", name, value, clamped)
    return clamped
