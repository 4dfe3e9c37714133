################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for Matrix3."""

from __future__ import annotations

import logging
from typing import Callable
from typing import Sequence

import numpy as np
import pytest

from exact_linalg.errors import DegenerateBasisError
from exact_linalg.errors import InvalidArgumentError
from exact_linalg.errors import InvalidIndexError
from exact_linalg.errors import SingularMatrixError
from exact_linalg.fields import QuadraticField5
from exact_linalg.fields import Rational
from exact_linalg.fields import Real
from exact_linalg.linalg import Matrix3
from exact_linalg.linalg import Vector3
from exact_linalg.linalg import Vector4
from exact_linalg.linalg.matrix_base import MatrixBase


def _rows(rows: Sequence[Sequence[int]]) -> Matrix3[Rational]:
    return Matrix3.from_rows([[Rational(x) for x in row] for row in rows])


def _vec3(x: int, y: int, z: int) -> Vector3[Rational]:
    return Vector3(Rational(x), Rational(y), Rational(z))


A: Matrix3[Rational] = _rows([[1, 4, 7], [2, 5, 8], [3, 6, 10]])
SINGULAR: Matrix3[Rational] = _rows([[1, 2, 0], [2, 4, 0], [3, 6, 1]])
IDENTITY: Matrix3[Rational] = Matrix3.identity(Rational)


def test_entry_reads_row_then_column() -> None:
    """entry(i, j) is the i-th component of column j."""
    m: Matrix3[Rational] = Matrix3(_vec3(1, 2, 3), _vec3(4, 5, 6), _vec3(7, 8, 9))

    assert m.entry(0, 1) == Rational(4)
    assert m.entry(1, 0) == Rational(2)
    assert m.entry(2, 0) == Rational(3)
    assert m.entry(0, 2) == Rational(7)
    assert m[1].equals(_vec3(4, 5, 6))


def test_entry_out_of_range_raises() -> None:
    """Indices outside 0..2 are rejected."""
    with pytest.raises(InvalidIndexError):
        A.entry(3, 0)

    with pytest.raises(InvalidIndexError):
        A.entry(0, -1)


def test_from_rows_matches_from_columns() -> None:
    """Row and column factories are transposes of each other."""
    values: list[list[Rational]] = [
        [Rational(1), Rational(2), Rational(3)],
        [Rational(4), Rational(5), Rational(6)],
        [Rational(7), Rational(8), Rational(9)],
    ]

    assert Matrix3.from_rows(values).equals(Matrix3.from_columns(values).transpose())


def test_columns_must_be_vector3() -> None:
    """Columns of the wrong kind are rejected."""
    v4: Vector4[Rational] = Vector4.basis(0, Rational)

    with pytest.raises(InvalidArgumentError):
        Matrix3(v4, v4, v4)  # type: ignore[arg-type]


def test_det() -> None:
    """Determinant by cofactor expansion."""
    assert A.det().equals(Rational(-3))
    assert IDENTITY.det().equals(Rational.one)
    assert SINGULAR.det().is_zero()


def test_inverse_is_two_sided() -> None:
    """M * M^-1 = M^-1 * M = I."""
    inverse: Matrix3[Rational] = A.inverse()

    assert A.right_mul(inverse).equals(IDENTITY)
    assert A.left_mul(inverse).equals(IDENTITY)


def test_inverse_over_quadratic_field() -> None:
    """Inversion is exact over Q(sqrt(5))."""
    phi: QuadraticField5 = QuadraticField5.golden_ratio
    one: QuadraticField5 = QuadraticField5.one
    zero: QuadraticField5 = QuadraticField5.zero
    m: Matrix3[QuadraticField5] = Matrix3.from_rows(
        [[phi, one, zero], [one, zero, phi], [zero, phi, one]]
    )

    assert m.right_mul(m.inverse()).equals(Matrix3.identity(QuadraticField5))


def test_singular_inverse_raises(caplog: pytest.LogCaptureFixture) -> None:
    """A zero determinant cannot be inverted."""
    caplog.set_level(logging.DEBUG, logger="exact_linalg")

    with pytest.raises(SingularMatrixError):
        SINGULAR.inverse()

    assert SINGULAR.is_singular()
    assert "singular" in caplog.text


def test_singularity_check_is_exact_on_reals() -> None:
    """Tiny nonzero Real determinants still invert."""
    tiny: Matrix3[Real] = Matrix3.diagonal(Real(1e-20), Real(1.0), Real(1.0))

    assert not tiny.is_singular()
    assert tiny.inverse().entry(0, 0).value == pytest.approx(1e20)


def test_equals_across_fields_is_false() -> None:
    """Matrices over different fields compare unequal without raising."""
    embedded: Matrix3[Real] = A.real_embedding()

    assert not A.equals(embedded)  # type: ignore[arg-type]
    assert not embedded.equals(A)  # type: ignore[arg-type]
    assert IDENTITY != Matrix3.identity(Real)
    assert not IDENTITY.equals(
        Matrix3.identity(QuadraticField5)  # type: ignore[arg-type]
    )


def test_matrix_base_is_abstract() -> None:
    """Only the sized subclasses can be instantiated."""
    with pytest.raises(TypeError):
        MatrixBase(_vec3(1, 0, 0))  # type: ignore[abstract]


def test_transpose_is_an_involution() -> None:
    """Transposing twice gives the original."""
    assert A.transpose().transpose().equals(A)
    assert not A.transpose().equals(A)


def test_pow() -> None:
    """Integer powers by repeated squaring."""
    assert A.pow(0).equals(IDENTITY)
    assert A.pow(1).equals(A)
    assert A.pow(-1).equals(A.inverse())
    assert A.pow(3).equals(A.right_mul(A).right_mul(A))
    assert A.pow(-2).equals(A.inverse().right_mul(A.inverse()))


@pytest.mark.parametrize("exponent", [1.5, True, "2"])
def test_pow_rejects_non_integers(exponent: object) -> None:
    """Only integer exponents are accepted."""
    with pytest.raises(InvalidArgumentError):
        A.pow(exponent)  # type: ignore[arg-type]


def test_pow_negative_of_singular_raises() -> None:
    """Negative powers need an inverse."""
    with pytest.raises(SingularMatrixError):
        SINGULAR.pow(-1)


def test_trace_and_arithmetic() -> None:
    """Trace, addition and scaling."""
    assert A.trace().equals(Rational(16))
    assert A.add(A).equals(A.scale(Rational(2)))
    assert A.sub(A).equals(Matrix3.zero(Rational))
    assert A.neg().add(A).equals(Matrix3.zero(Rational))


def test_vec_mul() -> None:
    """M e_j is column j."""
    for j in range(3):
        assert A.vec_mul(Vector3.basis(j, Rational)).equals(A[j])
    assert (A @ _vec3(1, 1, 1)).equals(_vec3(12, 15, 19))

    with pytest.raises(InvalidArgumentError):
        A.vec_mul(Vector4.basis(0, Rational))  # type: ignore[arg-type]


def test_conj() -> None:
    """conj(P) is P M P^-1."""
    p: Matrix3[Rational] = _rows([[1, 1, 0], [0, 1, 0], [0, 0, 2]])
    expected: Matrix3[Rational] = p.right_mul(A).right_mul(p.inverse())

    assert A.conj(p).equals(expected)
    assert A.conj(p).det().equals(A.det())


def test_change_of_basis() -> None:
    """Coordinates in a basis map back through the basis matrix."""
    basis: Matrix3[Rational] = _rows([[1, 1, 0], [0, 1, 1], [1, 0, 1]])
    to_coords: Callable[..., Vector3[Rational]] = Matrix3.create_basis_transform(
        basis
    )

    assert Matrix3.change_of_basis_matrix(basis).equals(basis.inverse())
    assert basis.is_valid_basis()
    for j in range(3):
        assert to_coords(basis[j]).equals(Vector3.basis(j, Rational))


def test_change_between_two_bases() -> None:
    """to * T = from for the transform between two bases."""
    from_basis: Matrix3[Rational] = _rows([[1, 1, 0], [0, 1, 1], [1, 0, 1]])
    to_basis: Matrix3[Rational] = _rows([[2, 0, 0], [0, 1, 0], [1, 0, 1]])
    transform: Matrix3[Rational] = Matrix3.change_of_basis_matrix(
        from_basis, to_basis
    )

    assert to_basis.right_mul(transform).equals(from_basis)


def test_degenerate_basis_raises() -> None:
    """Dependent columns do not form a basis."""
    assert not SINGULAR.is_valid_basis()

    with pytest.raises(DegenerateBasisError):
        Matrix3.change_of_basis_matrix(SINGULAR)

    with pytest.raises(DegenerateBasisError):
        Matrix3.change_of_basis_matrix(A, SINGULAR)


def test_basis_transform_rejects_wrong_vector() -> None:
    """The returned transform only accepts Vector3 inputs."""
    transform: Callable[..., Vector3[Rational]] = Matrix3.create_basis_transform(A)

    with pytest.raises(InvalidArgumentError):
        transform(Vector4.basis(0, Rational))


def test_numpy_boundary() -> None:
    """from_numpy and to_numpy use row/column indexing."""
    array: np.ndarray = np.array([[1.0, 2.0, 3.0], [0.0, 1.0, 4.0], [5.0, 6.0, 0.0]])
    m: Matrix3[Real] = Matrix3.from_numpy(array)

    assert m.entry(0, 1) == Real(2.0)
    assert m.det().equals(Real(1.0))
    np.testing.assert_allclose(m.to_numpy(), array)
    np.testing.assert_allclose(A.to_numpy(), [[1, 4, 7], [2, 5, 8], [3, 6, 10]])
    np.testing.assert_allclose(m.inverse().to_numpy(), np.linalg.inv(array))


def test_from_numpy_rejects_bad_arrays() -> None:
    """Shape and finiteness are checked."""
    with pytest.raises(InvalidArgumentError):
        Matrix3.from_numpy(np.eye(4))

    with pytest.raises(InvalidArgumentError):
        Matrix3.from_numpy(np.full((3, 3), np.nan))


def test_pretty_print() -> None:
    """One bracketed line per row."""
    assert IDENTITY.pretty_print() == "[ 1 , 0 , 0 ]\n[ 0 , 1 , 0 ]\n[ 0 , 0 , 1 ]"


def test_real_embedding() -> None:
    """Embedding a Q(sqrt(5)) matrix preserves its values."""
    m: Matrix3[QuadraticField5] = Matrix3.diagonal(
        QuadraticField5.sqrt5, QuadraticField5.one, QuadraticField5.golden_ratio
    )
    embedded: Matrix3[Real] = m.real_embedding()

    assert embedded.field_type is Real
    np.testing.assert_allclose(
        embedded.to_numpy(), np.diag([np.sqrt(5.0), 1.0, (1.0 + np.sqrt(5.0)) / 2.0])
    )
