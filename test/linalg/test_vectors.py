################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for Vector3 and Vector4."""

from __future__ import annotations

import numpy as np
import pytest

from exact_linalg.errors import InvalidArgumentError
from exact_linalg.errors import InvalidIndexError
from exact_linalg.fields import Complex
from exact_linalg.fields import QuadraticField5
from exact_linalg.fields import Rational
from exact_linalg.fields import Real
from exact_linalg.linalg import Vector3
from exact_linalg.linalg import Vector4


def _vec3(x: int, y: int, z: int) -> Vector3[Rational]:
    return Vector3(Rational(x), Rational(y), Rational(z))


def test_basis_vectors() -> None:
    """basis(i) has a single one at index i."""
    e1: Vector3[Rational] = Vector3.basis(1, Rational)
    e3: Vector4[Rational] = Vector4.basis(3, Rational)

    assert e1.equals(_vec3(0, 1, 0))
    assert e3.equals(Vector4(Rational(0), Rational(0), Rational(0), Rational(1)))
    assert Vector3.zeros(QuadraticField5).equals(
        Vector3(QuadraticField5.zero, QuadraticField5.zero, QuadraticField5.zero)
    )


@pytest.mark.parametrize("index", [-1, 3, True, 1.0])
def test_basis_index_out_of_range_raises(index: object) -> None:
    """Only integer indices 0..2 are valid for Vector3."""
    with pytest.raises(InvalidIndexError):
        Vector3.basis(index, Rational)  # type: ignore[arg-type]


def test_vector4_basis_accepts_index_three() -> None:
    """Vector4 has four basis vectors."""
    with pytest.raises(InvalidIndexError):
        Vector4.basis(4, Rational)

    assert Vector4.basis(3, Rational).w.equals(Rational.one)


def test_component_accessors() -> None:
    """Named accessors read components; set writes them."""
    v: Vector4[Rational] = Vector4(Rational(1), Rational(2), Rational(3), Rational(4))

    assert (v.x, v.y, v.z, v.w) == (Rational(1), Rational(2), Rational(3), Rational(4))

    v.set(Rational(1), Rational(2), Rational(3), Rational(9))

    assert v[3] == Rational(9)
    assert len(v) == 4
    assert list(v) == [Rational(1), Rational(2), Rational(3), Rational(9)]


def test_component_accessors_are_read_only() -> None:
    """Components cannot be assigned through the named accessors."""
    v: Vector3[Rational] = _vec3(1, 2, 3)

    with pytest.raises(AttributeError):
        v.x = Rational(7)  # type: ignore[misc]

    assert v.equals(_vec3(1, 2, 3))

def test_set_mutates_in_place() -> None:
    """set replaces all components and returns the same instance."""
    v: Vector3[Rational] = _vec3(1, 2, 3)
    result: Vector3[Rational] = v.set(Rational(4), Rational(5), Rational(6))

    assert result is v
    assert v.equals(_vec3(4, 5, 6))

    with pytest.raises(InvalidArgumentError):
        v.set(Rational(1))


def test_arithmetic_does_not_mutate() -> None:
    """Vector arithmetic returns new vectors."""
    v: Vector3[Rational] = _vec3(1, 2, 3)
    w: Vector3[Rational] = _vec3(4, 5, 6)

    assert v.add(w).equals(_vec3(5, 7, 9))
    assert w.sub(v).equals(_vec3(3, 3, 3))
    assert v.neg().equals(_vec3(-1, -2, -3))
    assert v.scale(Rational(2)).equals(_vec3(2, 4, 6))
    assert (v + w - w) == v
    assert v.equals(_vec3(1, 2, 3))


def test_clone_is_independent() -> None:
    """A clone does not share component storage."""
    v: Vector3[Rational] = _vec3(1, 2, 3)
    copy: Vector3[Rational] = v.clone()
    copy.set(Rational(7), Rational(8), Rational(9))

    assert v.equals(_vec3(1, 2, 3))
    assert copy.equals(_vec3(7, 8, 9))


def test_dot_and_cross() -> None:
    """Coordinate dot and cross products."""
    e0: Vector3[Rational] = Vector3.basis(0, Rational)
    e1: Vector3[Rational] = Vector3.basis(1, Rational)
    v: Vector3[Rational] = _vec3(1, 2, 3)
    w: Vector3[Rational] = _vec3(4, 5, 6)

    assert e0.cross(e1).equals(Vector3.basis(2, Rational))
    assert v.cross(w).equals(_vec3(-3, 6, -3))
    assert v.dot_euclidean(w).equals(Rational(32))
    assert v.cross(w).dot_euclidean(v).is_zero()


def test_mismatched_dimensions() -> None:
    """Vectors of different sizes never mix."""
    v3: Vector3[Rational] = _vec3(1, 2, 3)
    v4: Vector4[Rational] = Vector4.basis(0, Rational)

    assert not v3.equals(v4)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        v3.add(v4)  # type: ignore[arg-type]


def test_equals_across_fields_is_false() -> None:
    """Vectors over different fields compare unequal without raising."""
    v: Vector3[Rational] = _vec3(1, 2, 3)
    embedded: Vector3[Real] = v.real_embedding()

    assert not v.equals(embedded)  # type: ignore[arg-type]
    assert not embedded.equals(v)  # type: ignore[arg-type]
    assert v != embedded
    assert not Vector4.basis(0, Rational).equals(
        Vector4.basis(0, QuadraticField5)  # type: ignore[arg-type]
    )


def test_unhashable() -> None:
    """Mutable vectors are not hashable."""
    with pytest.raises(TypeError):
        hash(_vec3(1, 2, 3))


def test_pretty_print() -> None:
    """Components print with their field's formatting."""
    v: Vector3[Rational] = Vector3(Rational(1), Rational(2, 3), Rational(0))
    q: Vector3[QuadraticField5] = Vector3(
        QuadraticField5.sqrt5, QuadraticField5.one, QuadraticField5.golden_ratio
    )

    assert v.pretty_print() == "(1, 2/3, 0)"
    assert str(q) == "(√5, 1, 1/2 + 1/2√5)"


def test_field_type() -> None:
    """The field is inferred from the components."""
    assert _vec3(1, 2, 3).field_type is Rational
    assert Vector3.basis(0, QuadraticField5).field_type is QuadraticField5


def test_real_embedding_and_numpy() -> None:
    """Real embedding and the numpy boundary agree."""
    q: Vector3[QuadraticField5] = Vector3(
        QuadraticField5.sqrt5, QuadraticField5.one, QuadraticField5.zero
    )
    embedded: Vector3[Real] = q.real_embedding()

    assert embedded.field_type is Real
    np.testing.assert_allclose(q.to_numpy(), [np.sqrt(5.0), 1.0, 0.0])
    np.testing.assert_allclose(embedded.to_numpy(), q.to_numpy())


def test_complex_vectors() -> None:
    """Vectors work over the complex field."""
    v: Vector3[Complex] = Vector3(Complex.one, Complex.i, Complex.zero)
    w: Vector3[Complex] = Vector3(Complex.zero, Complex.one, Complex.i)
    expected: Vector3[Complex] = Vector3(Complex(-1.0), Complex(0.0, -1.0), Complex.one)

    assert v.cross(w).equals(expected)
    assert v.dot_euclidean(v).equals(Complex.zero)
    assert v.field_type is Complex
