################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-dimension vectors over an arbitrary field."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar
from typing import Generic
from typing import Iterator
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from exact_linalg.errors import InvalidArgumentError
from exact_linalg.errors import InvalidIndexError
from exact_linalg.fields.field import F
from exact_linalg.fields.field import field_type_of


if TYPE_CHECKING:
    from exact_linalg.linalg.matrix_base import MatrixBase


V = TypeVar("V", bound="VectorBase[Any]")


class VectorBase(Generic[F]):
    """
    Vector of ``DIM`` field elements of a single field type.

    All arithmetic returns a new vector. ``set`` is the only mutator and
    exists for callers that need a stable instance across reassignment.
    """

    DIM: ClassVar[int]

    __slots__ = ("_components",)

    def __init__(self, *components: F) -> None:
        if len(components) != self.DIM:
            raise InvalidArgumentError(
                f"{type(self).__name__} needs {self.DIM} components, "
                f"got {len(components)}"
            )
        self._components: list[F] = list(components)

    @classmethod
    def basis(cls: type[V], i: int, field_type: type[Any]) -> V:
        """Return the i-th standard basis vector over ``field_type``."""
        if isinstance(i, bool) or not isinstance(i, int) or not 0 <= i < cls.DIM:
            raise InvalidIndexError(
                f"basis index must be in [0, {cls.DIM - 1}] (got {i})"
            )
        return cls(
            *(field_type.one if k == i else field_type.zero for k in range(cls.DIM))
        )

    @classmethod
    def zeros(cls: type[V], field_type: type[Any]) -> V:
        """Return the zero vector over ``field_type``."""
        return cls(*(field_type.zero for _ in range(cls.DIM)))

    @property
    def field_type(self) -> type[F]:
        return field_type_of(self._components[0])

    def set(self: V, *components: F) -> V:
        """Replace the components in place and return self."""
        if len(components) != self.DIM:
            raise InvalidArgumentError(
                f"{type(self).__name__} needs {self.DIM} components, "
                f"got {len(components)}"
            )
        self._components[:] = components
        return self

    def clone(self: V) -> V:
        return type(self)(*self._components)

    def equals(self: V, other: V) -> bool:
        """Componentwise comparison; other kinds and fields compare unequal."""
        if type(other) is not type(self) or other.field_type is not self.field_type:
            return False
        return all(a.equals(b) for a, b in zip(self._components, other._components))

    def add(self: V, other: V) -> V:
        self._check_same_kind(other)
        return type(self)(
            *(a.add(b) for a, b in zip(self._components, other._components))
        )

    def sub(self: V, other: V) -> V:
        self._check_same_kind(other)
        return type(self)(
            *(a.sub(b) for a, b in zip(self._components, other._components))
        )

    def neg(self: V) -> V:
        return type(self)(*(a.neg() for a in self._components))

    def scale(self: V, scalar: F) -> V:
        """Multiply every component by a scalar of the same field."""
        return type(self)(*(a.mul(scalar) for a in self._components))

    def dot_euclidean(self: V, other: V) -> F:
        """Return the coordinate dot product sum(v[i] * w[i])."""
        self._check_same_kind(other)
        products: list[F] = [
            a.mul(b) for a, b in zip(self._components, other._components)
        ]
        total: F = products[0]
        for term in products[1:]:
            total = total.add(term)
        return total

    def apply_matrix(self: V, matrix: MatrixBase[F]) -> V:
        """
        Return sum(matrix[i] * self[i]).

        The vector is the coefficient list against the matrix columns, so
        this is the matrix-vector product M v.
        """
        if matrix.DIM != self.DIM:
            raise InvalidArgumentError(
                f"Cannot apply a {matrix.DIM}x{matrix.DIM} matrix "
                f"to {type(self).__name__}"
            )
        result: V = matrix[0].scale(self._components[0])
        for i in range(1, self.DIM):
            result = result.add(matrix[i].scale(self._components[i]))
        return result

    def real_embedding(self: V) -> V:
        """Embed every component into the Real field."""
        return type(self)(*(a.real_embedding() for a in self._components))

    def to_numpy(self) -> NDArray[np.float64]:
        """Return the real embedding as a float64 array."""
        return np.array(
            [a.real_embedding().value for a in self._components], dtype=float
        )

    def pretty_print(self) -> str:
        return "(" + ", ".join(format_entry(a) for a in self._components) + ")"

    def _check_same_kind(self, other: Any) -> None:
        if not isinstance(other, VectorBase) or other.DIM != self.DIM:
            raise InvalidArgumentError(
                f"Expected a {type(self).__name__}, got {type(other).__name__}"
            )

    def __getitem__(self, index: int) -> F:
        return self._components[index]

    def __len__(self) -> int:
        return self.DIM

    def __iter__(self) -> Iterator[F]:
        return iter(self._components)

    def __add__(self: V, other: V) -> V:
        return self.add(other)

    def __sub__(self: V, other: V) -> V:
        return self.sub(other)

    def __neg__(self: V) -> V:
        return self.neg()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorBase):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.pretty_print()

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.pretty_print()}"


def format_entry(value: Any) -> str:
    """Format a component with pretty_print when available."""
    if value is not None and callable(getattr(value, "pretty_print", None)):
        return str(value.pretty_print())
    return str(value)

