################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Floating-point field, the target of every real embedding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar
from typing import Union

from exact_linalg.config.linalg_params import get_params
from exact_linalg.errors import DivisionByZeroError


RealLike = Union["Real", float, int]


def _is_real_like(x: object) -> bool:
    """Return True for values coerce accepts."""
    if isinstance(x, bool):
        return False
    return isinstance(x, (Real, float, int))


@dataclass(frozen=True, eq=False)
class Real:
    """
    Field element wrapping a float.

    Equality is tolerance-based, so Real values are not hashable. Use
    ``is_zero`` for an exact zero test.
    """

    value: float

    zero: ClassVar[Real]
    one: ClassVar[Real]

    def __post_init__(self) -> None:
        """Coerce the stored value to a float."""
        object.__setattr__(self, "value", float(self.value))

    @staticmethod
    def coerce(x: RealLike) -> Real:
        """Return ``x`` as a Real."""
        if isinstance(x, Real):
            return x
        return Real(float(x))

    def clone(self) -> Real:
        return Real(self.value)

    def add(self, other: RealLike) -> Real:
        return Real(self.value + Real.coerce(other).value)

    def sub(self, other: RealLike) -> Real:
        return Real(self.value - Real.coerce(other).value)

    def mul(self, other: RealLike) -> Real:
        return Real(self.value * Real.coerce(other).value)

    def neg(self) -> Real:
        return Real(-self.value)

    def inv(self) -> Real:
        if self.value == 0.0:
            raise DivisionByZeroError("Cannot invert the real number 0")
        return Real(1.0 / self.value)

    def div(self, other: RealLike) -> Real:
        divisor: Real = Real.coerce(other)
        if divisor.value == 0.0:
            raise DivisionByZeroError("Division of a real number by 0")
        return Real(self.value / divisor.value)

    def equals(self, other: object) -> bool:
        """Compare within the configured absolute tolerance."""
        if not _is_real_like(other):
            return False
        diff: float = self.value - Real.coerce(other).value  # type: ignore[arg-type]
        return abs(diff) < get_params().real_eq_eps

    def is_zero(self) -> bool:
        return self.value == 0.0

    def real_embedding(self) -> Real:
        """Return self; the embedding is idempotent on Real."""
        return self

    def pretty_print(self) -> str:
        decimals: int = get_params().real_print_decimals
        return f"{self.value:.{decimals}f}"

    def __float__(self) -> float:
        return self.value

    def __add__(self, other: RealLike) -> Real:
        return self.add(other)

    def __radd__(self, other: RealLike) -> Real:
        return Real.coerce(other).add(self)

    def __sub__(self, other: RealLike) -> Real:
        return self.sub(other)

    def __rsub__(self, other: RealLike) -> Real:
        return Real.coerce(other).sub(self)

    def __mul__(self, other: RealLike) -> Real:
        return self.mul(other)

    def __rmul__(self, other: RealLike) -> Real:
        return Real.coerce(other).mul(self)

    def __truediv__(self, other: RealLike) -> Real:
        return self.div(other)

    def __rtruediv__(self, other: RealLike) -> Real:
        return Real.coerce(other).div(self)

    def __neg__(self) -> Real:
        return self.neg()

    def __eq__(self, other: object) -> bool:
        if not _is_real_like(other):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        return self.pretty_print()


Real.zero = Real(0.0)
Real.one = Real(1.0)
