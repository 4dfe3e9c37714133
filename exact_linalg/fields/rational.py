################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exact rational numbers over arbitrary-precision integers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar
from typing import Union

from exact_linalg.errors import DivisionByZeroError
from exact_linalg.fields.real import Real


RationalLike = Union["Rational", int]


def _require_int(value: object, name: str) -> None:
    """Require a plain int, rejecting bool and float."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Rational {name} must be an int (got {type(value).__name__})"
        )


def _is_rational_like(x: object) -> bool:
    """Return True for values coerce accepts."""
    if isinstance(x, bool):
        return False
    return isinstance(x, (Rational, int))


@dataclass(frozen=True, eq=False)
class Rational:
    """
    Fraction p/q stored in lowest terms.

    The constructor moves the sign into the numerator and divides out
    gcd(|p|, q), so q > 0 and the pair is canonical. Comparing the reduced
    pairs is therefore exact equality of rationals.
    """

    p: int = 0
    q: int = 1

    zero: ClassVar[Rational]
    one: ClassVar[Rational]

    def __post_init__(self) -> None:
        """Normalize sign and reduce to lowest terms."""
        _require_int(self.p, "numerator")
        _require_int(self.q, "denominator")
        p: int = self.p
        q: int = self.q
        if q == 0:
            raise DivisionByZeroError("Denominator cannot be zero")
        if q < 0:
            p = -p
            q = -q
        g: int = math.gcd(p, q)
        object.__setattr__(self, "p", p // g)
        object.__setattr__(self, "q", q // g)

    @staticmethod
    def coerce(x: RationalLike) -> Rational:
        """Return ``x`` as a Rational, accepting plain integers."""
        if isinstance(x, Rational):
            return x
        if isinstance(x, bool) or not isinstance(x, int):
            raise TypeError(f"Cannot coerce {type(x).__name__} to Rational")
        return Rational(x, 1)

    @property
    def numerator(self) -> int:
        return self.p

    @property
    def denominator(self) -> int:
        return self.q

    def clone(self) -> Rational:
        return Rational(self.p, self.q)

    def add(self, other: RationalLike) -> Rational:
        o: Rational = Rational.coerce(other)
        return Rational(self.p * o.q + o.p * self.q, self.q * o.q)

    def sub(self, other: RationalLike) -> Rational:
        o: Rational = Rational.coerce(other)
        return Rational(self.p * o.q - o.p * self.q, self.q * o.q)

    def mul(self, other: RationalLike) -> Rational:
        o: Rational = Rational.coerce(other)
        return Rational(self.p * o.p, self.q * o.q)

    def neg(self) -> Rational:
        return Rational(-self.p, self.q)

    def inv(self) -> Rational:
        if self.p == 0:
            raise DivisionByZeroError("Cannot invert the rational number 0")
        return Rational(self.q, self.p)

    def div(self, other: RationalLike) -> Rational:
        return self.mul(Rational.coerce(other).inv())

    def equals(self, other: object) -> bool:
        """Exact comparison; values from other fields compare unequal."""
        if isinstance(other, Rational):
            return self.p == other.p and self.q == other.q
        if isinstance(other, int) and not isinstance(other, bool):
            return self.q == 1 and self.p == other
        return False

    def is_zero(self) -> bool:
        return self.p == 0

    def real_embedding(self) -> Real:
        # Integer true division rounds correctly even for huge p and q
        return Real(self.p / self.q)

    def pretty_print(self) -> str:
        if self.q == 1:
            return f"{self.p}"
        return f"{self.p}/{self.q}"

    def __add__(self, other: RationalLike) -> Rational:
        if not _is_rational_like(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: int) -> Rational:
        return Rational.coerce(other).add(self)

    def __sub__(self, other: RationalLike) -> Rational:
        if not _is_rational_like(other):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: int) -> Rational:
        return Rational.coerce(other).sub(self)

    def __mul__(self, other: RationalLike) -> Rational:
        if not _is_rational_like(other):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: int) -> Rational:
        return Rational.coerce(other).mul(self)

    def __truediv__(self, other: RationalLike) -> Rational:
        if not _is_rational_like(other):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: int) -> Rational:
        return Rational.coerce(other).div(self)

    def __neg__(self) -> Rational:
        return self.neg()

    def __eq__(self, other: object) -> bool:
        if not _is_rational_like(other):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # Integral values hash like the matching int
        if self.q == 1:
            return hash(self.p)
        return hash((self.p, self.q))

    def __str__(self) -> str:
        return self.pretty_print()


Rational.zero = Rational(0, 1)
Rational.one = Rational(1, 1)
