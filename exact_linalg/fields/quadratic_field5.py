################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Quadratic field Q(sqrt(5))."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar
from typing import Union

from exact_linalg.config.linalg_params import get_params
from exact_linalg.errors import DivisionByZeroError
from exact_linalg.fields.rational import Rational
from exact_linalg.fields.rational import RationalLike
from exact_linalg.fields.real import Real


QuadraticLike = Union["QuadraticField5", Rational, int]

# sqrt(5) in double precision
_SQRT5: float = math.sqrt(5.0)

_FIVE: Rational = Rational(5)
_TWO: Rational = Rational(2)


def _is_quadratic_like(x: object) -> bool:
    """Return True for values coerce accepts."""
    if isinstance(x, bool):
        return False
    return isinstance(x, (QuadraticField5, Rational, int))


@dataclass(frozen=True, eq=False)
class QuadraticField5:
    """
    Element c0 + c1*sqrt(5) of Q(sqrt(5)).

    Coefficients are Rationals, so equality is exact.
    """

    c0: Rational = Rational(0)
    c1: Rational = Rational(0)

    zero: ClassVar[QuadraticField5]
    one: ClassVar[QuadraticField5]
    sqrt5: ClassVar[QuadraticField5]
    golden_ratio: ClassVar[QuadraticField5]
    golden_ratio_conjugate: ClassVar[QuadraticField5]

    def __post_init__(self) -> None:
        """Coerce both coefficients to Rationals."""
        object.__setattr__(self, "c0", Rational.coerce(self.c0))
        object.__setattr__(self, "c1", Rational.coerce(self.c1))

    @staticmethod
    def coerce(x: QuadraticLike) -> QuadraticField5:
        """Return ``x`` as an element of Q(sqrt(5))."""
        if isinstance(x, QuadraticField5):
            return x
        return QuadraticField5(Rational.coerce(x), Rational.zero)

    @staticmethod
    def from_rational(r: Rational) -> QuadraticField5:
        return QuadraticField5(r, Rational.zero)

    @staticmethod
    def from_integer(n: int) -> QuadraticField5:
        return QuadraticField5(Rational(n), Rational.zero)

    def clone(self) -> QuadraticField5:
        return QuadraticField5(self.c0.clone(), self.c1.clone())

    def add(self, other: QuadraticLike) -> QuadraticField5:
        o: QuadraticField5 = QuadraticField5.coerce(other)
        return QuadraticField5(self.c0.add(o.c0), self.c1.add(o.c1))

    def sub(self, other: QuadraticLike) -> QuadraticField5:
        o: QuadraticField5 = QuadraticField5.coerce(other)
        return QuadraticField5(self.c0.sub(o.c0), self.c1.sub(o.c1))

    def neg(self) -> QuadraticField5:
        return QuadraticField5(self.c0.neg(), self.c1.neg())

    def scale(self, r: RationalLike) -> QuadraticField5:
        """Multiply both coefficients by a Rational."""
        return QuadraticField5(self.c0.mul(r), self.c1.mul(r))

    def mul(self, other: QuadraticLike) -> QuadraticField5:
        # (a + b*sqrt5)(c + d*sqrt5) = (ac + 5bd) + (ad + bc)*sqrt5
        o: QuadraticField5 = QuadraticField5.coerce(other)
        a: Rational = self.c0
        b: Rational = self.c1
        c: Rational = o.c0
        d: Rational = o.c1
        return QuadraticField5(
            a.mul(c).add(_FIVE.mul(b).mul(d)),
            a.mul(d).add(b.mul(c)),
        )

    def norm(self) -> Rational:
        """Return the field norm c0^2 - 5*c1^2."""
        return self.c0.mul(self.c0).sub(_FIVE.mul(self.c1).mul(self.c1))

    def conjugate(self) -> QuadraticField5:
        """Return the Galois conjugate c0 - c1*sqrt(5)."""
        return QuadraticField5(self.c0, self.c1.neg())

    def trace(self) -> Rational:
        """Return the field trace 2*c0."""
        return _TWO.mul(self.c0)

    def inv(self) -> QuadraticField5:
        n: Rational = self.norm()
        # sqrt(5) is irrational, so the norm vanishes only at zero
        if n.is_zero():
            raise DivisionByZeroError("Cannot invert zero in Q(sqrt(5))")
        return QuadraticField5(self.c0.div(n), self.c1.neg().div(n))

    def div(self, other: QuadraticLike) -> QuadraticField5:
        return self.mul(QuadraticField5.coerce(other).inv())

    def equals(self, other: object) -> bool:
        """Exact comparison; values from other fields compare unequal."""
        if not _is_quadratic_like(other):
            return False
        o: QuadraticField5 = QuadraticField5.coerce(other)  # type: ignore[arg-type]
        return self.c0.equals(o.c0) and self.c1.equals(o.c1)

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero()

    def real_embedding(self) -> Real:
        c0: float = self.c0.real_embedding().value
        c1: float = self.c1.real_embedding().value
        return Real(c0 + c1 * _SQRT5)

    def real_embedding_high_precision(self) -> Real:
        """
        Embed with sqrt(5) carried to ``sqrt5_digits`` decimal digits.

        The sum c0 + c1*sqrt(5) is formed as a single exact fraction of
        integers, so the only rounding is the final conversion to float.
        """
        digits: int = get_params().sqrt5_digits
        scale: int = 10**digits
        sqrt5_scaled: int = math.isqrt(5 * scale * scale)

        # c0 + c1*s/S = (p0*q1*S + p1*q0*s) / (q0*q1*S)
        numerator: int = (
            self.c0.p * self.c1.q * scale + self.c1.p * self.c0.q * sqrt5_scaled
        )
        denominator: int = self.c0.q * self.c1.q * scale
        return Real(numerator / denominator)

    def pretty_print(self) -> str:
        c0_str: str = self.c0.pretty_print()

        if self.c1.is_zero():
            return c0_str

        if self.c0.is_zero():
            if self.c1.equals(Rational.one):
                return "√5"
            if self.c1.equals(Rational.one.neg()):
                return "-√5"
            return f"{self.c1.pretty_print()}√5"

        if self.c1.equals(Rational.one):
            return f"{c0_str} + √5"
        if self.c1.equals(Rational.one.neg()):
            return f"{c0_str} - √5"
        if self.c1.p > 0:
            return f"{c0_str} + {self.c1.pretty_print()}√5"
        return f"{c0_str} - {self.c1.neg().pretty_print()}√5"

    def __add__(self, other: QuadraticLike) -> QuadraticField5:
        return self.add(other)

    def __radd__(self, other: QuadraticLike) -> QuadraticField5:
        return QuadraticField5.coerce(other).add(self)

    def __sub__(self, other: QuadraticLike) -> QuadraticField5:
        return self.sub(other)

    def __rsub__(self, other: QuadraticLike) -> QuadraticField5:
        return QuadraticField5.coerce(other).sub(self)

    def __mul__(self, other: QuadraticLike) -> QuadraticField5:
        return self.mul(other)

    def __rmul__(self, other: QuadraticLike) -> QuadraticField5:
        return QuadraticField5.coerce(other).mul(self)

    def __truediv__(self, other: QuadraticLike) -> QuadraticField5:
        return self.div(other)

    def __rtruediv__(self, other: QuadraticLike) -> QuadraticField5:
        return QuadraticField5.coerce(other).div(self)

    def __neg__(self) -> QuadraticField5:
        return self.neg()

    def __eq__(self, other: object) -> bool:
        if not _is_quadratic_like(other):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # Rational values hash like the matching Rational
        if self.c1.is_zero():
            return hash(self.c0)
        return hash((self.c0, self.c1))

    def __str__(self) -> str:
        return self.pretty_print()


QuadraticField5.zero = QuadraticField5(Rational.zero, Rational.zero)
QuadraticField5.one = QuadraticField5(Rational.one, Rational.zero)
QuadraticField5.sqrt5 = QuadraticField5(Rational.zero, Rational.one)
QuadraticField5.golden_ratio = QuadraticField5(Rational(1, 2), Rational(1, 2))
QuadraticField5.golden_ratio_conjugate = QuadraticField5(
    Rational(1, 2), Rational(-1, 2)
)
