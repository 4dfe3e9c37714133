################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Cubic field Q(a) with a = cos(pi/7), used for heptagonal symmetry."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar
from typing import Union

from exact_linalg.errors import DivisionByZeroError
from exact_linalg.fields.rational import Rational
from exact_linalg.fields.rational import RationalLike
from exact_linalg.fields.real import Real


HeptagonLike = Union["HeptagonField", Rational, int]

# Real value of the generator a
_ALPHA: float = math.cos(math.pi / 7.0)

# a^3 = -1/8 + a/2 + a^2/2
_CUBE_C0: Rational = Rational(-1, 8)
_HALF: Rational = Rational(1, 2)


def _is_heptagon_like(x: object) -> bool:
    """Return True for values coerce accepts."""
    if isinstance(x, bool):
        return False
    return isinstance(x, (HeptagonField, Rational, int))


@dataclass(frozen=True, eq=False)
class HeptagonField:
    """Element x0 + x1*a + x2*a^2 of Q(cos(pi/7))."""

    c0: Rational = Rational(0)
    c1: Rational = Rational(0)
    c2: Rational = Rational(0)

    zero: ClassVar[HeptagonField]
    one: ClassVar[HeptagonField]
    alpha: ClassVar[HeptagonField]

    def __post_init__(self) -> None:
        """Coerce all coefficients to Rationals."""
        object.__setattr__(self, "c0", Rational.coerce(self.c0))
        object.__setattr__(self, "c1", Rational.coerce(self.c1))
        object.__setattr__(self, "c2", Rational.coerce(self.c2))

    @staticmethod
    def coerce(x: HeptagonLike) -> HeptagonField:
        """Return ``x`` as an element of Q(a)."""
        if isinstance(x, HeptagonField):
            return x
        return HeptagonField(Rational.coerce(x), Rational.zero, Rational.zero)

    def clone(self) -> HeptagonField:
        return HeptagonField(self.c0.clone(), self.c1.clone(), self.c2.clone())

    def add(self, other: HeptagonLike) -> HeptagonField:
        o: HeptagonField = HeptagonField.coerce(other)
        return HeptagonField(self.c0.add(o.c0), self.c1.add(o.c1), self.c2.add(o.c2))

    def sub(self, other: HeptagonLike) -> HeptagonField:
        o: HeptagonField = HeptagonField.coerce(other)
        return HeptagonField(self.c0.sub(o.c0), self.c1.sub(o.c1), self.c2.sub(o.c2))

    def neg(self) -> HeptagonField:
        return HeptagonField(self.c0.neg(), self.c1.neg(), self.c2.neg())

    def scale(self, r: RationalLike) -> HeptagonField:
        """Multiply every coefficient by a Rational."""
        return HeptagonField(self.c0.mul(r), self.c1.mul(r), self.c2.mul(r))

    def _mul_alpha(self) -> HeptagonField:
        """Multiply by the generator a, reducing a^3."""
        return HeptagonField(
            self.c2.mul(_CUBE_C0),
            self.c0.add(self.c2.mul(_HALF)),
            self.c1.add(self.c2.mul(_HALF)),
        )

    def mul(self, other: HeptagonLike) -> HeptagonField:
        o: HeptagonField = HeptagonField.coerce(other)
        times_alpha: HeptagonField = self._mul_alpha()
        times_alpha2: HeptagonField = times_alpha._mul_alpha()
        return (
            self.scale(o.c0)
            .add(times_alpha.scale(o.c1))
            .add(times_alpha2.scale(o.c2))
        )

    def inv(self) -> HeptagonField:
        """
        Invert by solving M y = (1, 0, 0) over Q.

        M is the matrix of multiplication by self in the basis 1, a, a^2, so
        its columns are the coefficients of self, self*a and self*a^2. Its
        determinant is the field norm, which vanishes only at zero.
        """
        x1: HeptagonField = self._mul_alpha()
        x2: HeptagonField = x1._mul_alpha()

        a, b, c = self.c0, x1.c0, x2.c0
        d, e, f = self.c1, x1.c1, x2.c1
        g, h, i = self.c2, x1.c2, x2.c2

        cof0: Rational = e.mul(i).sub(f.mul(h))
        cof1: Rational = f.mul(g).sub(d.mul(i))
        cof2: Rational = d.mul(h).sub(e.mul(g))

        # First-row cofactors double as the first column of the adjugate
        det: Rational = a.mul(cof0).add(b.mul(cof1)).add(c.mul(cof2))
        if det.is_zero():
            raise DivisionByZeroError("Cannot invert zero in Q(cos(pi/7))")

        return HeptagonField(cof0.div(det), cof1.div(det), cof2.div(det))

    def div(self, other: HeptagonLike) -> HeptagonField:
        return self.mul(HeptagonField.coerce(other).inv())

    def equals(self, other: object) -> bool:
        """Exact comparison; values from other fields compare unequal."""
        if not _is_heptagon_like(other):
            return False
        o: HeptagonField = HeptagonField.coerce(other)  # type: ignore[arg-type]
        return self.c0.equals(o.c0) and self.c1.equals(o.c1) and self.c2.equals(o.c2)

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero() and self.c2.is_zero()

    def real_embedding(self) -> Real:
        c0: float = self.c0.real_embedding().value
        c1: float = self.c1.real_embedding().value
        c2: float = self.c2.real_embedding().value
        return Real(c0 + c1 * _ALPHA + c2 * _ALPHA * _ALPHA)

    def pretty_print(self) -> str:
        parts: list[str] = []

        if not self.c0.is_zero():
            parts.append(self.c0.pretty_print())
        for coeff, symbol in ((self.c1, "a"), (self.c2, "a^2")):
            if coeff.is_zero():
                continue
            if coeff.equals(Rational.one):
                parts.append(symbol)
            elif coeff.equals(Rational.one.neg()):
                parts.append(f"-{symbol}")
            else:
                parts.append(f"{coeff.pretty_print()}*{symbol}")

        if not parts:
            return "0"

        return " + ".join(parts).replace("+ -", "- ")

    def __add__(self, other: HeptagonLike) -> HeptagonField:
        return self.add(other)

    def __radd__(self, other: HeptagonLike) -> HeptagonField:
        return HeptagonField.coerce(other).add(self)

    def __sub__(self, other: HeptagonLike) -> HeptagonField:
        return self.sub(other)

    def __rsub__(self, other: HeptagonLike) -> HeptagonField:
        return HeptagonField.coerce(other).sub(self)

    def __mul__(self, other: HeptagonLike) -> HeptagonField:
        return self.mul(other)

    def __rmul__(self, other: HeptagonLike) -> HeptagonField:
        return HeptagonField.coerce(other).mul(self)

    def __truediv__(self, other: HeptagonLike) -> HeptagonField:
        return self.div(other)

    def __rtruediv__(self, other: HeptagonLike) -> HeptagonField:
        return HeptagonField.coerce(other).div(self)

    def __neg__(self) -> HeptagonField:
        return self.neg()

    def __eq__(self, other: object) -> bool:
        if not _is_heptagon_like(other):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # Rational values hash like the matching Rational
        if self.c1.is_zero() and self.c2.is_zero():
            return hash(self.c0)
        return hash((self.c0, self.c1, self.c2))

    def __str__(self) -> str:
        return self.pretty_print()


HeptagonField.zero = HeptagonField(Rational.zero, Rational.zero, Rational.zero)
HeptagonField.one = HeptagonField(Rational.one, Rational.zero, Rational.zero)
HeptagonField.alpha = HeptagonField(Rational.zero, Rational.one, Rational.zero)
