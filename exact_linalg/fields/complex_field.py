################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Floating-point complex numbers, an approximate field with no order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar
from typing import Union

from exact_linalg.config.linalg_params import get_params
from exact_linalg.errors import DivisionByZeroError
from exact_linalg.errors import InvalidArgumentError
from exact_linalg.fields.real import Real


ComplexLike = Union["Complex", complex, float, int]


def _is_complex_like(x: object) -> bool:
    """Return True for values coerce accepts."""
    if isinstance(x, bool):
        return False
    return isinstance(x, (Complex, complex, float, int))


@dataclass(frozen=True, eq=False)
class Complex:
    """
    Field element re + im*i with float parts.

    Like Real, equality is tolerance-based (on both parts) and values are
    not hashable. ``is_zero`` is exact.
    """

    re: float = 0.0
    im: float = 0.0

    zero: ClassVar[Complex]
    one: ClassVar[Complex]
    i: ClassVar[Complex]

    def __post_init__(self) -> None:
        """Coerce both parts to floats."""
        object.__setattr__(self, "re", float(self.re))
        object.__setattr__(self, "im", float(self.im))

    @staticmethod
    def coerce(x: ComplexLike) -> Complex:
        """Return ``x`` as a Complex."""
        if isinstance(x, Complex):
            return x
        if isinstance(x, complex):
            return Complex(x.real, x.imag)
        return Complex(float(x), 0.0)

    def clone(self) -> Complex:
        return Complex(self.re, self.im)

    def add(self, other: ComplexLike) -> Complex:
        o: Complex = Complex.coerce(other)
        return Complex(self.re + o.re, self.im + o.im)

    def sub(self, other: ComplexLike) -> Complex:
        o: Complex = Complex.coerce(other)
        return Complex(self.re - o.re, self.im - o.im)

    def mul(self, other: ComplexLike) -> Complex:
        o: Complex = Complex.coerce(other)
        return Complex(
            self.re * o.re - self.im * o.im,
            self.re * o.im + self.im * o.re,
        )

    def neg(self) -> Complex:
        return Complex(-self.re, -self.im)

    def inv(self) -> Complex:
        if self.is_zero():
            raise DivisionByZeroError("Cannot invert the complex number 0")
        # Builtin complex division scales to avoid overflow in re^2 + im^2
        value: complex = 1.0 / complex(self.re, self.im)
        return Complex(value.real, value.imag)

    def div(self, other: ComplexLike) -> Complex:
        divisor: Complex = Complex.coerce(other)
        if divisor.is_zero():
            raise DivisionByZeroError("Division of a complex number by 0")
        value: complex = complex(self.re, self.im) / complex(divisor.re, divisor.im)
        return Complex(value.real, value.imag)

    def scale(self, r: Union[Real, float]) -> Complex:
        """Multiply both parts by a real scalar."""
        factor: float = float(r)
        return Complex(self.re * factor, self.im * factor)

    def conj(self) -> Complex:
        """Return the complex conjugate re - im*i."""
        return Complex(self.re, -self.im)

    def norm(self) -> float:
        """Return re^2 + im^2, the product with the conjugate."""
        return self.re * self.re + self.im * self.im

    def equals(self, other: object) -> bool:
        """Compare both parts within the configured absolute tolerance."""
        if not _is_complex_like(other):
            return False
        o: Complex = Complex.coerce(other)  # type: ignore[arg-type]
        eps: float = get_params().real_eq_eps
        return abs(self.re - o.re) < eps and abs(self.im - o.im) < eps

    def is_zero(self) -> bool:
        return self.re == 0.0 and self.im == 0.0

    def real_embedding(self) -> Real:
        """Return the real part, which must be the whole value."""
        if self.im != 0.0:
            raise InvalidArgumentError(
                f"Cannot embed the non-real complex number {self.pretty_print()}"
            )
        return Real(self.re)

    def pretty_print(self) -> str:
        """Return ``"a + bi"``, dropping zero parts and a unit coefficient."""
        if self.is_zero():
            return "0"

        decimals: int = get_params().real_print_decimals
        text: str = ""
        if self.re != 0.0:
            text = f"{self.re:.{decimals}f}"
        if self.im == 0.0:
            return text

        if text:
            text += " + " if self.im > 0.0 else " - "
        elif self.im < 0.0:
            text = "-"

        magnitude: float = abs(self.im)
        if magnitude != 1.0:
            text += f"{magnitude:.{decimals}f}"
        return text + "i"

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __add__(self, other: ComplexLike) -> Complex:
        return self.add(other)

    def __radd__(self, other: ComplexLike) -> Complex:
        return Complex.coerce(other).add(self)

    def __sub__(self, other: ComplexLike) -> Complex:
        return self.sub(other)

    def __rsub__(self, other: ComplexLike) -> Complex:
        return Complex.coerce(other).sub(self)

    def __mul__(self, other: ComplexLike) -> Complex:
        return self.mul(other)

    def __rmul__(self, other: ComplexLike) -> Complex:
        return Complex.coerce(other).mul(self)

    def __truediv__(self, other: ComplexLike) -> Complex:
        return self.div(other)

    def __rtruediv__(self, other: ComplexLike) -> Complex:
        return Complex.coerce(other).div(self)

    def __neg__(self) -> Complex:
        return self.neg()

    def __eq__(self, other: object) -> bool:
        if not _is_complex_like(other):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        return self.pretty_print()


Complex.zero = Complex(0.0, 0.0)
Complex.one = Complex(1.0, 0.0)
Complex.i = Complex(0.0, 1.0)
