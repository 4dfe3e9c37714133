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
Capability set shared by every scalar field.

Vectors, matrices and inner products are generic over any type providing
these methods. Arithmetic never mutates its operands. ``is_zero`` is an
exact test on every field and is the only zero test used by singularity
and pivot checks; ``equals`` may be tolerance-based (see ``Real``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar
from typing import Protocol
from typing import TypeVar


if TYPE_CHECKING:
    from exact_linalg.fields.real import Real


class FieldElement(Protocol):
    """Structural type of a field element."""

    zero: ClassVar[Any]
    one: ClassVar[Any]

    def clone(self: F) -> F: ...

    def add(self: F, other: F) -> F: ...

    def sub(self: F, other: F) -> F: ...

    def mul(self: F, other: F) -> F: ...

    def neg(self: F) -> F: ...

    def inv(self: F) -> F: ...

    def div(self: F, other: F) -> F: ...

    def equals(self: F, other: F) -> bool: ...

    def is_zero(self) -> bool: ...

    def real_embedding(self) -> Real: ...

    def pretty_print(self) -> str: ...


F = TypeVar("F", bound=FieldElement)


def field_type_of(element: F) -> type[F]:
    """Return the field class of an element."""
    return type(element)
