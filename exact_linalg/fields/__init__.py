################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from exact_linalg.fields.complex_field import Complex
from exact_linalg.fields.field import FieldElement
from exact_linalg.fields.field import field_type_of
from exact_linalg.fields.heptagon_field import HeptagonField
from exact_linalg.fields.quadratic_field5 import QuadraticField5
from exact_linalg.fields.rational import Rational
from exact_linalg.fields.real import Real


__all__ = [
    "Complex",
    "FieldElement",
    "HeptagonField",
    "QuadraticField5",
    "Rational",
    "Real",
    "field_type_of",
]
