################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from exact_linalg.config import LinalgParams
from exact_linalg.config import LinalgParamsError
from exact_linalg.errors import DegenerateBasisError
from exact_linalg.errors import DivisionByZeroError
from exact_linalg.errors import InvalidArgumentError
from exact_linalg.errors import InvalidIndexError
from exact_linalg.errors import LinalgError
from exact_linalg.errors import NotOnHyperboloidError
from exact_linalg.errors import SingularMatrixError
from exact_linalg.fields import Complex
from exact_linalg.fields import FieldElement
from exact_linalg.fields import HeptagonField
from exact_linalg.fields import QuadraticField5
from exact_linalg.fields import Rational
from exact_linalg.fields import Real
from exact_linalg.fields import field_type_of
from exact_linalg.geometry import InnerProduct
from exact_linalg.linalg import Matrix3
from exact_linalg.linalg import Matrix4
from exact_linalg.linalg import Vector3
from exact_linalg.linalg import Vector4


__all__ = [
    "Complex",
    "DegenerateBasisError",
    "DivisionByZeroError",
    "FieldElement",
    "HeptagonField",
    "InnerProduct",
    "InvalidArgumentError",
    "InvalidIndexError",
    "LinalgError",
    "LinalgParams",
    "LinalgParamsError",
    "Matrix3",
    "Matrix4",
    "NotOnHyperboloidError",
    "QuadraticField5",
    "Rational",
    "Real",
    "SingularMatrixError",
    "Vector3",
    "Vector4",
    "field_type_of",
]
