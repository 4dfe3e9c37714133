################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Error taxonomy for exact linear algebra."""

from __future__ import annotations


class LinalgError(Exception):
    """Base class for linear algebra failures."""


class DivisionByZeroError(LinalgError, ZeroDivisionError):
    """Raised when inverting or dividing by an exact zero."""


class SingularMatrixError(LinalgError, ArithmeticError):
    """Raised when a matrix with zero determinant must be inverted."""


class DegenerateBasisError(LinalgError, ValueError):
    """Raised when basis vectors are not linearly independent."""


class InvalidIndexError(LinalgError, IndexError):
    """Raised for an out-of-range basis or component index."""


class InvalidArgumentError(LinalgError, ValueError):
    """Raised for arguments of the wrong kind or shape."""


class NotOnHyperboloidError(LinalgError, ValueError):
    """Raised when a hyperbolic distance is requested for a non-timelike vector."""
