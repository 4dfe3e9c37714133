################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tunable parameters for the real-valued parts of the linear algebra kernel."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Absolute tolerance used by Real equality
REAL_EQ_EPS: float = 1e-10
# Decimal places printed for Real values
REAL_PRINT_DECIMALS: int = 3
# Decimal digits of sqrt(5) used by the high-precision embedding
SQRT5_DIGITS: int = 80
# Real norm^2 magnitude below which an axis is treated as isotropic
ISOTROPY_EPS: float = 1e-12


class LinalgParamsError(Exception):
    """Raised when linear algebra parameter validation fails."""


def _require_positive(value: float, name: str) -> None:
    """Require a positive value."""
    if value <= 0.0:
        raise LinalgParamsError(f"{name} must be positive")


def _require_non_negative_int(value: int, name: str) -> None:
    """Require a non-negative integer value."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise LinalgParamsError(f"{name} must be an int")
    if value < 0:
        raise LinalgParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class LinalgParams:
    """Parameters read by the Real field and the real-valued geometry."""

    # Absolute tolerance used by Real equality
    real_eq_eps: float = REAL_EQ_EPS
    # Decimal places printed for Real values
    real_print_decimals: int = REAL_PRINT_DECIMALS
    # Decimal digits of sqrt(5) used by the high-precision embedding
    sqrt5_digits: int = SQRT5_DIGITS
    # Real norm^2 magnitude below which an axis is treated as isotropic
    isotropy_eps: float = ISOTROPY_EPS

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default parameters."""
        return cls()

    def validate(self) -> None:
        """Validate parameter invariants."""
        _require_positive(self.real_eq_eps, "real_eq_eps")
        _require_non_negative_int(self.real_print_decimals, "real_print_decimals")
        _require_non_negative_int(self.sqrt5_digits, "sqrt5_digits")
        if self.sqrt5_digits < 17:
            raise LinalgParamsError("sqrt5_digits must be at least 17")
        _require_positive(self.isotropy_eps, "isotropy_eps")

    def replace(self, **overrides: Any) -> LinalgParams:
        """Return a modified copy of the parameters."""
        return replace(self, **overrides)

    def as_dict(self) -> dict[str, Any]:
        """Return a dict representation for debugging."""
        return {field.name: getattr(self, field.name) for field in fields(self)}


_ACTIVE_PARAMS: LinalgParams = LinalgParams.defaults()


def get_params() -> LinalgParams:
    """Return the active parameters."""
    return _ACTIVE_PARAMS


def set_params(params: LinalgParams) -> None:
    """Validate and install new active parameters."""
    global _ACTIVE_PARAMS

    params.validate()
    _ACTIVE_PARAMS = params


def reset_params() -> None:
    """Restore the default parameters."""
    global _ACTIVE_PARAMS

    _ACTIVE_PARAMS = LinalgParams.defaults()
