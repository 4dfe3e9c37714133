################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the linear algebra parameter layer."""

from __future__ import annotations

import pytest

from exact_linalg.config import LinalgParams
from exact_linalg.config import LinalgParamsError
from exact_linalg.config import get_params
from exact_linalg.config import reset_params
from exact_linalg.config import set_params


def test_defaults_validate() -> None:
    """Default parameters pass validation."""
    params: LinalgParams = LinalgParams.defaults()
    params.validate()

    assert params.real_eq_eps == 1e-10
    assert params.real_print_decimals == 3
    assert params.sqrt5_digits == 80


def test_replace_returns_modified_copy() -> None:
    """replace leaves the original untouched."""
    params: LinalgParams = LinalgParams.defaults()
    modified: LinalgParams = params.replace(real_print_decimals=5)

    assert modified.real_print_decimals == 5
    assert params.real_print_decimals == 3
    assert modified.as_dict()["real_print_decimals"] == 5


@pytest.mark.parametrize(
    "overrides",
    [
        {"real_eq_eps": 0.0},
        {"real_eq_eps": -1e-3},
        {"isotropy_eps": 0.0},
        {"real_print_decimals": -1},
        {"real_print_decimals": 2.5},
        {"sqrt5_digits": 16},
        {"sqrt5_digits": True},
    ],
)
def test_invalid_params_raise(overrides: dict[str, object]) -> None:
    """Out-of-range values are rejected."""
    params: LinalgParams = LinalgParams.defaults().replace(**overrides)

    with pytest.raises(LinalgParamsError):
        params.validate()


def test_set_params_rejects_invalid_and_keeps_active() -> None:
    """An invalid update does not replace the active parameters."""
    before: LinalgParams = get_params()

    with pytest.raises(LinalgParamsError):
        set_params(before.replace(real_eq_eps=-1.0))

    assert get_params() is before


def test_set_and_reset_params() -> None:
    """set_params installs values until reset_params restores defaults."""
    try:
        set_params(LinalgParams.defaults().replace(real_print_decimals=1))
        assert get_params().real_print_decimals == 1
    finally:
        reset_params()

    assert get_params() == LinalgParams.defaults()
