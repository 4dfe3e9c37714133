################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from exact_linalg.config.linalg_params import LinalgParams
from exact_linalg.config.linalg_params import LinalgParamsError
from exact_linalg.config.linalg_params import get_params
from exact_linalg.config.linalg_params import reset_params
from exact_linalg.config.linalg_params import set_params


__all__ = [
    "LinalgParams",
    "LinalgParamsError",
    "get_params",
    "reset_params",
    "set_params",
]
