################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from exact_linalg.linalg.matrix3 import Matrix3
from exact_linalg.linalg.matrix4 import Matrix4
from exact_linalg.linalg.vector3 import Vector3
from exact_linalg.linalg.vector4 import Vector4


__all__ = [
    "Matrix3",
    "Matrix4",
    "Vector3",
    "Vector4",
]
