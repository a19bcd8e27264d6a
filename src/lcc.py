# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""LUT Color Cube - Short import alias.

This module provides a short import alias for lut_color_cube.
Users can import as: import lcc
"""

# Import everything from the main package
from lut_color_cube import *  # noqa: F403, F401
