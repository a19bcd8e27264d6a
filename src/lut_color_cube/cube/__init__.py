# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Color cube construction, packing and blending."""

from .atlas import CUBE_DIMENSION, AtlasLayout
from .color_cube import ColorCube
from .generator import IdentityCubeGenerator, save_atlas
from .interpolator import CubeInterpolator
from .packer import CubePacker

__all__ = [
    "CUBE_DIMENSION",
    "AtlasLayout",
    "ColorCube",
    "CubeInterpolator",
    "CubePacker",
    "IdentityCubeGenerator",
    "save_atlas",
]
