# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""LUT Color Cube - Build and blend 3D color cubes from packed LUT atlases.

A Python package that decodes 2D LUT atlas images into 64x64x64 RGBA color
cubes and interpolates between an identity cube and an effect cube, producing
the float32 buffer consumed by color-cube filters.

Simple usage:
    import lcc
    converter = lcc.LutCubeConverter("Identity.png")
    converter.lut_locator = "K1.png"
    converter.intensity = 0.75
    data = converter.color_cube_data
"""

__version__ = "0.1.0"
__author__ = "Fuse Technical Group"

# Public API - minimal surface area
from .cache import IdentityCubeCache
from .converter import LutCubeConverter
from .cube import AtlasLayout, ColorCube, CubeInterpolator, CubePacker
from .effects import EffectCubeRenderer, PhotoEffect, PhotoEffectRegistry
from .errors import (
    CubeSizeMismatchError,
    DecodeError,
    IdentityLutError,
    InvalidAtlasDimensionsError,
    InvalidIntensityError,
    LutError,
    MissingEffectError,
)

__all__ = [
    "AtlasLayout",
    "ColorCube",
    "CubeInterpolator",
    "CubePacker",
    "CubeSizeMismatchError",
    "DecodeError",
    "EffectCubeRenderer",
    "IdentityCubeCache",
    "IdentityLutError",
    "InvalidAtlasDimensionsError",
    "InvalidIntensityError",
    "LutCubeConverter",
    "LutError",
    "MissingEffectError",
    "PhotoEffect",
    "PhotoEffectRegistry",
]
