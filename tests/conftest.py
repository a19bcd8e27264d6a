# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Shared fixtures for atlas and cube tests."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest

from lut_color_cube.cube.generator import IdentityCubeGenerator
from lut_color_cube.decoding.memory import MemoryDecoder


def slice_atlas(
    dimension: int, rows: int, columns: int, slice_colors: np.ndarray
) -> np.ndarray:
    """Build an atlas whose tile for slice z is filled with slice_colors[z].

    Tiles are laid out with the inverse of the packing mapping: slice z goes
    to tile (z // columns, z % columns).
    """
    atlas = np.zeros((rows * dimension, columns * dimension, 4), dtype=np.uint8)
    for z in range(dimension):
        row, col = divmod(z, columns)
        atlas[
            row * dimension : (row + 1) * dimension,
            col * dimension : (col + 1) * dimension,
        ] = slice_colors[z]
    return atlas


def _red_ramp_colors(dimension: int) -> np.ndarray:
    """Slice colors (z / N, 0, 0, 1) quantized to bytes."""
    colors = np.zeros((dimension, 4), dtype=np.uint8)
    colors[:, 0] = np.rint(np.arange(dimension) * 255.0 / dimension).astype(np.uint8)
    colors[:, 3] = 255
    return colors


@pytest.fixture
def make_slice_atlas() -> Callable[..., np.ndarray]:
    """Factory fixture for solid-tile atlases."""
    return slice_atlas


@pytest.fixture
def small_identity_atlas() -> np.ndarray:
    """Identity atlas for a 4x4x4 cube (2x2 tiles, 8x8 pixels)."""
    return IdentityCubeGenerator(4).identity_atlas()


@pytest.fixture
def small_effect_atlas() -> np.ndarray:
    """Inverting effect atlas for a 4x4x4 cube."""
    return IdentityCubeGenerator(4).transformed_atlas(lambda rgb: 1.0 - rgb)


@pytest.fixture
def small_decoder(
    small_identity_atlas: np.ndarray, small_effect_atlas: np.ndarray
) -> MemoryDecoder:
    """Memory decoder serving 4x4x4 identity, effect and broken atlases."""
    return MemoryDecoder(
        {
            "identity": small_identity_atlas,
            "invert": small_effect_atlas,
            "wrong-size": np.zeros((8, 12, 4), dtype=np.uint8),
        }
    )


@pytest.fixture
def red_ramp_colors() -> np.ndarray:
    """Slice colors (z / 64, 0, 0, 1) for a 64-slice cube."""
    return _red_ramp_colors(64)
