"""Identity cube and atlas generation."""

from __future__ import annotations

import os
from typing import Callable

import numpy as np
from PIL import Image

from .atlas import CUBE_DIMENSION, AtlasLayout
from .color_cube import ColorCube
from .packer import CubePacker


class IdentityCubeGenerator:
    """Generate identity color cubes and the atlases that encode them."""

    def __init__(self, dimension: int = CUBE_DIMENSION) -> None:
        """Initialize identity generator.

        Args:
            dimension: Size of the cube (default: 64 for 64x64x64)
        """
        if dimension < 2:
            raise ValueError("Cube dimension must be at least 2")
        self.dimension = dimension
        self._identity_cube: ColorCube | None = None

    @property
    def identity_cube(self) -> ColorCube:
        """Get or create the identity cube.

        Returns:
            Cube whose cell (x, y, z) holds (x, y, z) / (N - 1) with alpha 1.0
        """
        if self._identity_cube is None:
            self._identity_cube = ColorCube(self._identity_rgba(), self.dimension)
        return self._identity_cube

    def _identity_rgba(self) -> np.ndarray:
        """Build the identity grid indexed [z, y, x, channel]."""
        coords = np.linspace(0.0, 1.0, self.dimension, dtype=np.float32)

        # Blue follows z, green follows y, red follows x
        b_grid, g_grid, r_grid = np.meshgrid(coords, coords, coords, indexing="ij")
        alpha = np.ones_like(r_grid)

        return np.stack([r_grid, g_grid, b_grid, alpha], axis=-1)

    def apply_transform(
        self, transform_func: Callable[[np.ndarray], np.ndarray]
    ) -> ColorCube:
        """Apply a color transformation to the identity cube.

        Args:
            transform_func: Function mapping an (M, 3) RGB array to transformed RGB

        Returns:
            Transformed cube with alpha kept at 1.0
        """
        rgba = self._identity_rgba().reshape(-1, 4)
        transformed = np.asarray(transform_func(rgba[:, :3].copy()), dtype=np.float32)

        if transformed.shape != (rgba.shape[0], 3):
            raise ValueError(
                f"Transform must return shape {(rgba.shape[0], 3)}, got {transformed.shape}"
            )

        rgba[:, :3] = transformed
        return ColorCube(rgba, self.dimension)

    def identity_atlas(self, layout: AtlasLayout | None = None) -> np.ndarray:
        """Render the identity cube as an 8-bit RGBA atlas."""
        return CubePacker(self.dimension).unpack(self.identity_cube, layout)

    def transformed_atlas(
        self,
        transform_func: Callable[[np.ndarray], np.ndarray],
        layout: AtlasLayout | None = None,
    ) -> np.ndarray:
        """Render a transformed identity cube as an 8-bit RGBA atlas."""
        return CubePacker(self.dimension).unpack(
            self.apply_transform(transform_func), layout
        )


def save_atlas(atlas: np.ndarray, path: str | os.PathLike[str]) -> None:
    """Write an RGBA atlas to an image file (PNG keeps it lossless).

    Args:
        atlas: Atlas with shape (height, width, 4), uint8
        path: Destination file path
    """
    if atlas.ndim != 3 or atlas.shape[2] != 4 or atlas.dtype != np.uint8:
        raise ValueError(
            f"Atlas must be a (height, width, 4) uint8 array, got {atlas.shape} {atlas.dtype}"
        )
    Image.fromarray(atlas).save(path)
