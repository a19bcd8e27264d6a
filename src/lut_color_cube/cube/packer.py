"""Convert packed 2D atlas images into 3D color cubes and back."""

from __future__ import annotations

import logging

import numpy as np

from ..decoding.base import DecodedImage
from ..errors import InvalidAtlasDimensionsError
from .atlas import CUBE_DIMENSION, AtlasLayout
from .color_cube import CHANNELS, ColorCube

logger = logging.getLogger(__name__)


class CubePacker:
    """Pack RGBA atlas images into color cubes."""

    def __init__(self, dimension: int = CUBE_DIMENSION) -> None:
        """Initialize cube packer.

        Args:
            dimension: Size of the color cube (default: 64)
        """
        if dimension < 2:
            raise ValueError("Cube dimension must be at least 2")
        self.dimension = dimension

    def pack(self, pixels: np.ndarray, layout: AtlasLayout | None = None) -> ColorCube:
        """Convert an atlas image into a color cube.

        The atlas is a grid of ``rows x columns`` tiles of N x N pixels. Tile
        ``(row, col)`` becomes cube slice ``z = row * columns + col``; inside a
        tile the pixel row is the cube's y and the pixel column its x. Bytes are
        normalized to [0, 1] by dividing by 255.

        Args:
            pixels: Atlas with shape (height, width, 4), uint8 RGBA
            layout: Atlas layout (derived from the pixel array when omitted)

        Returns:
            Color cube of this packer's dimension

        Raises:
            DecodeError: If pixels is not an RGBA uint8 grid
            InvalidAtlasDimensionsError: If the atlas geometry is invalid
        """
        image = DecodedImage(pixels)
        n = self.dimension

        if layout is None:
            layout = AtlasLayout.from_size(image.width, image.height, n)
        elif layout.dimension != n or (layout.width, layout.height) != (
            image.width,
            image.height,
        ):
            raise InvalidAtlasDimensionsError(image.width, image.height, n)

        atlas = image.pixels
        cube = np.empty((n, n, n, CHANNELS), dtype=np.float32)
        divider = np.float32(255.0)

        for row in range(layout.row_count):
            top = row * n
            for y in range(n):
                # One horizontal strip across every tile of this row
                strip = atlas[top + y]
                for col in range(layout.column_count):
                    z = row * layout.column_count + col
                    left = col * n
                    cube[z, y] = strip[left : left + n].astype(np.float32) / divider

        logger.debug(
            f"Packed {layout.width}x{layout.height} atlas "
            f"({layout.row_count}x{layout.column_count} tiles) into {n}^3 cube"
        )

        return ColorCube(cube, n)

    def pack_image(self, image: DecodedImage) -> ColorCube:
        """Convert a decoded image into a color cube."""
        return self.pack(image.pixels)

    def unpack(self, cube: ColorCube, layout: AtlasLayout | None = None) -> np.ndarray:
        """Render a color cube back into an 8-bit atlas image.

        Slice ``z`` is written to tile ``(z // columns, z % columns)``, values
        are scaled by 255, rounded and clipped to [0, 255].

        Args:
            cube: Cube to render, must match this packer's dimension
            layout: Target layout (default: the most square layout)

        Returns:
            Atlas with shape (height, width, 4), uint8 RGBA
        """
        n = self.dimension
        if cube.dimension != n:
            raise ValueError(
                f"Cube dimension {cube.dimension} does not match packer dimension {n}"
            )
        if layout is None:
            layout = AtlasLayout.square(n)
        elif layout.dimension != n:
            raise ValueError(
                f"Layout dimension {layout.dimension} does not match packer dimension {n}"
            )

        grid = cube.as_grid()
        atlas = np.zeros((layout.height, layout.width, CHANNELS), dtype=np.uint8)

        for z in range(n):
            top, left = layout.tile_origin(z)
            tile = np.clip(np.rint(grid[z] * 255.0), 0, 255)
            atlas[top : top + n, left : left + n] = tile.astype(np.uint8)

        return atlas
