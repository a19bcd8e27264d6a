"""Tiling geometry of packed 2D cube atlases."""

from __future__ import annotations

import math

from ..errors import InvalidAtlasDimensionsError

CUBE_DIMENSION = 64


class AtlasLayout:
    """Grid of N x N tiles that serializes an N-slice color cube."""

    def __init__(self, row_count: int, column_count: int, dimension: int) -> None:
        """Initialize atlas layout.

        Use :meth:`from_size` to derive a layout from pixel dimensions.

        Args:
            row_count: Number of tile rows
            column_count: Number of tile columns
            dimension: Edge length of the cube (and of every tile)
        """
        if dimension < 2:
            raise ValueError("Cube dimension must be at least 2")
        if (
            row_count <= 0
            or column_count <= 0
            or row_count * column_count != dimension
        ):
            raise InvalidAtlasDimensionsError(
                column_count * dimension, row_count * dimension, dimension
            )
        self.row_count = row_count
        self.column_count = column_count
        self.dimension = dimension

    @classmethod
    def from_size(
        cls, width: int, height: int, dimension: int = CUBE_DIMENSION
    ) -> AtlasLayout:
        """Derive and validate the layout of an atlas image.

        Args:
            width: Atlas width in pixels
            height: Atlas height in pixels
            dimension: Cube dimension (default: 64)

        Returns:
            Validated atlas layout

        Raises:
            InvalidAtlasDimensionsError: If the atlas does not hold exactly
                ``dimension`` tiles of ``dimension`` x ``dimension`` pixels
        """
        if dimension < 2:
            raise ValueError("Cube dimension must be at least 2")

        if (
            width <= 0
            or height <= 0
            or width % dimension != 0
            or height % dimension != 0
            or (height // dimension) * (width // dimension) != dimension
        ):
            raise InvalidAtlasDimensionsError(width, height, dimension)

        return cls(height // dimension, width // dimension, dimension)

    @classmethod
    def square(cls, dimension: int = CUBE_DIMENSION) -> AtlasLayout:
        """Return the most square layout for a cube dimension.

        For N=64 this is 8x8 tiles (a 512x512 atlas), for a prime N it
        degenerates into a single row of tiles.
        """
        if dimension < 2:
            raise ValueError("Cube dimension must be at least 2")
        rows = math.isqrt(dimension)
        while dimension % rows != 0:
            rows -= 1
        return cls(rows, dimension // rows, dimension)

    @property
    def width(self) -> int:
        """Atlas width in pixels."""
        return self.column_count * self.dimension

    @property
    def height(self) -> int:
        """Atlas height in pixels."""
        return self.row_count * self.dimension

    @property
    def tile_count(self) -> int:
        """Number of tiles, always equal to the cube dimension."""
        return self.row_count * self.column_count

    def tile_origin(self, z: int) -> tuple[int, int]:
        """Get the pixel origin of the tile holding cube slice ``z``.

        Args:
            z: Cube slice index

        Returns:
            Tuple of (top, left) pixel coordinates
        """
        if not 0 <= z < self.tile_count:
            raise IndexError(f"Slice index {z} out of range [0, {self.tile_count})")
        row, col = divmod(z, self.column_count)
        return row * self.dimension, col * self.dimension

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AtlasLayout):
            return NotImplemented
        return (self.row_count, self.column_count, self.dimension) == (
            other.row_count,
            other.column_count,
            other.dimension,
        )

    def __hash__(self) -> int:
        return hash((self.row_count, self.column_count, self.dimension))

    def __repr__(self) -> str:
        return (
            f"AtlasLayout(row_count={self.row_count}, "
            f"column_count={self.column_count}, dimension={self.dimension})"
        )
