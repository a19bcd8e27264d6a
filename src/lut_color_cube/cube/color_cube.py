"""Flat RGBA float32 color cube."""

from __future__ import annotations

import numpy as np

from ..errors import CubeSizeMismatchError
from .atlas import CUBE_DIMENSION

CHANNELS = 4


class ColorCube:
    """Immutable N x N x N RGBA color cube stored as a flat float32 array.

    Cell ``(x, y, z)`` channel ``c`` lives at
    ``((z * N * N + y * N + x) * 4) + c``: x varies fastest, then y, then z,
    with channels in R, G, B, A order. This is the layout expected by
    color-cube filters consuming :meth:`to_bytes`.
    """

    def __init__(self, data: np.ndarray, dimension: int = CUBE_DIMENSION) -> None:
        """Initialize color cube.

        Args:
            data: Cube values, any shape holding exactly N^3 * 4 elements
            dimension: Cube dimension N (default: 64)

        Raises:
            CubeSizeMismatchError: If the element count does not match N^3 * 4
        """
        if dimension < 2:
            raise ValueError("Cube dimension must be at least 2")

        expected = dimension**3 * CHANNELS
        # Copy so callers cannot mutate the cube through their own array
        flat = np.array(data, dtype=np.float32).reshape(-1)
        if flat.size != expected:
            raise CubeSizeMismatchError(
                f"Cube of dimension {dimension} needs {expected} values, got {flat.size}"
            )
        flat.flags.writeable = False

        self._data = flat
        self.dimension = dimension

    @classmethod
    def from_bytes(cls, buffer: bytes, dimension: int = CUBE_DIMENSION) -> ColorCube:
        """Build a cube from a native float32 wire buffer.

        Args:
            buffer: Raw bytes as produced by :meth:`to_bytes`
            dimension: Cube dimension N (default: 64)

        Returns:
            Parsed color cube
        """
        itemsize = np.dtype(np.float32).itemsize
        if len(buffer) % itemsize != 0:
            raise CubeSizeMismatchError(
                f"Buffer length {len(buffer)} is not a multiple of {itemsize}"
            )
        return cls(np.frombuffer(buffer, dtype=np.float32), dimension)

    @classmethod
    def filled(cls, value: float, dimension: int = CUBE_DIMENSION) -> ColorCube:
        """Create a cube with every channel of every cell set to ``value``."""
        return cls(
            np.full(dimension**3 * CHANNELS, value, dtype=np.float32), dimension
        )

    @property
    def data(self) -> np.ndarray:
        """Read-only flat float32 array of all cube values."""
        return self._data

    @property
    def nbytes(self) -> int:
        """Size of the wire buffer in bytes."""
        return int(self._data.nbytes)

    def as_grid(self) -> np.ndarray:
        """Get a read-only view shaped (N, N, N, 4), indexed ``[z, y, x, channel]``."""
        n = self.dimension
        return self._data.reshape(n, n, n, CHANNELS)

    def cell(self, x: int, y: int, z: int) -> np.ndarray:
        """Get the RGBA values of one cube cell.

        Raises:
            IndexError: If any coordinate is outside [0, N)
        """
        n = self.dimension
        for name, value in (("x", x), ("y", y), ("z", z)):
            if not 0 <= value < n:
                raise IndexError(f"{name}={value} out of range [0, {n})")
        offset = (z * n * n + y * n + x) * CHANNELS
        return self._data[offset : offset + CHANNELS]

    def to_bytes(self) -> bytes:
        """Serialize the cube as native float32 bytes in cell order."""
        return self._data.tobytes()

    def __len__(self) -> int:
        return int(self._data.size)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorCube):
            return NotImplemented
        return self.dimension == other.dimension and np.array_equal(
            self._data, other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ColorCube(dimension={self.dimension}, values={len(self)})"
