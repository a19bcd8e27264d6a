# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Abstract base class for atlas image decoders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable

import numpy as np

from ..errors import DecodeError


class DecodedImage:
    """RGBA byte grid produced by an image decoder."""

    def __init__(self, pixels: np.ndarray) -> None:
        """Initialize decoded image.

        Args:
            pixels: Row-major pixel array with shape (height, width, 4), uint8

        Raises:
            DecodeError: If the array is not an RGBA uint8 grid
        """
        pixels = np.asarray(pixels)

        if pixels.ndim != 3:
            raise DecodeError(
                f"Expected 3D array (height, width, channels), got {pixels.ndim}D: {pixels.shape}"
            )

        if pixels.shape[2] != 4:
            raise DecodeError(
                f"Unsupported channel count: {pixels.shape[2]}. Expected 4 (RGBA)"
            )

        if pixels.dtype != np.uint8:
            raise DecodeError(
                f"Unsupported data type: {pixels.dtype}. Expected uint8 channels"
            )

        self.pixels = np.ascontiguousarray(pixels)

    @property
    def height(self) -> int:
        """Image height in pixels."""
        return int(self.pixels.shape[0])

    @property
    def width(self) -> int:
        """Image width in pixels."""
        return int(self.pixels.shape[1])

    def __repr__(self) -> str:
        return f"DecodedImage(width={self.width}, height={self.height})"


class ImageDecoder(ABC):
    """Decode a resource locator into an RGBA byte grid.

    Implementations hide the platform image codec from the cube packer so that
    packing and blending stay platform-agnostic.
    """

    name = "base"

    @abstractmethod
    def decode(self, locator: Hashable) -> DecodedImage:
        """Decode the image behind ``locator``.

        Args:
            locator: Resource locator understood by the decoder

        Returns:
            Decoded RGBA image

        Raises:
            DecodeError: If the resource is missing, unreadable or corrupt
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
