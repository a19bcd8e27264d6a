"""In-memory decoder for atlases that are already decoded."""

from __future__ import annotations

from collections.abc import Hashable

import numpy as np

from ..errors import DecodeError
from .base import DecodedImage, ImageDecoder


class MemoryDecoder(ImageDecoder):
    """Serve pre-decoded RGBA atlases registered under arbitrary locators."""

    name = "memory"

    def __init__(self, images: dict[Hashable, np.ndarray] | None = None) -> None:
        """Initialize memory decoder.

        Args:
            images: Optional mapping of locator to (height, width, 4) uint8 array
        """
        self._images: dict[Hashable, DecodedImage] = {}
        self.decode_count = 0
        for locator, pixels in (images or {}).items():
            self.register(locator, pixels)

    def register(self, locator: Hashable, pixels: np.ndarray) -> None:
        """Register (or replace) the atlas served for ``locator``."""
        self._images[locator] = DecodedImage(pixels)

    def unregister(self, locator: Hashable) -> None:
        """Forget the atlas registered for ``locator``."""
        self._images.pop(locator, None)

    def decode(self, locator: Hashable) -> DecodedImage:
        """Return the atlas registered for ``locator``.

        Raises:
            DecodeError: If nothing is registered under ``locator``
        """
        try:
            image = self._images[locator]
        except KeyError:
            raise DecodeError(f"No atlas registered for {locator!r}") from None
        self.decode_count += 1
        return image

    def __contains__(self, locator: object) -> bool:
        return locator in self._images

    def __len__(self) -> int:
        return len(self._images)
