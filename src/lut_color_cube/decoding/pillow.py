# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Pillow-backed atlas decoder."""

from __future__ import annotations

import logging
import os
from collections.abc import Hashable

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..errors import DecodeError
from .base import DecodedImage, ImageDecoder

logger = logging.getLogger(__name__)


class PillowDecoder(ImageDecoder):
    """Decode atlas files from disk with Pillow, converting to 8-bit RGBA."""

    name = "pillow"

    def decode(self, locator: Hashable) -> DecodedImage:
        """Decode an image file into an RGBA byte grid.

        Args:
            locator: Path to the image file (``str`` or ``os.PathLike``)

        Returns:
            Decoded RGBA image

        Raises:
            DecodeError: If the file cannot be opened or parsed
        """
        if not isinstance(locator, (str, os.PathLike)):
            raise DecodeError(f"Expected a file path, got {type(locator).__name__}")

        try:
            with Image.open(locator) as image:
                logger.debug(
                    f"Decoding {locator}: {image.format} {image.mode} {image.size[0]}x{image.size[1]}"
                )
                pixels = np.asarray(image.convert("RGBA"), dtype=np.uint8)
        except FileNotFoundError as e:
            raise DecodeError(f"LUT image not found: {locator}") from e
        except UnidentifiedImageError as e:
            raise DecodeError(f"Unrecognized image format: {locator}") from e
        except Image.DecompressionBombError as e:
            raise DecodeError(f"LUT image too large: {locator}: {e}") from e
        except (OSError, ValueError) as e:
            raise DecodeError(f"Failed to decode {locator}: {e}") from e

        return DecodedImage(pixels)
