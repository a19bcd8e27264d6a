# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Image decoders turning atlas resources into RGBA byte grids."""

from .base import DecodedImage, ImageDecoder
from .factory import DecoderFactory, DecoderNotAvailableError
from .memory import MemoryDecoder

__all__ = [
    "DecodedImage",
    "DecoderFactory",
    "DecoderNotAvailableError",
    "ImageDecoder",
    "MemoryDecoder",
]
