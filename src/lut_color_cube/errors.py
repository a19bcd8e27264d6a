# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Exceptions raised while building and blending color cubes."""

from __future__ import annotations


class LutError(Exception):
    """Base exception for LUT cube construction and blending."""

    pass


class InvalidAtlasDimensionsError(LutError, ValueError):
    """Exception raised when an atlas does not factor into cube slices."""

    def __init__(self, width: int, height: int, dimension: int) -> None:
        self.width = width
        self.height = height
        self.dimension = dimension
        super().__init__(
            f"Invalid atlas dimensions {width}x{height} for cube dimension {dimension}: "
            f"width and height must be multiples of {dimension} and hold exactly "
            f"{dimension} tiles"
        )


class DecodeError(LutError):
    """Exception raised when an atlas resource cannot be decoded."""

    pass


class CubeSizeMismatchError(LutError, ValueError):
    """Exception raised when two cubes (or a cube and a buffer) differ in length."""

    pass


class InvalidIntensityError(LutError, ValueError):
    """Exception raised when a blend intensity is outside [0, 1]."""

    def __init__(self, intensity: float) -> None:
        self.intensity = intensity
        super().__init__(f"Intensity must be within [0, 1], got {intensity}")


class MissingEffectError(LutError):
    """Exception raised when blended data is requested without an effect cube."""

    pass


class IdentityLutError(LutError):
    """Exception raised when the identity cube of a converter cannot be built."""

    pass
