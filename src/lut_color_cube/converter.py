# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""High-level converter producing blended color cube data from LUT atlases."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any

from .cache import IdentityCubeCache
from .cube.atlas import CUBE_DIMENSION
from .cube.color_cube import ColorCube
from .cube.interpolator import CubeInterpolator
from .cube.packer import CubePacker
from .decoding.base import ImageDecoder
from .decoding.factory import DecoderFactory
from .errors import (
    DecodeError,
    IdentityLutError,
    InvalidAtlasDimensionsError,
    LutError,
    MissingEffectError,
)

logger = logging.getLogger(__name__)


class LutCubeConverter:
    """Create color cube data by interpolating an identity LUT and an effect LUT.

    The identity cube is decoded once at construction and kept for the
    converter's lifetime. The effect cube is rebuilt synchronously every time
    :attr:`lut_locator` changes. The blended output is recomputed on every read
    of :attr:`color_cube_data`, which is expensive: callers should cache the
    result themselves and serialize access across threads.
    """

    DEFAULT_DIMENSION = CUBE_DIMENSION
    DEFAULT_INTENSITY = 1.0

    def __init__(
        self,
        identity_locator: Hashable,
        decoder: ImageDecoder | None = None,
        dimension: int = DEFAULT_DIMENSION,
        identity_cache: IdentityCubeCache | None = None,
    ) -> None:
        """Initialize the converter and build its identity cube.

        Args:
            identity_locator: Locator of the identity LUT atlas
            decoder: Image decoder (default: the factory's default decoder)
            dimension: Cube dimension (default: 64)
            identity_cache: Optional cache shared with other converters

        Raises:
            IdentityLutError: If the identity atlas cannot be turned into a cube
        """
        self.identity_locator = identity_locator
        self.decoder = decoder if decoder is not None else DecoderFactory.create_decoder()
        self.dimension = dimension
        self.intensity: float = self.DEFAULT_INTENSITY

        self._packer = CubePacker(dimension)
        self._identity_cache = identity_cache
        self._lut_locator: Hashable | None = None
        self._effect_cube: ColorCube | None = None
        self._effect_error: LutError | None = None
        self._closed = False

        try:
            if identity_cache is not None:
                self._identity_cube = identity_cache.acquire(
                    identity_locator, self.decoder, dimension
                )
            else:
                self._identity_cube = self._load_cube(identity_locator)
        except (DecodeError, InvalidAtlasDimensionsError) as e:
            raise IdentityLutError(
                f"Unable to create identity LUT from {identity_locator}: {e}"
            ) from e

        logger.info(f"Identity cube ready from {identity_locator}")

    def _load_cube(self, locator: Hashable) -> ColorCube:
        """Decode an atlas and pack it into a cube."""
        image = self.decoder.decode(locator)
        try:
            return self._packer.pack_image(image)
        except InvalidAtlasDimensionsError:
            logger.warning(f"Invalid color LUT {locator}: {image.width}x{image.height}")
            raise

    @property
    def identity_cube(self) -> ColorCube:
        """Identity cube, built once per converter."""
        return self._identity_cube

    @property
    def effect_cube(self) -> ColorCube | None:
        """Current effect cube, or None when absent or failed."""
        return self._effect_cube

    @property
    def effect_error(self) -> LutError | None:
        """Failure of the last effect load, if it failed."""
        return self._effect_error

    @property
    def lut_locator(self) -> Hashable | None:
        """Locator of the effect LUT atlas."""
        return self._lut_locator

    @lut_locator.setter
    def lut_locator(self, locator: Hashable | None) -> None:
        """Replace the effect LUT, rebuilding its cube immediately.

        A decode failure leaves the converter usable without an effect; the
        failure is logged and kept in :attr:`effect_error`.
        """
        try:
            self.load_effect(locator)
        except (DecodeError, InvalidAtlasDimensionsError) as e:
            logger.error(f"Unable to create LUT from {locator}: {e}")

    def load_effect(self, locator: Hashable | None) -> ColorCube | None:
        """Replace the effect LUT and return its cube.

        Setting the locator that is already loaded is a no-op; ``None``
        clears the effect.

        Raises:
            DecodeError: If the atlas cannot be decoded
            InvalidAtlasDimensionsError: If the atlas geometry is invalid
        """
        if locator == self._lut_locator and (
            self._effect_cube is not None or locator is None
        ):
            return self._effect_cube

        self._lut_locator = locator
        self._effect_cube = None
        self._effect_error = None

        if locator is None:
            logger.debug("Effect LUT cleared")
            return None

        try:
            self._effect_cube = self._load_cube(locator)
        except (DecodeError, InvalidAtlasDimensionsError) as e:
            self._effect_error = e
            raise

        logger.info(f"Effect cube ready from {locator}")
        return self._effect_cube

    def blend(self) -> ColorCube:
        """Interpolate identity and effect cubes at the current intensity.

        Returns:
            Freshly blended cube

        Raises:
            InvalidIntensityError: If intensity is outside [0, 1]
            MissingEffectError: If no effect cube is loaded
            CubeSizeMismatchError: If the cubes differ in length
        """
        CubeInterpolator.validate_intensity(self.intensity)

        if self._effect_cube is None:
            if self._effect_error is not None:
                raise MissingEffectError(
                    f"Effect LUT {self._lut_locator} failed to load"
                ) from self._effect_error
            raise MissingEffectError("No effect LUT set")

        return CubeInterpolator.blend(
            self._identity_cube, self._effect_cube, self.intensity
        )

    @property
    def color_cube_data(self) -> bytes | None:
        """Blended cube as native float32 bytes, or None if it cannot be built.

        Calling this is expensive and the result should be cached.
        """
        try:
            return self.blend().to_bytes()
        except LutError as e:
            logger.debug(f"No color cube data: {e}")
            return None

    @staticmethod
    def color_cube_data_from_lut(
        locator: Hashable,
        decoder: ImageDecoder | None = None,
        dimension: int = DEFAULT_DIMENSION,
    ) -> bytes | None:
        """Read a single LUT atlas and convert it to color cube data.

        Args:
            locator: Locator of the LUT atlas
            decoder: Image decoder (default: the factory's default decoder)
            dimension: Cube dimension (default: 64)

        Returns:
            Cube as native float32 bytes, or None if the atlas is unusable
        """
        if decoder is None:
            decoder = DecoderFactory.create_decoder()

        try:
            image = decoder.decode(locator)
            return CubePacker(dimension).pack_image(image).to_bytes()
        except InvalidAtlasDimensionsError as e:
            logger.warning(f"Invalid color LUT {locator}: {e}")
        except DecodeError as e:
            logger.error(f"Unable to decode LUT {locator}: {e}")
        return None

    def close(self) -> None:
        """Release the shared identity cube, if one was acquired."""
        if self._closed:
            return
        self._closed = True
        if self._identity_cache is not None:
            self._identity_cache.release(self.identity_locator, self.dimension)

    def __enter__(self) -> LutCubeConverter:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit."""
        del exc_type, exc_val, exc_tb  # Mark as used for static analysis
        self.close()
