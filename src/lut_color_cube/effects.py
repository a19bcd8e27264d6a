# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Named photo effects backed by LUT atlases."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from typing import NamedTuple

from .converter import LutCubeConverter
from .cube.interpolator import CubeInterpolator

logger = logging.getLogger(__name__)

NONE_EFFECT_IDENTIFIER = "None"


class PhotoEffect(NamedTuple):
    """An effect that can be applied to a photo through a color cube."""

    identifier: str
    lut_locator: Hashable | None
    display_name: str

    @property
    def uses_lut(self) -> bool:
        """Whether applying this effect needs color cube data."""
        return self.lut_locator is not None


class PhotoEffectRegistry:
    """Ordered collection of photo effects looked up by identifier."""

    def __init__(self, effects: Iterable[PhotoEffect] | None = None) -> None:
        """Initialize registry.

        Args:
            effects: Initial effects; the 'None' effect is always registered first
        """
        self._effects: dict[str, PhotoEffect] = {}
        self.register(PhotoEffect(NONE_EFFECT_IDENTIFIER, None, "None"))
        for effect in effects or ():
            self.register(effect)

    @classmethod
    def from_locators(cls, locators: dict[str, Hashable]) -> PhotoEffectRegistry:
        """Build a registry from an identifier -> LUT locator mapping."""
        return cls(
            PhotoEffect(identifier, locator, identifier)
            for identifier, locator in locators.items()
        )

    def register(self, effect: PhotoEffect) -> None:
        """Add an effect, replacing any effect with the same identifier."""
        if not effect.identifier:
            raise ValueError(f"Invalid effect identifier: {effect.identifier!r}")
        self._effects[effect.identifier] = effect

    def effect_with_identifier(self, identifier: str) -> PhotoEffect | None:
        """Get the effect registered under ``identifier``, if any."""
        return self._effects.get(identifier)

    @property
    def all_effects(self) -> list[PhotoEffect]:
        """All effects in registration order."""
        return list(self._effects.values())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._effects

    def __len__(self) -> int:
        return len(self._effects)


class EffectCubeRenderer:
    """Provide color cube data for effects, recomputing only on change.

    Keeps the last (locator, intensity, data) triple and reuses the data
    while neither the effect's LUT nor the intensity changed.
    """

    def __init__(self, converter: LutCubeConverter) -> None:
        """Initialize renderer.

        Args:
            converter: Converter whose identity cube is used for blending
        """
        self.converter = converter
        self._cached_locator: Hashable | None = None
        self._cached_intensity: float | None = None
        self._cached_data: bytes | None = None

    def cube_data_for(self, effect: PhotoEffect, intensity: float) -> bytes | None:
        """Get color cube data for ``effect`` at ``intensity``.

        Returns:
            Cube data, or None for effects without a LUT and for unusable LUTs

        Raises:
            InvalidIntensityError: If intensity is outside [0, 1]
        """
        intensity = CubeInterpolator.validate_intensity(intensity)

        if not effect.uses_lut:
            self.invalidate()
            return None

        if (
            self._cached_data is not None
            and effect.lut_locator == self._cached_locator
            and intensity == self._cached_intensity
        ):
            return self._cached_data

        logger.debug(f"Building cube data for {effect.identifier} at {intensity:.3f}")
        self.converter.lut_locator = effect.lut_locator
        self.converter.intensity = intensity
        data = self.converter.color_cube_data

        if data is None:
            self.invalidate()
            return None

        self._cached_locator = effect.lut_locator
        self._cached_intensity = intensity
        self._cached_data = data
        return data

    def invalidate(self) -> None:
        """Forget the cached cube data."""
        self._cached_locator = None
        self._cached_intensity = None
        self._cached_data = None
