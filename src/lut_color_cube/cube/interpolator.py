"""Linear interpolation between identity and effect color cubes."""

from __future__ import annotations

import math
import numbers

import numpy as np

from ..errors import CubeSizeMismatchError, InvalidIntensityError
from .color_cube import ColorCube


class CubeInterpolator:
    """Blend two equally sized color cubes by an intensity factor."""

    @staticmethod
    def validate_intensity(intensity: float) -> float:
        """Check that an intensity lies in [0, 1].

        Out-of-range values are rejected, never clamped.

        Returns:
            The intensity as a float

        Raises:
            InvalidIntensityError: If intensity is not a finite number in [0, 1]
        """
        if isinstance(intensity, bool) or not isinstance(intensity, numbers.Real):
            raise InvalidIntensityError(intensity)
        value = float(intensity)
        if not math.isfinite(value) or value < 0.0 or value > 1.0:
            raise InvalidIntensityError(intensity)
        return value

    @classmethod
    def blend(
        cls, identity: ColorCube, effect: ColorCube, intensity: float
    ) -> ColorCube:
        """Interpolate from ``identity`` towards ``effect``.

        Computes ``identity + (effect - identity) * intensity`` element-wise
        in float32.

        Args:
            identity: Cube used at intensity 0
            effect: Cube used at intensity 1
            intensity: Blend factor in [0, 1]

        Returns:
            New blended cube

        Raises:
            CubeSizeMismatchError: If the cubes differ in length
            InvalidIntensityError: If intensity is outside [0, 1]
        """
        if len(identity) != len(effect):
            raise CubeSizeMismatchError(
                f"Cube size mismatch: identity has {len(identity)} values, "
                f"effect has {len(effect)}"
            )

        factor = np.float32(cls.validate_intensity(intensity))

        blended = effect.data - identity.data
        blended *= factor
        blended += identity.data

        return ColorCube(blended, identity.dimension)
