#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Blend a 50% desaturation LUT atlas with the identity atlas.

Writes an identity atlas and a desaturation atlas into a temporary
directory, loads both through LutCubeConverter and prints sample cube
cells at several intensities.
"""

import sys
import tempfile
from pathlib import Path

import numpy as np

from lut_color_cube import LutCubeConverter, LutError
from lut_color_cube.cube import IdentityCubeGenerator, save_atlas


def desaturate(rgb: np.ndarray, amount: float = 0.5) -> np.ndarray:
    """Mix RGB values towards Rec. 709 luma."""
    luma = rgb @ np.array([0.2126, 0.7152, 0.0722], dtype=np.float32)
    return rgb + (luma[:, np.newaxis] - rgb) * amount


def main() -> int:
    """Build atlases, blend them and print sample cells."""
    print("=" * 70)
    print("Desaturation LUT Blend Demo")
    print("=" * 70)

    generator = IdentityCubeGenerator()

    with tempfile.TemporaryDirectory() as tmp:
        identity_path = Path(tmp) / "Identity.png"
        effect_path = Path(tmp) / "Desaturate.png"

        save_atlas(generator.identity_atlas(), identity_path)
        save_atlas(generator.transformed_atlas(desaturate), effect_path)
        print(f"\nWrote atlases to {tmp}")

        try:
            converter = LutCubeConverter(identity_path)
        except LutError as e:
            print(f"❌ {e}")
            return 1

        converter.lut_locator = effect_path
        if converter.effect_cube is None:
            print(f"❌ Effect LUT failed: {converter.effect_error}")
            return 1

        # Pure red input: cell x=63, y=0, z=0
        for intensity in (0.0, 0.5, 1.0):
            converter.intensity = intensity
            cube = converter.blend()
            print(f"  intensity {intensity:.1f}: red -> {cube.cell(63, 0, 0)}")

        data = converter.color_cube_data
        print(f"\nColor cube data: {len(data) if data else 0} bytes")

    print("✅ Demo completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
