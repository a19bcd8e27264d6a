"""Tests for photo effects and effect cube rendering."""

from unittest.mock import patch

import numpy as np
import pytest

from lut_color_cube.converter import LutCubeConverter
from lut_color_cube.decoding.memory import MemoryDecoder
from lut_color_cube.effects import (
    NONE_EFFECT_IDENTIFIER,
    EffectCubeRenderer,
    PhotoEffect,
    PhotoEffectRegistry,
)
from lut_color_cube.errors import InvalidIntensityError


@pytest.fixture
def renderer(small_decoder: MemoryDecoder) -> EffectCubeRenderer:
    """Renderer over 4x4x4 test atlases."""
    return EffectCubeRenderer(
        LutCubeConverter("identity", decoder=small_decoder, dimension=4)
    )


class TestPhotoEffectRegistry:
    """Test cases for PhotoEffectRegistry class."""

    def test_none_effect_always_present(self) -> None:
        """Test the 'None' effect is registered first without a LUT."""
        registry = PhotoEffectRegistry()
        effect = registry.effect_with_identifier(NONE_EFFECT_IDENTIFIER)

        assert effect is not None
        assert effect.lut_locator is None
        assert not effect.uses_lut
        assert registry.all_effects[0] == effect

    def test_register_and_lookup(self) -> None:
        """Test effects are found by identifier in registration order."""
        registry = PhotoEffectRegistry(
            [PhotoEffect("K1", "K1.png", "K1"), PhotoEffect("BW", "BW.png", "BW")]
        )

        assert len(registry) == 3
        assert "K1" in registry
        assert registry.effect_with_identifier("BW") == PhotoEffect("BW", "BW.png", "BW")
        assert [e.identifier for e in registry.all_effects] == ["None", "K1", "BW"]

    def test_unknown_identifier(self) -> None:
        """Test looking up an effect that does not exist."""
        assert PhotoEffectRegistry().effect_with_identifier("Sepia") is None

    def test_register_replaces(self) -> None:
        """Test re-registering an identifier replaces the effect."""
        registry = PhotoEffectRegistry([PhotoEffect("K1", "old.png", "K1")])
        registry.register(PhotoEffect("K1", "new.png", "K1"))

        assert registry.effect_with_identifier("K1").lut_locator == "new.png"
        assert len(registry) == 2

    def test_invalid_identifier(self) -> None:
        """Test effects need a non-empty identifier."""
        with pytest.raises(ValueError, match="Invalid effect identifier"):
            PhotoEffectRegistry().register(PhotoEffect("", "x.png", "X"))

    def test_from_locators(self) -> None:
        """Test building a registry from a locator mapping."""
        registry = PhotoEffectRegistry.from_locators({"Fall": "Fall.png"})
        effect = registry.effect_with_identifier("Fall")

        assert effect == PhotoEffect("Fall", "Fall.png", "Fall")
        assert effect.uses_lut


class TestEffectCubeRenderer:
    """Test cases for EffectCubeRenderer class."""

    def test_none_effect_has_no_data(self, renderer: EffectCubeRenderer) -> None:
        """Test effects without a LUT yield no cube data."""
        effect = PhotoEffectRegistry().effect_with_identifier(NONE_EFFECT_IDENTIFIER)
        assert renderer.cube_data_for(effect, 1.0) is None

    def test_lut_effect_data(self, renderer: EffectCubeRenderer) -> None:
        """Test a LUT effect yields blended cube data."""
        data = renderer.cube_data_for(PhotoEffect("Invert", "invert", "Invert"), 0.5)

        assert data is not None
        values = np.frombuffer(data, dtype=np.float32).reshape(-1, 4)
        assert np.allclose(values[:, :3], 0.5, atol=1e-6)

    def test_unchanged_request_is_cached(self, renderer: EffectCubeRenderer) -> None:
        """Test the same effect and intensity reuse the previous data."""
        effect = PhotoEffect("Invert", "invert", "Invert")
        first = renderer.cube_data_for(effect, 0.75)

        with patch.object(
            LutCubeConverter, "blend", side_effect=AssertionError("recomputed")
        ):
            second = renderer.cube_data_for(effect, 0.75)

        assert second is first

    def test_intensity_change_recomputes(self, renderer: EffectCubeRenderer) -> None:
        """Test a new intensity recomputes the data."""
        effect = PhotoEffect("Invert", "invert", "Invert")
        first = renderer.cube_data_for(effect, 0.25)
        second = renderer.cube_data_for(effect, 0.75)

        assert first != second
        assert renderer.converter.intensity == 0.75

    def test_effect_change_recomputes(
        self, renderer: EffectCubeRenderer, small_decoder: MemoryDecoder
    ) -> None:
        """Test a new effect LUT is loaded into the converter."""
        renderer.cube_data_for(PhotoEffect("Invert", "invert", "Invert"), 1.0)
        data = renderer.cube_data_for(PhotoEffect("Plain", "identity", "Plain"), 1.0)

        assert renderer.converter.lut_locator == "identity"
        assert data == renderer.converter.identity_cube.to_bytes()
        assert small_decoder.decode_count == 3

    def test_broken_effect_has_no_data(self, renderer: EffectCubeRenderer) -> None:
        """Test effects whose LUT cannot be decoded yield no cube data."""
        effect = PhotoEffect("Broken", "missing", "Broken")
        assert renderer.cube_data_for(effect, 1.0) is None

    def test_invalid_intensity(self, renderer: EffectCubeRenderer) -> None:
        """Test out-of-range intensities are rejected."""
        with pytest.raises(InvalidIntensityError):
            renderer.cube_data_for(PhotoEffect("Invert", "invert", "Invert"), 2.0)

    def test_invalidate(self, renderer: EffectCubeRenderer) -> None:
        """Test invalidation forces recomputation."""
        effect = PhotoEffect("Invert", "invert", "Invert")
        first = renderer.cube_data_for(effect, 0.5)
        renderer.invalidate()
        second = renderer.cube_data_for(effect, 0.5)

        assert second == first
        assert second is not first
