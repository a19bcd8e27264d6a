"""Tests for atlas to cube packing."""

from collections.abc import Callable

import numpy as np
import pytest

from lut_color_cube.cube.atlas import AtlasLayout
from lut_color_cube.cube.color_cube import ColorCube
from lut_color_cube.cube.packer import CubePacker
from lut_color_cube.decoding.base import DecodedImage
from lut_color_cube.errors import DecodeError, InvalidAtlasDimensionsError, LutError


class TestCubePacker:
    """Test cases for CubePacker class."""

    def test_init_default_dimension(self) -> None:
        """Test default initialization."""
        assert CubePacker().dimension == 64

    def test_init_invalid_dimension(self) -> None:
        """Test initialization with invalid dimension."""
        with pytest.raises(ValueError, match="Cube dimension must be at least 2"):
            CubePacker(1)

    def test_pack_512_atlas(self) -> None:
        """Test packing a production-size 512x512 atlas."""
        atlas = np.zeros((512, 512, 4), dtype=np.uint8)
        cube = CubePacker().pack(atlas)

        assert cube.dimension == 64
        assert len(cube) == 64**3 * 4
        assert cube.data.dtype == np.float32

    def test_pack_invalid_width(self) -> None:
        """Test packing an atlas whose width is not a multiple of 64."""
        atlas = np.zeros((512, 500, 4), dtype=np.uint8)
        with pytest.raises(InvalidAtlasDimensionsError):
            CubePacker().pack(atlas)

    def test_pack_rejects_rgb(self) -> None:
        """Test packing an atlas without alpha channel."""
        atlas = np.zeros((8, 8, 3), dtype=np.uint8)
        with pytest.raises(DecodeError, match="Expected 4 \\(RGBA\\)"):
            CubePacker(4).pack(atlas)

    def test_pack_rejects_float_pixels(self) -> None:
        """Test packing an atlas that is not 8-bit."""
        atlas = np.zeros((8, 8, 4), dtype=np.float32)
        with pytest.raises(DecodeError, match="Expected uint8"):
            CubePacker(4).pack(atlas)

    def test_pack_rejects_flat_array(self) -> None:
        """Test packing a pixel array with missing dimensions."""
        with pytest.raises(DecodeError, match="Expected 3D array"):
            CubePacker(4).pack(np.zeros((8, 32), dtype=np.uint8))

    def test_pack_layout_mismatch(self) -> None:
        """Test an explicit layout that does not match the pixels."""
        atlas = np.zeros((8, 8, 4), dtype=np.uint8)
        with pytest.raises(InvalidAtlasDimensionsError) as exc_info:
            CubePacker(4).pack(atlas, AtlasLayout(1, 4, 4))
        assert isinstance(exc_info.value, LutError)
        assert (exc_info.value.width, exc_info.value.height) == (8, 8)

    def test_normalization(self) -> None:
        """Test bytes are divided by 255."""
        atlas = np.full((8, 8, 4), 51, dtype=np.uint8)
        cube = CubePacker(4).pack(atlas)
        assert np.allclose(cube.data, 51 / 255.0, atol=1e-7)

        atlas[:] = 255
        assert np.all(CubePacker(4).pack(atlas).data == 1.0)

    def test_red_ramp_slices(
        self, make_slice_atlas: Callable[..., np.ndarray], red_ramp_colors: np.ndarray
    ) -> None:
        """Test solid tile z decodes to (z/64, 0, 0, 1) over the whole slice."""
        atlas = make_slice_atlas(64, 8, 8, red_ramp_colors)
        grid = CubePacker().pack(atlas).as_grid()

        for z in range(64):
            expected = np.array([z / 64.0, 0.0, 0.0, 1.0], dtype=np.float32)
            assert np.allclose(grid[z], expected, atol=0.5 / 255 + 1e-6), f"slice {z}"

    def test_slice_mapping_non_square(
        self, make_slice_atlas: Callable[..., np.ndarray]
    ) -> None:
        """Test z = row * columns + col for a 4 x 16 tile atlas."""
        colors = np.zeros((64, 4), dtype=np.uint8)
        colors[:, 0] = np.arange(64)
        colors[:, 1] = np.arange(64) // 16  # tile row
        colors[:, 2] = np.arange(64) % 16  # tile column
        atlas = make_slice_atlas(64, 4, 16, colors)
        assert atlas.shape == (256, 1024, 4)

        grid = CubePacker().pack(atlas).as_grid()
        for z in range(64):
            assert np.allclose(grid[z, :, :, 0], z / 255.0)
            assert np.allclose(grid[z, :, :, 1], (z // 16) / 255.0)
            assert np.allclose(grid[z, :, :, 2], (z % 16) / 255.0)

    def test_tile_pixels_map_to_x_and_y(self) -> None:
        """Test a tile's pixel rows are y and pixel columns are x."""
        n = 4
        atlas = np.zeros((8, 8, 4), dtype=np.uint8)
        # Tile (1, 0) is slice z=2; mark local row 3, column 1
        atlas[4 + 3, 0 + 1] = [10, 20, 30, 40]

        cube = CubePacker(n).pack(atlas)
        assert np.allclose(cube.cell(1, 3, 2), np.array([10, 20, 30, 40]) / 255.0)
        assert np.count_nonzero(cube.data) == 4

    def test_pack_matches_index_formula(self) -> None:
        """Test every cube value against the explicit atlas index formula."""
        n, rows, columns = 4, 2, 2
        rng = np.random.default_rng(3)
        atlas = rng.integers(0, 256, size=(rows * n, columns * n, 4), dtype=np.uint8)
        data = CubePacker(n).pack(atlas).data

        for z in range(n):
            row, col = divmod(z, columns)
            for y in range(n):
                for x in range(n):
                    offset = (z * n * n + y * n + x) * 4
                    pixel = atlas[row * n + y, col * n + x]
                    assert np.allclose(data[offset : offset + 4], pixel / 255.0)

    def test_round_trip_through_atlas(
        self, make_slice_atlas: Callable[..., np.ndarray]
    ) -> None:
        """Test packing then unpacking reconstructs the original atlas."""
        rng = np.random.default_rng(11)
        colors = rng.integers(0, 256, size=(64, 4), dtype=np.uint8)
        atlas = make_slice_atlas(64, 8, 8, colors)

        packer = CubePacker()
        cube = packer.pack(atlas)
        assert np.array_equal(packer.unpack(cube, AtlasLayout(8, 8, 64)), atlas)

        grid = cube.as_grid()
        for z in range(64):
            assert np.allclose(grid[z], colors[z] / 255.0)

    def test_unpack_default_layout(self) -> None:
        """Test unpacking uses the square layout by default."""
        atlas = CubePacker().unpack(ColorCube.filled(1.0))
        assert atlas.shape == (512, 512, 4)
        assert atlas.dtype == np.uint8
        assert np.all(atlas == 255)

    def test_unpack_clips_out_of_range(self) -> None:
        """Test values outside [0, 1] are clipped when rendering bytes."""
        assert np.all(CubePacker(4).unpack(ColorCube.filled(1.5, 4)) == 255)
        assert np.all(CubePacker(4).unpack(ColorCube.filled(-0.5, 4)) == 0)

    def test_unpack_dimension_mismatch(self) -> None:
        """Test unpacking a cube of another dimension."""
        with pytest.raises(ValueError, match="does not match packer dimension"):
            CubePacker(4).unpack(ColorCube.filled(0.0, 2))

    def test_pack_image(self) -> None:
        """Test packing a decoded image."""
        image = DecodedImage(np.full((8, 8, 4), 255, dtype=np.uint8))
        assert CubePacker(4).pack_image(image) == ColorCube.filled(1.0, 4)
