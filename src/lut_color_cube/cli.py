# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Command-line interface for lut-color-cube."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from .converter import LutCubeConverter
from .cube.atlas import CUBE_DIMENSION, AtlasLayout
from .cube.generator import IdentityCubeGenerator, save_atlas
from .decoding.base import ImageDecoder
from .decoding.factory import DecoderFactory, DecoderNotAvailableError
from .errors import LutError


def configure_logging(verbose: bool, info_logging: bool) -> None:
    """Configure root logging from the CLI verbosity flags."""
    if verbose:
        log_level = logging.DEBUG
    elif info_logging:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING  # Quiet mode - only warnings and errors

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose (debug) logging")
@click.option("--info-logging", is_flag=True, help="Enable info-level logging")
@click.option(
    "--decoder",
    default=DecoderFactory.DEFAULT_DECODER,
    help="Image decoder used to read LUT atlases",
)
@click.version_option(package_name="lut-color-cube")
@click.pass_context
def main(ctx: click.Context, verbose: bool, info_logging: bool, decoder: str) -> None:
    """LUT Color Cube - Build and blend 3D color cubes from LUT atlas images.

    Atlases are PNG images made of N x N tiles, one tile per cube slice.
    Output buffers are raw float32 RGBA cells, red index varying fastest.
    """
    configure_logging(verbose, info_logging)
    ctx.ensure_object(dict)
    ctx.obj["decoder"] = decoder


def _create_decoder(ctx: click.Context) -> ImageDecoder:
    try:
        return DecoderFactory.create_decoder(ctx.obj["decoder"])
    except DecoderNotAvailableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument("atlas", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--dimension", default=CUBE_DIMENSION, help="Cube dimension")
@click.pass_context
def info(ctx: click.Context, atlas: Path, dimension: int) -> None:
    """Show the tile layout of an ATLAS image."""
    decoder = _create_decoder(ctx)
    try:
        image = decoder.decode(atlas)
        layout = AtlasLayout.from_size(image.width, image.height, dimension)
    except (LutError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Atlas: {atlas}")
    click.echo(f"  size: {layout.width}x{layout.height}")
    click.echo(f"  tiles: {layout.row_count} rows x {layout.column_count} columns")
    click.echo(f"  cube: {dimension}x{dimension}x{dimension}")


@main.command()
@click.argument("atlas", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--dimension", default=CUBE_DIMENSION, help="Cube dimension")
@click.pass_context
def pack(ctx: click.Context, atlas: Path, output: Path, dimension: int) -> None:
    """Convert an ATLAS image into a raw cube buffer written to OUTPUT."""
    decoder = _create_decoder(ctx)
    try:
        data = LutCubeConverter.color_cube_data_from_lut(atlas, decoder, dimension)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if data is None:
        click.echo(f"Error: unable to convert {atlas} into a color cube", err=True)
        sys.exit(1)

    output.write_bytes(data)
    click.echo(f"✅ Wrote {len(data)} bytes to {output}")


@main.command()
@click.argument(
    "identity", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.argument("effect", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--intensity",
    default=LutCubeConverter.DEFAULT_INTENSITY,
    help="Blend factor between identity (0.0) and effect (1.0)",
)
@click.option("--dimension", default=CUBE_DIMENSION, help="Cube dimension")
@click.pass_context
def blend(
    ctx: click.Context,
    identity: Path,
    effect: Path,
    output: Path,
    intensity: float,
    dimension: int,
) -> None:
    """Blend IDENTITY and EFFECT atlases and write the cube buffer to OUTPUT."""
    try:
        with LutCubeConverter(identity, _create_decoder(ctx), dimension) as converter:
            converter.load_effect(effect)
            converter.intensity = intensity
            data = converter.blend().to_bytes()
    except (LutError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    output.write_bytes(data)
    click.echo(f"✅ Wrote {len(data)} bytes to {output}")


@main.command()
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--dimension", default=CUBE_DIMENSION, help="Cube dimension")
def identity(output: Path, dimension: int) -> None:
    """Write an identity atlas image to OUTPUT."""
    try:
        atlas = IdentityCubeGenerator(dimension).identity_atlas()
        save_atlas(atlas, output)
    except (ValueError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"✅ Wrote {atlas.shape[1]}x{atlas.shape[0]} identity atlas to {output}")


if __name__ == "__main__":
    main()
