# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Reference-counted cache of identity cubes shared between converters."""

from __future__ import annotations

import logging
import threading
from collections.abc import Hashable

from .cube.color_cube import ColorCube
from .cube.packer import CubePacker
from .decoding.base import ImageDecoder

logger = logging.getLogger(__name__)

CacheKey = tuple[Hashable, int]


class IdentityCubeCache:
    """Share decoded identity cubes between converters.

    Entries are keyed by ``(locator, dimension)`` and hold immutable
    :class:`ColorCube` objects. Each :meth:`acquire` adds a reference, each
    :meth:`release` drops one; an entry is evicted when its count reaches zero.
    A cache is passed explicitly to the converters that should share it.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._cubes: dict[CacheKey, ColorCube] = {}
        self._ref_counts: dict[CacheKey, int] = {}
        self._lock = threading.Lock()

    def acquire(
        self, locator: Hashable, decoder: ImageDecoder, dimension: int
    ) -> ColorCube:
        """Get the identity cube for ``locator``, decoding it on first use.

        Args:
            locator: Identity atlas locator
            decoder: Decoder used when the cube is not cached yet
            dimension: Cube dimension

        Returns:
            Shared identity cube

        Raises:
            DecodeError: If the atlas cannot be decoded
            InvalidAtlasDimensionsError: If the atlas geometry is invalid
        """
        key = (locator, dimension)
        with self._lock:
            cube = self._cubes.get(key)
            if cube is None:
                logger.info(f"Decoding shared identity cube from {locator}")
                cube = CubePacker(dimension).pack_image(decoder.decode(locator))
                self._cubes[key] = cube
                self._ref_counts[key] = 0
            self._ref_counts[key] += 1
            return cube

    def release(self, locator: Hashable, dimension: int) -> None:
        """Drop one reference to a cached cube.

        Raises:
            KeyError: If the cube is not cached
        """
        key = (locator, dimension)
        with self._lock:
            if key not in self._ref_counts:
                raise KeyError(f"Identity cube for {locator!r} is not cached")
            self._ref_counts[key] -= 1
            if self._ref_counts[key] == 0:
                del self._ref_counts[key]
                del self._cubes[key]
                logger.debug(f"Evicted shared identity cube for {locator}")

    def ref_count(self, locator: Hashable, dimension: int) -> int:
        """Get the number of live references to a cached cube."""
        with self._lock:
            return self._ref_counts.get((locator, dimension), 0)

    def clear(self) -> None:
        """Drop every cached cube regardless of reference counts."""
        with self._lock:
            self._cubes.clear()
            self._ref_counts.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cubes

    def __len__(self) -> int:
        with self._lock:
            return len(self._cubes)
