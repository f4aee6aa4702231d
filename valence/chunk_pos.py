"""Chunk coordinates in a world."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["ChunkPos"]

_CHUNK_WIDTH = 16


@dataclass(frozen=True, order=True)
class ChunkPos:
    """The X and Z position of a chunk."""

    x: int
    z: int

    @classmethod
    def at(cls, x: float, z: float) -> ChunkPos:
        """The chunk containing the world-space point ``(x, z)``."""
        return cls(math.floor(x / _CHUNK_WIDTH), math.floor(z / _CHUNK_WIDTH))

    @classmethod
    def from_block(cls, x: int, z: int) -> ChunkPos:
        """The chunk containing the block at integer coordinates ``(x, z)``."""
        return cls(x // _CHUNK_WIDTH, z // _CHUNK_WIDTH)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.z