"""Dimension configuration and identification."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from valence.constants import LIBRARY_NAMESPACE
from valence.ident import Ident

__all__ = ["DimensionEffects", "DimensionId", "Dimension", "validate_dimensions"]

_MAX_DIMENSIONS = 0xFFFF


class DimensionEffects(Enum):
    """Skybox and fog effects used in a dimension."""

    OVERWORLD = "overworld"
    THE_NETHER = "the_nether"
    THE_END = "the_end"


@dataclass(frozen=True, order=True)
class DimensionId:
    """Identifies a dimension by its index in the server's configuration."""

    value: int = 0

    def dimension_type_name(self) -> Ident:
        """The identifier of this dimension's type."""
        return Ident(f"{LIBRARY_NAMESPACE}:dimension_type_{self.value}")

    def dimension_name(self) -> Ident:
        """The identifier of this dimension."""
        return Ident(f"{LIBRARY_NAMESPACE}:dimension_{self.value}")


@dataclass
class Dimension:
    """Configuration of a dimension type."""

    natural: bool = True
    ambient_light: float = 1.0
    fixed_time: int | None = None
    effects: DimensionEffects = DimensionEffects.OVERWORLD
    min_y: int = -64
    height: int = 384

    def to_registry_item(self) -> dict[str, Any]:
        """The dimension-type registry entry describing this dimension."""
        item: dict[str, Any] = {
            "piglin_safe": True,
            "has_raids": True,
            "monster_spawn_light_level": 0,
            "monster_spawn_block_light_limit": 0,
            "natural": self.natural,
            "ambient_light": self.ambient_light,
            "infiniburn": "#minecraft:infiniburn_overworld",
            "respawn_anchor_works": True,
            "has_skylight": True,
            "bed_works": True,
            "effects": self.effects.value,
            "min_y": self.min_y,
            "height": self.height,
            "logical_height": self.height,
            "coordinate_scale": 1.0,
            "ultrawarm": False,
            "has_ceiling": False,
        }
        if self.fixed_time is not None:
            item["fixed_time"] = int(self.fixed_time)
        return item


def validate_dimensions(dimensions: Sequence[Dimension]) -> None:
    """Raise ``ValueError`` if the dimensions break the documented limits."""
    if not dimensions:
        raise ValueError("at least one dimension must be present")
    if len(dimensions) > _MAX_DIMENSIONS:
        raise ValueError("more than u16::MAX dimensions present")

    for i, dim in enumerate(dimensions):
        if dim.min_y % 16 != 0 or not -2032 <= dim.min_y <= 2016:
            raise ValueError(f"invalid min_y in dimension #{i}")
        if (
            dim.height % 16 != 0
            or not 0 <= dim.height <= 4064
            or dim.min_y + dim.height > 2032
        ):
            raise ValueError(f"invalid height in dimension #{i}")
        if not 0.0 <= dim.ambient_light <= 1.0:
            raise ValueError(f"ambient_light is out of range in dimension #{i}")
        if dim.fixed_time is not None and not 0 <= dim.fixed_time <= 24_000:
            raise ValueError(f"fixed_time is out of range in dimension #{i}")