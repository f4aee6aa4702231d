"""Entities in a world: identifiers, per-entity state and change tracking."""

from __future__ import annotations

import math
import uuid as _uuid
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from valence.constants import STANDARD_TPS

__all__ = ["EntityId", "Entity", "velocity_to_packet_units"]

_U32_MAX = 0xFFFF_FFFF
_I16_MIN = -0x8000
_I16_MAX = 0x7FFF

Vec3 = tuple[float, float, float]


@dataclass(frozen=True, order=True)
class EntityId:
    """Identifies an entity on the server.

    ``index`` locates the entity's slot and ``version`` is a non-zero
    32-bit number unique among live entities; an ID becomes invalid once
    its entity is removed and never becomes valid again.
    """

    index: int
    version: int

    def __post_init__(self) -> None:
        if not 0 <= self.index <= _U32_MAX:
            raise ValueError(f"index {self.index} is outside the u32 range")
        if not 1 <= self.version <= _U32_MAX:
            raise ValueError(f"version {self.version} must be a non-zero u32")

    def to_network_id(self) -> int:
        """The ID clients know this entity by: the version as a signed 32-bit int."""
        return self.version - (1 << 32) if self.version >= (1 << 31) else self.version


def _to_vec3(value: Iterable[float]) -> Vec3:
    x, y, z = value
    return (float(x), float(y), float(z))


class Entity:
    """An entity in a world, with its position, rotation, velocity and UUID.

    Changes to rotation and velocity are tracked so that only modified
    state needs to be sent to clients; :meth:`clear_modifications` resets
    the tracking at the end of a tick.
    """

    def __init__(self, kind: Any, uuid: _uuid.UUID, state: Any = None) -> None:
        self.state = state
        self._kind = kind
        self._uuid = uuid
        self.world: Any = None
        self._position: Vec3 = (0.0, 0.0, 0.0)
        self._old_position: Vec3 = (0.0, 0.0, 0.0)
        self._yaw = 0.0
        self._pitch = 0.0
        self._head_yaw = 0.0
        self._velocity: Vec3 = (0.0, 0.0, 0.0)
        self.on_ground = False
        self._events: list[Any] = []
        self._yaw_or_pitch_modified = False
        self._head_yaw_modified = False
        self._velocity_modified = False

    def __repr__(self) -> str:
        return f"Entity(kind={self._kind!r}, uuid={self._uuid}, position={self._position})"

    @property
    def kind(self) -> Any:
        """The kind of this entity."""
        return self._kind

    @property
    def uuid(self) -> _uuid.UUID:
        """The UUID of this entity."""
        return self._uuid

    @property
    def position(self) -> Vec3:
        """The position at the bottom of the entity's hitbox."""
        return self._position

    @position.setter
    def position(self, value: Iterable[float]) -> None:
        self._position = _to_vec3(value)

    @property
    def old_position(self) -> Vec3:
        """The position as it was at the end of the previous tick."""
        return self._old_position

    @property
    def yaw(self) -> float:
        """The yaw in degrees."""
        return self._yaw

    @property
    def pitch(self) -> float:
        """The pitch in degrees."""
        return self._pitch

    @property
    def head_yaw(self) -> float:
        """The head yaw in degrees."""
        return self._head_yaw

    @property
    def velocity(self) -> Vec3:
        """The velocity in metres per second."""
        return self._velocity

    @property
    def events(self) -> tuple[Any, ...]:
        """Entity events triggered this tick, in order."""
        return tuple(self._events)

    @property
    def yaw_or_pitch_modified(self) -> bool:
        return self._yaw_or_pitch_modified

    @property
    def head_yaw_modified(self) -> bool:
        return self._head_yaw_modified

    @property
    def velocity_modified(self) -> bool:
        return self._velocity_modified

    def push_event(self, event: Any) -> None:
        """Trigger an entity event for this entity."""
        self._events.append(event)

    def set_yaw(self, yaw: float) -> None:
        """Set the yaw in degrees, marking rotation as modified if it changed."""
        if self._yaw != yaw:
            self._yaw = yaw
            self._yaw_or_pitch_modified = True

    def set_pitch(self, pitch: float) -> None:
        """Set the pitch in degrees, marking rotation as modified if it changed."""
        if self._pitch != pitch:
            self._pitch = pitch
            self._yaw_or_pitch_modified = True

    def set_head_yaw(self, head_yaw: float) -> None:
        """Set the head yaw in degrees, marking it modified if it changed."""
        if self._head_yaw != head_yaw:
            self._head_yaw = head_yaw
            self._head_yaw_modified = True

    def set_velocity(self, velocity: Iterable[float]) -> None:
        """Set the velocity in m/s, marking it modified if it changed."""
        new_velocity = _to_vec3(velocity)
        if self._velocity != new_velocity:
            self._velocity = new_velocity
            self._velocity_modified = True

    def clear_modifications(self) -> None:
        """End the tick: remember the position, drop events and reset change flags."""
        self._old_position = self._position
        self._events.clear()
        self._yaw_or_pitch_modified = False
        self._head_yaw_modified = False
        self._velocity_modified = False


def _saturating_i16(value: float) -> int:
    if math.isnan(value):
        return 0
    if value <= _I16_MIN:
        return _I16_MIN
    if value >= _I16_MAX:
        return _I16_MAX
    return int(value)


def velocity_to_packet_units(velocity: Iterable[float]) -> tuple[int, int, int]:
    """Convert a velocity in m/s to the protocol's saturated 16-bit units."""
    scale = 8000.0 / STANDARD_TPS
    x, y, z = velocity
    return (
        _saturating_i16(scale * x),
        _saturating_i16(scale * y),
        _saturating_i16(scale * z),
    )