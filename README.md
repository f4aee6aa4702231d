# valence

Building blocks for Minecraft servers (protocol 760, version 1.19.2) in
plain Python, with no third-party dependencies.

## Modules

- `valence.constants` holds `PROTOCOL_VERSION`, `VERSION_NAME`,
  `LIBRARY_NAMESPACE` (`"valence"`) and `STANDARD_TPS` (20).
- `valence.ident` provides resource identifiers such as `minecraft:apple`.
  `Ident` checks the string when it is created and raises
  `IdentParseError` (a `ValueError`) if the string is invalid. A missing
  namespace counts as `minecraft` for equality, ordering and hashing, and
  `str()` always shows `namespace:path`. `ident()` is a shorthand for
  `Ident()`.
- `valence.dimension` provides `Dimension` settings, `DimensionEffects` and
  `DimensionId`, which names a dimension and its type under the library
  namespace. `Dimension.to_registry_item()` builds the dimension-type registry
  entry as a dict. `validate_dimensions()` raises `ValueError` when a list of
  dimensions breaks the limits on count, `min_y`, `height`, `ambient_light`
  or `fixed_time`.
- `valence.chunk_pos` provides `ChunkPos`. `ChunkPos.at(x, z)` gives the chunk
  that contains a world-space point, and `ChunkPos.from_block(x, z)` gives the
  chunk that contains a block. A `ChunkPos` unpacks to `(x, z)`.
- `valence.paletted_container` provides `PalettedContainer`, a fixed-length
  store. It holds a single value, a palette of up to 16 distinct values, or a
  plain list, depending on its contents. `set()` returns the previous value,
  and `optimize()` shrinks the storage back down when it can.
- `valence.entity` provides `Entity`, which keeps position, rotation, head yaw
  and velocity. It records which of these changed and collects the events
  raised during the tick. `clear_modifications()` ends a tick. `EntityId` is
  an index and a non-zero version, and `to_network_id()` returns the version
  as a signed 32-bit int. `velocity_to_packet_units()` converts m/s to the
  protocol's saturated 16-bit units.

## Installation

```
pip install .
```

## Example

```python
import uuid

from valence.chunk_pos import ChunkPos
from valence.dimension import Dimension, DimensionId, validate_dimensions
from valence.entity import Entity, velocity_to_packet_units
from valence.ident import Ident
from valence.paletted_container import PalettedContainer

assert Ident("stone") == Ident("minecraft:stone")
assert str(Ident("stone")) == "minecraft:stone"

assert tuple(ChunkPos.at(-1.5, 33.0)) == (-1, 2)

validate_dimensions([Dimension()])
assert DimensionId(2).dimension_name() == Ident("valence:dimension_2")

blocks = PalettedContainer(4096, 0)
assert blocks.set(10, 7) == 0
assert blocks.get(10) == 7

entity = Entity("zombie", uuid.uuid4(), state={"hp": 20})
entity.set_yaw(90.0)
assert entity.yaw_or_pitch_modified
entity.clear_modifications()
assert not entity.yaw_or_pitch_modified

assert velocity_to_packet_units((1.0, 0.0, 0.0)) == (400, 0, 0)
```

## What this package does not do

The package is a data model only. It does not open sockets, accept clients,
encode or decode packets, or run a tick loop. It also has no container that
manages many entities, and it does not store or load worlds or chunks. A
server built on it has to supply those parts itself.

## Running the tests

```
pip install .[test]
pytest
```