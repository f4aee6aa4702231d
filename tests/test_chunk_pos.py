import pytest

from valence.chunk_pos import ChunkPos


def test_at_origin():
    assert ChunkPos.at(0.0, 0.0) == ChunkPos(0, 0)


def test_at_negative_fraction_rounds_down():
    assert ChunkPos.at(-0.5, 15.9) == ChunkPos(-1, 0)


@pytest.mark.parametrize("k", [-5, -1, 0, 1, 7])
def test_at_chunk_boundaries(k):
    assert ChunkPos.at(16.0 * k, 16.0 * k + 15.999) == ChunkPos(k, k)


@pytest.mark.parametrize("x", range(-40, 40))
def test_from_block_agrees_with_at(x):
    assert ChunkPos.from_block(x, -x) == ChunkPos.at(float(x), float(-x))


@pytest.mark.parametrize("k", [-3, 0, 2])
def test_from_block_covers_whole_chunk(k):
    positions = {ChunkPos.from_block(16 * k + i, 16 * k + 15 - i) for i in range(16)}
    assert positions == {ChunkPos(k, k)}


def test_tuple_round_trip():
    pos = ChunkPos(3, -7)
    assert tuple(pos) == (3, -7)
    assert ChunkPos(*tuple(pos)) == pos
    x, z = pos
    assert (x, z) == (pos.x, pos.z)


def test_ordering_and_hashing():
    assert ChunkPos(1, 5) < ChunkPos(2, 0)
    assert ChunkPos(1, 0) < ChunkPos(1, 5)
    assert len({ChunkPos(1, 2), ChunkPos(1, 2), ChunkPos(2, 1)}) == 2