import random

import pytest

from valence.paletted_container import PalettedContainer


def matches(container, expected):
    assert len(container) == len(expected)
    return all(container.get(i) == expected[i] for i in range(len(expected)))


def test_random_assignments():
    length = 100
    rng = random.Random(1234)

    for _ in range(20):
        container = PalettedContainer(length, 0)
        init = rng.randrange(0, 64)
        container.fill(init)
        expected = [init] * length

        assert matches(container, expected)

        for _ in range(length * 10):
            idx = rng.randrange(0, length)
            val = rng.randrange(0, 64)

            assert container.get(idx) == container.set(idx, val)
            assert container.get(idx) == val
            expected[idx] = val

            container.optimize()

            assert matches(container, expected)


def test_new_container_holds_default():
    container = PalettedContainer(10, "air")
    assert len(container) == 10
    assert all(container.get(i) == "air" for i in range(10))


def test_set_returns_previous_value():
    container = PalettedContainer(4, 7)
    assert container.set(2, 9) == 7
    assert container.set(2, 3) == 9
    assert container.get(2) == 3
    assert container.get(1) == 7


def test_many_distinct_values_then_optimize_back():
    container = PalettedContainer(40, -1)
    for i in range(40):
        container.set(i, i)
    assert [container.get(i) for i in range(40)] == list(range(40))

    for i in range(40):
        container.set(i, i % 3)
    container.optimize()
    assert [container.get(i) for i in range(40)] == [i % 3 for i in range(40)]

    container.fill(5)
    container.optimize()
    assert [container.get(i) for i in range(40)] == [5] * 40


@pytest.mark.parametrize("index", [-1, 8, 100])
def test_out_of_bounds(index):
    container = PalettedContainer(8, 0)
    with pytest.raises(IndexError):
        container.get(index)
    with pytest.raises(IndexError):
        container.set(index, 1)


def test_zero_length_rejected():
    with pytest.raises(ValueError):
        PalettedContainer(0, 0)