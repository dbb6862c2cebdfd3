import pytest

from maze_rng import MazeRNG


def test_same_seed_same_sequence():
    a, b = MazeRNG(42), MazeRNG(42)
    assert [a.get_int(0, 100) for _ in range(20)] == [b.get_int(0, 100) for _ in range(20)]


def test_unseeded_rng_records_its_seed():
    rng = MazeRNG()
    replay = MazeRNG(rng.initial_seed)
    assert rng.get_int(0, 10**6) == replay.get_int(0, 10**6)


def test_get_int_is_inclusive():
    rng = MazeRNG(1)
    values = {rng.get_int(2, 4) for _ in range(200)}
    assert values == {2, 3, 4}
    with pytest.raises(ValueError):
        rng.get_int(5, 4)


def test_get_bool_extremes():
    rng = MazeRNG(1)
    assert not any(rng.get_bool(0.0) for _ in range(50))
    assert all(rng.get_bool(1.0) for _ in range(50))
    with pytest.raises(ValueError):
        rng.get_bool(1.5)


def test_choice():
    rng = MazeRNG(8)
    items = ["a", "b", "c"]
    assert {rng.choice(items) for _ in range(100)} == set(items)
    with pytest.raises(ValueError):
        rng.choice([])


def test_shuffle_is_a_seeded_permutation():
    items = list(range(10))
    a, b = list(items), list(items)
    MazeRNG(5).shuffle(a)
    MazeRNG(5).shuffle(b)
    assert a == b
    assert sorted(a) == items


def test_set_state_replays_draws():
    rng = MazeRNG(10)
    rng.get_int(0, 9)
    saved = rng.get_state()
    expected = [rng.get_int(0, 1000) for _ in range(5)]

    restored = MazeRNG(0)
    restored.set_state(saved)
    assert restored.initial_seed == 10
    assert [restored.get_int(0, 1000) for _ in range(5)] == expected
