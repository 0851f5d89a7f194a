import pytest

from ddc.core.rng import RNG


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    ints_a = [rng_a.randint(1, 100) for _ in range(5)]
    ints_b = [rng_b.randint(1, 100) for _ in range(5)]
    rolls_a = [rng_a.roll((-2, 3)) for _ in range(5)]
    rolls_b = [rng_b.roll((-2, 3)) for _ in range(5)]
    chances_a = [rng_a.chance(0.35) for _ in range(5)]
    chances_b = [rng_b.chance(0.35) for _ in range(5)]

    assert ints_a == ints_b
    assert rolls_a == rolls_b
    assert chances_a == chances_b


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    draws_a = [rng_a.randint(1, 100) for _ in range(5)]
    draws_b = [rng_b.randint(1, 100) for _ in range(5)]

    assert draws_a != draws_b


def test_roll_stays_inside_bounds() -> None:
    rng = RNG(3)
    assert all(-2 <= rng.roll((-2, 3)) <= 3 for _ in range(200))


def test_chance_extremes() -> None:
    rng = RNG(9)
    assert not any(rng.chance(0.0) for _ in range(50))
    assert all(rng.chance(1.0) for _ in range(50))


def test_choice_rejects_empty_sequence() -> None:
    with pytest.raises(ValueError):
        RNG(1).choice([])


def test_seed_is_exposed() -> None:
    assert RNG(77).seed == 77
