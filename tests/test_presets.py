"""
test_presets.py
---------------

Unit tests for OneIn fixed-bound checks and the preset catalog.
"""

import copy
import pickle

import pytest

import odds
from odds import bounded, presets
from odds.presets import OneIn
from odds.rng import seed_thread, thread_rng
from odds.stats import hit_rate
from odds.xoshiro import Xoshiro256ss


CATALOG = [2, 3, 4, 5, 6, 8, 10, 12, 16, 20, 25, 30, 50, 60, 100, 128, 256]


def test_catalog_denominators():
    assert sorted(presets.PRESETS) == CATALOG
    for n in CATALOG:
        check = getattr(presets, f"p{n}")
        assert isinstance(check, OneIn)
        assert check.bound == n
        assert presets.PRESETS[n] is check
        assert getattr(odds, f"p{n}") is check


@pytest.mark.parametrize("n", [1, 2, 3, 7, 64, 100, 256, 1000, (1 << 64) - 1])
@pytest.mark.parametrize("method", ["multiply", "portable"])
def test_matches_runtime_one_in(n, method):
    check = OneIn(n)
    a = Xoshiro256ss(n & 0xFFFF)
    b = copy.copy(a)
    for _ in range(500):
        assert check(a, method) == bounded.one_in(b, n, method)
    assert a == b


def test_one_in_1_always_true_without_draw(seeded_rng):
    reference = copy.copy(seeded_rng)
    assert all(OneIn(1)(seeded_rng) for _ in range(100))
    assert seeded_rng == reference


def test_default_stream_is_used():
    seed_thread(5)
    reference = copy.copy(thread_rng())
    results = [presets.p6() for _ in range(200)]
    assert results == [bounded.one_in(reference, 6) for _ in range(200)]


@pytest.mark.parametrize("wrapper, n", [
    (presets.one_in_2, 2), (presets.one_in_5, 5), (presets.one_in_10, 10),
    (presets.one_in_25, 25), (presets.one_in_50, 50), (presets.one_in_100, 100),
])
def test_named_wrappers(wrapper, n):
    seed_thread(n)
    reference = copy.copy(thread_rng())
    assert [wrapper() for _ in range(100)] == [bounded.one_in(reference, n) for _ in range(100)]


@pytest.mark.parametrize("check, expected", [(presets.p4, 0.25), (presets.p10, 0.1), (presets.p3, 1 / 3)])
def test_hit_rates(check, expected):
    rate = hit_rate(check, 200_000, Xoshiro256ss(17))
    assert abs(rate - expected) < 0.01


# ---------------------------------------------------------------------
# Object behavior
# ---------------------------------------------------------------------
@pytest.mark.parametrize("n, exc", [(0, ValueError), (-3, ValueError), (2.5, TypeError)])
def test_invalid_denominator(n, exc):
    with pytest.raises(exc):
        OneIn(n)


def test_immutable():
    with pytest.raises(AttributeError):
        presets.p2._bound = 3
    with pytest.raises(AttributeError):
        presets.p2.bound = 3


def test_equality_hash_repr():
    assert OneIn(100) == presets.p100
    assert hash(OneIn(100)) == hash(presets.p100)
    assert OneIn(3) != OneIn(4)
    assert repr(presets.p25) == "OneIn(25)"
    assert presets.p4.probability == 0.25


def test_usable_as_first_class_values():
    checks = {presets.p2: "coin", presets.p6: "die"}
    assert checks[OneIn(6)] == "die"
    assert all(callable(c) for c in presets.PRESETS.values())


def test_copy_and_deepcopy():
    assert copy.copy(presets.p100) == presets.p100
    table = copy.deepcopy({"crit": presets.p20, "checks": [presets.p2, OneIn(7)]})
    assert table["crit"] == presets.p20
    assert table["checks"] == [presets.p2, OneIn(7)]


@pytest.mark.parametrize("check", [OneIn(1), OneIn(6), presets.p256, OneIn((1 << 64) - 1)])
def test_pickle_round_trip(check):
    clone = pickle.loads(pickle.dumps(check))
    assert clone == check
    a, b = Xoshiro256ss(3), Xoshiro256ss(3)
    assert [clone(a) for _ in range(100)] == [check(b) for _ in range(100)]
