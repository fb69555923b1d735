"""Tests for unbiased range reduction."""

import logging

import pytest

from xoroshiro import Xoroshiro128Plus, RAND_MAX, U64, RangeError, UsageError
from tests.utils import chi_square, CHI2_CRITICAL_001


def test_known_draws_seed42():
    # First outputs for seed 42 all fall below the rejection threshold,
    # so each maps to r // (RAND_MAX // 10).
    g = Xoroshiro128Plus(42)
    assert [g.range(0, 10) for _ in range(3)] == [7, 2, 5]


def test_known_draws_with_offset():
    g = Xoroshiro128Plus(42)
    assert [g.range(100, 110) for _ in range(3)] == [107, 102, 105]


@pytest.mark.parametrize("lo,hi", [
    (0, 1),
    (0, 2),
    (0, 10),
    (5, 37),
    (1000, 1001),
    (0, (1 << 63) + 7),
    (int(RAND_MAX) - 5, int(RAND_MAX)),
    (0, int(RAND_MAX)),
])
def test_bounds(lo, hi):
    g = Xoroshiro128Plus(2718281828)
    for _ in range(10_000):
        r = g.range(lo, hi)
        assert lo <= r < hi


def test_single_value_range():
    g = Xoroshiro128Plus(1)
    assert all(g.range(41, 42) == 41 for _ in range(100))


def test_equal_bounds_returns_min_copy():
    g = Xoroshiro128Plus(1)
    lo = U64(5)
    r = g.range(lo, 5)
    assert r == 5
    assert r is not lo


def test_equal_bounds_does_not_draw():
    g = Xoroshiro128Plus(1)
    before = g.getstate()
    assert g.range(5, 5) == 5
    assert g.getstate() == before


def test_min_greater_than_max_returns_zero(caplog):
    g = Xoroshiro128Plus(1)
    with caplog.at_level(logging.WARNING, logger="xoroshiro.generator"):
        assert g.range(10, 3) == 0
    assert "min > max" in caplog.text


def test_min_greater_than_max_strict():
    g = Xoroshiro128Plus(1, strict=True)
    with pytest.raises(RangeError):
        g.range(10, 3)
    with pytest.raises(ValueError):
        g.range(RAND_MAX, 0)


def test_rejects_tail_values():
    # span = 2^63 + 1 gives bucket size 1 and threshold == span, so raw
    # draws at or above span are redrawn.
    span = (1 << 63) + 1
    g = Xoroshiro128Plus(1)
    # Raw outputs from this state: RAND_MAX, 0xFFFFFFFFFFFFBFFF, 0x0083FFEFF000001F
    g.setstate((RAND_MAX, 0))
    assert g.range(10, 10 + span) == 10 + 0x0083FFEFF000001F

    g.setstate((RAND_MAX, 0))
    for _ in range(3):
        g.next()
    after_three = g.getstate()
    g.setstate((RAND_MAX, 0))
    g.range(0, span)
    assert g.getstate() == after_three


def test_returns_u64():
    assert isinstance(Xoroshiro128Plus(3).range(0, 100), U64)


def test_uniform_small_range():
    g = Xoroshiro128Plus(0xC0FFEE)
    counts = [0] * 4
    n = 40_000
    for _ in range(n):
        counts[int(g.range(0, 4))] += 1
    for c in counts:
        assert abs(c / n - 0.25) < 0.01
    assert chi_square(counts) < CHI2_CRITICAL_001[3]


def test_uniform_ten_buckets():
    g = Xoroshiro128Plus(0xBADC0DE)
    counts = [0] * 10
    for _ in range(50_000):
        counts[int(g.range(20, 30)) - 20] += 1
    assert chi_square(counts) < CHI2_CRITICAL_001[9]


def test_rejects_non_integer_bounds():
    g = Xoroshiro128Plus(1)
    before = g.getstate()
    for lo, hi in [(0.5, 3.9), (True, 3), (0, None), ("x", 10)]:
        with pytest.raises(UsageError):
            g.range(lo, hi)
    assert g.getstate() == before


def test_accepts_u64_bounds():
    assert Xoroshiro128Plus(42).range(U64(0), U64(10)) == 7
