import pytest

from garden.scheduler import ClockTicker


def test_fires_once_per_interval():
    calls = []
    ticker = ClockTicker()
    ticker.start(600, lambda: calls.append(1))
    assert ticker.advance(599) == 0
    assert ticker.advance(1) == 1
    assert ticker.advance(300) == 0
    assert ticker.advance(300) == 1
    assert len(calls) == 2


def test_stall_is_capped():
    calls = []
    ticker = ClockTicker(max_ticks_per_advance=4)
    ticker.start(100, lambda: calls.append(1))
    assert ticker.advance(10_000) == 4
    assert ticker.advance(0) == 1
    assert ticker.advance(0) == 0
    assert len(calls) == 5


def test_cancel_stops_callbacks():
    calls = []
    ticker = ClockTicker()
    ticker.start(100, lambda: calls.append(1))
    ticker.cancel()
    assert ticker.advance(1000) == 0
    assert calls == []


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        ClockTicker().start(0, lambda: None)


def test_make_rng_is_reproducible():
    from garden.seed_util import make_rng

    a, seed_a = make_rng(7)
    b, seed_b = make_rng(7)
    assert seed_a == seed_b == 7
    assert a.random() == b.random()
    _, fresh = make_rng(-1)
    assert 0 <= fresh < 2**31
