import time

import pytest

from lcddino.shared import delay_ms


def test_delay_waits_at_least_requested_time():
    start = time.monotonic()
    result = delay_ms(20)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed >= 0.019


def test_zero_delay_returns_quickly():
    start = time.monotonic()
    result = delay_ms(0)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed < 0.5


@pytest.mark.parametrize("ms", [1, 5, 10])
def test_small_delays_wait_roughly_requested_time(ms):
    start = time.monotonic()
    result = delay_ms(ms)
    elapsed = time.monotonic() - start
    assert result is None
    assert ms / 1000 * 0.95 <= elapsed < ms / 1000 + 0.5


def test_negative_delay_is_rejected():
    with pytest.raises(ValueError):
        delay_ms(-1)