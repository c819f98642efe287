from __future__ import annotations

import pytest

from stream_client.core.retry import ExponentialBackoffPolicy, FixedIntervalPolicy


def test_fixed_interval_defaults_to_five_seconds_forever():
    policy = FixedIntervalPolicy()
    assert [policy.next_delay(n) for n in (1, 2, 50, 10_000)] == [5.0, 5.0, 5.0, 5.0]


def test_fixed_interval_with_cap():
    policy = FixedIntervalPolicy(2.0, max_attempts=3)
    assert policy.next_delay(3) == 2.0
    assert policy.next_delay(4) is None


def test_fixed_interval_rejects_negative():
    with pytest.raises(ValueError):
        FixedIntervalPolicy(-1)


def test_exponential_backoff_doubles_until_maximum():
    policy = ExponentialBackoffPolicy(initial=1.0, maximum=10.0)
    assert [policy.next_delay(n) for n in range(1, 7)] == [1.0, 2.0, 4.0, 8.0, 10.0, 10.0]


def test_exponential_backoff_survives_huge_attempt_numbers():
    policy = ExponentialBackoffPolicy(initial=5.0, maximum=300.0)
    assert policy.next_delay(100_000) == 300.0


def test_exponential_backoff_with_cap():
    policy = ExponentialBackoffPolicy(initial=1.0, maximum=10.0, max_attempts=2)
    assert policy.next_delay(2) == 2.0
    assert policy.next_delay(3) is None


@pytest.mark.parametrize("initial,maximum", [(0, 10), (-1, 10), (5, 1)])
def test_exponential_backoff_rejects_bad_bounds(initial, maximum):
    with pytest.raises(ValueError):
        ExponentialBackoffPolicy(initial, maximum)
