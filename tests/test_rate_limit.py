"""Tests for the per-client rate limiter."""

import threading
import time

from metagate.core.rate_limit import ClientRateLimiter


def test_allows_up_to_max_then_blocks():
    limiter = ClientRateLimiter(window_seconds=60, max_requests=3)

    decisions = [limiter.hit("10.0.0.1") for _ in range(4)]

    assert [d.allowed for d in decisions] == [True, True, True, False]
    assert [d.remaining for d in decisions] == [2, 1, 0, 0]
    assert decisions[-1].limit == 3


def test_window_resets_after_expiry():
    limiter = ClientRateLimiter(window_seconds=1, max_requests=1)

    assert limiter.hit("10.0.0.1").allowed
    assert not limiter.hit("10.0.0.1").allowed

    time.sleep(1.2)

    assert limiter.hit("10.0.0.1").allowed


def test_clients_are_counted_independently():
    limiter = ClientRateLimiter(window_seconds=60, max_requests=1)

    assert limiter.hit("10.0.0.1").allowed
    assert limiter.hit("10.0.0.2").allowed
    assert not limiter.hit("10.0.0.1").allowed


def test_reset_after_within_window():
    limiter = ClientRateLimiter(window_seconds=60, max_requests=5)

    decision = limiter.hit("a")

    assert 55 < decision.reset_after <= 60


def test_window_shorter_than_a_second_is_rounded_up():
    limiter = ClientRateLimiter(window_seconds=0, max_requests=5)

    assert limiter.item.get_expiry() == 1


def test_concurrent_hits_are_all_counted():
    limiter = ClientRateLimiter(window_seconds=60, max_requests=10_000)
    per_thread = 250

    def worker():
        for _ in range(per_thread):
            limiter.hit("shared")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert limiter.hit("shared").remaining == 10_000 - 8 * per_thread - 1
