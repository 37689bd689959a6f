# tests/unit/test_cached.py
import threading
import time

import pytest

from propreport.core.report import Cached


def test_computes_lazily_and_once():
    calls = []
    cached = Cached.of(lambda: calls.append(1) or object())

    assert calls == []
    assert cached.is_computed is False

    first = cached.get()
    second = cached.get()

    assert first is second
    assert calls == [1]
    assert cached.is_computed is True


def test_factory_error_is_not_cached():
    attempts = []

    def factory():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("boom")
        return "ok"

    cached = Cached(factory)

    with pytest.raises(RuntimeError):
        cached.get()
    assert cached.is_computed is False
    assert cached.get() == "ok"
    assert len(attempts) == 2


def test_concurrent_get_runs_factory_exactly_once():
    calls = []
    barrier = threading.Barrier(8)

    def factory():
        calls.append(1)
        time.sleep(0.05)
        return object()

    cached = Cached(factory)
    results = []

    def worker():
        barrier.wait()
        results.append(cached.get())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert len(results) == 8
    assert all(r is results[0] for r in results)
