# propreport/core/report/cache.py
"""
Cached - invocation-scoped, computed-once value.

Provides:
- Lazy computation on first get()
- Exactly one computation under concurrent get() calls
- No global state (owned by the task instance that needs it)
"""

from __future__ import annotations

import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class Cached(Generic[T]):
    """
    Guarded one-shot lazy value.

    If the factory raises nothing is stored and the error propagates;
    the next get() tries again.
    """

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._lock = threading.Lock()
        self._computed = False
        self._value: Optional[T] = None

    @classmethod
    def of(cls, factory: Callable[[], T]) -> "Cached[T]":
        return cls(factory)

    @property
    def is_computed(self) -> bool:
        return self._computed

    def get(self) -> T:
        if self._computed:
            return self._value  # type: ignore[return-value]
        with self._lock:
            if not self._computed:
                self._value = self._factory()
                self._computed = True
        return self._value  # type: ignore[return-value]
