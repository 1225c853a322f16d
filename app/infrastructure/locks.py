"""Process-wide named locks that serialize administrative operations."""

from __future__ import annotations

import threading
from collections import defaultdict
from typing import DefaultDict


class OperationLockRegistry:
    """Hand out one lock per operation name.

    Every caller asking for the same name shares the same lock, so wrapping
    an operation in ``with registry.get(name):`` lets only one run at a time
    inside this process.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: DefaultDict[str, threading.Lock] = defaultdict(threading.Lock)

    def get(self, name: str) -> threading.Lock:
        """Return the lock registered under ``name``."""

        with self._guard:
            return self._locks[name]

    def is_locked(self, name: str) -> bool:
        with self._guard:
            lock = self._locks.get(name)
        return bool(lock and lock.locked())


operation_locks = OperationLockRegistry()


def get_operation_lock(name: str) -> threading.Lock:
    """Return the shared lock for ``name`` from the default registry."""

    return operation_locks.get(name)


__all__ = ["OperationLockRegistry", "get_operation_lock", "operation_locks"]
