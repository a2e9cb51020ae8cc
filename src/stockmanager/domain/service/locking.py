"""Per-key mutual exclusion for order aggregates and product rows.

Callers take the order key first, then every product key the operation
touches. ``hold()`` acquires several keys in sorted order so two
operations that share products can never deadlock on them.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager


def customer_order_key(order_id: int) -> str:
    return f"customer-order:{order_id}"


def supplier_order_key(order_id: int) -> str:
    return f"supplier-order:{order_id}"


def product_key(product_id: str) -> str:
    return f"product:{product_id}"


class KeyedLocks:
    """Lock registry that only keeps entries for keys in use.

    An entry is created when the first caller asks for a key and dropped
    when the last holder or waiter lets go of it, so a long-running
    process does not accumulate one lock per id it has ever seen.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        # key -> [lock, number of holders and waiters]
        self._locks: dict[str, list] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    def _checkout(self, key: str) -> threading.Lock:
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = [threading.Lock(), 0]
            entry[1] += 1
            return entry[0]

    def _checkin(self, key: str) -> None:
        with self._guard:
            entry = self._locks[key]
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[key]

    @contextmanager
    def hold(self, *keys: str) -> Iterator[None]:
        """Hold every lock in *keys* for the duration of the block."""
        with ExitStack() as stack:
            for key in sorted(set(keys)):
                lock = self._checkout(key)
                stack.callback(self._checkin, key)
                stack.enter_context(lock)
            yield


# Shared by every handler in the process unless one is injected.
default_locks = KeyedLocks()
