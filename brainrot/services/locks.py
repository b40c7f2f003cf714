"""In-process per-user mutual exclusion around read-modify-write actions."""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator

_GUARD = threading.Lock()
_LOCKS: Dict[str, threading.Lock] = {}


def lock_for(username: str) -> threading.Lock:
    with _GUARD:
        lock = _LOCKS.get(username)
        if lock is None:
            lock = _LOCKS[username] = threading.Lock()
        return lock


@contextmanager
def hold(*usernames: str) -> Iterator[None]:
    """Acquire the locks of every distinct name in sorted order."""
    names = sorted({n for n in usernames if n})
    acquired = []
    try:
        for name in names:
            lock = lock_for(name)
            lock.acquire()
            acquired.append(lock)
        yield
    finally:
        for lock in reversed(acquired):
            lock.release()
