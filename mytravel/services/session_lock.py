"""
Session-scoped in-process locks guarding checkout against overlapping submissions.
"""
from contextlib import contextmanager
import threading
from typing import Dict, Iterator


_locks: Dict[str, threading.Lock] = {}
_locks_guard = threading.Lock()


def acquire_session_lock(session_id: str) -> bool:
    """
    Try to take the lock for a session without waiting.

    Returns False when another request for the session holds it.
    """
    if not session_id:
        return False

    with _locks_guard:
        lock = _locks.setdefault(session_id, threading.Lock())

    return lock.acquire(blocking=False)


def release_session_lock(session_id: str) -> None:
    """Release a held session lock and drop its registry entry."""
    if not session_id:
        return

    with _locks_guard:
        lock = _locks.get(session_id)
    if lock is None:
        return

    if lock.locked():
        try:
            lock.release()
        except RuntimeError:
            return

    with _locks_guard:
        if _locks.get(session_id) is lock and not lock.locked():
            _locks.pop(session_id, None)


@contextmanager
def session_request_lock(session_id: str) -> Iterator[bool]:
    """Yield whether the session lock was acquired; release it on exit."""
    acquired = acquire_session_lock(session_id)
    try:
        yield acquired
    finally:
        if acquired:
            release_session_lock(session_id)
