"""In-process, per-user serialization of cart mutations.

Two concurrent add-to-cart calls for the same user would otherwise both find
no cart and open two. The lock is held around the whole command dispatch so
that the unit of work has committed before the next writer reads.

The registry holds locks weakly: an entry lives only while some caller
holds or waits on it.
"""

import threading
import weakref
from contextlib import contextmanager

_registry_lock = threading.Lock()
_user_locks: "weakref.WeakValueDictionary[str, threading.Lock]" = weakref.WeakValueDictionary()


def lock_for(user_id) -> threading.Lock:
    key = str(user_id)
    with _registry_lock:
        lock = _user_locks.get(key)
        if lock is None:
            lock = threading.Lock()
            _user_locks[key] = lock
        return lock


@contextmanager
def user_cart_lock(user_id):
    lock = lock_for(user_id)
    with lock:
        yield
