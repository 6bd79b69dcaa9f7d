import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Hashable
from weakref import WeakValueDictionary


class PrincipalLocks:
    """
    One asyncio.Lock per principal.

    The login chain register -> count -> evaluate -> deactivate for a given
    principal runs while holding its lock, so two concurrent logins for the
    same user cannot both observe a stale under-cap count. Locks for
    different principals are independent. Entries disappear once no
    coroutine holds or waits on them.
    """

    def __init__(self):
        self._locks: "WeakValueDictionary[Hashable, asyncio.Lock]" = WeakValueDictionary()

    def get(self, principal_id: Hashable) -> asyncio.Lock:
        lock = self._locks.get(principal_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[principal_id] = lock
        return lock

    @asynccontextmanager
    async def hold(self, principal_id: Hashable) -> AsyncIterator[None]:
        lock = self.get(principal_id)
        async with lock:
            yield
