import logging
import time
from collections import OrderedDict
from typing import Callable

from session_risk.app.services.live_session_terminator import ILiveSessionTerminator

logger = logging.getLogger(__name__)


class InMemoryLiveSessionTerminator(ILiveSessionTerminator):
    """
    Process-local live-session layer.

    Keeps the tokens that were terminated so request authentication can
    reject them without a database round trip. An entry is only needed while
    an access token bound to it can still be valid, so entries expire after
    retention_seconds and the oldest are evicted beyond max_size. The
    database active flag stays authoritative after eviction.
    """

    def __init__(
        self,
        retention_seconds: float,
        max_size: int = 100000,
        clock: Callable[[], float] = time.monotonic,
    ):
        # token -> expiry on the clock, insertion order is expiry order
        self._terminated: "OrderedDict[str, float]" = OrderedDict()
        self._retention_seconds = retention_seconds
        self._max_size = max_size
        self._clock = clock

    async def terminate(self, token: str) -> None:
        self._cleanup()
        if token in self._terminated:
            logger.info(f"Live session {token[:8]}... already terminated")
            return

        while len(self._terminated) >= self._max_size:
            self._terminated.popitem(last=False)

        self._terminated[token] = self._clock() + self._retention_seconds
        logger.info(f"Live session {token[:8]}... terminated")

    def is_terminated(self, token: str) -> bool:
        self._cleanup()
        return token in self._terminated

    def __len__(self) -> int:
        return len(self._terminated)

    def _cleanup(self) -> None:
        now = self._clock()
        while self._terminated:
            token, expires_at = next(iter(self._terminated.items()))
            if expires_at > now:
                break
            self._terminated.popitem(last=False)
