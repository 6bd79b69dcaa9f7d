from abc import ABC, abstractmethod


class LiveSessionTerminationError(Exception):
    """Raised by a live-session layer that could not drop a session"""


class ILiveSessionTerminator(ABC):
    """
    Host live-session layer.

    Enforcement asks it to drop the client-side session for a token in
    addition to marking the stored row inactive. Implementations are best
    effort; the session registry contains any exception they raise.
    """

    @abstractmethod
    async def terminate(self, token: str) -> None:
        """Drop the live session bound to token"""
        pass
