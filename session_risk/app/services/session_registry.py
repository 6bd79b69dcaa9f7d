"""
Session Registry

Single writer for session validity. Every mutation commits before returning,
so a register -> count sequence inside one request always counts the row it
just inserted.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from session_risk.app.services.live_session_terminator import ILiveSessionTerminator
from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.domain.entities import UserSession
from session_risk.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class SessionRegistry:
    """
    Tracks active sessions per user.

    Business Rules:
    - Registration requires an existing user
    - Deactivation is idempotent and terminal
    - Bulk deactivation is always scoped to one user
    - A failure on one session never aborts a bulk deactivation
    """

    def __init__(self, uow: UnitOfWork, terminator: ILiveSessionTerminator):
        self.uow = uow
        self.terminator = terminator

    async def register(
        self,
        user_id: UUID,
        token: str,
        device_id: Optional[str],
        ip_address: Optional[str],
    ) -> Result[UserSession]:
        """
        Insert a new active session and commit it.

        Returns:
            Result with the stored UserSession, or Error
            (PRINCIPAL_NOT_FOUND, SESSION_TOKEN_CONFLICT)
        """
        user = await self.uow.users.get_by_id(user_id)
        if user is None:
            return Return.err(
                Error("PRINCIPAL_NOT_FOUND", f"User not found with ID: {user_id}")
            )

        session = UserSession(
            token=token,
            user_id=user_id,
            device_id=device_id,
            ip_address=ip_address,
        )
        try:
            await self.uow.sessions.create(session)
            await self.uow.commit()
        except IntegrityError:
            await self.uow.rollback()
            logger.warning(f"Rejected duplicate session token for user {user_id}")
            return Return.err(
                Error("SESSION_TOKEN_CONFLICT", "Session token already registered")
            )

        logger.info(f"Session registered for user {user_id} (device={device_id}, ip={ip_address})")
        return Return.ok(session)

    async def count_active(self, user_id: UUID) -> int:
        return await self.uow.sessions.count_active_by_user_id(user_id)

    async def list_active(self, user_id: UUID) -> List[UserSession]:
        return await self.uow.sessions.get_active_by_user_id(user_id)

    async def deactivate(self, token: str) -> bool:
        """Deactivate one session. Unknown or inactive tokens are a no-op."""
        await self._terminate_live(token)
        changed = await self.uow.sessions.deactivate_by_token(token)
        await self.uow.commit()
        if changed:
            logger.info(f"Session deactivated: {token[:8]}...")
        return changed

    async def deactivate_all_except(
        self, user_id: UUID, surviving_token: Optional[str] = None
    ) -> List[str]:
        """
        Deactivate every active session of user_id except surviving_token.

        surviving_token=None deactivates all of them.

        Returns:
            Tokens that were deactivated by this call
        """
        sessions = await self.uow.sessions.get_active_by_user_id(user_id)
        logger.info(
            f"Invalidating sessions for user {user_id}, keeping {surviving_token or 'none'}: "
            f"{len(sessions)} active"
        )

        # Plain values: a rollback below expires the ORM rows
        losing = [
            (s.token, s.device_id, s.ip_address)
            for s in sessions
            if surviving_token is None or s.token != surviving_token
        ]

        deactivated = []
        for token, device_id, ip_address in losing:
            logger.warning(f"Kicking out session {token[:8]}... (device={device_id}, ip={ip_address})")

            await self._terminate_live(token)

            try:
                changed = await self.uow.sessions.deactivate_for_user(user_id, token)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                logger.error(f"Error invalidating session {token[:8]}...: {exc}")
                continue

            if changed:
                deactivated.append(token)

        return deactivated

    async def _terminate_live(self, token: str) -> None:
        # Best effort, the stored row is deactivated regardless
        try:
            await self.terminator.terminate(token)
        except Exception as exc:
            logger.error(f"Live session termination failed for {token[:8]}...: {exc}")
