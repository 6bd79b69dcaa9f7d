"""
Login Use Case

Handles user authentication, session registration and risk enforcement.
"""

import logging
import secrets

import bcrypt

from session_risk.app.services.live_session_terminator import ILiveSessionTerminator
from session_risk.app.services.principal_locks import PrincipalLocks
from session_risk.app.services.risk_policy import RiskPolicy
from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.app.use_cases.sessions import RegisterSessionUseCase
from session_risk.api.utils.jwt import generate_jwt
from session_risk.libs.result import Error, Result, Return
from .dtos import LoginCommand, LoginResponse

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Each login gets a fresh unguessable session token
    - The new session survives enforcement, older ones are kicked out
    - JWT carries the session token so requests can be checked against it
    """

    def __init__(
        self,
        uow: UnitOfWork,
        terminator: ILiveSessionTerminator,
        policy: RiskPolicy,
        locks: PrincipalLocks,
    ):
        self.uow = uow
        self.register_session = RegisterSessionUseCase(uow, terminator, policy, locks)

    async def execute(self, command: LoginCommand) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            command: Credentials and client metadata

        Returns:
            Result with LoginResponse containing the access token and risk evaluation, or Error
        """
        logger.info(f"Authentication attempt for user: {command.username}")

        async with self.uow:
            user = await self.uow.users.get_by_username(command.username)

            # Constant-time password verification (prevent timing attacks)
            # Always perform hash check even if user not found
            if user is None:
                bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(12))
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid username or password")
                )

            password_valid = bcrypt.checkpw(
                command.password.encode(), user.password_hash.encode()
            )
            if not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid username or password")
                )

            user_id = user.id
            username = user.username
            role = user.role.value
            privileged = user.is_privileged

        session_token = secrets.token_urlsafe(32)
        registered = await self.register_session.execute(
            user_id, session_token, command.device_id, command.ip_address
        )
        if registered.is_err():
            return registered

        logger.info(f"User authenticated successfully: {username} (privileged={privileged})")

        access_token = generate_jwt(user_id, session_token, role)
        return Return.ok(
            LoginResponse(
                access_token=access_token,
                session_token=session_token,
                user_id=str(user_id),
                username=username,
                role=role,
                risk=registered.value.evaluation,
            )
        )
