from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from session_risk.adapter.services.live_session_terminator import InMemoryLiveSessionTerminator
from session_risk.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from session_risk.api.utils.jwt import verify_jwt
from session_risk.app.services.principal_locks import PrincipalLocks
from session_risk.app.services.risk_policy import RiskPolicy

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()

# Process-wide collaborators, static for the process lifetime
live_sessions = InMemoryLiveSessionTerminator(
    retention_seconds=ApplicationConfig.ACCESS_TOKEN_EXPIRE_MINUTES * 60
)
principal_locks = PrincipalLocks()
risk_policy = RiskPolicy.from_config(ApplicationConfig)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_live_session_terminator() -> InMemoryLiveSessionTerminator:
    return live_sessions


def get_principal_locks() -> PrincipalLocks:
    return principal_locks


def get_risk_policy() -> RiskPolicy:
    return risk_policy


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
    terminator: InMemoryLiveSessionTerminator = Depends(get_live_session_terminator),
) -> dict:
    """
    Dependency to authenticate a request against its tracked session.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id, sid (session token), role

    Raises:
        HTTPException: 401 if the token is invalid or expired, or its session
            was logged out or kicked out by enforcement
    """
    payload = verify_jwt(credentials.credentials)
    if payload is None or "sid" not in payload:
        raise _unauthorized("Invalid or expired token")

    session_token = payload["sid"]
    if terminator.is_terminated(session_token):
        raise _unauthorized("Session has been invalidated")

    async with uow:
        session = await uow.sessions.get_by_token(session_token)
        if (
            session is None
            or not session.active
            or str(session.user_id) != payload.get("user_id")
        ):
            raise _unauthorized("Session has been invalidated")

        await uow.sessions.touch(session_token)
        await uow.commit()

    return payload
