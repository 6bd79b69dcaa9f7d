from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from session_risk.api.error import ClientError, ServerError
from session_risk.app.services.live_session_terminator import ILiveSessionTerminator
from session_risk.app.services.principal_locks import PrincipalLocks
from session_risk.app.services.risk_policy import RiskPolicy
from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.app.use_cases.sessions import (
    DeactivateSessionResponse,
    ManageSessionsUseCase,
    SessionInfo,
)
from session_risk.depends import (
    get_current_user,
    get_live_session_terminator,
    get_principal_locks,
    get_risk_policy,
    get_unit_of_work,
)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=List[SessionInfo])
async def my_sessions(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    terminator: ILiveSessionTerminator = Depends(get_live_session_terminator),
    policy: RiskPolicy = Depends(get_risk_policy),
    locks: PrincipalLocks = Depends(get_principal_locks),
):
    """
    List My Active Sessions

    Returns the caller's active sessions in login order.
    """
    use_case = ManageSessionsUseCase(uow, terminator, policy, locks)
    result = await use_case.list_active(UUID(current_user["user_id"]))

    if result.is_err():
        error = result.error
        if error.code == "PRINCIPAL_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.delete(
    "/{session_token}",
    status_code=status.HTTP_200_OK,
    response_model=DeactivateSessionResponse,
)
async def end_session(
    session_token: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    terminator: ILiveSessionTerminator = Depends(get_live_session_terminator),
    policy: RiskPolicy = Depends(get_risk_policy),
    locks: PrincipalLocks = Depends(get_principal_locks),
):
    """
    End One Of My Sessions

    Logs out a specific device. Ending an already-ended session succeeds
    with deactivated=false.

    Raises:
        - 404 Not Found: Session not found or not owned by the caller
        - 500 Internal Server Error: Server error
    """
    use_case = ManageSessionsUseCase(uow, terminator, policy, locks)
    result = await use_case.deactivate_own(session_token, UUID(current_user["user_id"]))

    if result.is_err():
        error = result.error
        if error.code == "SESSION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
