"""
Risk Evaluator API Routes

Admin endpoints for risk evaluation, session monitoring and the risk event
log, plus the caller's own read-only dashboard.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from config import ApplicationConfig
from session_risk.api.error import ClientError, ServerError
from session_risk.api.utils.admin_auth import require_admin
from session_risk.app.services.live_session_terminator import ILiveSessionTerminator
from session_risk.app.services.principal_locks import PrincipalLocks
from session_risk.app.services.risk_policy import RiskPolicy
from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.app.use_cases.risk import (
    EvaluateRiskUseCase,
    GetRiskEventsUseCase,
    RiskEventsResponse,
)
from session_risk.app.use_cases.sessions import ManageSessionsUseCase, SessionInfo
from session_risk.depends import (
    get_current_user,
    get_live_session_terminator,
    get_principal_locks,
    get_risk_policy,
    get_unit_of_work,
)
from session_risk.domain.entities import RiskEvaluation
from session_risk.libs.result import Error

router = APIRouter(prefix="/risk", tags=["Risk Evaluator"])


class InvalidateSessionsResponse(BaseModel):
    """Response for manual invalidation"""

    message: str
    invalidated_count: int
    evaluation: RiskEvaluation


def _raise_for(error: Error):
    if error.code == "PRINCIPAL_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.get("/me", status_code=status.HTTP_200_OK, response_model=RiskEvaluation)
async def my_risk_status(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    terminator: ILiveSessionTerminator = Depends(get_live_session_terminator),
    policy: RiskPolicy = Depends(get_risk_policy),
    locks: PrincipalLocks = Depends(get_principal_locks),
):
    """
    My Risk Status (read-only)

    Refreshing the dashboard never triggers enforcement.
    """
    use_case = EvaluateRiskUseCase(uow, terminator, policy, locks)
    result = await use_case.peek(UUID(current_user["user_id"]))

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get("/me/events", status_code=status.HTTP_200_OK, response_model=RiskEventsResponse)
async def my_risk_events(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(
        ApplicationConfig.RECENT_EVENTS_DEFAULT_LIMIT, ge=1, le=100,
        description="Maximum number of events to return",
    ),
):
    """My Recent Risk Events, newest first"""
    use_case = GetRiskEventsUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]), limit)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.post(
    "/evaluate/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=RiskEvaluation,
    dependencies=[Depends(require_admin)],
)
async def evaluate_user_risk(
    user_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    terminator: ILiveSessionTerminator = Depends(get_live_session_terminator),
    policy: RiskPolicy = Depends(get_risk_policy),
    locks: PrincipalLocks = Depends(get_principal_locks),
):
    """
    Evaluate Risk For User (triggers enforcement)

    No session context is kept: when the limit is exceeded every session of
    the user is invalidated.

    Raises:
        - 403 Forbidden: Caller is not an admin
        - 404 Not Found: User not found
    """
    use_case = EvaluateRiskUseCase(uow, terminator, policy, locks)
    result = await use_case.execute(user_id)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get(
    "/status/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=RiskEvaluation,
    dependencies=[Depends(require_admin)],
)
async def get_risk_status(
    user_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    terminator: ILiveSessionTerminator = Depends(get_live_session_terminator),
    policy: RiskPolicy = Depends(get_risk_policy),
    locks: PrincipalLocks = Depends(get_principal_locks),
):
    """Current Risk Status (read-only)"""
    use_case = EvaluateRiskUseCase(uow, terminator, policy, locks)
    result = await use_case.peek(user_id)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get(
    "/sessions/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=List[SessionInfo],
    dependencies=[Depends(require_admin)],
)
async def get_active_sessions(
    user_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    terminator: ILiveSessionTerminator = Depends(get_live_session_terminator),
    policy: RiskPolicy = Depends(get_risk_policy),
    locks: PrincipalLocks = Depends(get_principal_locks),
):
    """Active Sessions For User"""
    use_case = ManageSessionsUseCase(uow, terminator, policy, locks)
    result = await use_case.list_active(user_id)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.post(
    "/invalidate/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=InvalidateSessionsResponse,
    dependencies=[Depends(require_admin)],
)
async def invalidate_all_sessions(
    user_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    terminator: ILiveSessionTerminator = Depends(get_live_session_terminator),
    policy: RiskPolicy = Depends(get_risk_policy),
    locks: PrincipalLocks = Depends(get_principal_locks),
):
    """
    Invalidate All Sessions For User

    Admin kill switch, including the admin's own session when targeting
    themselves.
    """
    use_case = ManageSessionsUseCase(uow, terminator, policy, locks)
    result = await use_case.invalidate_all(user_id)

    if result.is_err():
        _raise_for(result.error)

    evaluation = result.value
    return {
        "message": f"Successfully invalidated {evaluation.deactivated_sessions} session(s)",
        "invalidated_count": evaluation.deactivated_sessions,
        "evaluation": evaluation,
    }


@router.get(
    "/events/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=RiskEventsResponse,
    dependencies=[Depends(require_admin)],
)
async def get_risk_events(
    user_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(
        ApplicationConfig.RECENT_EVENTS_DEFAULT_LIMIT, ge=1, le=100,
        description="Maximum number of events to return",
    ),
):
    """Recent Risk Events For User, newest first"""
    use_case = GetRiskEventsUseCase(uow)
    result = await use_case.execute(user_id, limit)

    if result.is_err():
        _raise_for(result.error)

    return result.value
