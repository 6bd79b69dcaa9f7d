from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, Field

from session_risk.api.error import ClientError, ServerError
from session_risk.api.utils.client_info import client_ip_from_request, device_id_from_request
from session_risk.app.services.live_session_terminator import ILiveSessionTerminator
from session_risk.app.services.principal_locks import PrincipalLocks
from session_risk.app.services.risk_policy import RiskPolicy
from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.app.use_cases.auth import (
    GetCurrentUserUseCase,
    LoginCommand,
    LoginResponse,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    SignupCommand,
    SignupUseCase,
    UserInfo,
)
from session_risk.depends import (
    get_current_user,
    get_live_session_terminator,
    get_principal_locks,
    get_risk_policy,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    username: str = Field(..., min_length=1, max_length=100, description="Username")
    password: str = Field(..., min_length=1, description="User password")


class RegisterRequest(BaseModel):
    """
    Registration HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    """

    username: str = Field(..., min_length=3, max_length=100, description="Username")
    password: str = Field(
        ..., min_length=8, max_length=72, description="User password (8 to 72 chars)"
    )


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=UserInfo)
async def register(request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Registration

    Creates a regular user account. The caller logs in afterwards to open
    a tracked session.

    Raises:
        - 409 Conflict: Username already taken
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(username=request.username, password=request.password)

    use_case = SignupUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "USERNAME_TAKEN":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    terminator: ILiveSessionTerminator = Depends(get_live_session_terminator),
    policy: RiskPolicy = Depends(get_risk_policy),
    locks: PrincipalLocks = Depends(get_principal_locks),
):
    """
    User Login

    Authenticates the user, registers a new tracked session and evaluates
    session risk. When the user now has more sessions than allowed, all
    other sessions are invalidated and this one stays valid.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 409 Conflict: Session token collision
        - 500 Internal Server Error: Server error
    """
    command = LoginCommand(
        username=request.username,
        password=request.password,
        device_id=device_id_from_request(http_request),
        ip_address=client_ip_from_request(http_request),
    )

    use_case = LoginUseCase(uow, terminator, policy, locks)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "SESSION_TOKEN_CONFLICT":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    terminator: ILiveSessionTerminator = Depends(get_live_session_terminator),
):
    """
    User Logout

    Deactivates the session bound to the caller's access token.
    """
    use_case = LogoutUseCase(uow, terminator)
    result = await use_case.execute(current_user["sid"])

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def get_me(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Account behind the caller's access token"""
    use_case = GetCurrentUserUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]))

    if result.is_err():
        error = result.error
        if error.code == "PRINCIPAL_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
