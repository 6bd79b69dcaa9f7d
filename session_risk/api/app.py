from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = exc.as_dict()
    logger.warning(f"Client error on {request.url.path}: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(
        f"Server error on {request.url.path}: {exc.base_error.code} {exc.base_error.message}"
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.as_dict()})


@asynccontextmanager
async def lifespan(app: FastAPI):
    from config import ApplicationConfig
    from session_risk.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
    from session_risk.app.use_cases.auth import SeedAdminUseCase
    from session_risk.depends import AsyncSessionLocal, engine, risk_policy

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSessionLocal() as session:
        await SeedAdminUseCase(SqlAlchemyUnitOfWork(session)).execute(
            ApplicationConfig.ADMIN_USERNAME, ApplicationConfig.ADMIN_PASSWORD
        )

    logger.info(
        f"Session risk policy: max {risk_policy.max_allowed_sessions} sessions, "
        f"display threshold {risk_policy.display_threshold_percent}%"
    )
    yield
    await engine.dispose()


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Session Risk Service", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from session_risk.api.routes import auth, health_check, risk, sessions

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(sessions.router, tags=["Sessions"])
    app.include_router(risk.router, tags=["Risk Evaluator"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
