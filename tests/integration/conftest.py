import bcrypt
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from session_risk.depends import (
    get_live_session_terminator,
    get_principal_locks,
    get_risk_policy,
    get_unit_of_work,
)
from session_risk.adapter.services.live_session_terminator import InMemoryLiveSessionTerminator
from session_risk.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from session_risk.app.services.principal_locks import PrincipalLocks
from session_risk.app.services.risk_policy import RiskPolicy
from session_risk.domain.entities import User, UserRole


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def live_sessions():
    return InMemoryLiveSessionTerminator(retention_seconds=3600)


@pytest_asyncio.fixture
def policy():
    return RiskPolicy(max_allowed_sessions=2, display_threshold_percent=70.0)


@pytest_asyncio.fixture
async def create_user(db_session, test_data):
    """Insert a user from test_data.json and return it"""

    async def _create(key: str) -> User:
        data = test_data.get_copy("users")[key]
        user = User(
            username=data["username"],
            password_hash=bcrypt.hashpw(
                data["password"].encode(), bcrypt.gensalt(4)
            ).decode(),
            role=UserRole(data["role"]),
        )
        db_session.add(user)
        await db_session.commit()
        # Detached so later rollbacks in the shared session do not expire it
        db_session.expunge(user)
        return user

    return _create


@pytest_asyncio.fixture
async def client(db_session, live_sessions, policy):
    from httpx import ASGITransport
    from session_risk.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)
    locks = PrincipalLocks()

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_live_session_terminator] = lambda: live_sessions
    app.dependency_overrides[get_principal_locks] = lambda: locks
    app.dependency_overrides[get_risk_policy] = lambda: policy

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
