from sqlmodel.ext.asyncio.session import AsyncSession

from session_risk.adapter.repositories.risk_event_repository import RiskEventRepository
from session_risk.adapter.repositories.session_repository import SessionRepository
from session_risk.adapter.repositories.user_repository import UserRepository
from session_risk.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.risk_events = RiskEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
