"""
Get Risk Events Use Case

Retrieves the most recent enforcement events of a user.
"""

from uuid import UUID

from session_risk.app.services.event_log import EventLog
from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.libs.result import Error, Result, Return
from .dtos import RiskEventInfo, RiskEventsResponse


class GetRiskEventsUseCase:
    """
    Use case for reading the risk event log.

    Business Rules:
    - Results ordered by newest first
    - At most `limit` events
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.event_log = EventLog(uow)

    async def execute(self, user_id: UUID, limit: int = 10) -> Result[RiskEventsResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("PRINCIPAL_NOT_FOUND", f"User not found with ID: {user_id}"))

            events = await self.event_log.recent(user_id, limit)
            return Return.ok(
                RiskEventsResponse(events=[RiskEventInfo.from_entity(e) for e in events])
            )
