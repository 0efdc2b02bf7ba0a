from uuid import UUID

from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.domain.entities import Trip
from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error, Result, Return
from .scoped_lookup import get_trip_schedule


class DeleteScheduleUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, trip: Trip, schedule_id: UUID) -> Result[None]:
        async with self.uow:
            schedule = await get_trip_schedule(self.uow, trip, schedule_id)
            if schedule is None:
                return Return.err(Error(ErrorCode.SCHEDULE_NOT_FOUND, "Schedule not found"))

            await self.uow.schedules.delete(schedule)
            await self.uow.commit()
            return Return.ok(None)
