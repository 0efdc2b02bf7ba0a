from typing import List

from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.domain.entities import Trip
from tripmate.libs.result import Result, Return
from .dtos import ScheduleResponse


class ListSchedulesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, trip: Trip) -> Result[List[ScheduleResponse]]:
        async with self.uow:
            schedules = await self.uow.schedules.list_by_trip_id(trip.id)
            return Return.ok([ScheduleResponse.from_entity(s) for s in schedules])
