from uuid import UUID

from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.domain.base import utc_now
from tripmate.domain.entities import Trip
from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error, Result, Return
from .dtos import ScheduleResponse, ScheduleUpdateCommand
from .scoped_lookup import get_trip_schedule
from .validation import to_naive_utc, validate_schedule_window


class UpdateScheduleUseCase:
    """
    Partially update a schedule.

    The time window is validated on the values the schedule will have after
    the update, so moving only one end cannot invert it.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, trip: Trip, schedule_id: UUID, command: ScheduleUpdateCommand
    ) -> Result[ScheduleResponse]:
        async with self.uow:
            schedule = await get_trip_schedule(self.uow, trip, schedule_id)
            if schedule is None:
                return Return.err(Error(ErrorCode.SCHEDULE_NOT_FOUND, "Schedule not found"))

            new_start = command.start_date_time or schedule.start_date_time
            new_end = command.end_date_time or schedule.end_date_time
            validation_error = validate_schedule_window(new_start, new_end)
            if validation_error is not None:
                return Return.err(validation_error)

            if command.title is not None:
                schedule.title = command.title
            if command.memo is not None:
                schedule.memo = command.memo
            schedule.start_date_time = to_naive_utc(new_start)
            schedule.end_date_time = to_naive_utc(new_end)
            schedule.updated_at = utc_now()

            schedule = await self.uow.schedules.update(schedule)
            await self.uow.commit()

            return Return.ok(ScheduleResponse.from_entity(schedule))
