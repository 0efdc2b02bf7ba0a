from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.domain.entities import Schedule, Trip
from tripmate.libs.result import Result, Return
from .dtos import ScheduleCommand, ScheduleResponse
from .validation import to_naive_utc, validate_schedule_window


class AddScheduleUseCase:
    """Add a schedule to a trip resolved by a gate"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, trip: Trip, command: ScheduleCommand) -> Result[ScheduleResponse]:
        validation_error = validate_schedule_window(
            command.start_date_time, command.end_date_time
        )
        if validation_error is not None:
            return Return.err(validation_error)

        async with self.uow:
            schedule = Schedule(
                trip_id=trip.id,
                title=command.title,
                start_date_time=to_naive_utc(command.start_date_time),
                end_date_time=to_naive_utc(command.end_date_time),
                memo=command.memo,
            )
            schedule = await self.uow.schedules.create(schedule)
            await self.uow.commit()

            return Return.ok(ScheduleResponse.from_entity(schedule))
