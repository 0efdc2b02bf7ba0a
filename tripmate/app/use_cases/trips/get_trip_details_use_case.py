from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.app.use_cases.schedules.dtos import ScheduleResponse
from tripmate.domain.entities import Trip
from tripmate.libs.result import Result, Return
from .dtos import TripDetailsResponse, TripResponse


class GetTripDetailsUseCase:
    """Trip with its members and its schedules ordered by start time"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, trip: Trip) -> Result[TripDetailsResponse]:
        async with self.uow:
            members = await self.uow.trip_members.list_by_trip_id(trip.id)
            schedules = await self.uow.schedules.list_by_trip_id(trip.id)

            return Return.ok(
                TripDetailsResponse(
                    **TripResponse.from_entity(trip, members).model_dump(),
                    schedules=[ScheduleResponse.from_entity(s) for s in schedules],
                )
            )
