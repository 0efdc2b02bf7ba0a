from uuid import UUID

from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.domain.entities import Trip
from tripmate.libs.result import Result, Return
from .dtos import TripCommand, TripResponse
from .validation import validate_trip


class CreateTripUseCase:
    """Create a trip owned by the authenticated user"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, command: TripCommand) -> Result[TripResponse]:
        validation_error = validate_trip(command)
        if validation_error is not None:
            return Return.err(validation_error)

        async with self.uow:
            trip = Trip(
                user_id=user_id,
                title=command.title,
                start_date=command.start_date,
                end_date=command.end_date,
            )
            trip = await self.uow.trips.create(trip)
            members = await self.uow.trip_members.replace_for_trip(trip.id, command.members)
            await self.uow.commit()

            return Return.ok(TripResponse.from_entity(trip, members))
