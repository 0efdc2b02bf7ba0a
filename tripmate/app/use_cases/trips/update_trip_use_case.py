from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.domain.base import utc_now
from tripmate.domain.entities import Trip
from tripmate.libs.result import Result, Return
from .dtos import TripCommand, TripResponse
from .validation import validate_trip


class UpdateTripUseCase:
    """
    Replace the editable fields of a trip.

    The trip arrives already resolved by an authorization gate (ownership or
    share link); the owner is never changed here. The member list is
    replaced with the one supplied.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, trip: Trip, command: TripCommand) -> Result[TripResponse]:
        validation_error = validate_trip(command)
        if validation_error is not None:
            return Return.err(validation_error)

        async with self.uow:
            trip.title = command.title
            trip.start_date = command.start_date
            trip.end_date = command.end_date
            trip.updated_at = utc_now()

            trip = await self.uow.trips.update(trip)
            members = await self.uow.trip_members.replace_for_trip(trip.id, command.members)
            await self.uow.commit()

            return Return.ok(TripResponse.from_entity(trip, members))
