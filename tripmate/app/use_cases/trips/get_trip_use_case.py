from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.domain.entities import Trip
from tripmate.libs.result import Result, Return
from .dtos import TripResponse


class GetTripUseCase:
    """Trip with its members, for a trip already resolved by a gate"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, trip: Trip) -> Result[TripResponse]:
        async with self.uow:
            members = await self.uow.trip_members.list_by_trip_id(trip.id)
            return Return.ok(TripResponse.from_entity(trip, members))
