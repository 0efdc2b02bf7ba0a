from collections import defaultdict
from typing import List
from uuid import UUID

from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.libs.result import Result, Return
from .dtos import TripResponse


class ListTripsUseCase:
    """List the trips owned by the authenticated user"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[List[TripResponse]]:
        async with self.uow:
            trips = await self.uow.trips.list_by_user_id(user_id)
            members_by_trip = defaultdict(list)
            for member in await self.uow.trip_members.list_by_trip_ids([t.id for t in trips]):
                members_by_trip[member.trip_id].append(member)

            return Return.ok(
                [TripResponse.from_entity(trip, members_by_trip[trip.id]) for trip in trips]
            )
