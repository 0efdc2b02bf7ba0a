from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.domain.entities import Trip
from tripmate.libs.result import Result, Return


class DeleteTripUseCase:
    """Delete a trip with its schedules and share link"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, trip: Trip) -> Result[None]:
        async with self.uow:
            await self.uow.trips.delete(trip)
            await self.uow.commit()
            return Return.ok(None)
