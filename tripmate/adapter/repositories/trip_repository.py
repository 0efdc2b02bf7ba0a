from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from tripmate.app.repositories.trip_repository import ITripRepository
from tripmate.domain.entities import Schedule, ShareLink, Trip, TripMember


class TripRepository(ITripRepository):
    """Trip repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, trip_id: UUID) -> Optional[Trip]:
        stmt = select(Trip).where(Trip.id == trip_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_user_id(self, user_id: UUID) -> List[Trip]:
        stmt = (
            select(Trip)
            .where(Trip.user_id == user_id)
            .order_by(Trip.start_date, Trip.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, trip: Trip) -> Trip:
        self.session.add(trip)
        await self.session.flush()
        await self.session.refresh(trip)
        return trip

    async def update(self, trip: Trip) -> Trip:
        self.session.add(trip)
        await self.session.flush()
        await self.session.refresh(trip)
        return trip

    async def delete(self, trip: Trip) -> None:
        # SQLite does not enforce ON DELETE CASCADE by default
        for model in (TripMember, Schedule, ShareLink):
            result = await self.session.exec(select(model).where(model.trip_id == trip.id))
            for child in result.all():
                await self.session.delete(child)
        await self.session.flush()

        await self.session.delete(trip)
        await self.session.flush()
