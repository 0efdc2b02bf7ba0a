from typing import List
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from tripmate.app.repositories.trip_member_repository import ITripMemberRepository
from tripmate.domain.entities import TripMember


class TripMemberRepository(ITripMemberRepository):
    """TripMember repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_trip_id(self, trip_id: UUID) -> List[TripMember]:
        stmt = (
            select(TripMember)
            .where(TripMember.trip_id == trip_id)
            .order_by(TripMember.position)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_trip_ids(self, trip_ids: List[UUID]) -> List[TripMember]:
        if not trip_ids:
            return []
        stmt = (
            select(TripMember)
            .where(col(TripMember.trip_id).in_(trip_ids))
            .order_by(TripMember.trip_id, TripMember.position)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def replace_for_trip(self, trip_id: UUID, names: List[str]) -> List[TripMember]:
        for member in await self.list_by_trip_id(trip_id):
            await self.session.delete(member)
        await self.session.flush()

        members = [
            TripMember(trip_id=trip_id, name=name, position=position)
            for position, name in enumerate(names)
        ]
        self.session.add_all(members)
        await self.session.flush()
        return members
