from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from tripmate.app.repositories.schedule_repository import IScheduleRepository
from tripmate.domain.entities import Schedule


class ScheduleRepository(IScheduleRepository):
    """Schedule repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, schedule_id: UUID) -> Optional[Schedule]:
        stmt = select(Schedule).where(Schedule.id == schedule_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_trip_id(self, trip_id: UUID) -> List[Schedule]:
        stmt = (
            select(Schedule)
            .where(Schedule.trip_id == trip_id)
            .order_by(Schedule.start_date_time)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, schedule: Schedule) -> Schedule:
        self.session.add(schedule)
        await self.session.flush()
        await self.session.refresh(schedule)
        return schedule

    async def update(self, schedule: Schedule) -> Schedule:
        self.session.add(schedule)
        await self.session.flush()
        await self.session.refresh(schedule)
        return schedule

    async def delete(self, schedule: Schedule) -> None:
        await self.session.delete(schedule)
        await self.session.flush()
