from sqlmodel.ext.asyncio.session import AsyncSession

from tripmate.adapter.repositories.schedule_repository import ScheduleRepository
from tripmate.adapter.repositories.share_link_repository import ShareLinkRepository
from tripmate.adapter.repositories.trip_member_repository import TripMemberRepository
from tripmate.adapter.repositories.trip_repository import TripRepository
from tripmate.adapter.repositories.user_repository import UserRepository
from tripmate.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    SQLAlchemy implementation of UnitOfWork pattern.

    One instance is shared by every dependency of a request, so the gates and
    the handler see the same session. Leaving the block through an exception
    rolls back; a normal exit keeps loaded entities attached and usable.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.trips = TripRepository(self.session)
        self.trip_members = TripMemberRepository(self.session)
        self.schedules = ScheduleRepository(self.session)
        self.share_links = ShareLinkRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type is not None:
            await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
