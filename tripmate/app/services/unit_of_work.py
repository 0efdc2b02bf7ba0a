from abc import ABC, abstractmethod

from tripmate.app.repositories.schedule_repository import IScheduleRepository
from tripmate.app.repositories.share_link_repository import IShareLinkRepository
from tripmate.app.repositories.trip_member_repository import ITripMemberRepository
from tripmate.app.repositories.trip_repository import ITripRepository
from tripmate.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    trips: ITripRepository
    trip_members: ITripMemberRepository
    schedules: IScheduleRepository
    share_links: IShareLinkRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc, tb):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
