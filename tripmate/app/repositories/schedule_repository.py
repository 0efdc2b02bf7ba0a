from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from tripmate.domain.entities import Schedule


class IScheduleRepository(ABC):
    """Schedule repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, schedule_id: UUID) -> Optional[Schedule]:
        """Get schedule by ID"""
        pass

    @abstractmethod
    async def list_by_trip_id(self, trip_id: UUID) -> List[Schedule]:
        """List schedules of a trip ordered by start time"""
        pass

    @abstractmethod
    async def create(self, schedule: Schedule) -> Schedule:
        """Create a new schedule"""
        pass

    @abstractmethod
    async def update(self, schedule: Schedule) -> Schedule:
        """Update existing schedule"""
        pass

    @abstractmethod
    async def delete(self, schedule: Schedule) -> None:
        """Delete a schedule"""
        pass
