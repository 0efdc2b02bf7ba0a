from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from tripmate.domain.entities import Trip


class ITripRepository(ABC):
    """Trip repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, trip_id: UUID) -> Optional[Trip]:
        """Get trip by ID"""
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: UUID) -> List[Trip]:
        """List trips owned by a user, oldest start date first"""
        pass

    @abstractmethod
    async def create(self, trip: Trip) -> Trip:
        """Create a new trip"""
        pass

    @abstractmethod
    async def update(self, trip: Trip) -> Trip:
        """Update existing trip"""
        pass

    @abstractmethod
    async def delete(self, trip: Trip) -> None:
        """Delete a trip together with its schedules and share link"""
        pass
