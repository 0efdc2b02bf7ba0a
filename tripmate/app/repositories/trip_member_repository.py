from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from tripmate.domain.entities import TripMember


class ITripMemberRepository(ABC):
    """TripMember repository interface - application layer"""

    @abstractmethod
    async def list_by_trip_id(self, trip_id: UUID) -> List[TripMember]:
        """List members of a trip in their supplied order"""
        pass

    @abstractmethod
    async def list_by_trip_ids(self, trip_ids: List[UUID]) -> List[TripMember]:
        """List members of several trips, grouped by trip"""
        pass

    @abstractmethod
    async def replace_for_trip(self, trip_id: UUID, names: List[str]) -> List[TripMember]:
        """Drop the current members of a trip and store the given names"""
        pass
