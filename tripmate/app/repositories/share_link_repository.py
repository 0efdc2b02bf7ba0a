from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from tripmate.domain.entities import ShareLink


class IShareLinkRepository(ABC):
    """ShareLink repository interface - application layer"""

    @abstractmethod
    async def get_by_trip_id(self, trip_id: UUID) -> Optional[ShareLink]:
        """Get the share link of a trip"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[ShareLink]:
        """Get share link by SHA-256 hash of its raw secret"""
        pass

    @abstractmethod
    async def create(self, share_link: ShareLink) -> ShareLink:
        """Create a new share link"""
        pass

    @abstractmethod
    async def update(self, share_link: ShareLink) -> ShareLink:
        """Update existing share link"""
        pass
