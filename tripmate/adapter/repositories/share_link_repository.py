from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from tripmate.app.repositories.share_link_repository import IShareLinkRepository
from tripmate.domain.entities import ShareLink


class ShareLinkRepository(IShareLinkRepository):
    """ShareLink repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_trip_id(self, trip_id: UUID) -> Optional[ShareLink]:
        stmt = select(ShareLink).where(ShareLink.trip_id == trip_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_token_hash(self, token_hash: str) -> Optional[ShareLink]:
        stmt = select(ShareLink).where(ShareLink.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, share_link: ShareLink) -> ShareLink:
        self.session.add(share_link)
        await self.session.flush()
        await self.session.refresh(share_link)
        return share_link

    async def update(self, share_link: ShareLink) -> ShareLink:
        self.session.add(share_link)
        await self.session.flush()
        await self.session.refresh(share_link)
        return share_link
