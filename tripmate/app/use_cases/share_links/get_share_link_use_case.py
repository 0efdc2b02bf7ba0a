from uuid import UUID

from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error, Result, Return
from .dtos import ShareLinkInfoResponse


class GetShareLinkUseCase:
    """Report whether a trip has a share link; the secret is not recoverable"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, trip_id: UUID) -> Result[ShareLinkInfoResponse]:
        async with self.uow:
            share_link = await self.uow.share_links.get_by_trip_id(trip_id)
            if share_link is None:
                return Return.err(
                    Error(ErrorCode.SHARE_LINK_NOT_FOUND, "Trip has no share link")
                )

            return Return.ok(
                ShareLinkInfoResponse(
                    trip_id=str(share_link.trip_id),
                    created_at=share_link.created_at,
                    updated_at=share_link.updated_at,
                )
            )
