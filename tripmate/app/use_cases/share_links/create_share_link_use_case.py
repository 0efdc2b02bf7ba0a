"""
Create Share Link Use Case

Issues or regenerates the single share capability of a trip.
"""

from uuid import UUID

from sqlalchemy.exc import IntegrityError

from tripmate.app.services.secret_service import ISecretService
from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.domain.entities import ShareLink
from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error, Result, Return
from .dtos import PUBLIC_TRIP_PATH, ShareLinkResponse


class CreateShareLinkUseCase:
    """
    Use case for issuing a share link.

    Business Rules:
    - A trip has at most one share link
    - regenerate=False with an existing link: SHARE_LINK_CONFLICT; the live
      link is neither reused nor replaced
    - regenerate=True overwrites the stored hash in place (or creates the
      link), so any previously distributed secret stops resolving
    - Only the SHA-256 hash of the secret is stored
    - Two concurrent first issues race on the trip_id key; the loser is
      treated as if the link had already existed
    """

    def __init__(self, uow: UnitOfWork, secret_service: ISecretService):
        self.uow = uow
        self.secret_service = secret_service

    async def execute(self, trip_id: UUID, regenerate: bool = False) -> Result[ShareLinkResponse]:
        """
        Execute create share link use case.

        Args:
            trip_id: Trip the capability is bound to (ownership already checked)
            regenerate: Replace an existing link instead of failing

        Returns:
            Result with the raw secret and share URL, or SHARE_LINK_CONFLICT
        """
        raw_token, token_hash = self.secret_service.generate_token()

        async with self.uow:
            share_link = await self.uow.share_links.get_by_trip_id(trip_id)

            if share_link is not None and not regenerate:
                return Return.err(self._conflict())

            if share_link is None:
                try:
                    share_link = await self.uow.share_links.create(
                        ShareLink(trip_id=trip_id, token_hash=token_hash)
                    )
                    await self.uow.commit()
                except IntegrityError:
                    # Another request inserted the link after our lookup
                    await self.uow.rollback()
                    if not regenerate:
                        return Return.err(self._conflict())
                    share_link = await self.uow.share_links.get_by_trip_id(trip_id)
                    if share_link is None:
                        raise
                    share_link = await self._rotate(share_link, token_hash)
            else:
                share_link = await self._rotate(share_link, token_hash)

            return Return.ok(
                ShareLinkResponse(
                    share_token=raw_token,
                    share_url=f"{PUBLIC_TRIP_PATH}{raw_token}",
                    created_at=share_link.created_at,
                    updated_at=share_link.updated_at,
                )
            )

    async def _rotate(self, share_link: ShareLink, token_hash: str) -> ShareLink:
        share_link.rotate(token_hash)
        share_link = await self.uow.share_links.update(share_link)
        await self.uow.commit()
        return share_link

    @staticmethod
    def _conflict() -> Error:
        return Error(
            ErrorCode.SHARE_LINK_CONFLICT,
            "Share link already exists. Use regenerate=true to replace it.",
        )
