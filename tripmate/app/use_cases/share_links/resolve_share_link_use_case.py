from tripmate.app.services.secret_service import ISecretService
from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.domain.entities import Trip
from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error, Result, Return


class ResolveShareLinkUseCase:
    """
    Resolve a raw share secret to the one trip it is bound to.

    This is the only authorization check on public routes: holding a valid
    secret grants read and write access to that trip and nothing else.
    """

    def __init__(self, uow: UnitOfWork, secret_service: ISecretService):
        self.uow = uow
        self.secret_service = secret_service

    async def execute(self, raw_token: str) -> Result[Trip]:
        token_hash = self.secret_service.hash_for_lookup(raw_token)

        async with self.uow:
            share_link = await self.uow.share_links.get_by_token_hash(token_hash)
            if share_link is None:
                return Return.err(
                    Error(ErrorCode.SHARE_LINK_NOT_FOUND, "Shared trip not found")
                )

            trip = await self.uow.trips.get_by_id(share_link.trip_id)
            if trip is None:
                return Return.err(
                    Error(ErrorCode.SHARE_LINK_NOT_FOUND, "Shared trip not found")
                )

            return Return.ok(trip)
