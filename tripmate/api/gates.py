"""
Authorization Gates

FastAPI dependencies that run before every protected handler:

1. require_principal   - bearer credential -> PrincipalContext
2. require_owned_trip  - require_principal + trip ownership -> OwnedTripContext
3. require_shared_trip - raw share secret -> SharedTripContext (public routes)

A gate that rejects raises, so neither later gates nor the handler run.
The context objects are frozen and built per request; handlers receive
them as typed parameters instead of reading loose request state.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tripmate.api.error import ClientError, raise_for_error
from tripmate.app.services.credential_signer import ICredentialSigner
from tripmate.app.services.secret_service import ISecretService
from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.app.use_cases.share_links import ResolveShareLinkUseCase
from tripmate.depends import get_credential_signer, get_secret_service, get_unit_of_work
from tripmate.domain.entities import Trip
from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error

# Missing credentials are answered by require_principal, not by FastAPI
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class PrincipalContext:
    """Authenticated caller"""

    user_id: UUID


@dataclass(frozen=True)
class OwnedTripContext:
    """Authenticated caller together with a trip they own"""

    principal: PrincipalContext
    trip: Trip


@dataclass(frozen=True)
class SharedTripContext:
    """Trip unlocked by a share secret; there is no principal"""

    trip: Trip


async def require_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    signer: ICredentialSigner = Depends(get_credential_signer),
) -> PrincipalContext:
    """
    Bearer authentication gate.

    Raises:
        ClientError: 401 UNAUTHENTICATED if the credential is missing,
        malformed, signed with another secret or expired
    """
    if credentials is None:
        raise ClientError(
            Error(ErrorCode.UNAUTHENTICATED, "Missing bearer token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    result = signer.verify(credentials.credentials)
    if result.is_err():
        raise_for_error(result.error)

    return PrincipalContext(user_id=result.value)


async def require_owned_trip(
    trip_id: UUID,
    principal: PrincipalContext = Depends(require_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> OwnedTripContext:
    """
    Resource ownership gate, evaluated after require_principal.

    Raises:
        ClientError: 404 TRIP_NOT_FOUND, 403 FORBIDDEN
    """
    async with uow:
        trip = await uow.trips.get_by_id(trip_id)

    if trip is None:
        raise_for_error(Error(ErrorCode.TRIP_NOT_FOUND, "Trip not found"))

    if not trip.is_owned_by(principal.user_id):
        raise_for_error(Error(ErrorCode.FORBIDDEN, "You do not own this trip"))

    return OwnedTripContext(principal=principal, trip=trip)


async def require_shared_trip(
    share_token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    secret_service: ISecretService = Depends(get_secret_service),
) -> SharedTripContext:
    """
    Capability gate for public routes.

    Raises:
        ClientError: 404 SHARE_LINK_NOT_FOUND
    """
    result = await ResolveShareLinkUseCase(uow, secret_service).execute(share_token)
    if result.is_err():
        raise_for_error(result.error)

    return SharedTripContext(trip=result.value)
