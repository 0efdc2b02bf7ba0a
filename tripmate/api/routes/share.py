from fastapi import APIRouter, Depends, Query, status

from tripmate.api.error import raise_for_error
from tripmate.api.gates import OwnedTripContext, require_owned_trip
from tripmate.app.services.secret_service import ISecretService
from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.app.use_cases.share_links import (
    CreateShareLinkUseCase,
    GetShareLinkUseCase,
    ShareLinkInfoResponse,
    ShareLinkResponse,
)
from tripmate.depends import get_secret_service, get_unit_of_work

router = APIRouter(prefix="/trips/{trip_id}/share", tags=["Share Links"])


@router.get("", status_code=status.HTTP_200_OK, response_model=ShareLinkInfoResponse)
async def get_share_link(
    context: OwnedTripContext = Depends(require_owned_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Share link metadata. The secret itself is shown only when issued.

    Raises:
        - 404 Not Found: Trip has no share link
    """
    result = await GetShareLinkUseCase(uow).execute(context.trip.id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ShareLinkResponse)
async def create_share_link(
    regenerate: bool = Query(False, description="Replace an existing share link"),
    context: OwnedTripContext = Depends(require_owned_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
    secret_service: ISecretService = Depends(get_secret_service),
):
    """
    Issue a share link for the trip

    With regenerate=true the existing link is replaced and the previous
    secret stops working immediately.

    Raises:
        - 409 Conflict: A share link exists and regenerate is false
    """
    use_case = CreateShareLinkUseCase(uow, secret_service)
    result = await use_case.execute(context.trip.id, regenerate=regenerate)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
