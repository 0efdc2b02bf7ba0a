from datetime import date
from typing import Annotated, List

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from tripmate.api.error import raise_for_error
from tripmate.api.gates import (
    OwnedTripContext,
    PrincipalContext,
    require_owned_trip,
    require_principal,
)
from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.app.use_cases.trips import (
    CreateTripUseCase,
    DeleteTripUseCase,
    GetTripDetailsUseCase,
    GetTripUseCase,
    ListTripsUseCase,
    TripCommand,
    TripDetailsResponse,
    TripResponse,
    UpdateTripUseCase,
)
from tripmate.depends import get_unit_of_work

router = APIRouter(prefix="/trips", tags=["Trips"])


class TripRequest(BaseModel):
    """
    Trip HTTP request payload, used for create and full update.

    end_date >= start_date is checked by the use case.
    """

    title: str = Field(..., min_length=1, max_length=255, description="Trip title")
    start_date: date = Field(..., description="First day of the trip")
    end_date: date = Field(..., description="Last day of the trip")
    members: List[Annotated[str, Field(min_length=1, max_length=255)]] = Field(
        default_factory=list, description="Traveller names; replaces the stored list"
    )

    def to_command(self) -> TripCommand:
        return TripCommand(
            title=self.title,
            start_date=self.start_date,
            end_date=self.end_date,
            members=self.members,
        )


@router.get("", status_code=status.HTTP_200_OK, response_model=List[TripResponse])
async def list_trips(
    principal: PrincipalContext = Depends(require_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Trips owned by the caller, soonest first"""
    result = await ListTripsUseCase(uow).execute(principal.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TripResponse)
async def create_trip(
    request: TripRequest,
    principal: PrincipalContext = Depends(require_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a trip owned by the caller

    Raises:
        - 400 Bad Request: Missing title or end_date before start_date
        - 401 Unauthorized: Missing or invalid bearer token
    """
    result = await CreateTripUseCase(uow).execute(principal.user_id, request.to_command())

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{trip_id}", status_code=status.HTTP_200_OK, response_model=TripResponse)
async def get_trip(
    context: OwnedTripContext = Depends(require_owned_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 401 Unauthorized: Missing or invalid bearer token
        - 403 Forbidden: Trip belongs to another user
        - 404 Not Found: No such trip
    """
    result = await GetTripUseCase(uow).execute(context.trip)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{trip_id}", status_code=status.HTTP_200_OK, response_model=TripResponse)
async def update_trip(
    request: TripRequest,
    context: OwnedTripContext = Depends(require_owned_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateTripUseCase(uow).execute(context.trip, request.to_command())

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trip(
    context: OwnedTripContext = Depends(require_owned_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete a trip together with its schedules and share link"""
    result = await DeleteTripUseCase(uow).execute(context.trip)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{trip_id}/details",
    status_code=status.HTTP_200_OK,
    response_model=TripDetailsResponse,
)
async def get_trip_details(
    context: OwnedTripContext = Depends(require_owned_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTripDetailsUseCase(uow).execute(context.trip)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
