"""
Public trip routes

Reached without an account; the share secret in the path is the only
credential and unlocks exactly one trip.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from tripmate.api.error import raise_for_error
from tripmate.api.gates import SharedTripContext, require_shared_trip
from tripmate.api.routes.schedules import ScheduleRequest, ScheduleUpdateRequest
from tripmate.api.routes.trips import TripRequest
from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.app.use_cases.schedules import (
    AddScheduleUseCase,
    DeleteScheduleUseCase,
    GetScheduleUseCase,
    ListSchedulesUseCase,
    ScheduleResponse,
    UpdateScheduleUseCase,
)
from tripmate.app.use_cases.trips import (
    GetTripDetailsUseCase,
    GetTripUseCase,
    TripDetailsResponse,
    TripResponse,
    UpdateTripUseCase,
)
from tripmate.depends import get_unit_of_work

router = APIRouter(prefix="/public/trips/{share_token}", tags=["Public"])


@router.get("", status_code=status.HTTP_200_OK, response_model=TripResponse)
async def get_shared_trip(
    context: SharedTripContext = Depends(require_shared_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: Unknown or regenerated share secret
    """
    result = await GetTripUseCase(uow).execute(context.trip)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("", status_code=status.HTTP_200_OK, response_model=TripResponse)
async def update_shared_trip(
    request: TripRequest,
    context: SharedTripContext = Depends(require_shared_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateTripUseCase(uow).execute(context.trip, request.to_command())

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/details", status_code=status.HTTP_200_OK, response_model=TripDetailsResponse)
async def get_shared_trip_details(
    context: SharedTripContext = Depends(require_shared_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTripDetailsUseCase(uow).execute(context.trip)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/schedules", status_code=status.HTTP_200_OK, response_model=List[ScheduleResponse]
)
async def list_shared_schedules(
    context: SharedTripContext = Depends(require_shared_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListSchedulesUseCase(uow).execute(context.trip)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/schedules", status_code=status.HTTP_201_CREATED, response_model=ScheduleResponse
)
async def add_shared_schedule(
    request: ScheduleRequest,
    context: SharedTripContext = Depends(require_shared_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await AddScheduleUseCase(uow).execute(context.trip, request.to_command())

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/schedules/{schedule_id}",
    status_code=status.HTTP_200_OK,
    response_model=ScheduleResponse,
)
async def get_shared_schedule(
    schedule_id: UUID,
    context: SharedTripContext = Depends(require_shared_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: Unknown secret, or the schedule belongs to another trip
    """
    result = await GetScheduleUseCase(uow).execute(context.trip, schedule_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/schedules/{schedule_id}",
    status_code=status.HTTP_200_OK,
    response_model=ScheduleResponse,
)
async def update_shared_schedule(
    schedule_id: UUID,
    request: ScheduleUpdateRequest,
    context: SharedTripContext = Depends(require_shared_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateScheduleUseCase(uow).execute(
        context.trip, schedule_id, request.to_command()
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/schedules/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shared_schedule(
    schedule_id: UUID,
    context: SharedTripContext = Depends(require_shared_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteScheduleUseCase(uow).execute(context.trip, schedule_id)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
