from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from tripmate.api.error import raise_for_error
from tripmate.api.gates import OwnedTripContext, require_owned_trip
from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.app.use_cases.schedules import (
    AddScheduleUseCase,
    DeleteScheduleUseCase,
    GetScheduleUseCase,
    ListSchedulesUseCase,
    ScheduleCommand,
    ScheduleResponse,
    ScheduleUpdateCommand,
    UpdateScheduleUseCase,
)
from tripmate.depends import get_unit_of_work

router = APIRouter(prefix="/trips/{trip_id}/schedules", tags=["Schedules"])


class ScheduleRequest(BaseModel):
    """
    Schedule HTTP request payload

    Timestamps may carry an offset; they are stored as naive UTC.
    """

    title: str = Field(..., min_length=1, max_length=255, description="Schedule title")
    start_date_time: datetime = Field(..., description="Start of the schedule")
    end_date_time: datetime = Field(..., description="End of the schedule")
    memo: str = Field("", max_length=2000, description="Free-form note")

    def to_command(self) -> ScheduleCommand:
        return ScheduleCommand(
            title=self.title,
            start_date_time=self.start_date_time,
            end_date_time=self.end_date_time,
            memo=self.memo,
        )


class ScheduleUpdateRequest(BaseModel):
    """PATCH payload: omitted fields keep their current value"""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    start_date_time: Optional[datetime] = None
    end_date_time: Optional[datetime] = None
    memo: Optional[str] = Field(None, max_length=2000)

    def to_command(self) -> ScheduleUpdateCommand:
        return ScheduleUpdateCommand(**self.model_dump(exclude_unset=True))


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ScheduleResponse])
async def list_schedules(
    context: OwnedTripContext = Depends(require_owned_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Schedules of the trip ordered by start time"""
    result = await ListSchedulesUseCase(uow).execute(context.trip)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ScheduleResponse)
async def add_schedule(
    request: ScheduleRequest,
    context: OwnedTripContext = Depends(require_owned_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: end_date_time not after start_date_time
        - 401 / 403 / 404: Rejected by the bearer or ownership gate
    """
    result = await AddScheduleUseCase(uow).execute(context.trip, request.to_command())

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{schedule_id}", status_code=status.HTTP_200_OK, response_model=ScheduleResponse
)
async def get_schedule(
    schedule_id: UUID,
    context: OwnedTripContext = Depends(require_owned_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetScheduleUseCase(uow).execute(context.trip, schedule_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{schedule_id}", status_code=status.HTTP_200_OK, response_model=ScheduleResponse
)
async def update_schedule(
    schedule_id: UUID,
    request: ScheduleUpdateRequest,
    context: OwnedTripContext = Depends(require_owned_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateScheduleUseCase(uow).execute(
        context.trip, schedule_id, request.to_command()
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_schedule(
    schedule_id: UUID,
    context: OwnedTripContext = Depends(require_owned_trip),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteScheduleUseCase(uow).execute(context.trip, schedule_id)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
