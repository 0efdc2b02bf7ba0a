from typing import Optional
from uuid import UUID

from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.domain.entities import Schedule, Trip


async def get_trip_schedule(uow: UnitOfWork, trip: Trip, schedule_id: UUID) -> Optional[Schedule]:
    """Schedule by id, only if it belongs to the given trip"""
    schedule = await uow.schedules.get_by_id(schedule_id)
    if schedule is None or schedule.trip_id != trip.id:
        return None
    return schedule
