"""
Schedule Use Cases

Schedules always act within a trip already resolved by a gate.
"""

from .add_schedule_use_case import AddScheduleUseCase
from .list_schedules_use_case import ListSchedulesUseCase
from .get_schedule_use_case import GetScheduleUseCase
from .update_schedule_use_case import UpdateScheduleUseCase
from .delete_schedule_use_case import DeleteScheduleUseCase
from .dtos import ScheduleCommand, ScheduleUpdateCommand, ScheduleResponse

__all__ = [
    "AddScheduleUseCase",
    "ListSchedulesUseCase",
    "GetScheduleUseCase",
    "UpdateScheduleUseCase",
    "DeleteScheduleUseCase",
    "ScheduleCommand",
    "ScheduleUpdateCommand",
    "ScheduleResponse",
]
