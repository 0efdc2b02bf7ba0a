from typing import Optional

from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error
from .dtos import TripCommand

MEMBER_NAME_MAX_LENGTH = 255


def validate_trip(command: TripCommand) -> Optional[Error]:
    if command.end_date < command.start_date:
        return Error(ErrorCode.VALIDATION_ERROR, "end_date must not be before start_date")
    for name in command.members:
        if not name.strip() or len(name) > MEMBER_NAME_MAX_LENGTH:
            return Error(
                ErrorCode.VALIDATION_ERROR,
                f"Member names must be 1 to {MEMBER_NAME_MAX_LENGTH} characters",
            )
    return None
