from uuid import UUID

from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.app.use_cases.auth.dtos import UserResponse
from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error, Result, Return


class GetProfileUseCase:
    """Load the authenticated user's own account"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User not found"))
            return Return.ok(UserResponse.from_entity(user))
