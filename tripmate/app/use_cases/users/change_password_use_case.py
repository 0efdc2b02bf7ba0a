"""
Change Password Use Case

Replaces the password of an authenticated user.
"""

from uuid import UUID

from tripmate.app.services.secret_service import ISecretService
from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.app.services.user_validator import IUserValidator
from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error, Result, Return


class ChangePasswordUseCase:
    """
    Use case for changing a password.

    Business Rules:
    - New password must differ from the current one and meet the length rules
    - Current password must verify against the stored bcrypt hash
    - Credentials issued before the change stay valid until they expire;
      there is no server-side revocation
    """

    def __init__(
        self,
        uow: UnitOfWork,
        secret_service: ISecretService,
        validator: IUserValidator,
    ):
        self.uow = uow
        self.secret_service = secret_service
        self.validator = validator

    async def execute(
        self, user_id: UUID, current_password: str, new_password: str
    ) -> Result[None]:
        """
        Errors:
            - VALIDATION_ERROR: new password rejected by the validator
            - USER_NOT_FOUND: the principal no longer exists
            - INCORRECT_PASSWORD: current password does not match
        """
        validation_error = self.validator.validate_change_password(
            current_password, new_password
        )
        if validation_error is not None:
            return Return.err(validation_error)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User not found"))

            if not self.secret_service.verify_password(user.password_hash, current_password):
                return Return.err(
                    Error(ErrorCode.INCORRECT_PASSWORD, "Incorrect current password")
                )

            user.change_password(self.secret_service.hash_password(new_password))
            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(None)
