"""
Login Use Case

Authenticates a user and returns a stateless bearer credential.
"""

from tripmate.app.services.credential_signer import ICredentialSigner
from tripmate.app.services.secret_service import ISecretService
from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.app.services.user_validator import IUserValidator
from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error, Result, Return
from .dtos import LoginResponse, UserResponse


class LoginUseCase:
    """
    Use case for user login and credential issuance.

    Business Rules:
    - Unknown email: INVALID_CREDENTIALS
    - Pending account: USER_NOT_ACTIVE. This reveals that the account exists
      and awaits verification; it is a product choice in favour of a clear
      message over masking it as INVALID_CREDENTIALS.
    - Wrong password: INVALID_CREDENTIALS
    - Success: signed credential with a fixed lifetime, nothing persisted
    """

    def __init__(
        self,
        uow: UnitOfWork,
        secret_service: ISecretService,
        signer: ICredentialSigner,
        validator: IUserValidator,
    ):
        self.uow = uow
        self.secret_service = secret_service
        self.signer = signer
        self.validator = validator

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the access token, or Error
        """
        validation_error = self.validator.validate_login(email, password)
        if validation_error is not None:
            return Return.err(validation_error)

        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                # Spend a bcrypt round anyway so unknown emails are not faster
                self.secret_service.hash_password(password)
                return Return.err(
                    Error(ErrorCode.INVALID_CREDENTIALS, "Invalid email or password")
                )

            if not user.is_active:
                return Return.err(
                    Error(
                        ErrorCode.USER_NOT_ACTIVE,
                        "Account is not active. Please verify your email.",
                    )
                )

            if not self.secret_service.verify_password(user.password_hash, password):
                return Return.err(
                    Error(ErrorCode.INVALID_CREDENTIALS, "Invalid email or password")
                )

            access_token = self.signer.sign(user.id)

            return Return.ok(
                LoginResponse(
                    access_token=access_token,
                    expires_in=self.signer.ttl_seconds,
                    user=UserResponse.from_entity(user),
                )
            )
