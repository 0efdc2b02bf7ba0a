import logging
from datetime import datetime, timedelta

from sqlalchemy.exc import IntegrityError

from tripmate.app.services.email_sender import IEmailSender
from tripmate.app.services.secret_service import ISecretService
from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.app.services.user_validator import IUserValidator
from tripmate.domain.base import utc_now
from tripmate.domain.entities import User
from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error, Result, Return
from .dtos import SignupCommand, UserResponse

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (name, email)
    - Output: Result[UserResponse]

    Business Logic:
    1. Validate name and email
    2. Look up the email
       - active account: EMAIL_CONFLICT
       - pending account: reactivation, credentials overwritten in place
       - no account: create a pending user
    3. Generate an initial password (bcrypt) and a verification token
       (SHA-256, expires after token_ttl_minutes)
    4. Commit
    5. Email the raw token and raw password

    Two concurrent signups for a new email race on the unique email column;
    the loser re-reads the row and continues as a reactivation.

    The email goes out after the commit. A failed dispatch is reported as
    EMAIL_DELIVERY_FAILED but does not undo the committed credentials; the
    user can sign up again to receive a fresh email.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        secret_service: ISecretService,
        email_sender: IEmailSender,
        validator: IUserValidator,
        token_ttl_minutes: int = 30,
    ):
        self.uow = uow
        self.secret_service = secret_service
        self.email_sender = email_sender
        self.validator = validator
        self.token_ttl_minutes = token_ttl_minutes

    async def execute(self, command: SignupCommand) -> Result[UserResponse]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with name and email

        Returns:
            Result[UserResponse] with the pending user,
            or Error(VALIDATION_ERROR | EMAIL_CONFLICT | EMAIL_DELIVERY_FAILED)
        """
        validation_error = self.validator.validate_signup(command.name, command.email)
        if validation_error is not None:
            return Return.err(validation_error)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user is not None and existing_user.is_active:
                return Return.err(
                    Error(ErrorCode.EMAIL_CONFLICT, "Email is already registered and active")
                )

            raw_password, password_hash = self.secret_service.generate_password()
            raw_token, token_hash = self.secret_service.generate_token()
            expires_at = utc_now() + timedelta(minutes=self.token_ttl_minutes)

            if existing_user is None:
                try:
                    user = await self.uow.users.create(
                        User(
                            name=command.name,
                            email=command.email,
                            password_hash=password_hash,
                            is_active=False,
                            verification_token_hash=token_hash,
                            verification_token_expires_at=expires_at,
                        )
                    )
                    await self.uow.commit()
                except IntegrityError:
                    # Another signup for the same email committed first
                    await self.uow.rollback()
                    existing_user = await self.uow.users.get_by_email(command.email)
                    if existing_user is None:
                        raise
                    if existing_user.is_active:
                        return Return.err(
                            Error(
                                ErrorCode.EMAIL_CONFLICT, "Email is already registered and active"
                            )
                        )
                    user = await self._restart_verification(
                        existing_user, command.name, password_hash, token_hash, expires_at
                    )
            else:
                user = await self._restart_verification(
                    existing_user, command.name, password_hash, token_hash, expires_at
                )

        sent = await self.email_sender.send_verification_email(
            user.email, raw_token, raw_password
        )
        if sent.is_err():
            logger.error(
                f"Signup committed for user {user.id} but verification email failed: "
                f"{sent.error.code}"
            )
            return Return.err(sent.error)

        return Return.ok(UserResponse.from_entity(user))

    async def _restart_verification(
        self, user: User, name: str, password_hash: str, token_hash: str, expires_at: datetime
    ) -> User:
        # Reactivation: the previous token and password stop working
        user.name = name
        user.start_verification(password_hash, token_hash, expires_at)
        user = await self.uow.users.update(user)
        await self.uow.commit()
        return user
