"""
Verify Email Use Case

Activates a pending account via the emailed verification token.
"""

from tripmate.app.services.secret_service import ISecretService
from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.domain.base import utc_now
from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error, Result, Return
from .dtos import VerifyEmailResponse


class VerifyEmailUseCase:
    """
    Use case for email verification.

    Business Rules:
    - The raw token is hashed with SHA-256 and looked up by hash
    - Expired token: TOKEN_EXPIRED, user stays pending and untouched
    - Success sets is_active and clears token hash and expiry
    - Single-use: a repeated call finds no hash and gets INVALID_TOKEN
    """

    def __init__(self, uow: UnitOfWork, secret_service: ISecretService):
        self.uow = uow
        self.secret_service = secret_service

    async def execute(self, token: str) -> Result[VerifyEmailResponse]:
        """
        Execute email verification use case.

        Args:
            token: Raw verification token from the email

        Returns:
            Result with verification status, or Error

        Errors:
            - INVALID_TOKEN: no pending user holds this token
            - TOKEN_EXPIRED: token is past its expiry
        """
        token_hash = self.secret_service.hash_for_lookup(token)

        async with self.uow:
            user = await self.uow.users.get_by_verification_token_hash(token_hash)

            if user is None:
                return Return.err(
                    Error(ErrorCode.INVALID_TOKEN, "Invalid verification token")
                )

            if user.verification_expired(utc_now()):
                return Return.err(
                    Error(
                        ErrorCode.TOKEN_EXPIRED,
                        "Verification token has expired. Please sign up again.",
                    )
                )

            user.activate()
            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(
                VerifyEmailResponse(
                    status="verified",
                    message="Email verified successfully. You can now log in.",
                )
            )
