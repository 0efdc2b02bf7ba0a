from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt

from tripmate.app.services.credential_signer import ICredentialSigner
from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error, Result, Return

ALGORITHM = "HS256"


class JwtCredentialSigner(ICredentialSigner):
    """Bearer credentials as HS256 JWTs carrying user_id, iat and exp"""

    def __init__(self, secret: str, ttl_minutes: int = 30):
        self._secret = secret
        self._ttl = timedelta(minutes=ttl_minutes)

    @property
    def ttl_seconds(self) -> int:
        return int(self._ttl.total_seconds())

    def sign(self, user_id: UUID) -> str:
        """
        Generate JWT access token

        Args:
            user_id: Principal UUID

        Returns:
            JWT token string (HS256, fixed expiry)
        """
        now = datetime.now(UTC)
        payload = {
            "user_id": str(user_id),
            "exp": now + self._ttl,
            "iat": now,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, credential: str) -> Result[UUID]:
        """
        Verify signature and expiry, then extract the principal.

        Returns:
            Result with the user UUID, or UNAUTHENTICATED error
        """
        try:
            payload = jwt.decode(credential, self._secret, algorithms=[ALGORITHM])
            return Return.ok(UUID(payload["user_id"]))
        except (JWTError, KeyError, TypeError, ValueError):
            return Return.err(
                Error(ErrorCode.UNAUTHENTICATED, "Invalid or expired token")
            )
