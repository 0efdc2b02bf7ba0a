from abc import ABC, abstractmethod

from tripmate.libs.result import Result


class IEmailSender(ABC):
    """Outgoing account email - application layer"""

    @abstractmethod
    async def send_verification_email(
        self, recipient_email: str, raw_token: str, raw_password: str
    ) -> Result[None]:
        """
        Send the activation email carrying the raw verification token and the
        raw initial password. Must return within a bounded time; a failure
        is reported as an error result, never retried here.
        """
        pass
