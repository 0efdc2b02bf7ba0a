from abc import ABC, abstractmethod
from uuid import UUID

from tripmate.libs.result import Result


class ICredentialSigner(ABC):
    """Issues and verifies stateless bearer credentials - application layer"""

    @property
    @abstractmethod
    def ttl_seconds(self) -> int:
        """Lifetime of a freshly signed credential"""
        pass

    @abstractmethod
    def sign(self, user_id: UUID) -> str:
        """Mint a signed credential for the principal"""
        pass

    @abstractmethod
    def verify(self, credential: str) -> Result[UUID]:
        """Check signature and expiry, returning the principal id"""
        pass
