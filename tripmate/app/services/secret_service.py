from abc import ABC, abstractmethod
from typing import Tuple

# Entropy profiles, in random bytes before encoding
TOKEN_BYTES = 32
PASSWORD_BYTES = 12


class ISecretService(ABC):
    """
    Secret generation and hashing - application layer.

    Two hashing modes that must never be swapped:
    - hash_for_lookup: fast and deterministic, for tokens found by equality
    - hash_password: slow, salted and adaptive, for passwords only
    """

    @abstractmethod
    def generate_secret(self, byte_length: int) -> str:
        """Cryptographically random, URL-safe secret"""
        pass

    @abstractmethod
    def hash_for_lookup(self, raw: str) -> str:
        """Deterministic one-way hash used to find tokens by equality"""
        pass

    @abstractmethod
    def hash_password(self, raw: str) -> str:
        """Salted adaptive hash; distinct output for identical input"""
        pass

    @abstractmethod
    def verify_password(self, password_hash: str, raw: str) -> bool:
        """Check a raw password against a stored password hash"""
        pass

    def generate_token(self) -> Tuple[str, str]:
        """New opaque token as (raw, lookup hash)"""
        raw = self.generate_secret(TOKEN_BYTES)
        return raw, self.hash_for_lookup(raw)

    def generate_password(self) -> Tuple[str, str]:
        """New initial password as (raw, password hash)"""
        raw = self.generate_secret(PASSWORD_BYTES)
        return raw, self.hash_password(raw)
