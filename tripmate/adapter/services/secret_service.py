import base64
import hashlib
import secrets
from typing import Callable

import bcrypt

from tripmate.app.services.secret_service import ISecretService


class SecretService(ISecretService):
    """
    Secrets backed by the OS CSPRNG, SHA-256 for lookup hashes and bcrypt
    for passwords.
    """

    def __init__(
        self,
        bcrypt_rounds: int = 12,
        random_bytes: Callable[[int], bytes] = secrets.token_bytes,
    ):
        self.bcrypt_rounds = bcrypt_rounds
        self._random_bytes = random_bytes

    def generate_secret(self, byte_length: int) -> str:
        raw = self._random_bytes(byte_length)
        return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")

    def hash_for_lookup(self, raw: str) -> str:
        return hashlib.sha256(raw.encode("utf-8")).hexdigest()

    def hash_password(self, raw: str) -> str:
        password_hash = bcrypt.hashpw(raw.encode("utf-8"), bcrypt.gensalt(self.bcrypt_rounds))
        return password_hash.decode("utf-8")

    def verify_password(self, password_hash: str, raw: str) -> bool:
        try:
            return bcrypt.checkpw(raw.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Not a bcrypt hash (e.g. a lookup hash stored by mistake)
            return False
