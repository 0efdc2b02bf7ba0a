from abc import ABC, abstractmethod
from typing import Optional

from tripmate.libs.result import Error


class IUserValidator(ABC):
    """Field-level input rules for identity operations - application layer"""

    @abstractmethod
    def validate_signup(self, name: str, email: str) -> Optional[Error]:
        pass

    @abstractmethod
    def validate_login(self, email: str, password: str) -> Optional[Error]:
        pass

    @abstractmethod
    def validate_change_password(
        self, current_password: str, new_password: str
    ) -> Optional[Error]:
        pass
