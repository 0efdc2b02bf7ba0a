from typing import Optional, Type

from pydantic import BaseModel, EmailStr, Field, ValidationError, model_validator

from tripmate.app.services.user_validator import IUserValidator
from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error

PASSWORD_MIN_LENGTH = 8
# bcrypt only looks at the first 72 bytes
PASSWORD_MAX_LENGTH = 72


class SignupFields(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr


class LoginFields(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)


class ChangePasswordFields(BaseModel):
    current_password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)
    new_password: str = Field(
        ..., min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )

    @model_validator(mode="after")
    def new_password_differs(self) -> "ChangePasswordFields":
        if self.new_password == self.current_password:
            raise ValueError("New password must differ from the current password")
        return self


def _check(model: Type[BaseModel], **fields) -> Optional[Error]:
    try:
        model(**fields)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        message = f"{location}: {first['msg']}" if location else first["msg"]
        return Error(ErrorCode.VALIDATION_ERROR, message)
    return None


class PydanticUserValidator(IUserValidator):
    """Field rules expressed as pydantic models"""

    def validate_signup(self, name: str, email: str) -> Optional[Error]:
        return _check(SignupFields, name=name, email=email)

    def validate_login(self, email: str, password: str) -> Optional[Error]:
        return _check(LoginFields, email=email, password=password)

    def validate_change_password(
        self, current_password: str, new_password: str
    ) -> Optional[Error]:
        return _check(
            ChangePasswordFields,
            current_password=current_password,
            new_password=new_password,
        )
