from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from tripmate.api.error import raise_for_error
from tripmate.api.gates import PrincipalContext, require_principal
from tripmate.app.services.credential_signer import ICredentialSigner
from tripmate.app.services.email_sender import IEmailSender
from tripmate.app.services.secret_service import ISecretService
from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.app.services.user_validator import IUserValidator
from tripmate.app.use_cases.auth import (
    LoginResponse,
    LoginUseCase,
    SignupCommand,
    SignupUseCase,
    UserResponse,
    VerifyEmailResponse,
    VerifyEmailUseCase,
)
from tripmate.depends import (
    get_credential_signer,
    get_email_sender,
    get_secret_service,
    get_unit_of_work,
    get_user_validator,
)

router = APIRouter(tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Field rules (email format, name length) are enforced by the signup use
    case through IUserValidator, so they share the 400 VALIDATION_ERROR
    envelope with every other business validation.
    """

    name: str = Field(..., description="Display name")
    email: str = Field(..., description="User email address")


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
async def signup(
    request: SignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    secret_service: ISecretService = Depends(get_secret_service),
    email_sender: IEmailSender = Depends(get_email_sender),
    validator: IUserValidator = Depends(get_user_validator),
):
    """
    User Signup

    Creates a pending account (or refreshes a pending one) and emails a
    verification token together with a generated initial password.

    Raises:
        - 400 Bad Request: Invalid name or email
        - 409 Conflict: Email belongs to an active account
        - 500 Internal Server Error: Verification email could not be sent
    """
    command = SignupCommand(name=request.name, email=request.email)

    use_case = SignupUseCase(
        uow,
        secret_service,
        email_sender,
        validator,
        token_ttl_minutes=ApplicationConfig.VERIFICATION_TOKEN_TTL_MINUTES,
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/users/verify/{token}",
    status_code=status.HTTP_200_OK,
    response_model=VerifyEmailResponse,
)
async def verify_email(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    secret_service: ISecretService = Depends(get_secret_service),
):
    """
    Verify Email

    Activates the account the token was issued for. A token works once.

    Raises:
        - 400 Bad Request: Unknown or already used token (INVALID_TOKEN),
          expired token (TOKEN_EXPIRED)
    """
    use_case = VerifyEmailUseCase(uow, secret_service)
    result = await use_case.execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    secret_service: ISecretService = Depends(get_secret_service),
    signer: ICredentialSigner = Depends(get_credential_signer),
    validator: IUserValidator = Depends(get_user_validator),
):
    """
    User Login

    Raises:
        - 400 Bad Request: Malformed email or short password
        - 401 Unauthorized: Invalid credentials, or account not verified yet
    """
    use_case = LoginUseCase(uow, secret_service, signer, validator)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(principal: PrincipalContext = Depends(require_principal)):
    """
    Logout

    Credentials are stateless, so there is nothing to revoke server-side;
    the client discards its token. Still requires a valid bearer token.
    """
    return Response(status_code=status.HTTP_204_NO_CONTENT)
