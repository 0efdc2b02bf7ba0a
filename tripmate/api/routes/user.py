from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from tripmate.api.error import raise_for_error
from tripmate.api.gates import PrincipalContext, require_principal
from tripmate.app.services.secret_service import ISecretService
from tripmate.app.services.unit_of_work import UnitOfWork
from tripmate.app.services.user_validator import IUserValidator
from tripmate.app.use_cases.auth import UserResponse
from tripmate.app.use_cases.users import ChangePasswordUseCase, GetProfileUseCase
from tripmate.depends import get_secret_service, get_unit_of_work, get_user_validator

router = APIRouter(tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def get_me(
    principal: PrincipalContext = Depends(require_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current user profile

    Raises:
        - 401 Unauthorized: Missing, invalid or expired bearer token
        - 404 Not Found: The account behind the token no longer exists
    """
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(principal.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ChangePasswordRequest(BaseModel):
    """PUT /me/password request payload"""

    current_password: str = Field(..., description="Password in use now")
    new_password: str = Field(..., description="Replacement password (8-72 chars)")


@router.put("/me/password", status_code=status.HTTP_204_NO_CONTENT)
async def change_password(
    request: ChangePasswordRequest,
    principal: PrincipalContext = Depends(require_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
    secret_service: ISecretService = Depends(get_secret_service),
    validator: IUserValidator = Depends(get_user_validator),
):
    """
    Change password

    Raises:
        - 400 Bad Request: New password too short, too long or unchanged
        - 401 Unauthorized: Current password does not match
        - 404 Not Found: The account behind the token no longer exists
    """
    use_case = ChangePasswordUseCase(uow, secret_service, validator)
    result = await use_case.execute(
        principal.user_id, request.current_password, request.new_password
    )

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
