"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status

from admissions.application.dtos.auth_dto import (
    ChangePasswordDTO,
    LoginDTO,
    LoginResponseDTO,
    StudentSignupDTO,
    StudentUserDTO,
)
from admissions.application.dtos.user_dto import UserDTO
from admissions.application.services.auth_service import AuthService
from admissions.presentation.dependencies import get_auth_service, get_current_user

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/signup",
    response_model=StudentUserDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Student self-registration",
    description="Create a student account together with the student's profile.",
)
async def signup(
    dto: StudentSignupDTO,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a prospective student.

    Raises:
        409 Conflict: If the email is already registered
    """
    return await auth_service.student_signup(dto)


@router.post(
    "/login",
    response_model=LoginResponseDTO,
    status_code=status.HTTP_200_OK,
    summary="User login",
    description="Authenticate with email and password, returns the profile and an access token.",
)
async def login(
    dto: LoginDTO,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate and receive a JWT access token.

    Send it as ``Authorization: Bearer <accessToken>`` on later requests.

    Raises:
        401 Unauthorized: If email or password is incorrect
        403 Forbidden: If the account is suspended
    """
    return await auth_service.login(dto)


@router.get(
    "/me",
    response_model=UserDTO,
    status_code=status.HTTP_200_OK,
    summary="Get current user",
)
async def get_me(current_user: UserDTO = Depends(get_current_user)):
    return current_user


@router.patch(
    "/change-password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Change own password",
)
async def change_password(
    dto: ChangePasswordDTO,
    current_user: UserDTO = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service),
) -> None:
    """
    Raises:
        401 Unauthorized: If the email or current password does not match
    """
    await auth_service.change_password(current_user.id, dto)
