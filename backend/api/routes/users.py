"""
User endpoints.

Signup and signin are public. Listing users and reading profiles
require a bearer token.
"""

from fastapi import APIRouter, Depends, status

from modules.auth.interfaces import IAuthService
from modules.auth.models import (
    LoginRequest,
    LoginResponse,
    PublicProfile,
    SignupRequest,
)

from ..dependencies import get_auth_service
from ..models.errors import ErrorResponse
from ..middleware.auth import get_current_user

router = APIRouter()

PROTECTED_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Missing, invalid or expired token"},
    404: {"model": ErrorResponse, "description": "User not found"},
}


@router.post(
    "/signup",
    response_model=PublicProfile,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def signup(
    request: SignupRequest,
    service: IAuthService = Depends(get_auth_service),
) -> PublicProfile:
    """
    Create a new user account.

    Returns 400 listing every invalid field, or 409 if the email is taken.
    """
    return await service.signup(request.name, request.email, request.password)


@router.post(
    "/signin",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def signin(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Authenticate with email and password.

    Returns the user's profile and a bearer token.
    """
    return await service.login(request.email, request.password)


@router.get("", response_model=list[PublicProfile], responses=PROTECTED_RESPONSES)
async def list_users(
    user: PublicProfile = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> list[PublicProfile]:
    """
    List all registered users.

    Requires authentication.
    """
    return await service.list_profiles()


@router.get("/me", response_model=PublicProfile, responses=PROTECTED_RESPONSES)
async def get_me(
    user: PublicProfile = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> PublicProfile:
    """
    Get the current user's profile.

    Requires authentication.
    """
    return await service.get_profile(user.id)


@router.get("/{user_id}", response_model=PublicProfile, responses=PROTECTED_RESPONSES)
async def get_user(
    user_id: str,
    user: PublicProfile = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> PublicProfile:
    """
    Get a user by ID.

    Requires authentication.
    """
    return await service.get_profile(user_id)
