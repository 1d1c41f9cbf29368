"""Account routes: registration, login and the current user."""

from __future__ import annotations

from fastapi import APIRouter, status

from folio_builder.api.dependencies import CurrentUser, ServiceDep
from folio_builder.api.schemas.users import CredentialsRequest, UserInfoResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/register",
    response_model=UserInfoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    description="Create an account together with its default portfolio.",
)
def register(request: CredentialsRequest, service: ServiceDep) -> UserInfoResponse:
    user, _ = service.register_user(request.username, request.password)
    return UserInfoResponse.from_user(user)


@router.post(
    "/login",
    response_model=UserInfoResponse,
    summary="Verify credentials",
)
def login(request: CredentialsRequest, service: ServiceDep) -> UserInfoResponse:
    """Check the password and return the account.

    The caller then identifies itself with the ``X-Username`` header.
    """
    user = service.authenticate(request.username, request.password)
    return UserInfoResponse.from_user(user)


@router.get("/me", response_model=UserInfoResponse)
def get_current_user_info(user: CurrentUser) -> UserInfoResponse:
    """Get the current authenticated user's basic information."""
    return UserInfoResponse.from_user(user)
