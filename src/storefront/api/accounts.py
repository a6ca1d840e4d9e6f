"""FastAPI endpoints for registration, login and user profiles."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from storefront.account.authentication import authenticate, create_token
from storefront.account.profile import UpdateProfile
from storefront.account.registration import RegisterUser
from storefront.account.user import User
from storefront.api.schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    StatusResponse,
    UpdateProfileRequest,
    UserProfileResponse,
    UserResponse,
)
from storefront.api.views import profile_view, user_view

router = APIRouter(tags=["accounts"])


@router.post("/register", status_code=201, response_model=UserResponse)
async def register(body: RegisterRequest) -> UserResponse:
    command = RegisterUser(
        email=body.email,
        password=body.password,
        name=body.name,
        phone=body.phone,
        address=body.address,
    )
    user_id = current_domain.process(command, asynchronous=False)
    return user_view(current_domain.repository_for(User).get(user_id))


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest) -> LoginResponse:
    user = authenticate(body.email, body.password)
    return LoginResponse(token=create_token(user), user=profile_view(user))


@router.get("/profile/{user_id}", response_model=UserProfileResponse)
async def get_profile(user_id: str) -> UserProfileResponse:
    user = current_domain.repository_for(User).get(user_id)
    return profile_view(user)


@router.put("/users/{user_id}", response_model=StatusResponse)
async def update_profile(user_id: str, body: UpdateProfileRequest) -> StatusResponse:
    command = UpdateProfile(
        user_id=user_id,
        name=body.name,
        phone=body.phone,
        address=body.address,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse(message="User updated")
