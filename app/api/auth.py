"""
Authentication API routes
"""
from fastapi import APIRouter, Depends, status

from app.auth.service import IdentityService
from app.auth.utils import get_current_user, get_identity_service
from app.models.user import User
from app.api.schemas import RegisterRequest, LoginRequest, AuthResponse, UserResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    identity: IdentityService = Depends(get_identity_service),
):
    """
    Create an account. Role defaults to "player" when omitted.
    """
    user, token = identity.register(
        name=request.name,
        email=request.email,
        password=request.password,
        role=request.role,
    )
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
def login(
    request: LoginRequest,
    identity: IdentityService = Depends(get_identity_service),
):
    """
    Exchange email and password for a session token.
    Unknown email and wrong password both give "Invalid credentials".
    """
    user, token = identity.login(request.email, request.password)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.get("/profile", response_model=UserResponse)
def get_profile(current_user: User = Depends(get_current_user)):
    """
    Get the current authenticated user's info.
    """
    return UserResponse.model_validate(current_user)
