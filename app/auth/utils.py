"""
Authentication utilities - request dependencies for the current user
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.auth.policy import ensure_can_create
from app.auth.service import IdentityService
from app.database import get_db
from app.models.user import User


# Security scheme for Bearer token; missing headers are reported as 401 below
security = HTTPBearer(auto_error=False)


def get_identity_service(db: Session = Depends(get_db)) -> IdentityService:
    return IdentityService(db)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    identity: IdentityService = Depends(get_identity_service),
) -> User:
    """
    FastAPI dependency to get the current authenticated user.
    Use this in route functions: current_user: User = Depends(get_current_user)
    """
    token = credentials.credentials if credentials else None
    return identity.authenticate(token)


def get_editor(current_user: User = Depends(get_current_user)) -> User:
    """Current user, required to hold a role that may create records"""
    ensure_can_create(current_user)
    return current_user
