"""
Authentication module for password login and JWT session tokens
"""
from app.auth.utils import get_current_user, get_editor
from app.auth.service import IdentityService
from app.auth.config import settings

__all__ = [
    "get_current_user",
    "get_editor",
    "IdentityService",
    "settings",
]
