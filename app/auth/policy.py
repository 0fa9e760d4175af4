"""
Access control: role gate for creation, creator-or-admin for mutation
"""
from app.errors import AuthorizationError
from app.models.user import User, UserRole

EDITOR_ROLES = (UserRole.ADMIN, UserRole.MANAGER)


def can_create(user: User) -> bool:
    return user.role in EDITOR_ROLES


def can_modify(user: User, record) -> bool:
    """Admins may modify anything; managers only what they created"""
    if user.role == UserRole.ADMIN:
        return True
    if user.role not in EDITOR_ROLES:
        return False
    return record.created_by == user.id


def ensure_can_create(user: User):
    if not can_create(user):
        raise AuthorizationError()


def ensure_can_modify(user: User, record, action: str = "modify"):
    """Call only once the record is known to exist."""
    if not can_modify(user, record):
        kind = type(record).__name__.lower()
        raise AuthorizationError(f"Not authorized to {action} this {kind}")
