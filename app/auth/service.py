"""
Identity service - registration, login and token resolution
"""
import logging
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from app.auth.security import Hasher, TokenCodec
from app.database import unit_of_work
from app.errors import AuthenticationError, ConflictError, InvalidCredentialsError
from app.models.user import User, UserRole
from app.store import UserStore

logger = logging.getLogger(__name__)


class IdentityService:
    def __init__(self, db: Session, hasher: Hasher = None, tokens: TokenCodec = None):
        self.db = db
        self.users = UserStore(db)
        self.hasher = hasher or Hasher()
        self.tokens = tokens or TokenCodec()

    def register(
        self,
        name: str,
        email: str,
        password: str,
        role: Optional[UserRole] = None,
    ) -> Tuple[User, str]:
        """Create an account and issue its first token"""
        if self.users.find_by_email(email) is not None:
            raise ConflictError("User already exists with this email")

        with unit_of_work(self.db):
            user = self.users.create(
                name=name,
                email=email,
                password=self.hasher.hash(password),
                role=role or UserRole.PLAYER,
            )
        logger.info("Registered %s as %s", email, user.role.value)
        return user, self.tokens.encode(user.id)

    def login(self, email: str, password: str) -> Tuple[User, str]:
        user = self.users.find_by_email(email)
        if user is None or not self.hasher.verify(password, user.password):
            logger.info("Failed login for %s", email)
            raise InvalidCredentialsError()
        return user, self.tokens.encode(user.id)

    def authenticate(self, token: Optional[str]) -> User:
        if not token:
            raise AuthenticationError("No token, authorization denied")
        user_id = self.tokens.decode(token)
        if user_id is None:
            raise AuthenticationError("Token is not valid")
        user = self.users.find_by_id(user_id)
        if user is None:
            raise AuthenticationError("Token is not valid")
        return user
