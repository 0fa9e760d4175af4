"""
Crypto capabilities used by the identity service: password hashing and
signed session tokens. Both are swappable without touching the service.
"""
from datetime import datetime, timedelta
from typing import Optional

import bcrypt
from jose import JWTError, jwt

from app.auth.config import settings
from app.errors import ValidationError

# bcrypt rejects longer input
MAX_PASSWORD_BYTES = 72


class Hasher:
    """One-way bcrypt password hashing"""

    def __init__(self, rounds: int = None):
        self.rounds = rounds or settings.BCRYPT_ROUNDS

    def hash(self, password: str) -> str:
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Not a bcrypt hash, or a password over the byte limit
            return False


class TokenCodec:
    """Self-verifying HS256 JWTs carrying the user id and an expiry"""

    def __init__(
        self,
        secret: str = None,
        algorithm: str = None,
        lifetime: timedelta = None,
    ):
        self.secret = secret or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.lifetime = lifetime or timedelta(days=settings.TOKEN_EXPIRE_DAYS)

    def encode(self, user_id: str, now: datetime = None) -> str:
        expire = (now or datetime.utcnow()) + self.lifetime
        payload = {
            "sub": str(user_id),
            "exp": expire,
            "type": "access",
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> Optional[str]:
        """User id for a valid token, None for anything else"""
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError:
            return None
        if payload.get("type") != "access":
            return None
        return payload.get("sub")
