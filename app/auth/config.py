"""
Authentication configuration
"""
import logging
import os
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEV_SECRET = "change-me-in-production"


class AuthSettings:
    """Authentication settings from environment variables"""

    # JWT settings
    JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", DEV_SECRET)
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    TOKEN_EXPIRE_DAYS: int = int(os.getenv("TOKEN_EXPIRE_DAYS", "30"))

    # Password hashing cost
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

    @property
    def using_dev_secret(self) -> bool:
        return self.JWT_SECRET_KEY == DEV_SECRET


settings = AuthSettings()

if settings.using_dev_secret:
    logger.warning("JWT_SECRET_KEY is not set; using the development secret")
