import logging
import os
import uuid
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session

from app.errors import InternalError

logger = logging.getLogger(__name__)

# Use /app/data in Docker, current dir otherwise
db_path = os.environ.get("DATABASE_PATH", "cricket_league.db")
DATABASE_URL = os.environ.get("DATABASE_URL", f"sqlite:///{db_path}")

engine = create_engine(DATABASE_URL, echo=False)
SessionLocal = sessionmaker(bind=engine)


class Base(DeclarativeBase):
    pass


def new_id() -> str:
    """Opaque record identifier"""
    return uuid.uuid4().hex


def init_db(bind=None):
    """Create all tables"""
    from app.models import user, team, player, match, tournament  # noqa
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables ready (%s)", (bind or engine).url)


def get_session():
    """Get a database session - for direct use (caller must close)"""
    return SessionLocal()


def get_db():
    """FastAPI dependency - yields session and closes after request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session):
    """
    Commit everything written inside the block, or nothing.
    Store failures surface as InternalError after rollback.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Store failure, transaction rolled back")
        raise InternalError("Store operation failed") from e
    except Exception:
        db.rollback()
        raise
