from typing import Optional
from datetime import datetime
from sqlalchemy import String, Integer, Enum, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
import enum
from app.database import Base


class PlayerPosition(enum.Enum):
    BATSMAN = "batsman"
    BOWLER = "bowler"
    ALL_ROUNDER = "all-rounder"
    WICKET_KEEPER = "wicket-keeper"


class BattingStyle(enum.Enum):
    RIGHT_HANDED = "Right-handed"
    LEFT_HANDED = "Left-handed"


class BowlingStyle(enum.Enum):
    RIGHT_ARM_FAST = "Right-arm fast"
    LEFT_ARM_FAST = "Left-arm fast"
    RIGHT_ARM_SPIN = "Right-arm spin"
    LEFT_ARM_SPIN = "Left-arm spin"
    NONE = "None"


def empty_stats() -> dict:
    return {"matches_played": 0, "runs": 0, "wickets": 0}


class Player(Base):
    __tablename__ = "players"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    age: Mapped[int] = mapped_column(Integer)

    # Role and style
    position: Mapped[PlayerPosition] = mapped_column(Enum(PlayerPosition))
    batting_style: Mapped[BattingStyle] = mapped_column(Enum(BattingStyle))
    bowling_style: Mapped[BowlingStyle] = mapped_column(Enum(BowlingStyle), default=BowlingStyle.NONE)

    # Team ids, mirrored by Team.players
    teams: Mapped[list] = mapped_column(JSON, default=list)

    # Career aggregates: matches_played, runs, wickets
    stats: Mapped[dict] = mapped_column(JSON, default=empty_stats)

    created_by: Mapped[str] = mapped_column(String(32))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Player {self.name} ({self.position.value})>"
