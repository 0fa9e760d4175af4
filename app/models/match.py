from typing import Optional
from sqlalchemy import String, Integer, Enum, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
import enum
from app.database import Base


class MatchStatus(enum.Enum):
    SCHEDULED = "scheduled"
    LIVE = "live"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


MAX_OVERS = 50
MAX_WICKETS = 10


class Match(Base):
    __tablename__ = "matches"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    title: Mapped[str] = mapped_column(String(200))

    # Teams (ids; team1 != team2)
    team1: Mapped[str] = mapped_column(String(32))
    team2: Mapped[str] = mapped_column(String(32))

    # Match info
    venue: Mapped[str] = mapped_column(String(100))
    date: Mapped[datetime] = mapped_column(DateTime)
    overs: Mapped[int] = mapped_column(Integer)

    # Status
    status: Mapped[MatchStatus] = mapped_column(Enum(MatchStatus), default=MatchStatus.SCHEDULED)

    # Result; scores are {runs, wickets, overs}
    winner: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    team1_score: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    team2_score: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)

    # Owning tournament, mirrored by Tournament.matches
    tournament: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    created_by: Mapped[str] = mapped_column(String(32))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def team_ids(self) -> tuple:
        return (self.team1, self.team2)

    def __repr__(self):
        return f"<Match {self.title} ({self.status.value})>"
