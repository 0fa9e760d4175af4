"""
Tournament model. Holds the participating team ids and the ids of its fixtures.
"""
from typing import Optional
from sqlalchemy import String, Text, Enum, Date, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from datetime import date, datetime
import enum
from app.database import Base


class TournamentFormat(enum.Enum):
    T20 = "T20"
    ODI = "ODI"
    TEST = "Test"


class TournamentStatus(enum.Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"


class Tournament(Base):
    __tablename__ = "tournaments"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), index=True)
    description: Mapped[str] = mapped_column(Text, default="")

    # start_date < end_date
    start_date: Mapped[date] = mapped_column(Date)
    end_date: Mapped[date] = mapped_column(Date)

    format: Mapped[TournamentFormat] = mapped_column(Enum(TournamentFormat))
    status: Mapped[TournamentStatus] = mapped_column(Enum(TournamentStatus), default=TournamentStatus.UPCOMING)

    teams: Mapped[list] = mapped_column(JSON, default=list)
    matches: Mapped[list] = mapped_column(JSON, default=list)  # mirrored by Match.tournament
    winner: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    created_by: Mapped[str] = mapped_column(String(32))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Tournament '{self.name}' ({self.format.value}, {self.status.value})>"
