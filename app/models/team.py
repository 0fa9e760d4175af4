from datetime import date, datetime
from typing import Optional
from sqlalchemy import String, Date, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from app.database import Base


class Team(Base):
    __tablename__ = "teams"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), index=True)
    city: Mapped[str] = mapped_column(String(50))

    # Free text, not references
    captain: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    coach: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    founded: Mapped[date] = mapped_column(Date)

    # Player ids, mirrored by Player.teams
    players: Mapped[list] = mapped_column(JSON, default=list)

    created_by: Mapped[str] = mapped_column(String(32))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def squad_size(self) -> int:
        return len(self.players or [])

    def __repr__(self):
        return f"<Team {self.name} ({self.city})>"
