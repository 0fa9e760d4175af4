"""
Record stores: keyed CRUD per entity type plus the few secondary lookups.
No business logic and no commits; callers own the transaction.
"""
from datetime import datetime
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import String, cast
from sqlalchemy.orm import Session

from app.database import Base, new_id
from app.models import User, Team, Player, Match, Tournament

ModelT = TypeVar("ModelT", bound=Base)


class RecordStore(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def create(self, **fields) -> ModelT:
        now = datetime.utcnow()
        record = self.model(id=new_id(), created_at=now, updated_at=now, **fields)
        self.db.add(record)
        self.db.flush()
        return record

    def find_by_id(self, record_id: Optional[str]) -> Optional[ModelT]:
        if not record_id:
            return None
        return self.db.get(self.model, record_id)

    def find_all(self) -> List[ModelT]:
        return self.db.query(self.model).order_by(self.model.created_at).all()

    def find_many(self, record_ids) -> List[ModelT]:
        """Records for the given ids that exist, in id order"""
        found = (self.find_by_id(record_id) for record_id in record_ids)
        return [record for record in found if record is not None]

    def update(self, record_id: str, **changes) -> Optional[ModelT]:
        record = self.find_by_id(record_id)
        if record is None:
            return None
        for field, value in changes.items():
            if field in ("id", "created_at") or not hasattr(self.model, field):
                raise ValueError(f"{self.model.__name__} has no updatable field '{field}'")
            # JSON columns are only tracked on assignment, never copy-in-place
            setattr(record, field, list(value) if isinstance(value, list) else value)
        record.updated_at = datetime.utcnow()
        self.db.flush()
        return record

    def delete(self, record_id: str) -> bool:
        record = self.find_by_id(record_id)
        if record is None:
            return False
        self.db.delete(record)
        self.db.flush()
        return True


class UserStore(RecordStore[User]):
    model = User

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()


class TeamStore(RecordStore[Team]):
    model = Team

    def find_by_name(self, name: str) -> Optional[Team]:
        return self.db.query(Team).filter(Team.name == name).first()


class PlayerStore(RecordStore[Player]):
    model = Player

    def find_by_team(self, team_id: str) -> List[Player]:
        """Players whose membership list contains team_id"""
        candidates = (
            self.db.query(Player)
            .filter(cast(Player.teams, String).like(f'%"{team_id}"%'))
            .order_by(Player.created_at)
            .all()
        )
        return [p for p in candidates if team_id in (p.teams or [])]


class MatchStore(RecordStore[Match]):
    model = Match


class TournamentStore(RecordStore[Tournament]):
    model = Tournament

    def find_by_name(self, name: str) -> Optional[Tournament]:
        return self.db.query(Tournament).filter(Tournament.name == name).first()

    def find_by_team(self, team_id: str) -> List[Tournament]:
        candidates = (
            self.db.query(Tournament)
            .filter(cast(Tournament.teams, String).like(f'%"{team_id}"%'))
            .all()
        )
        return [t for t in candidates if team_id in (t.teams or [])]
