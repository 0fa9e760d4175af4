"""
Pydantic schemas for API request/response models.

JSON keys are camelCase; record ids serialize as "_id". Requests accept either
camelCase or snake_case keys.
"""
from datetime import date, datetime, timezone
from typing import ClassVar, List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from app.auth.security import MAX_PASSWORD_BYTES
from app.errors import ValidationError
from app.models.user import UserRole
from app.models.player import PlayerPosition, BattingStyle, BowlingStyle
from app.models.match import MatchStatus, MAX_OVERS, MAX_WICKETS
from app.models.tournament import TournamentFormat, TournamentStatus


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Offset-aware datetimes become naive UTC, the stored convention"""
    if value is not None and value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def record_id():
    # Written as "_id"; read back from either "_id" or the ORM attribute
    return Field(validation_alias=AliasChoices("_id", "id"), serialization_alias="_id")


class PartialUpdate(CamelModel):
    """
    Update payload: absent fields are left alone, present ones are applied
    even when 0, false or empty. Explicit null is only allowed for optional
    record fields.
    """
    required_fields: ClassVar[tuple] = ()

    def changes(self, record=None) -> dict:
        """
        Fields to write. Nested objects (scores, stats) are merged over the
        value stored on record, so their absent keys keep the stored value.
        """
        data = {}
        for field in self.model_fields_set:
            value = getattr(self, field)
            if value is None and field in self.required_fields:
                raise ValidationError(f"{to_camel(field)} cannot be null")
            if isinstance(value, BaseModel):
                stored = getattr(record, field, None) or {}
                merged = {**stored, **value.model_dump(exclude_unset=True)}
                value = type(value).model_validate(merged).model_dump()
            data[field] = value
        return data


class MessageResponse(BaseModel):
    message: str


# Auth Schemas
class RegisterRequest(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=255)
    password: str = Field(min_length=6, max_length=72)
    role: Optional[UserRole] = None

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(CamelModel):
    email: str
    password: str


class UserResponse(CamelModel):
    id: str = record_id()
    name: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    user: UserResponse
    token: str


# Team Schemas
class TeamCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    city: str = Field(min_length=1, max_length=50)
    captain: Optional[str] = None
    coach: Optional[str] = None
    founded: date


class TeamUpdate(PartialUpdate):
    required_fields: ClassVar[tuple] = ("name", "city", "founded")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    city: Optional[str] = Field(None, min_length=1, max_length=50)
    captain: Optional[str] = None
    coach: Optional[str] = None
    founded: Optional[date] = None


class TeamResponse(CamelModel):
    id: str = record_id()
    name: str
    city: str
    captain: Optional[str] = None
    coach: Optional[str] = None
    founded: date
    players: List[str] = []
    created_by: str
    created_at: datetime
    updated_at: datetime


# Player Schemas
class PlayerStats(CamelModel):
    matches_played: int = Field(0, ge=0)
    runs: int = Field(0, ge=0)
    wickets: int = Field(0, ge=0)


class PlayerCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    email: Optional[str] = None
    age: int = Field(ge=15, le=50)
    position: PlayerPosition
    batting_style: BattingStyle
    bowling_style: BowlingStyle = BowlingStyle.NONE
    teams: List[str] = []


class PlayerUpdate(PartialUpdate):
    required_fields: ClassVar[tuple] = ("name", "age", "position", "batting_style", "bowling_style", "stats")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = None
    age: Optional[int] = Field(None, ge=15, le=50)
    position: Optional[PlayerPosition] = None
    batting_style: Optional[BattingStyle] = None
    bowling_style: Optional[BowlingStyle] = None
    teams: Optional[List[str]] = None
    stats: Optional[PlayerStats] = None


class PlayerStatsUpdate(PartialUpdate):
    required_fields: ClassVar[tuple] = ("matches_played", "runs", "wickets")

    matches_played: Optional[int] = Field(None, ge=0)
    runs: Optional[int] = Field(None, ge=0)
    wickets: Optional[int] = Field(None, ge=0)


class PlayerResponse(CamelModel):
    id: str = record_id()
    name: str
    email: Optional[str] = None
    age: int
    position: PlayerPosition
    batting_style: BattingStyle
    bowling_style: BowlingStyle
    teams: List[str] = []
    stats: PlayerStats
    created_by: str
    created_at: datetime
    updated_at: datetime


class PlayerStatsResponse(CamelModel):
    player_id: str
    name: str
    stats: PlayerStats


# Match Schemas
class Score(CamelModel):
    runs: int = Field(0, ge=0)
    wickets: int = Field(0, ge=0, le=MAX_WICKETS)
    overs: float = Field(0, ge=0)


class MatchCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    team1: str = Field(min_length=1)
    team2: str = Field(min_length=1)
    venue: str = Field(min_length=1, max_length=100)
    date: datetime
    overs: int = Field(ge=1, le=MAX_OVERS)
    status: MatchStatus = MatchStatus.SCHEDULED
    tournament: Optional[str] = None

    @field_validator("date")
    @classmethod
    def store_as_utc(cls, value: datetime) -> datetime:
        return naive_utc(value)

    @model_validator(mode="after")
    def check_distinct_teams(self):
        if self.team1 == self.team2:
            raise ValueError("Team 1 and Team 2 must be different")
        return self


class MatchUpdate(PartialUpdate):
    required_fields: ClassVar[tuple] = ("title", "team1", "team2", "venue", "date", "overs", "status")

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    team1: Optional[str] = None
    team2: Optional[str] = None
    venue: Optional[str] = Field(None, min_length=1, max_length=100)
    date: Optional[datetime] = None
    overs: Optional[int] = Field(None, ge=1, le=MAX_OVERS)
    status: Optional[MatchStatus] = None
    team1_score: Optional[Score] = Field(None, alias="team1Score")
    team2_score: Optional[Score] = Field(None, alias="team2Score")
    winner: Optional[str] = None

    @field_validator("date")
    @classmethod
    def store_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return naive_utc(value)


class ScoreUpdate(PartialUpdate):
    required_fields: ClassVar[tuple] = ("status",)

    team1_score: Optional[Score] = Field(None, alias="team1Score")
    team2_score: Optional[Score] = Field(None, alias="team2Score")
    winner: Optional[str] = None
    status: Optional[MatchStatus] = None


class MatchResponse(CamelModel):
    id: str = record_id()
    title: str
    team1: str
    team2: str
    venue: str
    date: datetime
    overs: int
    status: MatchStatus
    winner: Optional[str] = None
    team1_score: Optional[Score] = Field(None, alias="team1Score")
    team2_score: Optional[Score] = Field(None, alias="team2Score")
    tournament: Optional[str] = None
    created_by: str
    created_at: datetime
    updated_at: datetime


# Tournament Schemas
class TournamentCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    description: str = ""
    start_date: date
    end_date: date
    format: TournamentFormat
    teams: List[str] = []

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_date >= self.end_date:
            raise ValueError("Start date must be before end date")
        return self


class TournamentUpdate(PartialUpdate):
    required_fields: ClassVar[tuple] = ("name", "description", "start_date", "end_date", "format", "teams", "status")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    format: Optional[TournamentFormat] = None
    teams: Optional[List[str]] = None
    status: Optional[TournamentStatus] = None
    winner: Optional[str] = None


class TournamentResponse(CamelModel):
    id: str = record_id()
    name: str
    description: str
    start_date: date
    end_date: date
    format: TournamentFormat
    status: TournamentStatus
    teams: List[str] = []
    matches: List[str] = []
    winner: Optional[str] = None
    created_by: str
    created_at: datetime
    updated_at: datetime
