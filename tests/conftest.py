"""
Shared fixtures: in-memory database, API client and registered users.
"""
import itertools
import os

# Fast hashes and no database file for the app's default engine
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import init_db, get_db
from app.models.user import User, UserRole
from app.store import UserStore
from main import app


@pytest.fixture
def engine():
    """Create an in-memory test database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = Session(engine)
    yield session
    session.close()


@pytest.fixture
def client(engine):
    TestSession = sessionmaker(bind=engine)

    def override_get_db():
        session = TestSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_db_user(db):
    """Users created straight through the store, for engine-level tests."""
    counter = itertools.count()

    def _make(role: UserRole = UserRole.MANAGER) -> User:
        n = next(counter)
        user = UserStore(db).create(
            name=f"{role.value} {n}",
            email=f"{role.value}{n}@example.com",
            password="not-a-real-hash",
            role=role,
        )
        db.commit()
        return user

    return _make


@pytest.fixture
def make_user(client):
    """Register through the API; returns (user json, auth headers)."""
    counter = itertools.count()

    def _make(role: str = "manager"):
        n = next(counter)
        response = client.post("/api/auth/register", json={
            "name": f"{role.title()} {n}",
            "email": f"{role}{n}@example.com",
            "password": "secret123",
            "role": role,
        })
        assert response.status_code == 201, response.text
        body = response.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}

    return _make


@pytest.fixture
def admin(make_user):
    return make_user("admin")


@pytest.fixture
def manager(make_user):
    return make_user("manager")


@pytest.fixture
def viewer(make_user):
    """A plain player-role account"""
    return make_user("player")


class LeagueApi:
    """Thin helpers for building league state over HTTP"""

    def __init__(self, client: TestClient):
        self.client = client

    def create_team(self, headers, name, city="Mumbai", **extra):
        response = self.client.post("/api/teams", headers=headers, json={
            "name": name, "city": city, "founded": "2008-01-24", **extra,
        })
        assert response.status_code == 201, response.text
        return response.json()

    def create_player(self, headers, name, teams=(), **extra):
        body = {
            "name": name,
            "age": 24,
            "position": "batsman",
            "battingStyle": "Right-handed",
            "teams": list(teams),
        }
        body.update(extra)
        response = self.client.post("/api/players", headers=headers, json=body)
        assert response.status_code == 201, response.text
        return response.json()

    def match_body(self, team1, team2, **extra):
        body = {
            "title": "League match",
            "team1": team1,
            "team2": team2,
            "venue": "Wankhede Stadium",
            "date": "2030-04-01T19:30:00",
            "overs": 20,
        }
        body.update(extra)
        return body

    def create_match(self, headers, team1, team2, **extra):
        response = self.client.post("/api/matches", headers=headers, json=self.match_body(team1, team2, **extra))
        assert response.status_code == 201, response.text
        return response.json()

    def create_tournament(self, headers, name, teams=(), **extra):
        body = {
            "name": name,
            "description": "Season opener",
            "startDate": "2030-04-01",
            "endDate": "2030-05-30",
            "format": "T20",
            "teams": list(teams),
        }
        body.update(extra)
        response = self.client.post("/api/tournaments", headers=headers, json=body)
        assert response.status_code == 201, response.text
        return response.json()


@pytest.fixture
def api(client):
    return LeagueApi(client)
