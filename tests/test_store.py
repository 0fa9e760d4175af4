"""
Tests for the record stores and the unit of work.
"""
from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from app.database import unit_of_work
from app.errors import InternalError
from app.models import Team
from app.models.player import PlayerPosition, BattingStyle
from app.models.user import UserRole
from app.store import TeamStore, PlayerStore, UserStore


def make_team(db, name="Lions", **extra):
    fields = {"city": "Mumbai", "founded": date(2008, 1, 24), "players": [], "created_by": "u1"}
    fields.update(extra)
    return TeamStore(db).create(name=name, **fields)


def make_player(db, name="A", teams=()):
    return PlayerStore(db).create(
        name=name,
        age=25,
        position=PlayerPosition.BATSMAN,
        batting_style=BattingStyle.RIGHT_HANDED,
        teams=list(teams),
        created_by="u1",
    )


class TestRecordStore:
    def test_create_assigns_id_and_timestamps(self, db):
        team = make_team(db)

        assert team.id
        assert team.created_at is not None
        assert team.updated_at == team.created_at
        assert TeamStore(db).find_by_id(team.id) is team

    def test_ids_are_unique(self, db):
        assert make_team(db, "Lions").id != make_team(db, "Tigers").id

    def test_find_by_id_absent(self, db):
        assert TeamStore(db).find_by_id("missing") is None
        assert TeamStore(db).find_by_id(None) is None

    def test_find_all_in_insertion_order(self, db):
        make_team(db, "Lions")
        make_team(db, "Tigers")
        assert [t.name for t in TeamStore(db).find_all()] == ["Lions", "Tigers"]

    def test_update_applies_only_given_fields(self, db):
        team = make_team(db, captain="Rohit")
        created = team.updated_at

        updated = TeamStore(db).update(team.id, city="Pune")

        assert updated.city == "Pune"
        assert updated.name == "Lions"
        assert updated.captain == "Rohit"
        assert updated.updated_at >= created

    def test_update_can_store_falsy_values(self, db):
        team = make_team(db, captain="Rohit")
        updated = TeamStore(db).update(team.id, captain="")
        assert updated.captain == ""

    def test_update_unknown_id_returns_none(self, db):
        assert TeamStore(db).update("missing", city="Pune") is None

    def test_update_rejects_unknown_field(self, db):
        team = make_team(db)
        with pytest.raises(ValueError):
            TeamStore(db).update(team.id, stadium="Eden")

    def test_delete(self, db):
        team = make_team(db)
        assert TeamStore(db).delete(team.id) is True
        assert TeamStore(db).find_by_id(team.id) is None
        assert TeamStore(db).delete(team.id) is False

    def test_list_update_persists(self, db):
        team = make_team(db)
        TeamStore(db).update(team.id, players=["p1", "p2"])
        db.commit()
        db.expire_all()

        assert db.get(Team, team.id).players == ["p1", "p2"]


class TestSecondaryLookups:
    def test_find_by_email(self, db):
        UserStore(db).create(name="Ann", email="ann@example.com", password="x", role=UserRole.ADMIN)

        assert UserStore(db).find_by_email("ann@example.com").name == "Ann"
        assert UserStore(db).find_by_email("bob@example.com") is None

    def test_find_by_team_matches_whole_ids_only(self, db):
        a = make_player(db, "A", teams=["team1"])
        make_player(db, "B", teams=["team10"])
        c = make_player(db, "C", teams=["team2", "team1"])
        make_player(db, "D")

        found = PlayerStore(db).find_by_team("team1")
        assert [p.id for p in found] == [a.id, c.id]

    def test_team_find_by_name(self, db):
        team = make_team(db, "Lions")
        assert TeamStore(db).find_by_name("Lions").id == team.id
        assert TeamStore(db).find_by_name("Tigers") is None


class TestUnitOfWork:
    def test_commits_on_success(self, db):
        with unit_of_work(db):
            team = make_team(db)
        db.expire_all()
        assert db.get(Team, team.id) is not None

    def test_store_failure_rolls_back_and_raises_internal_error(self, db, monkeypatch):
        def broken_commit():
            raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

        monkeypatch.setattr(db, "commit", broken_commit)
        with pytest.raises(InternalError):
            with unit_of_work(db):
                make_team(db)

        monkeypatch.undo()
        assert TeamStore(db).find_all() == []

    def test_other_errors_roll_back_and_propagate(self, db):
        with pytest.raises(RuntimeError):
            with unit_of_work(db):
                make_team(db)
                raise RuntimeError("boom")

        assert TeamStore(db).find_all() == []
