"""
Relationship Maintainer - keeps both copies of every cross-entity link in step.

Team.players <-> Player.teams and Tournament.matches <-> Match.tournament are
stored on both sides. Every operation here looks the target up, checks the
actor may touch it, validates, and only then writes both sides inside a single
unit of work, so a failure leaves neither side changed.
"""
import logging
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from app.auth.policy import ensure_can_create, ensure_can_modify
from app.database import unit_of_work
from app.errors import ConflictError, NotFoundError, ValidationError
from app.models import Match, Player, Team, Tournament, User
from app.models.player import empty_stats
from app.store import MatchStore, PlayerStore, TeamStore, TournamentStore

logger = logging.getLogger(__name__)


def _unique(ids: Iterable[str]) -> List[str]:
    seen = []
    for record_id in ids:
        if record_id not in seen:
            seen.append(record_id)
    return seen


def _without(ids: Optional[list], record_id: str) -> list:
    return [i for i in (ids or []) if i != record_id]


def _with(ids: Optional[list], record_id: str) -> list:
    ids = list(ids or [])
    if record_id not in ids:
        ids.append(record_id)
    return ids


class RelationshipMaintainer:
    def __init__(self, session: Session):
        self.session = session
        self.teams = TeamStore(session)
        self.players = PlayerStore(session)
        self.matches = MatchStore(session)
        self.tournaments = TournamentStore(session)

    # Lookups

    @staticmethod
    def _require(store, record_id: str, label: str):
        record = store.find_by_id(record_id)
        if record is None:
            raise NotFoundError(f"{label} not found")
        return record

    def require_team_ids(self, team_ids: Iterable[str]) -> List[str]:
        """De-duplicated team ids, all of which must exist"""
        team_ids = _unique(team_ids or [])
        if any(self.teams.find_by_id(team_id) is None for team_id in team_ids):
            raise ValidationError("One or more teams not found")
        return team_ids

    def check_match_teams(self, team1: str, team2: str):
        if team1 == team2:
            raise ValidationError("Team 1 and Team 2 must be different")
        if self.teams.find_by_id(team1) is None:
            raise ValidationError("Team 1 not found")
        if self.teams.find_by_id(team2) is None:
            raise ValidationError("Team 2 not found")

    # Players <-> Teams

    def create_player(self, actor: User, teams: Iterable[str] = (), **fields) -> Player:
        ensure_can_create(actor)
        team_ids = self.require_team_ids(teams)
        fields.setdefault("stats", empty_stats())

        with unit_of_work(self.session):
            player = self.players.create(teams=team_ids, created_by=actor.id, **fields)
            for team_id in team_ids:
                team = self.teams.find_by_id(team_id)
                self.teams.update(team_id, players=_with(team.players, player.id))
        if team_ids:
            logger.info("Player %s created in teams %s", player.id, team_ids)
        return player

    def update_player(self, actor: User, player_id: str, **changes) -> Player:
        player = self._require(self.players, player_id, "Player")
        ensure_can_modify(actor, player, "update")

        new_teams = None
        if "teams" in changes:
            new_teams = self.require_team_ids(changes.pop("teams") or [])

        with unit_of_work(self.session):
            if new_teams is not None:
                old_teams = list(player.teams or [])
                for team_id in old_teams:
                    if team_id not in new_teams:
                        team = self.teams.find_by_id(team_id)
                        if team is not None:
                            self.teams.update(team_id, players=_without(team.players, player_id))
                for team_id in new_teams:
                    if team_id not in old_teams:
                        team = self.teams.find_by_id(team_id)
                        self.teams.update(team_id, players=_with(team.players, player_id))
                changes["teams"] = new_teams
            player = self.players.update(player_id, **changes)
        if new_teams is not None:
            logger.info("Player %s memberships now %s", player_id, new_teams)
        return player

    def delete_player(self, actor: User, player_id: str):
        player = self._require(self.players, player_id, "Player")
        ensure_can_modify(actor, player, "delete")

        with unit_of_work(self.session):
            # Sweep every team, not just player.teams, so stale copies go too
            for team in self.teams.find_all():
                if player_id in (team.players or []):
                    self.teams.update(team.id, players=_without(team.players, player_id))
            self.players.delete(player_id)
        logger.info("Player %s deleted and removed from its teams", player_id)

    def add_player_to_team(self, actor: User, team_id: str, player_id: str) -> Team:
        team = self._require(self.teams, team_id, "Team")
        ensure_can_modify(actor, team)
        player = self._require(self.players, player_id, "Player")
        if player_id in (team.players or []):
            raise ConflictError("Player is already in this team")

        with unit_of_work(self.session):
            self.teams.update(team_id, players=_with(team.players, player_id))
            self.players.update(player_id, teams=_with(player.teams, team_id))
        logger.info("Player %s added to team %s", player_id, team_id)
        return team

    def remove_player_from_team(self, actor: User, team_id: str, player_id: str) -> Team:
        team = self._require(self.teams, team_id, "Team")
        ensure_can_modify(actor, team)

        with unit_of_work(self.session):
            if player_id in (team.players or []):
                self.teams.update(team_id, players=_without(team.players, player_id))
            player = self.players.find_by_id(player_id)
            if player is not None and team_id in (player.teams or []):
                self.players.update(player_id, teams=_without(player.teams, team_id))
        logger.info("Player %s removed from team %s", player_id, team_id)
        return team

    def delete_team(self, actor: User, team_id: str):
        team = self._require(self.teams, team_id, "Team")
        ensure_can_modify(actor, team, "delete")

        with unit_of_work(self.session):
            members = self.players.find_by_team(team_id)
            for player in members:
                self.players.update(player.id, teams=_without(player.teams, team_id))
            for tournament in self.tournaments.find_by_team(team_id):
                self.tournaments.update(tournament.id, teams=_without(tournament.teams, team_id))
            self.teams.delete(team_id)
        logger.info("Team %s deleted, detached from %d players", team_id, len(members))

    # Matches <-> Tournaments

    def create_match(self, actor: User, team1: str, team2: str, tournament: Optional[str] = None, **fields) -> Match:
        ensure_can_create(actor)
        self.check_match_teams(team1, team2)
        owner = None
        if tournament:
            owner = self.tournaments.find_by_id(tournament)
            if owner is None:
                raise ValidationError("Tournament not found")

        with unit_of_work(self.session):
            match = self.matches.create(
                team1=team1,
                team2=team2,
                tournament=tournament or None,
                created_by=actor.id,
                **fields,
            )
            if owner is not None:
                self.tournaments.update(owner.id, matches=_with(owner.matches, match.id))
        return match

    def delete_match(self, actor: User, match_id: str):
        match = self._require(self.matches, match_id, "Match")
        ensure_can_modify(actor, match, "delete")

        with unit_of_work(self.session):
            owner = self.tournaments.find_by_id(match.tournament)
            if owner is not None:
                self.tournaments.update(owner.id, matches=_without(owner.matches, match_id))
            self.matches.delete(match_id)
        logger.info("Match %s deleted", match_id)

    def add_match_to_tournament(self, actor: User, tournament_id: str, match_id: str) -> Tournament:
        tournament = self._require(self.tournaments, tournament_id, "Tournament")
        ensure_can_modify(actor, tournament)
        match = self._require(self.matches, match_id, "Match")
        if match_id in (tournament.matches or []):
            raise ConflictError("Match is already in this tournament")

        with unit_of_work(self.session):
            previous = match.tournament
            if previous and previous != tournament_id:
                old_owner = self.tournaments.find_by_id(previous)
                if old_owner is not None:
                    self.tournaments.update(previous, matches=_without(old_owner.matches, match_id))
            self.tournaments.update(tournament_id, matches=_with(tournament.matches, match_id))
            self.matches.update(match_id, tournament=tournament_id)
        logger.info("Match %s added to tournament %s", match_id, tournament_id)
        return tournament

    def add_team_to_tournament(self, actor: User, tournament_id: str, team_id: str) -> Tournament:
        tournament = self._require(self.tournaments, tournament_id, "Tournament")
        ensure_can_modify(actor, tournament)
        self._require(self.teams, team_id, "Team")
        if team_id in (tournament.teams or []):
            raise ConflictError("Team is already in this tournament")

        with unit_of_work(self.session):
            self.tournaments.update(tournament_id, teams=_with(tournament.teams, team_id))
        return tournament

    def remove_team_from_tournament(self, actor: User, tournament_id: str, team_id: str) -> Tournament:
        tournament = self._require(self.tournaments, tournament_id, "Tournament")
        ensure_can_modify(actor, tournament)

        with unit_of_work(self.session):
            self.tournaments.update(tournament_id, teams=_without(tournament.teams, team_id))
        return tournament

    def delete_tournament(self, actor: User, tournament_id: str):
        tournament = self._require(self.tournaments, tournament_id, "Tournament")
        ensure_can_modify(actor, tournament, "delete")

        match_ids = list(tournament.matches or [])
        with unit_of_work(self.session):
            for match_id in match_ids:
                self.matches.delete(match_id)
            self.tournaments.delete(tournament_id)
        logger.info("Tournament %s deleted with %d matches", tournament_id, len(match_ids))
