"""
League Generator - seeds a demo league through the same stores and
relationship maintainer the API uses
"""
import itertools
import logging
from datetime import date, datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from app.database import unit_of_work
from app.engine.relationships import RelationshipMaintainer
from app.generators.player_generator import PlayerGenerator
from app.generators.team_generator import TeamGenerator
from app.models.tournament import TournamentFormat, TournamentStatus
from app.models.user import User
from app.store import TeamStore, TournamentStore

logger = logging.getLogger(__name__)


class LeagueGenerator:
    def __init__(self, session: Session, owner: User):
        self.session = session
        self.owner = owner
        self.maintainer = RelationshipMaintainer(session)
        self.teams = TeamStore(session)
        self.tournaments = TournamentStore(session)

    def seed(
        self,
        team_count: int = 4,
        players_per_team: int = 11,
        tournament_name: Optional[str] = None,
        start: Optional[date] = None,
    ) -> dict:
        """
        Create teams with squads, one T20 tournament and a single
        round-robin of fixtures. Teams whose name already exists are reused.
        """
        start = start or date.today() + timedelta(days=7)
        venues = {}
        team_ids = []
        new_players = 0

        for fields in TeamGenerator.generate_teams(team_count):
            home_ground = fields.pop("home_ground")
            team = self.teams.find_by_name(fields["name"])
            if team is None:
                with unit_of_work(self.session):
                    team = self.teams.create(players=[], created_by=self.owner.id, **fields)
                for player_fields in PlayerGenerator.generate_squad(players_per_team):
                    self.maintainer.create_player(self.owner, teams=[team.id], **player_fields)
                    new_players += 1
            venues[team.id] = home_ground
            team_ids.append(team.id)

        pairings = list(itertools.combinations(team_ids, 2))
        name = tournament_name or f"Demo Cup {start.year}"
        tournament = self.tournaments.find_by_name(name)
        if tournament is None:
            with unit_of_work(self.session):
                tournament = self.tournaments.create(
                    name=name,
                    description="Round-robin demo tournament",
                    start_date=start,
                    end_date=start + timedelta(days=max(len(pairings), 1)),
                    format=TournamentFormat.T20,
                    status=TournamentStatus.UPCOMING,
                    teams=team_ids,
                    matches=[],
                    created_by=self.owner.id,
                )
            for day, (home, away) in enumerate(pairings):
                kickoff = datetime.combine(start + timedelta(days=day), datetime.min.time()) + timedelta(hours=19, minutes=30)
                self.maintainer.create_match(
                    self.owner,
                    team1=home,
                    team2=away,
                    tournament=tournament.id,
                    title=f"Match {day + 1}",
                    venue=venues[home],
                    date=kickoff,
                    overs=20,
                )

        logger.info("Seeded %d teams and tournament %s", len(team_ids), tournament.id)
        return {
            "teams": len(team_ids),
            "players": new_players,
            "tournament": tournament.name,
            "matches": len(tournament.matches or []),
        }
