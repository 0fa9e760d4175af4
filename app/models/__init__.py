from app.models.user import User, UserRole
from app.models.team import Team
from app.models.player import Player, PlayerPosition, BattingStyle, BowlingStyle
from app.models.match import Match, MatchStatus
from app.models.tournament import Tournament, TournamentFormat, TournamentStatus

__all__ = [
    "User",
    "UserRole",
    "Team",
    "Player",
    "PlayerPosition",
    "BattingStyle",
    "BowlingStyle",
    "Match",
    "MatchStatus",
    "Tournament",
    "TournamentFormat",
    "TournamentStatus",
]
