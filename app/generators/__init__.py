from app.generators.player_generator import PlayerGenerator
from app.generators.team_generator import TeamGenerator
from app.generators.league_generator import LeagueGenerator

__all__ = ["PlayerGenerator", "TeamGenerator", "LeagueGenerator"]
