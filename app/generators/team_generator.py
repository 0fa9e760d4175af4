"""
Team Generator - fictional franchise teams for demo leagues
"""
from datetime import date
from faker import Faker

fake = Faker('en_IN')


# 8 Fictional franchise teams
FRANCHISE_TEAMS = [
    {"name": "Mumbai Titans", "city": "Mumbai", "home_ground": "Wankhede Stadium", "founded": date(2008, 1, 24)},
    {"name": "Chennai Kings", "city": "Chennai", "home_ground": "M.A. Chidambaram Stadium", "founded": date(2008, 1, 24)},
    {"name": "Bangalore Warriors", "city": "Bangalore", "home_ground": "M. Chinnaswamy Stadium", "founded": date(2008, 1, 24)},
    {"name": "Kolkata Knights", "city": "Kolkata", "home_ground": "Eden Gardens", "founded": date(2008, 1, 24)},
    {"name": "Delhi Capitals", "city": "Delhi", "home_ground": "Arun Jaitley Stadium", "founded": date(2008, 1, 24)},
    {"name": "Hyderabad Chargers", "city": "Hyderabad", "home_ground": "Rajiv Gandhi Stadium", "founded": date(2012, 12, 18)},
    {"name": "Rajasthan Royals", "city": "Jaipur", "home_ground": "Sawai Mansingh Stadium", "founded": date(2008, 1, 24)},
    {"name": "Punjab Lions", "city": "Mohali", "home_ground": "PCA Stadium", "founded": date(2008, 1, 24)},
]


class TeamGenerator:
    """Generates franchise team records"""

    @classmethod
    def generate_teams(cls, count: int = 8) -> list[dict]:
        """
        Field dicts for up to 8 franchises, with made-up coaches.
        home_ground is returned alongside for fixture venues; it is not a Team field.
        """
        teams = []
        for team_data in FRANCHISE_TEAMS[:count]:
            teams.append({
                "name": team_data["name"],
                "city": team_data["city"],
                "founded": team_data["founded"],
                "coach": fake.name(),
                "home_ground": team_data["home_ground"],
            })
        return teams

