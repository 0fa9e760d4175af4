import random
from faker import Faker
from app.models.player import PlayerPosition, BattingStyle, BowlingStyle

# Initialize Faker instances - use en_US as fallback for unavailable locales
fake_in = Faker('en_IN')
fake_au = Faker('en_AU')
fake_en = Faker('en_GB')
fake_nz = Faker('en_NZ')
fake_wi = Faker('en_US')  # No specific WI locale


class PlayerGenerator:
    """Generates fictional player records for demo leagues"""

    # Name locale distribution (weighted towards Indian players)
    LOCALES = [
        (fake_in, 60),
        (fake_au, 12),
        (fake_en, 12),
        (fake_nz, 8),
        (fake_wi, 8),
    ]

    POSITION_WEIGHTS = {
        PlayerPosition.BATSMAN: 35,
        PlayerPosition.BOWLER: 35,
        PlayerPosition.ALL_ROUNDER: 20,
        PlayerPosition.WICKET_KEEPER: 10,
    }

    # Batsmen and keepers mostly don't bowl
    BOWLING_STYLES = {
        PlayerPosition.BOWLER: [
            (BowlingStyle.RIGHT_ARM_FAST, 40),
            (BowlingStyle.LEFT_ARM_FAST, 15),
            (BowlingStyle.RIGHT_ARM_SPIN, 25),
            (BowlingStyle.LEFT_ARM_SPIN, 20),
        ],
        PlayerPosition.ALL_ROUNDER: [
            (BowlingStyle.RIGHT_ARM_FAST, 30),
            (BowlingStyle.LEFT_ARM_FAST, 10),
            (BowlingStyle.RIGHT_ARM_SPIN, 40),
            (BowlingStyle.LEFT_ARM_SPIN, 20),
        ],
    }

    @staticmethod
    def _weighted(options):
        values, weights = zip(*options)
        return random.choices(values, weights=weights, k=1)[0]

    @classmethod
    def generate_player(cls) -> dict:
        """Field dict accepted by RelationshipMaintainer.create_player"""
        fake = cls._weighted(cls.LOCALES)
        position = cls._weighted(cls.POSITION_WEIGHTS.items())
        if position in cls.BOWLING_STYLES:
            bowling_style = cls._weighted(cls.BOWLING_STYLES[position])
        else:
            bowling_style = BowlingStyle.NONE

        name = fake.name()
        return {
            "name": name,
            "email": f"{name.lower().replace(' ', '.')}@{fake.free_email_domain()}",
            "age": random.randint(18, 38),
            "position": position,
            "batting_style": random.choices(
                [BattingStyle.RIGHT_HANDED, BattingStyle.LEFT_HANDED], weights=[70, 30], k=1
            )[0],
            "bowling_style": bowling_style,
        }

    @classmethod
    def generate_squad(cls, size: int = 11) -> list[dict]:
        """Generate a squad with at least one keeper"""
        squad = [cls.generate_player() for _ in range(size)]
        if squad and not any(p["position"] == PlayerPosition.WICKET_KEEPER for p in squad):
            squad[0]["position"] = PlayerPosition.WICKET_KEEPER
            squad[0]["bowling_style"] = BowlingStyle.NONE
        return squad
