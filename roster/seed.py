"""
Seed data for the roster database.

Sample roster of the Argentina men's indoor squad at the 2020 Olympics,
with their statistic lines and three teams of the same tournament.

Usage:
    flask --app app seed-db
"""

from models import Player, Statistic, Team
from roster.repositories.core import PlayerRepository, StatisticRepository, TeamRepository


def sample_players():
    return [
        Player(player_id=1, player_name="Matias Sanchez", number=1, team_name="Argentina",
               position="Setter", age="27", height="175cm"),
        Player(player_id=2, player_name="Federico Pereyra", number=2, team_name="Argentina",
               position="Opposite Hitter", age="35", height="200cm"),
        Player(player_id=3, player_name="Cristian Poglajen", number=6, team_name="Argentina",
               position="Outside Hitter", age="34", height="195cm"),
    ]


def sample_statistics():
    return [
        Statistic(id=1, player_name="Matias Sanchez", total_points=0, attack_points=0,
                  block_points=0, serve_points=0, efficiency=0.00),
        Statistic(id=2, player_name="Federico Pereyra", total_points=7, attack_points=5,
                  block_points=2, serve_points=0, efficiency=31.25),
        Statistic(id=3, player_name="Cristian Poglajen", total_points=28, attack_points=25,
                  block_points=2, serve_points=1, efficiency=50.00),
    ]


def sample_teams():
    return [
        Team(id=1, team_name="Argentina", location="Argentina", league_type="2020 Olympics",
             category="Indoor", gender="Men"),
        Team(id=2, team_name="Brazil", location="Brazil", league_type="2020 Olympics",
             category="Indoor", gender="Men"),
        Team(id=3, team_name="Canada", location="Canada", league_type="2020 Olympics",
             category="Indoor", gender="Men"),
    ]


def seed(session=None):
    """
    Insert the sample data into every empty table.
    Tables that already hold rows are left untouched.

    Returns:
        Dict of table name -> number of inserted rows
    """
    inserted = {}
    for name, repository, records in (
        ('player', PlayerRepository(session), sample_players()),
        ('statistic', StatisticRepository(session), sample_statistics()),
        ('team', TeamRepository(session), sample_teams()),
    ):
        if repository.count():
            inserted[name] = 0
            continue
        inserted[name] = len(repository.add_range(records, commit=True))
    return inserted
