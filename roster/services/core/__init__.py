"""
Core services for main business entities
"""

from .player_service import PlayerService
from .statistic_service import StatisticService
from .team_service import TeamService

__all__ = [
    'PlayerService',
    'StatisticService',
    'TeamService'
]
