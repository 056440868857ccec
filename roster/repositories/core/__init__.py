"""
Core repositories for main entities
"""

from .player_repository import PlayerRepository
from .statistic_repository import StatisticRepository
from .team_repository import TeamRepository

__all__ = ['PlayerRepository', 'StatisticRepository', 'TeamRepository']
