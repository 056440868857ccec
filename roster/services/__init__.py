"""
Service Layer for the Volleyball Roster
Provides the CRUD operations used by the web layer and the CLI
"""

from .base.base_service import BaseService
from .core.player_service import PlayerService
from .core.statistic_service import StatisticService
from .core.team_service import TeamService

__all__ = [
    'BaseService',
    'PlayerService',
    'StatisticService',
    'TeamService'
]
