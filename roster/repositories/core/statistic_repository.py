"""
Statistic Repository for the Volleyball Roster
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from models import Statistic
from roster.repositories.base import BaseRepository


class StatisticRepository(BaseRepository[Statistic]):
    """
    Repository for player statistic lines
    """

    def __init__(self, session: Optional[Session] = None):
        super().__init__(Statistic, session)

    def get_statistics_by_player(self, player_name: str) -> List[Statistic]:
        """Get all statistic lines recorded under a player name"""
        return self.get_query().filter(Statistic.player_name == player_name).all()
