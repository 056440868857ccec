"""
Statistic Service
Stores per-player point breakdowns (attack, block, serve) and efficiency
"""

from typing import List, Optional
from models import Statistic
from roster.services.base import BaseService
from roster.repositories.core import StatisticRepository


class StatisticService(BaseService[Statistic]):
    """
    Service for player statistic lines
    """

    def __init__(self, repository: Optional[StatisticRepository] = None):
        if repository is None:
            repository = StatisticRepository()
        super().__init__(repository)

    def get_all_statistics(self) -> List[Statistic]:
        return self.repository.find_all()

    def get_statistics_by_player(self, player_name: str) -> List[Statistic]:
        """Statistic lines recorded under exactly this player name"""
        return self.repository.get_statistics_by_player(player_name)

    def get_statistic_by_id(self, statistic_id: int) -> Optional[Statistic]:
        """Returns None for an unknown ID"""
        return self.get_by_id(statistic_id)

    def add_or_update_statistic(self, statistic: Statistic) -> Statistic:
        """
        Upsert keyed on the statistic ID; the caller commits

        Args:
            statistic: Statistic carrying the ID and the field values

        Returns:
            The session-bound statistic instance
        """
        return self.repository.merge(statistic)

    def delete_statistic(self, statistic: Statistic) -> bool:
        return self.repository.remove(statistic)
