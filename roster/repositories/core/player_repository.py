"""
Player Repository for the Volleyball Roster
Handles player-specific data access patterns
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from models import Player
from roster.repositories.base import BaseRepository


class PlayerRepository(BaseRepository[Player]):
    """
    Repository for player-specific queries and data access
    """

    def __init__(self, session: Optional[Session] = None):
        super().__init__(Player, session)

    def get_players_by_position(self, position: str) -> List[Player]:
        """
        Get all players playing a position (exact match)

        Args:
            position: Position name (e.g., 'Setter', 'Libero')

        Returns:
            List of players
        """
        return self.get_query().filter(Player.position == position).all()

    def get_players_by_team(self, team_name: str) -> List[Player]:
        """
        Get all players of a team, ordered by jersey number

        Args:
            team_name: Team name (e.g., 'Argentina')

        Returns:
            List of players
        """
        return self.get_query().filter(
            Player.team_name == team_name
        ).order_by(Player.number).all()
