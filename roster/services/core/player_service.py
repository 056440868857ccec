"""
Player Service with Repository Pattern
Handles roster operations for players
"""

from typing import List, Optional
from models import Player
from roster.services.base import BaseService
from roster.repositories.core import PlayerRepository


class PlayerService(BaseService[Player]):
    """
    Service for player records
    Lookups return None / empty lists on a miss; writes are staged in the
    session and persisted by the caller's commit()
    """

    def __init__(self, repository: Optional[PlayerRepository] = None):
        """
        Initialize service with repository

        Args:
            repository: PlayerRepository instance (optional, will create if not provided)
        """
        if repository is None:
            repository = PlayerRepository()
        super().__init__(repository)

    def get_all_players(self) -> List[Player]:
        """
        Get every player on record

        Returns:
            List of players, order not guaranteed
        """
        return self.repository.find_all()

    def get_players_by_position(self, position: str) -> List[Player]:
        """
        Get players whose position equals the given string exactly

        Args:
            position: Position name (e.g., 'Setter')

        Returns:
            Matching players, empty list if none match
        """
        return self.repository.get_players_by_position(position)

    def get_players_by_team(self, team_name: str) -> List[Player]:
        """
        Get the players listed under a team name

        Args:
            team_name: Team name (e.g., 'Argentina')

        Returns:
            Matching players ordered by jersey number
        """
        return self.repository.get_players_by_team(team_name)

    def get_player_by_id(self, player_id: int) -> Optional[Player]:
        """
        Get a single player

        Args:
            player_id: Player ID

        Returns:
            The player, or None if no player has this ID
        """
        return self.get_by_id(player_id)

    def add_or_update_player(self, player: Player) -> Player:
        """
        Insert the player if its ID is unknown, otherwise overwrite the
        stored player's fields with the given ones

        Args:
            player: Player carrying the ID and the field values

        Returns:
            The session-bound player instance
        """
        return self.repository.merge(player)

    def delete_player(self, player: Player) -> bool:
        """
        Mark a player for removal

        Args:
            player: Player to remove (matched by ID)

        Returns:
            True if the player was stored, False otherwise
        """
        return self.repository.remove(player)
