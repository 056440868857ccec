"""
Team Service with Repository Pattern
Handles team records and league filtering
"""

from typing import List, Optional
from models import Team
from roster.services.base import BaseService
from roster.repositories.core import TeamRepository
from roster.exceptions import NotFoundError, DuplicateError


class TeamService(BaseService[Team]):
    """
    Service for team records
    Unlike players and statistics, teams are inserted and updated through
    separate operations
    """

    def __init__(self, repository: Optional[TeamRepository] = None):
        """
        Initialize service with repository

        Args:
            repository: TeamRepository instance (optional, will create if not provided)
        """
        if repository is None:
            repository = TeamRepository()
        super().__init__(repository)

    def get_all_teams(self) -> List[Team]:
        return self.repository.find_all()

    def get_teams_by_league(self, league_type: str) -> List[Team]:
        """
        Get teams entered in a league

        Args:
            league_type: League name, matched exactly (e.g., '2020 Olympics')

        Returns:
            Matching teams, empty list if none match
        """
        return self.repository.get_teams_by_league(league_type)

    def get_team(self, team_id: int) -> Optional[Team]:
        """
        Get a single team

        Args:
            team_id: Team ID

        Returns:
            The team, or None if no team has this ID
        """
        return self.get_by_id(team_id)

    def add_team(self, team: Team) -> Team:
        """
        Insert a new team; the caller commits

        Args:
            team: Transient team (ID may be None to let the database assign one)

        Returns:
            The inserted team

        Raises:
            DuplicateError: If a team with the same ID is already stored
        """
        if self.exists(team.id):
            self.logger.warning(f"Team with ID {team.id} already exists")
            raise DuplicateError("Team", "id", team.id)
        return self.repository.add(team)

    def update_team(self, team: Team) -> Team:
        """
        Overwrite a stored team's fields; the caller commits

        Args:
            team: Team carrying the ID of a stored team and the new values

        Returns:
            The session-bound team instance

        Raises:
            NotFoundError: If no team with this ID is stored
        """
        if not self.exists(team.id):
            self.logger.warning(f"Team with ID {team.id} not found for update")
            raise NotFoundError("Team", team.id)
        return self.repository.merge(team)

    def delete_team(self, team: Team) -> bool:
        """
        Mark a team for removal

        Returns:
            True if the team was stored, False otherwise
        """
        return self.repository.remove(team)
