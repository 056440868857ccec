"""
Team Repository for the Volleyball Roster
Handles team-specific data access patterns
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from models import Team
from roster.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """
    Repository for team-specific queries and data access
    """

    def __init__(self, session: Optional[Session] = None):
        super().__init__(Team, session)

    def get_teams_by_league(self, league_type: str) -> List[Team]:
        """
        Get all teams entered in a league (exact match)

        Args:
            league_type: League name (e.g., '2020 Olympics')

        Returns:
            List of teams ordered by name
        """
        return self.get_query().filter(
            Team.league_type == league_type
        ).order_by(Team.team_name).all()
