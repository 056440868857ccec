"""
Repository Layer for the Volleyball Roster
Provides data access abstraction for the service layer
"""

from .base import BaseRepository

__all__ = ['BaseRepository']
