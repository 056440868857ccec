"""
Volleyball roster package
Contains the service layer and repository modules
"""

__version__ = "1.0.0"
