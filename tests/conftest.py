"""
Shared test fixtures and configuration for the roster tests.
"""

import pytest
from app import create_app
from models import db
from roster.seed import sample_players, sample_statistics, sample_teams


@pytest.fixture
def app():
    """Create a test application backed by a fresh in-memory database."""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SECRET_KEY': 'test-secret-key',
    })

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create a test client for the Flask application."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Create a test runner for the Flask application."""
    return app.test_cli_runner()


@pytest.fixture
def seeded_players(app):
    """Matias Sanchez, Federico Pereyra and Cristian Poglajen."""
    players = sample_players()
    db.session.add_all(players)
    db.session.commit()
    return players


@pytest.fixture
def seeded_statistics(app):
    statistics = sample_statistics()
    db.session.add_all(statistics)
    db.session.commit()
    return statistics


@pytest.fixture
def seeded_teams(app):
    """Argentina, Brazil and Canada, all in the 2020 Olympics."""
    teams = sample_teams()
    db.session.add_all(teams)
    db.session.commit()
    return teams
