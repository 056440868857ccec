"""
Tests for the JSON API blueprint
"""

import pytest
from models import Player, Team, db


@pytest.fixture
def seeded(seeded_players, seeded_statistics, seeded_teams):
    """All three sample tables filled."""
    return None


class TestPlayerRoutes:

    def test_list_players(self, client, seeded):
        response = client.get('/api/players')

        assert response.status_code == 200
        assert len(response.get_json()) == 3

    def test_list_players_by_position(self, client, seeded):
        """Test the position filter on the collection endpoint"""
        response = client.get('/api/players', query_string={'position': 'Setter'})

        data = response.get_json()
        assert response.status_code == 200
        assert len(data) == 1
        assert data[0]['player_name'] == "Matias Sanchez"

    def test_list_players_by_team(self, client, seeded):
        response = client.get('/api/players', query_string={'team': 'Brazil'})

        assert response.status_code == 200
        assert response.get_json() == []

    def test_get_player(self, client, seeded):
        response = client.get('/api/players/2')

        assert response.status_code == 200
        assert response.get_json()['height'] == "200cm"

    def test_get_unknown_player_returns_404(self, client, seeded):
        response = client.get('/api/players/99')

        assert response.status_code == 404
        assert response.get_json()['error'] == "NOT_FOUND"

    def test_post_player_inserts(self, client, seeded):
        """Test inserting through POST"""
        # Arrange
        payload = {'player_id': 4, 'player_name': "Facundo Conte", 'number': 7, 'team_name': "Argentina",
                   'position': "Outside Hitter", 'age': "34", 'height': "197cm"}

        # Act
        response = client.post('/api/players', json=payload)

        # Assert
        assert response.status_code == 200
        assert response.get_json() == payload
        assert db.session.get(Player, 4).player_name == "Facundo Conte"

    def test_put_player_updates_in_place(self, client, seeded):
        """Test that PUT overwrites the given fields and keeps the others"""
        response = client.put('/api/players/1', json={'height': "180cm"})

        data = response.get_json()
        assert response.status_code == 200
        assert data['height'] == "180cm"
        assert data['player_name'] == "Matias Sanchez"
        assert len(client.get('/api/players').get_json()) == 3

    def test_put_player_with_conflicting_id_returns_400(self, client, seeded):
        response = client.put('/api/players/1', json={'player_id': 2})

        assert response.status_code == 400
        assert response.get_json()['field'] == "player_id"

    def test_post_player_with_unknown_field_returns_400(self, client, seeded):
        response = client.post('/api/players', json={'player_name': "X", 'shoe_size': 46})

        assert response.status_code == 400
        assert response.get_json()['field'] == "shoe_size"

    def test_post_player_with_non_integer_id_returns_400(self, client, seeded):
        """Test that a non-integer key is rejected before reaching the database"""
        response = client.post('/api/players', json={'player_id': 'abc', 'player_name': "X"})

        data = response.get_json()
        assert response.status_code == 400
        assert data['error'] == "VALIDATION_ERROR"
        assert data['field'] == "player_id"
        assert len(client.get('/api/players').get_json()) == 3

    def test_post_player_with_boolean_id_returns_400(self, client, seeded):
        response = client.post('/api/players', json={'player_id': True, 'player_name': "X"})

        assert response.status_code == 400
        assert response.get_json()['field'] == "player_id"

    def test_post_team_with_non_integer_id_returns_400(self, client, seeded):
        response = client.post('/api/teams', json={'id': "4", 'team_name': "France"})

        assert response.status_code == 400
        assert response.get_json()['field'] == "id"

    def test_post_player_without_json_body_returns_400(self, client, seeded):
        response = client.post('/api/players', data="not json", content_type="text/plain")

        assert response.status_code == 400
        assert response.get_json()['error'] == "VALIDATION_ERROR"

    def test_delete_player(self, client, seeded):
        response = client.delete('/api/players/1')

        assert response.status_code == 200
        assert response.get_json()['success'] is True
        assert client.get('/api/players/1').status_code == 404

    def test_delete_unknown_player_returns_404(self, client, seeded):
        assert client.delete('/api/players/99').status_code == 404


class TestStatisticRoutes:

    def test_list_statistics_by_player(self, client, seeded):
        response = client.get('/api/statistics', query_string={'player': 'Federico Pereyra'})

        data = response.get_json()
        assert len(data) == 1
        assert data[0]['efficiency'] == pytest.approx(31.25)

    def test_get_unknown_statistic_returns_404(self, client, seeded):
        assert client.get('/api/statistics/99').status_code == 404

    def test_post_statistic_inserts(self, client, seeded):
        """Test inserting a statistic line through POST"""
        # Arrange
        payload = {'id': 4, 'player_name': "Facundo Conte", 'total_points': 125, 'attack_points': 111,
                   'block_points': 7, 'serve_points': 7, 'efficiency': 45.12}

        # Act
        response = client.post('/api/statistics', json=payload)

        # Assert
        assert response.status_code == 200
        assert response.get_json()['player_name'] == "Facundo Conte"
        assert client.get('/api/statistics/4').get_json()['total_points'] == 125

    def test_put_statistic_upserts(self, client, seeded):
        """Test that PUT on an unknown ID inserts"""
        response = client.put('/api/statistics/4', json={'player_name': "Facundo Conte", 'total_points': 125})

        assert response.status_code == 200
        assert response.get_json()['id'] == 4
        assert len(client.get('/api/statistics').get_json()) == 4

    def test_delete_statistic(self, client, seeded):
        assert client.delete('/api/statistics/3').status_code == 200
        assert client.get('/api/statistics/3').status_code == 404


class TestTeamRoutes:

    def test_list_teams_by_league(self, client, seeded):
        response = client.get('/api/teams', query_string={'league': '2020 Olympics'})

        assert [t['team_name'] for t in response.get_json()] == ["Argentina", "Brazil", "Canada"]

    def test_list_teams_by_unknown_league(self, client, seeded):
        response = client.get('/api/teams', query_string={'league': 'NonExistingLeague'})

        assert response.status_code == 200
        assert response.get_json() == []

    def test_get_team(self, client, seeded):
        response = client.get('/api/teams/3')

        data = response.get_json()
        assert response.status_code == 200
        assert data['team_name'] == "Canada"
        assert data['league_type'] == "2020 Olympics"

    def test_add_team(self, client, seeded):
        payload = {'id': 4, 'team_name': "France", 'location': "France", 'league_type': "2020 Olympics",
                   'category': "Indoor", 'gender': "Men"}

        response = client.post('/api/teams', json=payload)

        assert response.status_code == 201
        assert db.session.get(Team, 4).team_name == "France"

    def test_add_team_with_existing_id_returns_409(self, client, seeded):
        response = client.post('/api/teams', json={'id': 1, 'team_name': "Poland"})

        assert response.status_code == 409
        assert response.get_json()['error'] == "DUPLICATE_ERROR"
        assert client.get('/api/teams/1').get_json()['team_name'] == "Argentina"

    def test_update_team(self, client, seeded):
        response = client.put('/api/teams/1', json={'location': "New Argentina"})

        assert response.status_code == 200
        assert response.get_json()['location'] == "New Argentina"

    def test_update_unknown_team_returns_404(self, client, seeded):
        response = client.put('/api/teams/99', json={'team_name': "Ghost"})

        assert response.status_code == 404
        assert client.get('/api/teams/99').status_code == 404

    def test_delete_team(self, client, seeded):
        assert client.delete('/api/teams/2').status_code == 200
        assert len(client.get('/api/teams').get_json()) == 2
