from flask import jsonify, request

from models import Team
from roster.services.core.team_service import TeamService
from roster.exceptions import NotFoundError
from . import api_bp
from .utils import record_from_payload


@api_bp.route('/teams', methods=['GET'])
def list_teams():
    team_service = TeamService()

    league = request.args.get('league')
    if league is not None:
        teams = team_service.get_teams_by_league(league)
    else:
        teams = team_service.get_all_teams()

    return jsonify([team.to_dict() for team in teams])


@api_bp.route('/teams/<int:team_id>', methods=['GET'])
def get_team(team_id):
    team = TeamService().get_team(team_id)
    if team is None:
        raise NotFoundError("Team", team_id)
    return jsonify(team.to_dict())


@api_bp.route('/teams', methods=['POST'])
def add_team():
    team_service = TeamService()

    team = record_from_payload(Team, request.get_json(silent=True))
    team = team_service.add_team(team)
    team_service.commit()

    return jsonify(team.to_dict()), 201


@api_bp.route('/teams/<int:team_id>', methods=['PUT'])
def update_team(team_id):
    team_service = TeamService()

    team = record_from_payload(Team, request.get_json(silent=True), team_id)
    team = team_service.update_team(team)
    team_service.commit()

    return jsonify(team.to_dict())


@api_bp.route('/teams/<int:team_id>', methods=['DELETE'])
def delete_team(team_id):
    team_service = TeamService()

    team = team_service.get_team(team_id)
    if team is None:
        raise NotFoundError("Team", team_id)
    team_service.delete_team(team)
    team_service.commit()

    return jsonify({'success': True, 'message': f'Team {team_id} deleted'})
