from flask import jsonify, request

from models import Player
from roster.services.core.player_service import PlayerService
from roster.exceptions import NotFoundError
from . import api_bp
from .utils import record_from_payload


@api_bp.route('/players', methods=['GET'])
def list_players():
    player_service = PlayerService()

    position = request.args.get('position')
    team = request.args.get('team')
    if position is not None:
        players = player_service.get_players_by_position(position)
    elif team is not None:
        players = player_service.get_players_by_team(team)
    else:
        players = player_service.get_all_players()

    return jsonify([player.to_dict() for player in players])


@api_bp.route('/players/<int:player_id>', methods=['GET'])
def get_player(player_id):
    player = PlayerService().get_player_by_id(player_id)
    if player is None:
        raise NotFoundError("Player", player_id)
    return jsonify(player.to_dict())


@api_bp.route('/players', methods=['POST'])
@api_bp.route('/players/<int:player_id>', methods=['PUT'])
def save_player(player_id=None):
    """Insert or update a player (upsert keyed on player_id)"""
    player_service = PlayerService()

    player = record_from_payload(Player, request.get_json(silent=True), player_id)
    saved = player_service.add_or_update_player(player)
    player_service.commit()

    return jsonify(saved.to_dict())


@api_bp.route('/players/<int:player_id>', methods=['DELETE'])
def delete_player(player_id):
    player_service = PlayerService()

    player = player_service.get_player_by_id(player_id)
    if player is None:
        raise NotFoundError("Player", player_id)
    player_service.delete_player(player)
    player_service.commit()

    return jsonify({'success': True, 'message': f'Player {player_id} deleted'})
