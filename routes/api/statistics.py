from flask import jsonify, request

from models import Statistic
from roster.services.core.statistic_service import StatisticService
from roster.exceptions import NotFoundError
from . import api_bp
from .utils import record_from_payload


@api_bp.route('/statistics', methods=['GET'])
def list_statistics():
    statistic_service = StatisticService()

    player = request.args.get('player')
    if player is not None:
        statistics = statistic_service.get_statistics_by_player(player)
    else:
        statistics = statistic_service.get_all_statistics()

    return jsonify([statistic.to_dict() for statistic in statistics])


@api_bp.route('/statistics/<int:statistic_id>', methods=['GET'])
def get_statistic(statistic_id):
    statistic = StatisticService().get_statistic_by_id(statistic_id)
    if statistic is None:
        raise NotFoundError("Statistic", statistic_id)
    return jsonify(statistic.to_dict())


@api_bp.route('/statistics', methods=['POST'])
@api_bp.route('/statistics/<int:statistic_id>', methods=['PUT'])
def save_statistic(statistic_id=None):
    statistic_service = StatisticService()

    statistic = record_from_payload(Statistic, request.get_json(silent=True), statistic_id)
    saved = statistic_service.add_or_update_statistic(statistic)
    statistic_service.commit()

    return jsonify(saved.to_dict())


@api_bp.route('/statistics/<int:statistic_id>', methods=['DELETE'])
def delete_statistic(statistic_id):
    statistic_service = StatisticService()

    statistic = statistic_service.get_statistic_by_id(statistic_id)
    if statistic is None:
        raise NotFoundError("Statistic", statistic_id)
    statistic_service.delete_statistic(statistic)
    statistic_service.commit()

    return jsonify({'success': True, 'message': f'Statistic {statistic_id} deleted'})
