from flask import Blueprint, jsonify, current_app

from roster.exceptions import ServiceError, ValidationError, NotFoundError, DuplicateError

# Create the blueprint
api_bp = Blueprint('api_bp', __name__, url_prefix='/api')

ERROR_STATUS = {
    ValidationError: 400,
    NotFoundError: 404,
    DuplicateError: 409,
}


@api_bp.errorhandler(ServiceError)
def handle_service_error(error):
    status = ERROR_STATUS.get(type(error), 500)
    if status == 500:
        current_app.logger.error(f"Service error: {str(error)}")
    return jsonify(error.to_dict()), status


# Register the route modules with the blueprint
from .players import list_players, get_player, save_player, delete_player
from .statistics import list_statistics, get_statistic, save_statistic, delete_statistic
from .teams import list_teams, get_team, add_team, update_team, delete_team
