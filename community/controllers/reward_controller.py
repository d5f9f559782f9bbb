"""
Reward Controller

Handles the rank ladder and roulette endpoints.
"""

from flask import Blueprint, request, jsonify
from ..services.rank_service import get_rank_service
from ..services.roulette_service import get_roulette_service
from ..utils.activity_logger import activity_logger
from ..utils.decorators import handle_errors, require_service

reward_bp = Blueprint('rewards', __name__)


@reward_bp.route('/ranks', methods=['GET'])
@handle_errors('list_ranks')
@require_service(get_rank_service, 'Rank')
def list_ranks(service):
    """List ranks ordered by minimum points."""
    ranks = service.list_ranks()
    return jsonify(ranks)


@reward_bp.route('/ranks/user/<int:user_id>', methods=['GET'])
@handle_errors('resolve_rank')
@require_service(get_rank_service, 'Rank')
def resolve_rank(user_id, service):
    """Get the rank a user currently holds."""
    activity_logger.log_user_action(request, 'resolve_rank', user_id=user_id)
    rank = service.resolve_rank(user_id)
    activity_logger.log_server_response(request, 'resolve_rank', True, rank)
    return jsonify(rank)


@reward_bp.route('/roulette', methods=['GET'])
@handle_errors('roulette_config')
@require_service(get_roulette_service, 'Roulette')
def get_roulette(service):
    """Get the prize table."""
    return jsonify(service.get_config())


@reward_bp.route('/roulette/spin/<int:user_id>', methods=['POST'])
@handle_errors('spin')
@require_service(get_roulette_service, 'Roulette')
def spin(user_id, service):
    """Spin the roulette and credit the prize to the user."""
    # Log user action
    activity_logger.log_user_action(request, 'spin', user_id=user_id)

    result = service.spin(user_id)

    activity_logger.log_server_response(request, 'spin', True, result)
    return jsonify(result)
