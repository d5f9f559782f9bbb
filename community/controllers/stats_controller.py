"""
Stats Controller

Handles aggregate statistics and the health check.
"""

from flask import Blueprint, request, jsonify
from ..services.stats_service import get_stats_service
from ..utils.activity_logger import activity_logger
from ..utils.decorators import handle_errors, require_service

stats_bp = Blueprint('stats', __name__)


@stats_bp.route('/stats', methods=['GET'])
@handle_errors('stats')
@require_service(get_stats_service, 'Stats')
def get_stats(service):
    """Community totals and the top users by points."""
    activity_logger.log_user_action(request, 'stats')
    stats = service.get_stats()
    activity_logger.log_server_response(request, 'stats', True, stats)
    return jsonify(stats)


@stats_bp.route('/health', methods=['GET'])
@handle_errors('health_check')
def health_check():
    """Health check endpoint."""
    response_data = {
        'status': 'healthy',
        'stats_available': get_stats_service() is not None,
        'log_stats': activity_logger.get_log_stats()
    }
    return jsonify(response_data)
