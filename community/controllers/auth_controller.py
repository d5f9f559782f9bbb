"""
Authentication Controller

Handles login and logout HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..models.user import UserStatus
from ..services.user_service import get_user_service
from ..utils.activity_logger import activity_logger
from ..utils.decorators import handle_errors, require_json, require_service
from ..utils.errors import ValidationError
from ..utils.helpers import to_int

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/login', methods=['POST'])
@handle_errors('login')
@require_service(get_user_service, 'User')
@require_json
def login(service, data):
    """Check credentials and mark the user online."""
    username = data.get('username')

    # Log user action
    activity_logger.log_user_action(request, 'login', username=username)

    user = service.authenticate(username, data.get('password'))

    response_data = {'success': True, 'user': user}
    activity_logger.log_server_response(request, 'login', True, response_data)
    return jsonify(response_data)


@auth_bp.route('/logout', methods=['POST'])
@handle_errors('logout')
@require_service(get_user_service, 'User')
@require_json
def logout(service, data):
    """Mark a user offline."""
    user_id = to_int(data.get('userId'))
    if user_id is None:
        raise ValidationError('userId is required')

    activity_logger.log_user_action(request, 'logout', user_id=user_id)

    user = service.set_status(user_id, UserStatus.OFFLINE)

    response_data = {'success': True, 'user': user}
    activity_logger.log_server_response(request, 'logout', True, response_data)
    return jsonify(response_data)
