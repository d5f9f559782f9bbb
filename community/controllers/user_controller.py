"""
User Controller

Handles user listing, lookup, registration and profile update endpoints.
"""

from flask import Blueprint, request, jsonify
from ..services.user_service import get_user_service
from ..utils.activity_logger import activity_logger
from ..utils.decorators import handle_errors, require_json, require_service

user_bp = Blueprint('users', __name__)


@user_bp.route('/users', methods=['GET'])
@handle_errors('list_users')
@require_service(get_user_service, 'User')
def list_users(service):
    """List every user (passwords omitted)."""
    activity_logger.log_user_action(request, 'list_users')
    users = service.list_users()
    activity_logger.log_server_response(request, 'list_users', True, users)
    return jsonify(users)


@user_bp.route('/users/<int:user_id>', methods=['GET'])
@handle_errors('get_user')
@require_service(get_user_service, 'User')
def get_user(user_id, service):
    """Get a single user."""
    activity_logger.log_user_action(request, 'get_user', user_id=user_id)
    user = service.get_user(user_id)
    activity_logger.log_server_response(request, 'get_user', True, user)
    return jsonify(user)


@user_bp.route('/users', methods=['POST'])
@handle_errors('register')
@require_service(get_user_service, 'User')
@require_json
def register(service, data):
    """Register a new user."""
    username = data.get('username')

    # Log user action
    activity_logger.log_user_action(request, 'register', username=username)

    user = service.register(username, data.get('email'), data.get('password'))

    activity_logger.log_server_response(request, 'register', True, user)
    return jsonify(user), 201


@user_bp.route('/users/<int:user_id>', methods=['PUT'])
@handle_errors('update_user')
@require_service(get_user_service, 'User')
@require_json
def update_user(user_id, service, data):
    """Shallow-merge the body over the stored user."""
    activity_logger.log_user_action(request, 'update_user', user_id=user_id, fields=sorted(data))

    user = service.update_user(user_id, data)

    activity_logger.log_server_response(request, 'update_user', True, user)
    return jsonify(user)
