"""
Message Controller

Handles the chat feed endpoints.
"""

from flask import Blueprint, request, jsonify
from ..services.message_service import get_message_service
from ..utils.activity_logger import activity_logger
from ..utils.decorators import handle_errors, require_json, require_service

message_bp = Blueprint('messages', __name__)


@message_bp.route('/messages', methods=['GET'])
@handle_errors('list_messages')
@require_service(get_message_service, 'Message')
def list_messages(service):
    """Page through messages, newest first."""
    limit = request.args.get('limit')
    offset = request.args.get('offset')

    activity_logger.log_user_action(request, 'list_messages', limit=limit, offset=offset)

    page = service.list(limit, offset)

    activity_logger.log_server_response(request, 'list_messages', True,
                                        {'total': page['total'], 'hasMore': page['hasMore']})
    return jsonify(page)


@message_bp.route('/messages', methods=['POST'])
@handle_errors('post_message')
@require_service(get_message_service, 'Message')
@require_json
def post_message(service, data):
    """Post a message for a user."""
    user_id = data.get('userId')

    activity_logger.log_user_action(request, 'post_message', user_id=user_id)

    message = service.post(user_id, data.get('text'))

    activity_logger.log_server_response(request, 'post_message', True, message)
    return jsonify(message), 201
