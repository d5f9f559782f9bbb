"""
Endpoint Decorators

Contains decorators shared by the HTTP controllers: service lookup, JSON
body checks and the mapping of service errors onto responses.
"""

from functools import wraps
from flask import request, jsonify

from .activity_logger import activity_logger
from .errors import ServiceError


def require_service(getter, name: str, arg: str = 'service'):
    """
    Decorator that injects a global service instance into the view.

    Responds with 500 when the service has not been initialized.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            service = getter()
            if not service:
                return jsonify({
                    'success': False,
                    'error': f'{name} service unavailable'
                }), 500

            kwargs[arg] = service
            return f(*args, **kwargs)

        return decorated_function
    return decorator


def require_json(f):
    """Decorator for endpoints that need a JSON object body, passed as `data`."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data:
            return jsonify({
                'success': False,
                'error': 'Request body is required'
            }), 400

        kwargs['data'] = data
        return f(*args, **kwargs)

    return decorated_function


def handle_errors(action: str):
    """
    Decorator that turns raised errors into JSON error responses.

    ServiceError subclasses keep their own status code; anything else is
    logged with its traceback context and answered with a 500.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except ServiceError as e:
                error_response = {'success': False, 'error': e.message}
                activity_logger.log_server_response(request, action, False, error_response,
                                                    status=e.status_code)
                return jsonify(error_response), e.status_code
            except Exception as e:
                activity_logger.log_error(request, e, action)
                error_response = {'success': False, 'error': 'Something went wrong!'}
                activity_logger.log_server_response(request, action, False, error_response, status=500)
                return jsonify(error_response), 500

        return decorated_function
    return decorator
