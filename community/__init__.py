"""
Community Server Application Package

A small community backend: user registration and login, a chat feed, a rank
ladder and a weighted roulette that awards points, persisted as whole-document
collections.
"""

from flask import Flask, jsonify
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Services are initialized separately (see `services.initialize_services`)
    so tests can inject their own storage backend.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all blueprints registered
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Register blueprints
    from .controllers.auth_controller import auth_bp
    from .controllers.user_controller import user_bp
    from .controllers.message_controller import message_bp
    from .controllers.reward_controller import reward_bp
    from .controllers.stats_controller import stats_bp

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(user_bp, url_prefix='/api')
    app.register_blueprint(message_bp, url_prefix='/api')
    app.register_blueprint(reward_bp, url_prefix='/api')
    app.register_blueprint(stats_bp, url_prefix='/api')

    @app.errorhandler(404)
    def route_not_found(error):
        return jsonify({'success': False, 'error': 'Route not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'success': False, 'error': 'Method not allowed'}), 405

    return app
