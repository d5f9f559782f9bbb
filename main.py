"""
Community Server - Main Entry Point

This is the main entry point for the community server.
It initializes storage and all services and starts the Flask application.
"""

import os
from community import create_app
from community.config import config
from community.services import initialize_services
from community.utils.activity_logger import activity_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('APP_ENV', 'default')]
    try:
        print("Initializing services...")
        initialize_services(config_class)
        print(f"✓ Storage ready ({config_class.STORAGE_BACKEND}: {config_class.DATA_DIR})")

        print("Creating Flask application...")
        app = create_app(config_class)
        print("✓ Flask application created successfully")

        activity_logger.logger.info("Community Server Starting")

        print(f"\nStarting Community Server on http://{config_class.HOST}:{config_class.PORT}")
        print(f"API endpoints available at http://{config_class.HOST}:{config_class.PORT}/api")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG, threaded=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        activity_logger.logger.info("Community Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        activity_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
