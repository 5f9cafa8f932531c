"""
Portfolio Contact API - Main Application Entry Point
Built using the Application Factory Pattern

This module initializes the Flask application with its configuration,
extensions, contact store and middleware. Route handling is delegated to blueprints.
"""

from flask import Flask, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix
from config import get_config
from extensions import cors, STORE_KEY
from storage import connect_store
from utils.security import add_security_headers

# Import all blueprints
from blueprints.contact import contact_bp


def create_app(config_name=None, store=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        store (SubmissionStore): Pre-built store to use instead of connecting to MongoDB (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions with app
    initialize_extensions(app, store)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        database = 'connected' if app.extensions[STORE_KEY].ping() else 'unavailable'
        return jsonify({'status': 'ok', 'database': database}), 200

    return app


def initialize_extensions(app, store=None):
    """Initialize Flask extensions and the contact store with the app instance"""
    cors.init_app(app, origins=app.config.get('CORS_ORIGINS', '*'), send_wildcard=True)

    # Trust X-Forwarded-For only from the configured number of proxies
    proxy_count = app.config.get('PROXY_FIX_X_FOR', 0)
    if proxy_count:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=proxy_count)

    if store is None:
        store = connect_store(app.config)
    app.extensions[STORE_KEY] = store

    # Verify connection
    if store.ping():
        app.logger.info("✓ MongoDB connected")
    else:
        app.logger.error("✗ MongoDB connection failed, submissions will fail until it is reachable")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(contact_bp)


def register_error_handlers(app):
    """Register plain-text error handlers"""

    def plain(body, status):
        return app.response_class(body, status=status, mimetype='text/plain')

    @app.errorhandler(400)
    def bad_request(e):
        return plain('Bad request', 400)

    @app.errorhandler(404)
    def page_not_found(e):
        return plain('Not found', 404)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return plain('Method not allowed', 405)

    @app.errorhandler(413)
    def payload_too_large(e):
        return plain('Request body too large', 413)

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return plain('Internal server error', 500)


def register_hooks(app):
    """Register request/response hooks"""
    app.after_request(add_security_headers)


if __name__ == '__main__':
    app = create_app()

    # Run development server
    app.run(
        host=app.config['HOST'],
        port=app.config['PORT'],
        debug=app.config.get('DEBUG', False)
    )
