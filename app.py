"""
Portfolio - Main Application Entry Point
Application Factory Pattern with blueprint-based architecture

This module initializes the Flask application with its extensions and
configuration. Page rendering lives in the theme blueprint, routes in the
site and portfolio blueprints.

Run with gunicorn: gunicorn "app:create_app()"
"""

import os
from datetime import datetime
from flask import Flask
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.middleware.proxy_fix import ProxyFix
from config import get_config
from extensions import db
from theme import Seo, ThemeError, render_themed, theme_bp

# Import all blueprints
from blueprints.site import site_bp
from blueprints.portfolio import portfolio_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)

    # Trust X-Forwarded-For only from the configured number of proxies
    if app.config.get('PROXY_FIX_X_FOR'):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=app.config['PROXY_FIX_X_FOR'],
                                x_proto=1, x_host=1)

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)

    # Create tables if they don't exist
    with app.app_context():
        import models  # noqa: F401 - registers the tables on db.metadata
        try:
            db.create_all()
            app.logger.info("✓ Database initialized successfully")
        except SQLAlchemyError as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(theme_bp)
    app.register_blueprint(site_bp)
    app.register_blueprint(portfolio_bp)


def _render_error(status, message):
    try:
        return render_themed('theme/error.html', Seo(title=f'{status}: {message}'),
                             status=status, message=message), status
    except ThemeError:
        # Content itself is broken; fall back to a bare page
        return f'<h1>{status}</h1><p>{message}</p>', status


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        return _render_error(404, 'Not Found')

    @app.errorhandler(405)
    def method_not_allowed(e):
        return _render_error(405, 'Method Not Allowed')

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(getattr(e, 'original_exception', e))}")
        return _render_error(500, 'Internal Server Error')


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        return {
            'current_year': datetime.now().year,
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src * data:; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        if not app.debug:
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
