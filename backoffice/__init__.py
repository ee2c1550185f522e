"""
Admin Back-Office - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask

from backoffice.config import Config
from backoffice.extensions import db, csrf


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.getLogger(__name__).setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    db.init_app(app)
    csrf.init_app(app)

    # Register blueprints
    from backoffice.admin import admin_bp, gate
    from backoffice.main import main_bp
    from backoffice import cli

    app.register_blueprint(main_bp)
    app.register_blueprint(admin_bp, url_prefix=app.config['ADMIN_URL_PREFIX'])
    gate.init_app(app)
    cli.init_app(app)

    # Signed-in admin for the layout header
    @app.context_processor
    def inject_current_admin():
        from backoffice.auth import get_admin_guard
        return dict(current_admin=get_admin_guard().user())

    # Create database tables
    with app.app_context():
        uri = app.config['SQLALCHEMY_DATABASE_URI']
        if uri.startswith('sqlite:///') and ':memory:' not in uri:
            directory = os.path.dirname(uri[len('sqlite:///'):])
            if directory:
                os.makedirs(directory, exist_ok=True)
        db.create_all()

    return app
