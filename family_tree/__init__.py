"""
Family Tree API - Flask application for genealogical family trees
"""

import os

from flask import Flask

from family_tree.blueprints.auth import api_auth
from family_tree.blueprints.main import main
from family_tree.blueprints.persons import api_persons
from family_tree.blueprints.relationships import api_relationships
from family_tree.blueprints.trees import api_trees
from family_tree.commands import register_commands
from family_tree.database import db
from family_tree.database import init_app as init_database
from family_tree.error_handlers import register_error_handlers
from family_tree.services import ServiceContainer
from family_tree.shared.logging_config import apply_log_level


class Config:
    """Configuration class for Flask app with required environment variables"""

    def __init__(self):
        # Flask configuration
        self.secret_key = self._require_env('SECRET_KEY')

        # Database configuration
        self.sqlalchemy_database_uri = self._require_env('DATABASE_URL')
        self.sqlalchemy_track_modifications = False

        # Token configuration
        self.jwt_secret_key = self._require_env('JWT_SECRET_KEY')
        self.token_ttl_hours = self._int_env('TOKEN_TTL_HOURS', 24)

        self.log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()

    def _require_env(self, var_name: str) -> str:
        """Require environment variable or raise error"""
        value = os.environ.get(var_name)
        if not value:
            raise RuntimeError(f"Required environment variable {var_name} is not set")
        return value

    def _int_env(self, var_name: str, default: int) -> int:
        value = os.environ.get(var_name)
        if not value:
            return default
        try:
            parsed = int(value)
        except ValueError as e:
            raise RuntimeError(f"Environment variable {var_name} must be an integer") from e
        if parsed <= 0:
            raise RuntimeError(f"Environment variable {var_name} must be positive")
        return parsed


def create_app(config=None):
    """Application factory"""
    app = Flask(__name__)

    # Initialize configuration
    if config is None:
        config = Config()

    # Set Flask config from our config object
    app.config['SECRET_KEY'] = config.secret_key
    app.config['SQLALCHEMY_DATABASE_URI'] = config.sqlalchemy_database_uri
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = config.sqlalchemy_track_modifications
    app.config['JWT_SECRET_KEY'] = config.jwt_secret_key
    app.config['TOKEN_TTL_HOURS'] = config.token_ttl_hours
    app.config['LOG_LEVEL'] = config.log_level

    apply_log_level(config.log_level)

    # Register blueprints
    app.register_blueprint(main)
    app.register_blueprint(api_auth)
    app.register_blueprint(api_trees)
    app.register_blueprint(api_persons)
    app.register_blueprint(api_relationships)

    # Initialize database
    init_database(app)

    # Services share the request-scoped session
    app.extensions['family_tree_services'] = ServiceContainer(config, db.session)

    # Register error handlers
    register_error_handlers(app)

    register_commands(app)

    return app


__all__ = ['Config', 'create_app']
