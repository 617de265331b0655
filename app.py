"""
FM Role Scout - Football Manager player import and role scoring API
"""
import os
from flask import Flask, jsonify
from config import get_config
from models.role_definitions import RoleCatalogue
from routes import players_bp
from services.player_import_service import PlayerImportService
from utils.logger import setup_logger


def create_app(config_class=None):
    """
    Application factory.

    Loads the role catalogue once and shares it, read only, with the import
    service stored in app.extensions.

    Args:
        config_class: Config class to use; defaults to the one selected by FLASK_ENV

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.config.from_object(config_class or get_config())
    app.json.sort_keys = app.config.get('JSON_SORT_KEYS', False)

    setup_logger(app)

    catalogue = RoleCatalogue.from_json(app.config['ROLES_DATA_PATH'])
    app.extensions['role_catalogue'] = catalogue
    app.extensions['player_import_service'] = PlayerImportService(
        catalogue,
        max_players=app.config['MAX_PLAYERS']
    )

    app.register_blueprint(players_bp)

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(413)
    def too_large(e):
        return jsonify({'error': 'File too large'}), 413

    return app


if __name__ == "__main__":
    app = create_app()

    debug_mode = app.config.get('DEBUG', False)
    env_name = os.environ.get('FLASK_ENV', 'development')

    app.logger.info(f"Starting FM Role Scout - Environment: {env_name}, Debug: {debug_mode}")

    host = os.environ.get('FLASK_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_PORT', 5000))

    app.run(host=host, port=port, debug=debug_mode)
