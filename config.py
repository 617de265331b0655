"""
FM Role Scout configuration.

Settings come from class attributes, overridable through environment
variables (a local .env file is read on import). Pick a class with
get_config() and hand it to create_app().
"""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Project root; the bundled role dataset lives under data/
BASE_DIR = Path(__file__).parent.resolve()
DEFAULT_ROLES_FILE = BASE_DIR / 'data' / 'roles.json'


class Config:
    """Settings shared by every environment."""

    # Role catalogue, loaded once by the application factory
    ROLES_DATA_PATH = Path(os.environ.get('ROLES_DATA_PATH', DEFAULT_ROLES_FILE))

    # Player import limits
    MAX_PLAYERS = int(os.environ.get('MAX_PLAYERS', 20000))
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_UPLOAD_SIZE', 50 * 1024 * 1024))  # 50MB uploads

    # Exports imported by path must live under this directory
    IMPORT_DIR = Path(os.environ.get('IMPORT_DIR', BASE_DIR / 'imports'))

    # Keep role and attribute order as loaded
    JSON_SORT_KEYS = False


class DevelopmentConfig(Config):
    """Local runs with debug logging."""

    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Used by the pytest app fixture."""

    DEBUG = True
    TESTING = True

    # Ignore .env overrides so tests always see the bundled catalogue
    ROLES_DATA_PATH = DEFAULT_ROLES_FILE
    MAX_PLAYERS = 20000
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024


ENVIRONMENTS = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
}


def get_config(env_name=None):
    """
    Resolve the settings class for an environment.

    Args:
        env_name (str): development, production or testing. Defaults to
                        the FLASK_ENV environment variable

    Returns:
        Config subclass; DevelopmentConfig for unknown names
    """
    if env_name is None:
        env_name = os.environ.get('FLASK_ENV', 'development')

    return ENVIRONMENTS.get(env_name, DevelopmentConfig)
