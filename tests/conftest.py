"""
Pytest Configuration and Fixtures

Provides shared fixtures for the import pipeline, the role catalogue and
the Flask application (built with the application factory).
"""

import pytest
import os


@pytest.fixture(scope='session')
def test_config():
    """Test configuration class."""
    from config import TestingConfig
    return TestingConfig


@pytest.fixture
def app(test_config):
    """
    Create and configure a Flask application instance for testing.

    Uses the application factory pattern to create a clean instance
    for each test function.
    """
    os.environ['FLASK_ENV'] = 'testing'

    from app import create_app
    app = create_app(test_config)

    ctx = app.app_context()
    ctx.push()

    yield app

    ctx.pop()


@pytest.fixture
def client(app):
    """Flask test client for making HTTP requests."""
    return app.test_client()


@pytest.fixture(scope='session')
def role_catalogue():
    """The role catalogue bundled with the application."""
    from models.role_definitions import RoleCatalogue
    return RoleCatalogue.load_default()


@pytest.fixture
def small_catalogue():
    """
    Hand-built catalogue with three roles.

    - "Striker - Attack" (st): Fin 10, Pac 10
    - "Stopper - Defend" (sd): Tck 5, Hea 5, Str 10
    - "Empty - Support" (emp): every weight 0
    """
    from models.role_definitions import RoleCatalogue
    return RoleCatalogue.from_records([
        {'Role': 'Striker - Attack', 'RoleCode': 'st', 'Fin': 10, 'Pac': 10},
        {'Role': 'Stopper - Defend', 'RoleCode': 'sd', 'Tck': 5, 'Hea': 5, 'Str': 10},
        {'Role': 'Empty - Support', 'RoleCode': 'emp'},
    ])


@pytest.fixture
def import_service(small_catalogue):
    """PlayerImportService over the small catalogue."""
    from services.player_import_service import PlayerImportService
    return PlayerImportService(small_catalogue)


@pytest.fixture
def write_export(tmp_path):
    """Write an export file into a temporary directory and return its path."""
    def _write(filename, content):
        path = tmp_path / filename
        path.write_text(content, encoding='utf-8')
        return path
    return _write


@pytest.fixture
def sample_html():
    """Small HTML export with identity columns and attributes."""
    return """
    <html>
        <body>
            <table>
                <tr>
                    <th>Name</th><th>Nationality</th><th>Club</th><th>Position</th>
                    <th>Fin</th><th>Pac</th><th>Tck</th><th>Hea</th><th>Str</th>
                </tr>
                <tr>
                    <td>Harry Kane</td><td>ENG</td><td>Bayern</td><td>ST (C)</td>
                    <td>18</td><td>12</td><td>7</td><td>16</td><td>15</td>
                </tr>
                <tr>
                    <td>Virgil van Dijk</td><td>NED</td><td>Liverpool</td><td>D (C)</td>
                    <td>9</td><td>13-15</td><td>18</td><td>17</td><td>18</td>
                </tr>
            </table>
        </body>
    </html>
    """
