"""
Player Routes Blueprint

JSON endpoints for the role catalogue, player file import and role
re-scoring. All work is delegated to the import service built by the
application factory.
"""

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.security import safe_join

from models.player import ImportResult
from schemas import ScoreRequestSchema

players_bp = Blueprint('players', __name__, url_prefix='/api')


def _catalogue():
    return current_app.extensions['role_catalogue']


def _import_service():
    return current_app.extensions['player_import_service']


@players_bp.route("/roles")
def list_roles():
    """All roles, or those whose name contains ?duty=..."""
    duty = request.args.get('duty')
    roles = _catalogue().get_roles_by_duty(duty) if duty else _catalogue().get_roles()
    return jsonify([role.to_dict() for role in roles])


@players_bp.route("/roles/names")
def list_role_names():
    """Display name and code of every role, for role pickers."""
    return jsonify(_catalogue().get_all_role_names())


@players_bp.route("/roles/<code>")
def get_role(code):
    role = _catalogue().get_role_by_code(code)
    if role is None:
        return jsonify({'error': f"Unknown role code '{code}'"}), 404
    return jsonify(role.to_dict())


@players_bp.route("/attributes")
def list_attributes():
    return jsonify(_catalogue().get_all_attributes())


@players_bp.route("/import", methods=["POST"])
def import_players():
    """
    Import a player export.

    Accepts either a multipart upload in the "file" field or a JSON body
    {"path": "..."} naming a file relative to the IMPORT_DIR setting.
    Paths that would leave IMPORT_DIR are refused.
    """
    service = _import_service()
    upload = request.files.get('file')

    if upload and upload.filename:
        try:
            content = upload.read().decode('utf-8-sig')
        except UnicodeDecodeError as e:
            return jsonify(ImportResult.failure(f"Failed to read file: {e}").to_dict()), 400
        result = service.import_content(content, upload.filename)
    else:
        payload = request.get_json(silent=True)
        requested = payload.get('path') if isinstance(payload, dict) else None
        if not requested:
            return jsonify(ImportResult.failure("No file or path provided").to_dict()), 400

        import_dir = current_app.config['IMPORT_DIR']
        file_path = safe_join(str(import_dir), str(requested))
        if file_path is None:
            current_app.logger.warning(f"Refused import path outside {import_dir}: {requested}")
            return jsonify(ImportResult.failure("Path is outside the import directory").to_dict()), 403
        result = service.import_file(file_path)

    return jsonify(result.to_dict()), (200 if result.success else 400)


@players_bp.route("/scores", methods=["POST"])
def score_players():
    """Re-score previously imported players for a subset of roles."""
    try:
        score_request = ScoreRequestSchema.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        current_app.logger.warning(f"Invalid score request: {e.error_count()} errors")
        return jsonify({'error': f"Invalid score request: {str(e)}"}), 400

    results = _import_service().score_selected(score_request.players, score_request.role_codes)
    return jsonify({'players': results})
