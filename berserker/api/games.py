from flask import Blueprint, current_app, jsonify

from berserker import get_gateway
from berserker.errors import UnknownSession

games = Blueprint('games', __name__)


def _create_session():
    session = get_gateway().create_session()
    current_app.logger.info(f"[create] session={session.session_id}")
    return session


@games.route('/create', methods=['POST'])
def create_game():
    """
    Mints a new session id with a fresh board.
    """
    session = _create_session()
    return jsonify({'sessionId': session.session_id}), 201


@games.route('/create-game', methods=['GET'])
def create_game_get():
    """
    GET form of ``create`` used by the browser client's home screen.
    """
    session = _create_session()
    return jsonify({'sessionId': session.session_id}), 200


@games.route('/<string:session_id>/state', methods=['GET'])
def get_game_state(session_id):
    """
    Returns the same snapshot that ``state_update`` carries.
    """
    try:
        snapshot = get_gateway().snapshot(session_id)
    except UnknownSession:
        return jsonify({'error': 'Game not found'}), 404
    return jsonify(snapshot)
