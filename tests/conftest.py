import os
import sys
import pytest

# Ensure the project root (containing the `berserker` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from berserker import create_app, socketio
from berserker.models import GameSession


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    BOARD_SIZE = 6
    INITIAL_STASH = 8
    LINE_LENGTH = 3
    ALLOW_HOTSEAT = False
    SOCKETIO_NAMESPACE = '/ws'
    CORS_ORIGINS = ['http://localhost:3000']
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_sio_client(flask_app):
    """Factory for extra Socket.IO connections (host, guest, observers)."""
    clients = []

    def _make():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
            namespace='/ws'
        )
        test_client.get_received('/ws')  # drop the 'connected' greeting
        clients.append(test_client)
        return test_client

    yield _make
    for test_client in clients:
        try:
            test_client.disconnect(namespace='/ws')
        except Exception:
            pass


@pytest.fixture()
def sio_client(make_sio_client):
    return make_sio_client()


@pytest.fixture()
def session():
    return GameSession('test-session')


@pytest.fixture()
def place():
    """Put pawns straight on the board, keeping stashes consistent."""
    def _place(game, *cells):
        for row, col, color in cells:
            game.board.set(row, col, color)
            game.stash[color] -= 1
    return _place
