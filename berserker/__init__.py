from flask import Flask, current_app
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)

EXTENSION_KEY = 'berserker'


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS', [])
    CORS(flask_app, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One registry and gateway per app; sessions live only in memory
    from berserker.services.games.gateway import GameGateway
    from berserker.services.games.registry import SessionRegistry
    registry = SessionRegistry(
        board_size=flask_app.config.get('BOARD_SIZE', 6),
        initial_stash=flask_app.config.get('INITIAL_STASH', 8),
    )
    flask_app.extensions[EXTENSION_KEY] = GameGateway(
        registry,
        line_length=flask_app.config.get('LINE_LENGTH', 3),
        allow_hotseat=flask_app.config.get('ALLOW_HOTSEAT', False),
        logger=flask_app.logger,
    )

    from berserker.routes import main
    flask_app.register_blueprint(main)

    from berserker.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api/games')

    from berserker.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/ws'))

    flask_app.logger.info(
        f"[startup] board={registry.board_size}x{registry.board_size} stash={registry.initial_stash} "
        f"hotseat={flask_app.config.get('ALLOW_HOTSEAT', False)}"
    )
    return flask_app


def get_gateway(app=None):
    return (app or current_app).extensions[EXTENSION_KEY]
