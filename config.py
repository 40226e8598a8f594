import os


def _env_flag(name, default='0'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Board geometry and material
    BOARD_SIZE = int(os.environ.get('BOARD_SIZE', '6'))
    INITIAL_STASH = int(os.environ.get('INITIAL_STASH', '8'))
    LINE_LENGTH = int(os.environ.get('LINE_LENGTH', '3'))
    # Let any connection move for the side to play (one browser, two players)
    ALLOW_HOTSEAT = _env_flag('ALLOW_HOTSEAT')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/ws')
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173',
        ).split(',')
        if origin.strip()
    ]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
