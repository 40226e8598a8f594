from flask import Blueprint, jsonify

from berserker import get_gateway

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the Berserker game server!'})

@main.route('/health')
def health():
    return jsonify({'status': 'ok', 'sessions': len(get_gateway().registry)})
