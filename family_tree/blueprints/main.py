"""
Health check blueprint
"""

from flask import Blueprint, jsonify


main = Blueprint('main', __name__)


@main.route('/ping', methods=['GET'])
def ping():
    """Liveness probe"""
    return jsonify({'status': 'ok', 'handler': 'ping'})
