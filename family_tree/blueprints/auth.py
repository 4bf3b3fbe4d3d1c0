"""
Authentication API blueprint
"""

from flask import Blueprint, g

from family_tree.blueprints.blueprint_utils import get_json_body, get_services, login_required
from family_tree.shared.api_response_formatter import APIResponseFormatter
from family_tree.shared.logging_config import get_project_logger


logger = get_project_logger(__name__)

api_auth = Blueprint('api_auth', __name__, url_prefix='/api/auth')


@api_auth.route('/register', methods=['POST'])
def register():
    """Create an account and return a token for it"""
    data = get_json_body()
    auth_service = get_services().auth_service

    user = auth_service.register(data.get('email'), data.get('password'))
    token = auth_service.generate_token(user.id)

    return APIResponseFormatter.success({
        'token': token,
        'user': APIResponseFormatter.format_user(user)
    }, message='User registered', status_code=201)


@api_auth.route('/login', methods=['POST'])
def login():
    data = get_json_body()
    token, user = get_services().auth_service.login(data.get('email'), data.get('password'))

    return APIResponseFormatter.success({
        'token': token,
        'user': APIResponseFormatter.format_user(user)
    })


@api_auth.route('/logout', methods=['POST'])
@login_required
def logout():
    """Tokens are stateless; the client discards its copy"""
    logger.info(f"User {g.user_id} logged out")
    return APIResponseFormatter.success(message='Logged out successfully')


@api_auth.route('/profile', methods=['GET'])
@login_required
def profile():
    user = get_services().auth_service.get_user(g.user_id)
    return APIResponseFormatter.success({'user': APIResponseFormatter.format_user(user)})
