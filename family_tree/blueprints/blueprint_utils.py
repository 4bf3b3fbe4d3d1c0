"""
Shared helpers for API blueprints: authentication, request parsing, service lookup
"""
from functools import wraps

from flask import current_app, g, request

from family_tree.repositories.base_repository import as_uuid
from family_tree.services.exceptions import (
    AuthenticationError,
    PersonNotFoundError,
    TreeNotFoundError,
    ValidationError,
)


DEFAULT_RELATIONSHIP_TYPE = 'biological'


def get_services():
    """The ServiceContainer of the running app"""
    return current_app.extensions['family_tree_services']


def login_required(func):
    """Require ``Authorization: Bearer <token>``; stores the caller in ``g.user_id``"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        auth_header = request.headers.get('Authorization', '')
        if not auth_header:
            raise AuthenticationError("Authorization header required")

        parts = auth_header.split(' ')
        if len(parts) != 2 or parts[0] != 'Bearer' or not parts[1]:
            raise AuthenticationError("Invalid authorization header format")

        g.user_id = get_services().auth_service.authenticate(parts[1]).id
        return func(*args, **kwargs)
    return wrapper


def get_json_body() -> dict:
    """Parsed JSON object body; ValidationError when missing or malformed"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid JSON body")
    return data


def parse_id(value, name: str = 'id'):
    """UUID from a path or body value; ValidationError when malformed"""
    if value is None or value == '':
        raise ValidationError(f"{name} is required")
    try:
        return as_uuid(value)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"Invalid {name}") from e


def relationship_type_from(data: dict):
    """The requested edge type; only an absent or empty value means biological"""
    relationship_type = data.get('relationship_type')
    if relationship_type is None or relationship_type == '':
        return DEFAULT_RELATIONSHIP_TYPE
    return relationship_type


def owned_tree(tree_id):
    """The caller's tree; trees of other users are reported as not found"""
    services = get_services()
    return services.tree_service.get_tree_for_owner(parse_id(tree_id, 'tree id'), g.user_id)


def owned_person(person_id, name: str = 'person id'):
    """A person inside one of the caller's trees"""
    services = get_services()
    person_id = parse_id(person_id, name)
    person = services.person_service.get_person(person_id)
    try:
        owned_tree(person.tree_id)
    except TreeNotFoundError as e:
        raise PersonNotFoundError(f"Person not found: {person_id}") from e
    return person
