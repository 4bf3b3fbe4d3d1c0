"""
Pytest configuration and fixtures for the family tree API
"""

from datetime import date

import pytest

from family_tree import create_app
from family_tree.database import db as _db


class BaseTestConfig:
    """Test configuration backed by an in-memory SQLite database"""
    def __init__(self):
        self.secret_key = 'test-secret-key'

        self.sqlalchemy_database_uri = 'sqlite:///:memory:'
        self.sqlalchemy_track_modifications = False

        self.jwt_secret_key = 'test-jwt-secret-0123456789abcdefghij'
        self.token_ttl_hours = 24
        self.log_level = 'WARNING'


@pytest.fixture
def test_config():
    return BaseTestConfig()


@pytest.fixture
def app(test_config):
    """Create Flask app for testing"""
    app = create_app(test_config)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def db(app):
    """Fresh schema per test"""
    with app.app_context():
        _db.create_all()
        try:
            yield _db
        finally:
            _db.session.remove()
            _db.drop_all()


@pytest.fixture
def client(app, db):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def runner(app, db):
    """Create CLI runner"""
    return app.test_cli_runner()


@pytest.fixture
def services(app, db):
    """The app's ServiceContainer"""
    return app.extensions['family_tree_services']


@pytest.fixture
def user(services):
    return services.auth_service.register('ada@example.com', 'secret123')


@pytest.fixture
def auth_headers(services, user):
    token = services.auth_service.generate_token(user.id)
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def tree(services, user):
    return services.tree_service.create_tree(user.id, 'Lovelace family')


@pytest.fixture
def make_person(services, tree):
    """Factory creating persons in the default tree (or the one given)"""
    def _make_person(first_name, birth_date=None, is_male=False, last_name='Byron', tree_id=None):
        attrs = {
            'first_name': first_name,
            'last_name': last_name,
            'birth_date': birth_date,
            'is_male': is_male,
        }
        return services.person_service.create_person(tree_id or tree.id, attrs)
    return _make_person


@pytest.fixture
def family(make_person):
    """Two potential parents and a child with known birth dates"""
    return {
        'father': make_person('George', date(1950, 1, 1), is_male=True),
        'mother': make_person('Anne', date(1952, 1, 1), is_male=False),
        'child': make_person('Ada', date(1975, 1, 1), is_male=False),
    }
