"""
Tests for the authentication API and the health check
"""

import pytest


class TestPing:

    def test_ping(self, client):
        response = client.get('/ping')

        assert response.status_code == 200
        assert response.get_json() == {'status': 'ok', 'handler': 'ping'}


class TestAuthAPI:
    """Test register, login, logout and profile endpoints"""

    def test_register(self, client):
        response = client.post('/api/auth/register', json={'email': 'ada@example.com', 'password': 'secret123'})

        assert response.status_code == 201
        data = response.get_json()
        assert data['success'] is True
        assert data['token']
        assert data['user']['email'] == 'ada@example.com'
        assert 'password_hash' not in data['user']

    def test_register_duplicate_email(self, client, user):
        response = client.post('/api/auth/register', json={'email': user.email, 'password': 'secret123'})

        assert response.status_code == 409
        data = response.get_json()
        assert data['success'] is False
        assert data['error_type'] == 'EmailAlreadyRegisteredError'

    def test_register_short_password(self, client):
        response = client.post('/api/auth/register', json={'email': 'ada@example.com', 'password': '123'})

        assert response.status_code == 400
        assert response.get_json()['error_type'] == 'ValidationError'

    def test_register_malformed_json(self, client):
        response = client.post('/api/auth/register', data='{not json', content_type='application/json')

        assert response.status_code == 400
        assert response.get_json()['error'] == 'Invalid JSON body'

    def test_login(self, client, user):
        response = client.post('/api/auth/login', json={'email': 'ada@example.com', 'password': 'secret123'})

        assert response.status_code == 200
        data = response.get_json()
        assert data['token']
        assert data['user']['id'] == str(user.id)

    def test_login_wrong_password(self, client, user):
        response = client.post('/api/auth/login', json={'email': 'ada@example.com', 'password': 'nope-nope'})

        assert response.status_code == 401
        assert response.get_json()['error'] == 'invalid email or password'

    def test_profile(self, client, user, auth_headers):
        response = client.get('/api/auth/profile', headers=auth_headers)

        assert response.status_code == 200
        assert response.get_json()['user']['email'] == user.email

    def test_token_from_login_opens_profile(self, client, user):
        token = client.post('/api/auth/login',
                            json={'email': 'ada@example.com', 'password': 'secret123'}).get_json()['token']

        response = client.get('/api/auth/profile', headers={'Authorization': f'Bearer {token}'})
        assert response.status_code == 200

    def test_logout(self, client, auth_headers):
        response = client.post('/api/auth/logout', headers=auth_headers)

        assert response.status_code == 200
        assert response.get_json()['message'] == 'Logged out successfully'

    @pytest.mark.parametrize("headers", [
        {},
        {'Authorization': 'Token abc'},
        {'Authorization': 'Bearer'},
        {'Authorization': 'Bearer not-a-jwt'},
    ])
    def test_protected_endpoint_rejects_bad_auth(self, client, headers):
        response = client.get('/api/auth/profile', headers=headers)

        assert response.status_code == 401
        assert response.get_json()['error_type'] == 'AuthenticationError'

    def test_token_of_deleted_user_is_rejected(self, client, db, user, auth_headers):
        db.session.delete(user)
        db.session.commit()

        response = client.post('/api/trees', json={'name': 'Orphaned family'}, headers=auth_headers)

        assert response.status_code == 401
        assert response.get_json()['error_type'] == 'AuthenticationError'
        assert response.get_json()['error'] == 'user no longer exists'


class TestErrorHandlers:
    """Test generic JSON error responses"""

    def test_unknown_route(self, client):
        response = client.get('/api/nothing-here')

        assert response.status_code == 404
        assert response.get_json()['success'] is False

    def test_method_not_allowed(self, client):
        response = client.delete('/ping')

        assert response.status_code == 405
        assert response.get_json()['error'] == 'Method not allowed'
