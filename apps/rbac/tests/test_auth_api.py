"""
Tests for authentication API endpoints.
"""
import pytest
from datetime import timedelta
from rest_framework import status
from rest_framework.test import APIClient

from apps.rbac.models import User
from apps.rbac.services import AuthService

PASSWORD = 'farm-pass-123'


@pytest.mark.django_db
class TestRegistrationEndpoint:
    """Test POST /v1/auth/register endpoint."""

    def test_register_user_success(self):
        client = APIClient()

        response = client.post('/v1/auth/register', {
            'name': 'Jane Wanjiku',
            'email': 'Jane@Example.com',
            'password': 'layers2024',
            'phone': '+254712345678',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['success'] is True
        assert response.data['message'] == 'User registered successfully'
        assert response.data['data']['token']
        assert response.data['data']['user']['email'] == 'jane@example.com'
        assert response.data['data']['user']['role'] == 'Worker'
        assert 'password_hash' not in response.data['data']['user']

        user = User.objects.get(email='jane@example.com')
        assert user.check_password('layers2024')

    def test_register_ignores_requested_role(self):
        client = APIClient()

        response = client.post('/v1/auth/register', {
            'name': 'Sneaky',
            'email': 'sneaky@example.com',
            'password': 'layers2024',
            'role': 'Admin',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert User.objects.get(email='sneaky@example.com').role == 'Worker'

    def test_register_duplicate_email(self, worker_user):
        client = APIClient()

        response = client.post('/v1/auth/register', {
            'name': 'Copy',
            'email': 'WORKER@farm.test',
            'password': 'layers2024',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False
        assert response.data['message'] == 'User already exists with this email'

    def test_register_missing_fields(self):
        client = APIClient()

        response = client.post('/v1/auth/register', {'email': 'x@example.com'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'name' in response.data['errors']
        assert 'password' in response.data['errors']

    def test_register_short_password(self):
        client = APIClient()

        response = client.post('/v1/auth/register', {
            'name': 'Short',
            'email': 'short@example.com',
            'password': '123',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestLoginEndpoint:
    """Test POST /v1/auth/login endpoint."""

    def test_login_success(self, manager_user):
        client = APIClient()

        response = client.post('/v1/auth/login', {
            'email': 'manager@farm.test',
            'password': PASSWORD,
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['user']['role'] == 'Manager'

        principal = AuthService.verify_token(response.data['data']['token'])
        assert principal.id == str(manager_user.id)
        assert principal.role == 'Manager'

        manager_user.refresh_from_db()
        assert manager_user.last_login_at is not None

    def test_login_invalid_password(self, manager_user):
        client = APIClient()

        response = client.post('/v1/auth/login', {
            'email': 'manager@farm.test',
            'password': 'wrong-password',
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['message'] == 'Invalid email or password'

    def test_login_unknown_email(self, db):
        client = APIClient()

        response = client.post('/v1/auth/login', {
            'email': 'nobody@farm.test',
            'password': PASSWORD,
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_user(self, manager_user):
        manager_user.is_active = False
        manager_user.save()
        client = APIClient()

        response = client.post('/v1/auth/login', {
            'email': 'manager@farm.test',
            'password': PASSWORD,
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_rate_limited(self, manager_user, settings):
        settings.RATELIMIT_ENABLE = True
        client = APIClient()
        payload = {'email': 'manager@farm.test', 'password': 'wrong-password'}

        codes = [client.post('/v1/auth/login', payload, format='json').status_code for _ in range(6)]

        assert codes[:5] == [status.HTTP_401_UNAUTHORIZED] * 5
        assert codes[5] == status.HTTP_429_TOO_MANY_REQUESTS


@pytest.mark.django_db
class TestTokenHandling:
    """Bearer token checks on a protected endpoint."""

    def test_no_token(self):
        response = APIClient().get('/v1/auth/me')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False
        assert response.data['message'] == 'Not authorized, no token'

    def test_garbage_token(self):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION='Bearer not-a-jwt')

        response = client.get('/v1/auth/me')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['message'] == 'Not authorized, token failed'

    def test_expired_token(self, worker_user):
        token = AuthService.issue_token(worker_user.id, worker_user.role, expires_in=timedelta(seconds=-1))
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')

        response = client.get('/v1/auth/me')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_token_for_deleted_user(self, worker_user, auth_header):
        header = auth_header(worker_user)
        worker_user.delete()
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=header)

        response = client.get('/v1/auth/me')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_role_comes_from_stored_user(self, worker_user, client_for):
        """A token issued before a promotion carries the new role."""
        client = client_for(worker_user)
        worker_user.role = 'Manager'
        worker_user.save()

        response = client.get('/v1/auth/permissions')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['role'] == 'Manager'


@pytest.mark.django_db
class TestProfileEndpoint:
    """Test GET/PUT /v1/auth/me endpoint."""

    def test_get_profile(self, vet_client, vet_user):
        response = vet_client.get('/v1/auth/me')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['id'] == str(vet_user.id)
        assert response.data['data']['role'] == 'Veterinarian'

    def test_update_profile(self, vet_client, vet_user):
        response = vet_client.put('/v1/auth/me', {'name': 'Dr. Victor', 'phone': '0700111222'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        vet_user.refresh_from_db()
        assert vet_user.name == 'Dr. Victor'
        assert vet_user.phone == '0700111222'

    def test_profile_cannot_change_role(self, worker_client, worker_user):
        response = worker_client.put('/v1/auth/me', {'role': 'Admin'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        worker_user.refresh_from_db()
        assert worker_user.role == 'Worker'


@pytest.mark.django_db
class TestPermissionsEndpoint:

    def test_worker_permissions(self, worker_client):
        response = worker_client.get('/v1/auth/permissions')

        data = response.data['data']
        assert data['role'] == 'Worker'
        assert 'flocks' not in data['routes']
        assert data['actions']['production'] == ['view', 'create']
        assert data['policy']['version'] == 1
