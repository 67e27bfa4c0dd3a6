"""
Pytest configuration and fixtures.
"""
import pytest
from datetime import date
from django.conf import settings
import django

TEST_JWT_SECRET = 'test-jwt-secret-5b1f0c7e9a3d48e2b6c4f7a1d9e0c3b8'
TEST_PASSWORD = 'farm-pass-123'


def pytest_configure(config):
    """Configure Django settings for tests."""
    settings.DATABASES['default'] = {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
        'ATOMIC_REQUESTS': False,
    }
    # The test client speaks plain http
    settings.SECURE_SSL_REDIRECT = False
    django.setup()


@pytest.fixture(autouse=True)
def farm_settings(settings):
    """JWT secret set, rate limits off and a clean cache for every test."""
    from django.core.cache import cache

    settings.JWT_SECRET_KEY = TEST_JWT_SECRET
    settings.RATELIMIT_ENABLE = False
    cache.clear()
    yield settings
    cache.clear()


@pytest.fixture
def api_client():
    """Return DRF API client."""
    from rest_framework.test import APIClient
    return APIClient()


def _make_user(role, email, name):
    from apps.rbac.models import User
    return User.objects.create_user(
        email=email,
        password=TEST_PASSWORD,
        name=name,
        role=role,
    )


@pytest.fixture
def admin_user(db):
    return _make_user('Admin', 'admin@farm.test', 'Amina Admin')


@pytest.fixture
def manager_user(db):
    return _make_user('Manager', 'manager@farm.test', 'Moses Manager')


@pytest.fixture
def worker_user(db):
    return _make_user('Worker', 'worker@farm.test', 'Wanjiru Worker')


@pytest.fixture
def vet_user(db):
    return _make_user('Veterinarian', 'vet@farm.test', 'Victor Vet')


@pytest.fixture
def auth_header():
    """Build an Authorization header value for a stored user."""
    from apps.rbac.services import AuthService

    def _header(user):
        return f'Bearer {AuthService.token_for(user)}'
    return _header


@pytest.fixture
def client_for(auth_header):
    """Return an APIClient authenticated as the given user."""
    from rest_framework.test import APIClient

    def _client(user):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=auth_header(user))
        return client
    return _client


@pytest.fixture
def admin_client(client_for, admin_user):
    return client_for(admin_user)


@pytest.fixture
def manager_client(client_for, manager_user):
    return client_for(manager_user)


@pytest.fixture
def worker_client(client_for, worker_user):
    return client_for(worker_user)


@pytest.fixture
def vet_client(client_for, vet_user):
    return client_for(vet_user)


@pytest.fixture
def flock(db):
    """An active batch of 100 layers."""
    from apps.flocks.models import PoultryBatch
    return PoultryBatch.objects.create(
        breed='Layers',
        quantity=100,
        age=10,
        date_acquired=date(2024, 1, 1),
        housing_unit='House A',
    )
