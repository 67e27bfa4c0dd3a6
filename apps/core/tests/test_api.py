"""
Tests for the status endpoint, request ids and the error envelope.
"""
import pytest
from rest_framework import status
from rest_framework.test import APIClient
from django.db import DatabaseError

from apps.core.exceptions import ConfigError, InternalError
from apps.core.responses import envelope
from apps.flocks.services import FlockService


class TestEnvelope:

    def test_list_shape(self):
        response = envelope(data=[1, 2], count=2)

        assert response.data == {'success': True, 'count': 2, 'data': [1, 2]}

    def test_message_only(self):
        response = envelope(message='Flock deleted successfully')

        assert response.data == {'success': True, 'message': 'Flock deleted successfully'}
        assert response.status_code == status.HTTP_200_OK


@pytest.mark.django_db
class TestStatusEndpoint:

    def test_healthy(self):
        response = APIClient().get('/v1/status/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['data']['database'] == 'healthy'
        assert response.data['data']['cache'] == 'healthy'

    def test_unhealthy_cache(self, monkeypatch):
        class BrokenCache:
            def set(self, *args, **kwargs):
                raise ConnectionError('redis unreachable')

        monkeypatch.setattr('apps.core.views.cache', BrokenCache())

        response = APIClient().get('/v1/status/')

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.data['success'] is False
        assert response.data['data']['cache'] == 'unhealthy'
        assert response.data['data']['database'] == 'healthy'

    def test_request_id_generated(self):
        response = APIClient().get('/v1/status/')

        assert response['X-Request-ID']

    def test_request_id_echoed(self):
        response = APIClient().get('/v1/status/', HTTP_X_REQUEST_ID='trace-42')

        assert response['X-Request-ID'] == 'trace-42'


@pytest.mark.django_db
class TestErrorEnvelope:

    def test_unknown_id(self, worker_client):
        response = worker_client.get('/v1/flocks/3fa85f64-5717-4562-b3fc-2c963f66afa6')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['success'] is False
        assert response.data['message'] == 'Flock not found'

    def test_validation_errors_listed(self, manager_client):
        response = manager_client.post('/v1/flocks/', {'breed': 'Layers'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'].startswith('Missing or invalid fields')
        assert 'quantity' in response.data['errors']

    def test_unexpected_error_is_hidden(self, worker_client, monkeypatch):
        def explode(cls, filters=None):
            raise RuntimeError('connection string postgres://farm:pw@db')

        monkeypatch.setattr(FlockService, 'list', classmethod(explode))

        response = worker_client.get('/v1/flocks/')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data['success'] is False
        assert response.data['message'] == 'Server error'

    def test_database_error_is_hidden(self, worker_client, monkeypatch):
        def broken(cls, filters=None):
            raise DatabaseError('relation "poultry_batches" does not exist')

        monkeypatch.setattr(FlockService, 'list', classmethod(broken))

        response = worker_client.get('/v1/flocks/')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data['message'] == InternalError.default_message

    def test_missing_jwt_secret(self, worker_client, settings):
        settings.JWT_SECRET_KEY = ''

        response = worker_client.get('/v1/flocks/')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data['message'] == ConfigError.default_message

    def test_unknown_route(self, worker_client):
        response = worker_client.get('/v1/roosters/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
