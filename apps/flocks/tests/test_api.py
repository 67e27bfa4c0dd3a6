"""
Tests for flock endpoints.
"""
import pytest
from datetime import date
from rest_framework import status
from rest_framework.test import APIClient

from apps.flocks.models import PoultryBatch

FLOCK_PAYLOAD = {
    'breed': 'Layers',
    'quantity': 100,
    'age': 10,
    'date_acquired': '2024-01-01',
}


@pytest.mark.django_db
class TestFlockAccess:

    def test_unauthenticated_list(self):
        response = APIClient().get('/v1/flocks/')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False

    def test_vet_can_list(self, vet_client, flock):
        response = vet_client.get('/v1/flocks/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1

    def test_vet_cannot_create(self, vet_client):
        response = vet_client.post('/v1/flocks/', FLOCK_PAYLOAD, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['message'] == 'User role Veterinarian is not authorized to create flocks'
        assert PoultryBatch.objects.count() == 0

    def test_manager_cannot_delete(self, manager_client, flock):
        response = manager_client.delete(f'/v1/flocks/{flock.id}')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert PoultryBatch.objects.filter(pk=flock.pk).exists()

    def test_forbidden_before_not_found(self, worker_client):
        response = worker_client.delete('/v1/flocks/3fa85f64-5717-4562-b3fc-2c963f66afa6')

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestFlockCrud:

    def test_create_fetch_update_round_trip(self, manager_client):
        created = manager_client.post('/v1/flocks/', FLOCK_PAYLOAD, format='json')

        assert created.status_code == status.HTTP_201_CREATED
        assert created.data['message'] == 'Flock created successfully'
        flock_id = created.data['data']['id']

        fetched = manager_client.get(f'/v1/flocks/{flock_id}').data['data']
        for field, value in FLOCK_PAYLOAD.items():
            assert fetched[field] == value
        assert fetched['status'] == 'Active'

        updated = manager_client.put(f'/v1/flocks/{flock_id}', {'quantity': 90}, format='json')
        assert updated.status_code == status.HTTP_200_OK

        refetched = manager_client.get(f'/v1/flocks/{flock_id}').data['data']
        assert refetched['quantity'] == 90
        for field in ('breed', 'age', 'date_acquired', 'housing_unit', 'status'):
            assert refetched[field] == fetched[field]

    def test_create_missing_fields(self, manager_client):
        response = manager_client.post('/v1/flocks/', {'breed': 'Layers'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert set(response.data['errors']) == {'quantity', 'age', 'date_acquired'}
        assert response.data['message'].startswith('Missing or invalid fields')

    def test_negative_quantity_rejected(self, manager_client):
        response = manager_client.post('/v1/flocks/', {**FLOCK_PAYLOAD, 'quantity': -1}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'quantity' in response.data['errors']

    def test_get_unknown_flock(self, manager_client):
        response = manager_client.get('/v1/flocks/3fa85f64-5717-4562-b3fc-2c963f66afa6')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['message'] == 'Flock not found'

    def test_admin_deletes_flock_and_children(self, admin_client, flock, worker_user):
        from apps.production.models import ProductionRecord

        ProductionRecord.objects.create(batch=flock, eggs_collected=80, date=date(2024, 2, 1), recorded_by=worker_user)

        response = admin_client.delete(f'/v1/flocks/{flock.id}')

        assert response.status_code == status.HTTP_200_OK
        assert not PoultryBatch.objects.exists()
        assert not ProductionRecord.objects.exists()

    def test_detail_expands_records(self, manager_client, flock, worker_user):
        from apps.feeding.models import FeedRecord

        FeedRecord.objects.create(batch=flock, feed_type='Layers Mash', quantity='50.00', date=date(2024, 2, 1), recorded_by=worker_user)

        data = manager_client.get(f'/v1/flocks/{flock.id}').data['data']

        assert len(data['feed_records']) == 1
        assert data['feed_records'][0]['recorded_by']['email'] == 'worker@farm.test'
        assert data['production_records'] == []
        assert data['health_records'] == []


@pytest.mark.django_db
class TestFlockFilters:

    @pytest.fixture
    def flocks(self, db):
        PoultryBatch.objects.create(breed='Layers', quantity=100, age=10, date_acquired=date(2024, 1, 1), housing_unit='House A')
        PoultryBatch.objects.create(breed='Broilers', quantity=50, age=4, date_acquired=date(2024, 3, 1), housing_unit='House B')
        PoultryBatch.objects.create(breed='Kienyeji layers', quantity=30, age=20, date_acquired=date(2023, 6, 1), status='Sold')

    def test_breed_is_case_insensitive_substring(self, vet_client, flocks):
        response = vet_client.get('/v1/flocks/', {'breed': 'LAYER'})

        assert response.data['count'] == 2

    def test_status_filter(self, vet_client, flocks):
        response = vet_client.get('/v1/flocks/', {'status': 'Sold'})

        assert [f['breed'] for f in response.data['data']] == ['Kienyeji layers']

    def test_date_range_is_inclusive(self, vet_client, flocks):
        response = vet_client.get('/v1/flocks/', {'start_date': '2024-01-01', 'end_date': '2024-03-01'})

        assert response.data['count'] == 2

    def test_inverted_date_range(self, vet_client, flocks):
        response = vet_client.get('/v1/flocks/', {'start_date': '2024-03-01', 'end_date': '2024-01-01'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_summary(self, vet_client, flocks):
        data = vet_client.get('/v1/flocks/stats/summary').data['data']

        assert data['total_flocks'] == 3
        assert data['active_flocks'] == 2
        assert data['total_birds'] == 150
