"""
Tests for production endpoints and the mortality rule.
"""
import pytest
from datetime import date
from rest_framework import status

from apps.flocks.models import PoultryBatch
from apps.production.models import ProductionRecord
from apps.production.services import ProductionService
from apps.rbac.services import Principal


@pytest.fixture
def small_flock(db):
    return PoultryBatch.objects.create(breed='Broilers', quantity=3, age=6, date_acquired=date(2024, 1, 1))


@pytest.fixture
def record(flock, worker_user):
    return ProductionRecord.objects.create(batch=flock, eggs_collected=80, date=date(2024, 2, 1), recorded_by=worker_user)


@pytest.mark.django_db
class TestMortality:

    def test_mortality_is_floored_at_zero(self, worker_client, small_flock):
        response = worker_client.post('/v1/production/', {
            'batch': str(small_flock.id),
            'eggs_collected': 0,
            'mortality_count': 5,
            'date': '2024-02-01',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['data']['mortality_count'] == 5
        assert response.data['data']['batch']['quantity'] == 0

        small_flock.refresh_from_db()
        assert small_flock.quantity == 0
        assert ProductionRecord.objects.get().mortality_count == 5

    def test_mortality_decrements(self, worker_client, flock):
        worker_client.post('/v1/production/', {
            'batch': str(flock.id),
            'eggs_collected': 85,
            'mortality_count': 2,
            'date': '2024-02-01',
        }, format='json')

        flock.refresh_from_db()
        assert flock.quantity == 98

    def test_no_mortality_leaves_quantity(self, worker_client, flock):
        worker_client.post('/v1/production/', {
            'batch': str(flock.id),
            'eggs_collected': 85,
            'date': '2024-02-01',
        }, format='json')

        flock.refresh_from_db()
        assert flock.quantity == 100

    def test_sequential_submissions_both_apply(self, flock, worker_user):
        principal = Principal(id=str(worker_user.id), role='Worker')

        for _ in range(2):
            ProductionService.create(
                {'batch': flock, 'eggs_collected': 10, 'mortality_count': 3, 'date': date(2024, 2, 1)},
                principal=principal,
            )

        flock.refresh_from_db()
        assert flock.quantity == 94

    def test_failed_decrement_rolls_back_insert(self, flock, worker_user, monkeypatch):
        from apps.core.exceptions import NotFound

        def fail(batch_id, count):
            raise NotFound('Flock not found')

        monkeypatch.setattr(ProductionService, 'apply_mortality', staticmethod(fail))

        with pytest.raises(NotFound):
            ProductionService.create(
                {'batch': flock, 'eggs_collected': 10, 'mortality_count': 3, 'date': date(2024, 2, 1)},
                principal=Principal(id=str(worker_user.id), role='Worker'),
            )

        assert not ProductionRecord.objects.exists()

    def test_editing_mortality_does_not_touch_batch(self, manager_client, record, flock):
        response = manager_client.put(f'/v1/production/{record.id}', {'mortality_count': 7}, format='json')

        assert response.status_code == status.HTTP_200_OK
        flock.refresh_from_db()
        assert flock.quantity == 100


@pytest.mark.django_db
class TestProductionPermissions:

    def test_worker_cannot_delete(self, worker_client, record):
        response = worker_client.delete(f'/v1/production/{record.id}')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert ProductionRecord.objects.filter(pk=record.pk).exists()

    def test_admin_deletes_then_not_found(self, admin_client, record):
        response = admin_client.delete(f'/v1/production/{record.id}')

        assert response.status_code == status.HTTP_200_OK
        assert not ProductionRecord.objects.filter(pk=record.pk).exists()

        response = admin_client.get(f'/v1/production/{record.id}')
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_vet_cannot_record_production(self, vet_client, flock):
        response = vet_client.post('/v1/production/', {
            'batch': str(flock.id), 'eggs_collected': 1, 'date': '2024-02-01',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_recorder_comes_from_token(self, worker_client, worker_user, manager_user, flock):
        response = worker_client.post('/v1/production/', {
            'batch': str(flock.id),
            'eggs_collected': 10,
            'date': '2024-02-01',
            'recorded_by': str(manager_user.id),
        }, format='json')

        assert response.data['data']['recorded_by']['id'] == str(worker_user.id)


@pytest.mark.django_db
class TestProductionQueries:

    def test_batch_totals(self, worker_client, flock, worker_user):
        ProductionRecord.objects.create(batch=flock, eggs_collected=80, mortality_count=1, date=date(2024, 2, 1), recorded_by=worker_user)
        ProductionRecord.objects.create(batch=flock, eggs_collected=90, date=date(2024, 2, 2), recorded_by=worker_user)

        response = worker_client.get(f'/v1/production/batch/{flock.id}')

        assert response.data['count'] == 2
        assert response.data['total_eggs'] == 170
        assert response.data['total_mortality'] == 1
        assert response.data['data'][0]['date'] == '2024-02-02'

    def test_summary_without_records(self, worker_client):
        data = worker_client.get('/v1/production/stats/summary').data['data']

        assert data['total_eggs'] == 0
        assert data['average_eggs_per_record'] == 0
        assert data['by_batch'] == []

    def test_list_filters_by_batch(self, worker_client, flock, small_flock, worker_user):
        ProductionRecord.objects.create(batch=flock, eggs_collected=80, date=date(2024, 2, 1), recorded_by=worker_user)
        ProductionRecord.objects.create(batch=small_flock, eggs_collected=2, date=date(2024, 2, 1), recorded_by=worker_user)

        response = worker_client.get('/v1/production/', {'batch_id': str(small_flock.id)})

        assert response.data['count'] == 1
        assert response.data['data'][0]['batch']['id'] == str(small_flock.id)
