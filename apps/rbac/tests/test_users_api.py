"""
Tests for user management endpoints.
"""
import pytest
from rest_framework import status

from apps.rbac.models import User


@pytest.mark.django_db
class TestUserList:

    def test_admin_lists_users(self, admin_client, worker_user, vet_user):
        response = admin_client.get('/v1/users/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 3

    def test_filter_by_role(self, admin_client, worker_user, vet_user):
        response = admin_client.get('/v1/users/', {'role': 'Veterinarian'})

        assert response.data['count'] == 1
        assert response.data['data'][0]['email'] == 'vet@farm.test'

    def test_manager_cannot_open_users_page(self, manager_client):
        response = manager_client.get('/v1/users/')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['success'] is False

    def test_admin_creates_user_with_role(self, admin_client):
        response = admin_client.post('/v1/users/', {
            'name': 'New Vet',
            'email': 'newvet@farm.test',
            'password': 'vet-pass-1',
            'role': 'Veterinarian',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert User.objects.get(email='newvet@farm.test').role == 'Veterinarian'

    def test_worker_cannot_create_users(self, worker_client):
        response = worker_client.post('/v1/users/', {
            'name': 'Boss',
            'email': 'boss@farm.test',
            'password': 'boss-pass-1',
            'role': 'Admin',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not User.objects.filter(email='boss@farm.test').exists()


@pytest.mark.django_db
class TestUserDetail:

    def test_user_reads_self(self, worker_client, worker_user):
        response = worker_client.get(f'/v1/users/{worker_user.id}')

        assert response.status_code == status.HTTP_200_OK

    def test_user_cannot_read_others(self, worker_client, vet_user):
        response = worker_client.get(f'/v1/users/{vet_user.id}')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_unknown_user(self, admin_client):
        response = admin_client.get('/v1/users/3fa85f64-5717-4562-b3fc-2c963f66afa6')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_worker_role_escalation_denied(self, worker_client, worker_user):
        response = worker_client.put(f'/v1/users/{worker_user.id}', {'role': 'Admin'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        worker_user.refresh_from_db()
        assert worker_user.role == 'Worker'

    def test_admin_promotes_worker(self, admin_client, worker_user):
        response = admin_client.put(f'/v1/users/{worker_user.id}', {'role': 'Manager'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['role'] == 'Manager'

    def test_admin_deletes_user(self, admin_client, vet_user):
        response = admin_client.delete(f'/v1/users/{vet_user.id}')

        assert response.status_code == status.HTTP_200_OK
        assert not User.objects.filter(pk=vet_user.pk).exists()

    def test_admin_cannot_delete_self(self, admin_client, admin_user):
        response = admin_client.delete(f'/v1/users/{admin_user.id}')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_manager_cannot_delete(self, manager_client, worker_user):
        response = manager_client.delete(f'/v1/users/{worker_user.id}')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_user_with_sales_cannot_be_deleted(self, admin_client, manager_user):
        from datetime import date
        from decimal import Decimal
        from apps.finance.models import SalesRecord

        SalesRecord.objects.create(
            product_type='Eggs', quantity=Decimal('10'), unit_price=Decimal('12'),
            total_amount=Decimal('120'), date=date(2024, 3, 1), recorded_by=manager_user,
        )

        response = admin_client.delete(f'/v1/users/{manager_user.id}')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert User.objects.filter(pk=manager_user.pk).exists()
